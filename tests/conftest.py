from __future__ import annotations

from typing import List

import pytest

from tests.layout import FULL_HEADER, offence, page, row, total


@pytest.fixture
def single_record_page() -> List[str]:
    return page(
        FULL_HEADER,
        offence(
            FULL_HEADER,
            "Fail to keep premises clean",
            "$500",
            name="Acme Takeaway",
            address="1 Main Street",
            date="12/03/2015",
            removal="12/03/2017",
            notes="Fine paid",
        ),
        row(
            FULL_HEADER,
            {
                "Prosecution Details": "Pty Ltd",
                "Business Address": "Civic",
                "Date of Offence": "19/03/2015",
            },
        ),
        offence(FULL_HEADER, "Fail to control pests", "$700"),
        total(FULL_HEADER, 2, "$1,200"),
    )
