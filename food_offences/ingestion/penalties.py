"""Repair penalty totals that slip across record boundaries."""

from __future__ import annotations

import logging
from typing import List

from food_offences.errors import UnhandledOffsetError
from food_offences.models.record import FinalizedRecord

logger = logging.getLogger(__name__)


def correct_imposed_penalties(records: List[FinalizedRecord]) -> List[FinalizedRecord]:
    """Normalise ``imposed_penalties`` across all records, in place.

    Every record ends with a "Total (x) Charges" line whose dollar value is
    just a sum of the penalties above it. Normally that total sits on the
    terminator line and is the last penalty of its own record. Sometimes it is
    printed on the line after the terminator, which pushes it into the next
    record as that record's first penalty. Both copies are removed here.
    """
    for index, record in enumerate(records):
        offset = len(record.imposed_penalties) - len(record.offence_proven)
        if offset == 1:
            del record.imposed_penalties[-1]
        elif offset == 0:
            if index + 1 < len(records):
                next_record = records[index + 1]
                if next_record.imposed_penalties:
                    logger.debug(
                        "Moving spilled total %r out of record %s",
                        next_record.imposed_penalties[0],
                        index + 1,
                    )
                    del next_record.imposed_penalties[0]
        else:
            raise UnhandledOffsetError(offset, record)
    return records
