"""Pure entry points: decoded pages in, prosecutions out."""

from __future__ import annotations

import logging
from typing import Iterable, List

from food_offences.ingestion.assembler import RecordAssembler
from food_offences.ingestion.expander import split_records_into_prosecutions
from food_offences.models.prosecution import Prosecution
from food_offences.models.record import FinalizedRecord, Page

logger = logging.getLogger(__name__)


def extract_records_from_pages(pages: Iterable[Page]) -> List[FinalizedRecord]:
    """Iterate through all pages, in order, to build up corrected records."""
    assembler = RecordAssembler()
    assembler.start_run()
    for page in pages:
        assembler.feed_page(page)
    records = assembler.finish_run()
    logger.info("Assembled %s register records", len(records))
    return records


def build_prosecutions(pages: Iterable[Page], link: str) -> List[Prosecution]:
    records = extract_records_from_pages(pages)
    return split_records_into_prosecutions(records, link)
