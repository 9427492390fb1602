"""Reassemble wrapped, multi-column table rows into register records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from food_offences.ingestion.columns import determine_columns
from food_offences.ingestion.finalizer import finalise_record, is_end_of_record
from food_offences.ingestion.pages import trim_page
from food_offences.ingestion.penalties import correct_imposed_penalties
from food_offences.models.record import ColumnMap, FinalizedRecord, InProgressRecord, Page

logger = logging.getLogger(__name__)


@dataclass
class AssemblyState:
    """The record currently being built and every record closed so far."""

    record: InProgressRecord = field(default_factory=dict)
    records: List[FinalizedRecord] = field(default_factory=list)
    pending_lines: int = 0


class RecordAssembler:
    """Accumulates column fragments across pages until a terminator line.

    State lives for a whole run rather than a page because records routinely
    continue onto the next page.
    """

    def __init__(self) -> None:
        self.state: Optional[AssemblyState] = None

    def start_run(self) -> None:
        self.state = AssemblyState()

    def feed_page(self, page: Page) -> None:
        state = self._require_state()
        columns = determine_columns(page)
        self.build_records(trim_page(page), columns)
        logger.debug("Page done; %s records closed so far", len(state.records))

    def build_records(self, raw_lines: List[str], columns: ColumnMap) -> None:
        state = self._require_state()
        for line in raw_lines:
            for column, column_range in columns.items():
                state.record.setdefault(column, []).append(column_range.slice(line))
            state.pending_lines += 1
            if is_end_of_record(line):
                self._finalise(state)

    def finish_run(self) -> List[FinalizedRecord]:
        state = self._require_state()
        if state.pending_lines:
            logger.warning(
                "Discarding %s trailing lines with no record terminator", state.pending_lines
            )
        records = correct_imposed_penalties(state.records)
        self.state = None
        return records

    def _finalise(self, state: AssemblyState) -> None:
        state.records.append(finalise_record(state.record))
        state.record = {}
        state.pending_lines = 0

    def _require_state(self) -> AssemblyState:
        if self.state is None:
            raise RuntimeError("start_run() must be called before feeding pages")
        return self.state
