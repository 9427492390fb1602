"""Record-level models produced while reassembling the register table."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

Page = List[str]
InProgressRecord = Dict[str, List[Optional[str]]]


class ColumnRange(BaseModel):
    """Character range of one printed column.

    ``stop`` is inclusive. ``None`` means the column runs to the end of the line.
    """

    start: int
    stop: Optional[int] = None

    def slice(self, line: str) -> str:
        if self.start < 0 or self.start > len(line):
            return ""
        if self.stop is None:
            return line[self.start :]
        if self.stop < self.start:
            return ""
        return line[self.start : self.stop + 1]


ColumnMap = Dict[str, ColumnRange]


class FinalizedRecord(BaseModel):
    """One compound register entry: a business and every offence listed for it."""

    prosecution_details: str = ""
    business_address: str = ""
    offence_dates: List[date] = Field(default_factory=list)
    offence_proven: List[str] = Field(default_factory=list)
    imposed_penalties: List[str] = Field(default_factory=list)
    removal_date: Optional[date] = None
    notes: str = ""
