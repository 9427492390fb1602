"""Typed models shared across the application."""

from .prosecution import Prosecution
from .record import ColumnMap, ColumnRange, FinalizedRecord, InProgressRecord, Page

__all__ = [
    "ColumnMap",
    "ColumnRange",
    "FinalizedRecord",
    "InProgressRecord",
    "Page",
    "Prosecution",
]
