"""Collapse accumulated column fragments into a cleaned record."""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from food_offences.models.record import FinalizedRecord, InProgressRecord
from food_offences.utils.dates import parse_date
from food_offences.utils.text import normalize_whitespace

TERMINATOR_PATTERN = re.compile(r"Total \(\d+\) Charge", re.IGNORECASE)


def is_end_of_record(line: str) -> bool:
    return TERMINATOR_PATTERN.search(line) is not None


def clean_values(values: List[Optional[str]]) -> List[str]:
    """Drop missing fragments, strip the rest and drop those left empty."""
    stripped = [value.strip() for value in values if value is not None]
    return [value for value in stripped if value]


def _joined(values: List[str]) -> str:
    return " ".join(values)


def _dates(values: List[str]) -> List[date]:
    return [parse_date(value) for value in values]


def _offences(values: List[str]) -> List[str]:
    # the terminator text lands in this column
    return [value for value in values if not is_end_of_record(value)]


def _penalties(values: List[str]) -> List[str]:
    return list(values)


def _removal_date(values: List[str]) -> Optional[date]:
    if not values:
        return None
    return parse_date(" ".join(values))


FIELD_RULES: Dict[str, Tuple[str, Callable[[List[str]], object]]] = {
    "prosecution details": ("prosecution_details", _joined),
    "business address": ("business_address", _joined),
    "date of offence": ("offence_dates", _dates),
    "offence proven": ("offence_proven", _offences),
    "imposed penalty": ("imposed_penalties", _penalties),
    "removal date": ("removal_date", _removal_date),
    "notes": ("notes", _joined),
}


def column_key(label: str) -> str:
    return normalize_whitespace(label).lower()


def finalise_record(record: InProgressRecord) -> FinalizedRecord:
    """Turn a closed in-progress record into a ``FinalizedRecord``.

    Recognized columns are removed from ``record`` as they are consumed; any
    column without a rule is ignored.
    """
    fields: Dict[str, object] = {}
    for label in list(record):
        rule = FIELD_RULES.get(column_key(label))
        if rule is None:
            continue
        field_name, convert = rule
        fields[field_name] = convert(clean_values(record.pop(label)))
    return FinalizedRecord(**fields)
