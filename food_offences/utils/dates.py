"""Date parsing for register fields."""

from __future__ import annotations

from datetime import date, datetime

from dateutil import parser as date_parser

from food_offences.errors import DateParseError

# Every component differs, so a value missing from the text shows up as a mismatch.
_DEFAULTS = (datetime(2001, 1, 1), datetime(2002, 2, 2))


def parse_date(text: str) -> date:
    """Parse a day-first register date such as ``12/03/2015`` or ``12 March 2015``.

    Partial dates ("12 March", "2015") are rejected rather than completed from
    the current date.
    """
    if not text or not text.strip():
        raise DateParseError(text)
    try:
        first, second = (
            date_parser.parse(text, dayfirst=True, default=default).date() for default in _DEFAULTS
        )
    except (ValueError, OverflowError) as exc:
        raise DateParseError(text) from exc
    if first != second:
        raise DateParseError(text)
    return first
