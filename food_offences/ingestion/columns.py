"""Derive per-page column boundaries from the printed table header."""

from __future__ import annotations

import logging
import re
from typing import List

from food_offences.errors import HeaderNotFoundError
from food_offences.models.record import ColumnMap, ColumnRange, Page

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^Prosecution Details")
LABEL_SEPARATOR = re.compile(r"\s{2,}")


def extract_header(page: Page) -> str:
    """Return the header line of ``page``."""
    for line in page:
        if HEADER_PATTERN.match(line):
            return line
    raise HeaderNotFoundError(page)


def split_labels(header: str) -> List[str]:
    return [label for label in LABEL_SEPARATOR.split(header) if label]


def determine_columns(page: Page) -> ColumnMap:
    """Work out column names, and where they start and stop on this page.

    A column starts where its label starts and stops one character before the
    next label. The labels are not aligned with the typeset grid, so cell text
    can bleed a character or two into a neighbour; the last column always runs
    to the end of the line.
    """
    header = extract_header(page)
    labels = split_labels(header)

    columns: ColumnMap = {}
    for first, last in zip(labels, labels[1:]):
        columns[first] = ColumnRange(start=header.index(first), stop=header.index(last) - 1)
    columns[labels[-1]] = ColumnRange(start=header.index(labels[-1]))

    logger.debug("Determined %s columns from header %r", len(columns), header)
    return columns
