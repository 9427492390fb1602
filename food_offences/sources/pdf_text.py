"""Decode the register PDF into fixed-width text lines, one list per page."""

from __future__ import annotations

import logging
import statistics
from typing import List, Sequence, Tuple

import fitz

from food_offences.config import settings
from food_offences.ingestion.pages import clean_page_text
from food_offences.models.record import Page

logger = logging.getLogger(__name__)

Word = Tuple[float, float, float, float, str]


def glyph_width(words: Sequence[Word]) -> float:
    """Median width of a single character across the page's words."""
    widths = [(x1 - x0) / len(text) for x0, _, x1, _, text in words if text]
    return statistics.median(widths) if widths else 1.0


def group_lines(words: Sequence[Word], tolerance: float) -> List[List[Word]]:
    """Group words into physical lines by their top coordinate."""
    lines: List[List[Word]] = []
    current_y = None
    for word in sorted(words, key=lambda w: (w[1], w[0])):
        if current_y is None or abs(word[1] - current_y) > tolerance:
            lines.append([])
            current_y = word[1]
        lines[-1].append(word)
    return lines


def render_line(words: Sequence[Word], char_width: float, margin: float = 0.0) -> str:
    """Lay words out on a character grid so column positions survive as offsets."""
    line = ""
    for x0, _, _, _, text in sorted(words, key=lambda w: w[0]):
        column = max(round((x0 - margin) / char_width), 0)
        if line:
            column = max(column, len(line) + 1)
        line = line.ljust(column) + text
    return line


def page_to_text(words: Sequence[Word], tolerance: float) -> str:
    if not words:
        return ""
    char_width = glyph_width(words)
    margin = min(word[0] for word in words)
    return "\n".join(
        render_line(line, char_width, margin) for line in group_lines(words, tolerance)
    )


def read_pages(pdf_bytes: bytes, tolerance: float = settings.pdf_line_tolerance) -> List[Page]:
    """Decode every page, dropping blank lines."""
    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    pages: List[Page] = []
    for page in doc:
        words = [tuple(w[:5]) for w in page.get_text("words")]
        pages.append(clean_page_text(page_to_text(words, tolerance)))
    doc.close()
    logger.debug("Decoded %s pages from register PDF", len(pages))
    return pages
