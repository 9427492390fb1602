"""Page-level line handling: blank filtering and header/footer trimming."""

from __future__ import annotations

from typing import Iterable, List

from food_offences.ingestion.columns import extract_header
from food_offences.models.record import Page


def clean_page_text(text: str) -> Page:
    """Split decoded page text into lines, dropping whitespace-only ones."""
    return [line for line in text.splitlines() if line.strip()]


def clean_pages(texts: Iterable[str]) -> List[Page]:
    return [clean_page_text(text) for text in texts]


def trim_page(page: Page) -> Page:
    """Strip header and footer from a page, returning just the prosecution lines."""
    header = extract_header(page)
    start = page.index(header) + 1
    # last line is always a footer
    return page[start:-1]
