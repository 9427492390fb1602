"""Landing-page change detection and register download.

ACT Health don't publish the register PDF at a consistent URL; both the link
text and the link target change every time a new register goes up, and an
unchanged URL is no guarantee of unchanged content. Rather than guess, the run
stops whenever the landing page no longer matches what we last saw.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

import requests
from bs4 import BeautifulSoup

from food_offences.config import Settings, settings
from food_offences.errors import RegisterChangedError

logger = logging.getLogger(__name__)

REGISTER_LINK_PATTERN = re.compile(r"register.*updated", re.IGNORECASE)


def find_register_link(html: str) -> Optional[Tuple[str, str]]:
    """Return ``(text, href)`` of the register link on the landing page."""
    soup = BeautifulSoup(html, "html.parser")
    for anchor in soup.find_all("a"):
        text = anchor.get_text()
        if REGISTER_LINK_PATTERN.search(text):
            return text.strip(), anchor.get("href", "")
    return None


def check_register_unchanged(html: str, config: Settings = settings) -> None:
    link = find_register_link(html)
    if link is None:
        raise RegisterChangedError("Could not find register link on the landing page", exit_code=1)
    text, href = link
    if text != config.last_known_link_text:
        raise RegisterChangedError(
            f"Link text has changed! Expected: {config.last_known_link_text!r} Actual: {text!r}",
            exit_code=2,
        )
    if href != config.register_path:
        raise RegisterChangedError(f"New register published at {href}", exit_code=3)


def fetch_landing_page(config: Settings = settings) -> str:
    logger.info("Checking landing page %s", config.landing_page_url)
    response = requests.get(config.landing_page_url, timeout=config.request_timeout)
    response.raise_for_status()
    return response.text


def abort_if_updated(config: Settings = settings) -> None:
    check_register_unchanged(fetch_landing_page(config), config)


def fetch_register_pdf(config: Settings = settings) -> bytes:
    logger.info("Downloading register from %s", config.register_url)
    response = requests.get(config.register_url, timeout=config.request_timeout)
    response.raise_for_status()
    return response.content
