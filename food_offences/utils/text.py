"""Whitespace and fingerprint helpers."""

from __future__ import annotations

import hashlib
import re
from datetime import date
from typing import Any, Mapping

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every run of (unicode) whitespace into one space and strip the ends."""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def fingerprint(values: Mapping[str, Any]) -> str:
    """Return a stable MD5 hex digest of ``values``, independent of key order."""
    payload = " ".join(f"{key}={_render(values[key])}" for key in sorted(values))
    return hashlib.md5(payload.encode("utf-8")).hexdigest()
