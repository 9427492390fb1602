"""Failures raised while reconstructing the register."""

from __future__ import annotations

from typing import Any, List, Optional


class RegisterError(Exception):
    """Base class for every fatal register-processing failure."""


class HeaderNotFoundError(RegisterError):
    """A page has no ``Prosecution Details`` header line."""

    def __init__(self, page: Optional[List[str]] = None) -> None:
        self.page = page or []
        preview = self.page[0] if self.page else "<empty page>"
        super().__init__(f"Could not find the column header on page starting {preview!r}")


class DateParseError(RegisterError, ValueError):
    """A field expected to hold a date does not."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse date from {text!r}")


class UnhandledOffsetError(RegisterError):
    """Penalty and offence counts disagree in a way no known layout explains."""

    def __init__(self, offset: int, record: Any) -> None:
        self.offset = offset
        self.record = record
        super().__init__(f"Unhandled offset: {offset} {record!r}")


class RegisterChangedError(RegisterError):
    """The landing page no longer points at the register we know how to read."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.exit_code = exit_code
        super().__init__(message)
