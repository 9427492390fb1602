"""Builders for fixed-width register pages."""

from __future__ import annotations

from typing import Dict, List

SHORT_HEADER = "Prosecution Details  Business Address  Offence Proven  Imposed Penalty"

FULL_HEADER = (
    "Prosecution Details".ljust(24)
    + "Business Address".ljust(24)
    + "Date of Offence".ljust(18)
    + "Offence Proven".ljust(32)
    + "Imposed Penalty".ljust(18)
    + "Removal date".ljust(16)
    + "Notes"
)

FOOTER = "Page 1 of 1                                   Printed 18/11/2016"


def row(header: str, cells: Dict[str, str]) -> str:
    """Place each cell's text at its column label's position in ``header``."""
    line = ""
    for label, text in sorted(cells.items(), key=lambda item: header.index(item[0])):
        line = line.ljust(header.index(label)) + text
    return line


def page(header: str, *lines: str, title: str = "Register of Food Offences") -> List[str]:
    return [title, header, *lines, FOOTER]


def total(header: str, count: int, amount: str = "") -> str:
    cells = {"Offence Proven": f"Total ({count}) Charges"}
    if amount:
        cells["Imposed Penalty"] = amount
    return row(header, cells)


def offence(header: str, text: str, penalty: str = "", **cells: str) -> str:
    values = {"Offence Proven": text}
    if penalty:
        values["Imposed Penalty"] = penalty
    labels = {
        "name": "Prosecution Details",
        "address": "Business Address",
        "date": "Date of Offence",
        "removal": "Removal date",
        "notes": "Notes",
    }
    for key, value in cells.items():
        values[labels[key]] = value
    return row(header, values)
