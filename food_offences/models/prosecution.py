"""Atomic prosecution entries published from the register."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Prosecution(BaseModel):
    """A single offence and its penalty, ready for dedup, geocoding and storage."""

    model_config = ConfigDict(frozen=True)

    business_name: str
    business_address: str
    offence_date: Optional[date] = None
    offence: str
    imposed_penalty: str
    removal_date: Optional[date] = None
    notes: str = ""
    link: str
    id: str
    lat: Optional[float] = None
    lng: Optional[float] = None
