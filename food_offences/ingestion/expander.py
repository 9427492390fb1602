"""Split compound register records into one prosecution per offence."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from food_offences.models.prosecution import Prosecution
from food_offences.models.record import FinalizedRecord
from food_offences.utils.text import fingerprint

VOLATILE_FIELDS = frozenset({"id", "link", "lat", "lng"})


def generate_id(fields: Dict[str, Any]) -> str:
    return fingerprint({key: value for key, value in fields.items() if key not in VOLATILE_FIELDS})


def split_records_into_prosecutions(
    records: Iterable[FinalizedRecord], link: str
) -> List[Prosecution]:
    """Emit one ``Prosecution`` per offence/penalty pair.

    Offence dates can't be matched to individual offences, so every
    prosecution from a record carries the record's first offence date.
    """
    prosecutions: List[Prosecution] = []
    for record in records:
        offence_date = record.offence_dates[0] if record.offence_dates else None
        for offence, penalty in zip(record.offence_proven, record.imposed_penalties):
            fields: Dict[str, Any] = {
                "business_name": record.prosecution_details,
                "business_address": record.business_address,
                "offence_date": offence_date,
                "offence": offence,
                "imposed_penalty": penalty,
                "removal_date": record.removal_date,
                "notes": record.notes,
                "link": link,
            }
            prosecutions.append(Prosecution(**fields, id=generate_id(fields)))
    return prosecutions
