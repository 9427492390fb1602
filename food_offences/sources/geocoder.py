"""Attach coordinates to prosecutions, caching lookups by address."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from food_offences.config import Settings, settings
from food_offences.models.prosecution import Prosecution
from food_offences.utils.text import normalize_whitespace

logger = logging.getLogger(__name__)

Location = Tuple[Optional[float], Optional[float]]


def default_lookup(config: Settings) -> Callable[[str], Any]:
    """Nominatim allows at most one request per second."""
    nominatim = Nominatim(user_agent=config.geocoder_user_agent)
    return RateLimiter(
        partial(nominatim.geocode, timeout=config.geocode_timeout),
        min_delay_seconds=config.geocode_min_delay,
    )


class AddressGeocoder:
    """Geocodes business addresses, looking each distinct address up once.

    ``backend`` is any object with ``geocode(query)`` returning a result with
    ``latitude``/``longitude``, or ``None``.
    """

    def __init__(self, backend: Any = None, config: Settings = settings) -> None:
        self.config = config
        self.lookup = backend.geocode if backend is not None else default_lookup(config)
        self.cache: Dict[str, Location] = {}

    def address_query(self, prosecution: Prosecution) -> str:
        return normalize_whitespace(f"{prosecution.business_address}, {self.config.geocode_locality}")

    def locate(self, address: str) -> Location:
        if address in self.cache:
            logger.info("Geocoding [cache hit] %s", address)
            return self.cache[address]

        logger.info("Geocoding %s", address)
        result = self.lookup(address)
        if result is None:
            logger.debug("Couldn't geocode %s", address)
            location: Location = (None, None)
        else:
            location = (result.latitude, result.longitude)
        self.cache[address] = location
        return location

    def geocode(self, prosecution: Prosecution) -> Prosecution:
        lat, lng = self.locate(self.address_query(prosecution))
        return prosecution.model_copy(update={"lat": lat, "lng": lng})

    def geocode_all(self, prosecutions: Iterable[Prosecution]) -> List[Prosecution]:
        return [self.geocode(prosecution) for prosecution in prosecutions]
