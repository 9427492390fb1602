from types import SimpleNamespace

from geopy.extra.rate_limiter import RateLimiter

from food_offences.config import Settings
from food_offences.models.prosecution import Prosecution
from food_offences.sources.geocoder import AddressGeocoder


class FakeBackend:
    def __init__(self, results):
        self.results = results
        self.queries = []

    def geocode(self, query):
        self.queries.append(query)
        return self.results.get(query)


def make_prosecution(address, offence="Dirty"):
    return Prosecution(
        business_name="Acme",
        business_address=address,
        offence=offence,
        imposed_penalty="$5",
        link="http://example.test/register.pdf",
        id=f"{address}-{offence}",
    )


def test_geocode_attaches_coordinates():
    backend = FakeBackend(
        {"1 Main Street Civic, Canberra, ACT": SimpleNamespace(latitude=-35.28, longitude=149.13)}
    )
    geocoder = AddressGeocoder(backend=backend, config=Settings())

    located = geocoder.geocode(make_prosecution("1 Main Street  Civic"))

    assert (located.lat, located.lng) == (-35.28, 149.13)
    assert located.offence == "Dirty"


def test_each_address_is_looked_up_once():
    backend = FakeBackend(
        {"1 Main Street, Canberra, ACT": SimpleNamespace(latitude=-35.0, longitude=149.0)}
    )
    geocoder = AddressGeocoder(backend=backend, config=Settings())

    results = geocoder.geocode_all(
        [make_prosecution("1 Main Street", "Dirty"), make_prosecution("1 Main Street", "Pests")]
    )

    assert backend.queries == ["1 Main Street, Canberra, ACT"]
    assert [r.lat for r in results] == [-35.0, -35.0]


def test_unresolved_address_has_no_coordinates():
    geocoder = AddressGeocoder(backend=FakeBackend({}), config=Settings())

    located = geocoder.geocode(make_prosecution("Nowhere"))

    assert located.lat is None and located.lng is None


def test_default_backend_is_rate_limited():
    geocoder = AddressGeocoder(config=Settings(geocode_min_delay=1.0))

    assert isinstance(geocoder.lookup, RateLimiter)
    assert geocoder.lookup.min_delay_seconds == 1.0


def test_injected_backend_is_called_with_the_query_only():
    backend = FakeBackend({})
    geocoder = AddressGeocoder(backend=backend, config=Settings())

    geocoder.locate("1 Main Street, Canberra, ACT")

    assert backend.queries == ["1 Main Street, Canberra, ACT"]
