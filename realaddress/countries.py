# countries.py
#
# Static per-country configuration: city centres to sample coordinates
# around, the randomuser.me nationality used for names, and the literal
# address returned when reverse geocoding never yields a street address.

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from realaddress.exceptions import UnsupportedCountryError


@dataclass(frozen=True)
class City:
    name: str
    lat: float
    lng: float


@dataclass(frozen=True)
class Country:
    code: str
    name: str
    nationality: str
    cities: Tuple[City, ...]
    fallback_address: str


# Insertion order is the order of the country selector on the page.
COUNTRIES: Dict[str, Country] = {
    "AU": Country(
        code="AU",
        name="Australia",
        nationality="au",
        cities=(City("Melbourne", -37.8136, 144.9631),),
        fallback_address="1 Flinders Street, Melbourne, 3000, AU",
    ),
    "CH": Country(
        code="CH",
        name="Switzerland",
        nationality="ch",
        cities=(City("Zürich", 47.3769, 8.5417),),
        fallback_address="1 Bahnhofstrasse, Zürich, 8001, CH",
    ),
    "US": Country(
        code="US",
        name="United States",
        nationality="us",
        cities=(
            City("New York", 40.7128, -74.0060),
            City("Chicago", 41.8781, -87.6298),
            City("Los Angeles", 34.0522, -118.2437),
        ),
        fallback_address="350 5th Avenue, New York, 10118, US",
    ),
    "GB": Country(
        code="GB",
        name="United Kingdom",
        nationality="gb",
        cities=(
            City("London", 51.5074, -0.1278),
            City("Manchester", 53.4808, -2.2426),
        ),
        fallback_address="221 Baker Street, London, NW1 6XE, GB",
    ),
    "CA": Country(
        code="CA",
        name="Canada",
        nationality="ca",
        cities=(
            City("Toronto", 43.6532, -79.3832),
            City("Montreal", 45.5017, -73.5673),
        ),
        fallback_address="290 Bremner Boulevard, Toronto, M5V 3L9, CA",
    ),
    "DE": Country(
        code="DE",
        name="Germany",
        nationality="de",
        cities=(
            City("Berlin", 52.5200, 13.4050),
            City("Munich", 48.1351, 11.5820),
        ),
        fallback_address="1 Pariser Platz, Berlin, 10117, DE",
    ),
    "FR": Country(
        code="FR",
        name="France",
        nationality="fr",
        cities=(
            City("Paris", 48.8566, 2.3522),
            City("Lyon", 45.7640, 4.8357),
        ),
        fallback_address="5 Avenue Anatole France, Paris, 75007, FR",
    ),
    "NZ": Country(
        code="NZ",
        name="New Zealand",
        nationality="nz",
        cities=(
            City("Auckland", -36.8485, 174.7633),
            City("Wellington", -41.2865, 174.7762),
        ),
        fallback_address="1 Queen Street, Auckland, 1010, NZ",
    ),
}


def normalize_country_code(raw: Optional[str], default: str) -> str:
    """Upper-cases a ?country= value, using the default when it is blank."""
    if raw is None:
        return default
    code = raw.strip().upper()
    return code or default


def get_country(code: str) -> Country:
    """
    Looks up the configuration for a country code.

    Raises:
        UnsupportedCountryError: If the code is not configured.
    """
    try:
        return COUNTRIES[code]
    except KeyError:
        raise UnsupportedCountryError(code) from None


def country_options(selected: str) -> List[Tuple[str, str, bool]]:
    return [(c.code, c.name, c.code == selected) for c in COUNTRIES.values()]
