# geocoding.py

# --- Reverse Geocoding ---
# Turns random coordinates around a country's cities into a street address
# using OpenStreetMap Nominatim through geopy. The geopy RateLimiter doubles
# as the retry helper for each call: a fixed number of retries with a fixed
# wait between them, and a fixed per-request timeout on the geocoder.

import logging
import random
from typing import Any, Dict, Optional, Tuple

# Third-party: geopy provides the Nominatim client and the rate limiter.
from geopy.geocoders import Nominatim
from geopy.extra.rate_limiter import RateLimiter
from geopy.exc import GeopyError

from realaddress import config
from realaddress.countries import Country

logger = logging.getLogger(__name__)

# Street-level detail; lower zoom levels stop at suburbs or cities.
REVERSE_ZOOM = 18
LOCALITY_KEYS = ("city", "town", "village")


def random_location(country: Country, rng=random,
                    jitter: float = config.LOCATION_JITTER_DEGREES) -> Tuple[float, float]:
    """
    Picks a random point near one of the country's configured cities.

    Args:
        country: The country to sample.
        rng: Source of randomness; the random module or a random.Random.
        jitter: Total width in degrees of the offset applied to each axis.

    Returns:
        A (latitude, longitude) tuple.
    """
    city = rng.choice(country.cities)
    lat = city.lat + (rng.random() - 0.5) * jitter
    lng = city.lng + (rng.random() - 0.5) * jitter
    return lat, lng


def _locality(address: Dict[str, Any]) -> Optional[str]:
    for key in LOCALITY_KEYS:
        if address.get(key):
            return address[key]
    return None


def has_street_details(address: Optional[Dict[str, Any]]) -> bool:
    """True when the address has a house number, a road and a locality."""
    if not address:
        return False
    return bool(address.get("house_number") and address.get("road") and _locality(address))


def format_address(address: Dict[str, Any], code: str) -> str:
    postcode = address.get("postcode") or ""
    return f"{address['house_number']} {address['road']}, {_locality(address)}, {postcode}, {code}"


class ReverseGeocoder:
    """Rate limited, retrying Nominatim reverse geocoder"""

    def __init__(self, geolocator=None,
                 user_agent: str = config.GEO_USER_AGENT,
                 domain: str = config.NOMINATIM_DOMAIN,
                 timeout: float = config.GEO_TIMEOUT_SECONDS,
                 min_delay_seconds: float = config.GEO_MIN_DELAY_SECONDS,
                 max_retries: int = config.GEO_MAX_RETRIES,
                 error_wait_seconds: float = config.GEO_ERROR_WAIT_SECONDS):
        """
        Initializes the reverse geocoder.

        Args:
            geolocator: A geopy geocoder exposing reverse(). A Nominatim
                instance is created when omitted.
            user_agent: User-Agent sent to Nominatim.
            domain: Nominatim host.
            timeout: Per-request timeout in seconds.
            min_delay_seconds: Minimum delay between consecutive calls.
            max_retries: Retries after a failed call.
            error_wait_seconds: Wait between retries.
        """
        if geolocator is None:
            geolocator = Nominatim(user_agent=user_agent, domain=domain, timeout=timeout)
        self.geolocator = geolocator
        self._reverse = RateLimiter(
            geolocator.reverse,
            min_delay_seconds=min_delay_seconds,
            max_retries=max_retries,
            error_wait_seconds=error_wait_seconds,
            swallow_exceptions=False,
        )

    def lookup(self, lat: float, lng: float) -> Optional[Dict[str, Any]]:
        """
        Reverse geocodes a point.

        Returns:
            The Nominatim address details, or None when nothing was found.

        Raises:
            GeopyError: When every retry of the call failed.
        """
        location = self._reverse((lat, lng), exactly_one=True, addressdetails=True, zoom=REVERSE_ZOOM)
        if location is None:
            return None
        return location.raw.get("address")


def find_street_address(country: Country, geocoder: ReverseGeocoder,
                        max_attempts: int = config.ADDRESS_MAX_ATTEMPTS,
                        rng=random) -> str:
    """
    Reverse geocodes random points until one resolves to a street address.

    Points are tried one after another. Geocoder errors and results without
    street details are skipped. After max_attempts the country's fallback
    address is returned.

    Args:
        country: The country to find an address in.
        geocoder: The reverse geocoder to query.
        max_attempts: Number of points to try.
        rng: Source of randomness.

    Returns:
        The formatted address string.
    """
    for attempt in range(1, max_attempts + 1):
        lat, lng = random_location(country, rng)
        try:
            address = geocoder.lookup(lat, lng)
        except GeopyError as e:
            logger.warning(f"Reverse geocoding failed for ({lat:.5f}, {lng:.5f}) on attempt {attempt}: {e}")
            continue

        if has_street_details(address):
            logger.debug(f"Found street address for {country.code} on attempt {attempt}.")
            return format_address(address, country.code)
        logger.debug(f"No street address at ({lat:.5f}, {lng:.5f}), attempt {attempt}/{max_attempts}.")

    logger.warning(f"No street address for {country.code} after {max_attempts} attempts, using fallback.")
    return country.fallback_address
