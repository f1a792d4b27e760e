# identity.py

import logging
import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from realaddress import config
from realaddress.countries import get_country
from realaddress.exceptions import RandomUserError
from realaddress.geocoding import ReverseGeocoder, find_street_address
from realaddress.phone import generate_phone_number, strip_phone_formatting
from realaddress.randomuser import Person, RandomUserClient

logger = logging.getLogger(__name__)

FALLBACK_PERSON = Person(name="Alex Smith", gender="Unknown")


@dataclass
class Identity:
    country: str
    name: str
    gender: str
    phone: str
    address: str

    @property
    def phone_digits(self) -> str:
        return strip_phone_formatting(self.phone)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class IdentityGenerator:
    """
    Builds a random identity for a country.

    Upstream calls run one after another: the reverse geocoding attempts
    first, then the random user lookup. Each has a literal fallback, so
    generate() only raises for unsupported countries or unexpected errors.
    """

    def __init__(self, geocoder: Optional[ReverseGeocoder] = None,
                 user_client: Optional[RandomUserClient] = None,
                 max_attempts: int = config.ADDRESS_MAX_ATTEMPTS,
                 rng=random):
        self.geocoder = geocoder or ReverseGeocoder()
        self.user_client = user_client or RandomUserClient()
        self.max_attempts = max_attempts
        self.rng = rng

    def pick_person(self, nationality: str) -> Person:
        try:
            return self.user_client.fetch_person(nationality)
        except RandomUserError as e:
            logger.warning(f"Failed to fetch user data, using fallback person: {e}")
            return FALLBACK_PERSON

    def generate(self, code: str) -> Identity:
        """
        Generates an identity.

        Args:
            code: Normalized upper-case country code.

        Returns:
            The generated Identity.

        Raises:
            UnsupportedCountryError: If the country is not configured.
        """
        country = get_country(code)
        address = find_street_address(country, self.geocoder, self.max_attempts, self.rng)
        person = self.pick_person(country.nationality)
        phone = generate_phone_number(country.code, self.rng)

        logger.info(f"Generated identity for {country.code}.")
        return Identity(
            country=country.code,
            name=person.name,
            gender=person.gender,
            phone=phone,
            address=address,
        )
