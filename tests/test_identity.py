import re
from unittest.mock import Mock

import pytest
from geopy.exc import GeocoderTimedOut

from realaddress.countries import COUNTRIES
from realaddress.exceptions import RandomUserError, UnsupportedCountryError
from realaddress.identity import FALLBACK_PERSON, Identity, IdentityGenerator
from realaddress.randomuser import RandomUserClient


def test_generate_identity(generator, user_client):
    identity = generator.generate("AU")

    assert identity.country == "AU"
    assert identity.name == "Jane Doe"
    assert identity.gender == "Female"
    assert identity.address == "12 Collins Street, Melbourne, 3000, AU"
    assert re.match(r"^\+61 4 \d{4} \d{4}$", identity.phone)
    user_client.fetch_person.assert_called_once_with("au")


def test_uses_country_nationality(generator, user_client):
    generator.generate("CH")
    user_client.fetch_person.assert_called_once_with("ch")


def test_falls_back_to_default_person(generator, user_client):
    user_client.fetch_person.side_effect = RandomUserError("down")

    identity = generator.generate("AU")

    assert identity.name == "Alex Smith"
    assert identity.gender == "Unknown"
    assert (identity.name, identity.gender) == (FALLBACK_PERSON.name, FALLBACK_PERSON.gender)


def test_falls_back_to_default_address(generator, geocoder):
    geocoder.lookup.side_effect = GeocoderTimedOut("slow")

    identity = generator.generate("NZ")

    assert identity.address == COUNTRIES["NZ"].fallback_address
    assert geocoder.lookup.call_count == 3


def test_unsupported_country(generator, geocoder, user_client):
    with pytest.raises(UnsupportedCountryError):
        generator.generate("ZZ")
    geocoder.lookup.assert_not_called()
    user_client.fetch_person.assert_not_called()


def test_identity_dict_and_phone_digits():
    identity = Identity(
        country="US",
        name="John Roe",
        gender="Male",
        phone="+1 (212) 555-0134",
        address="350 5th Avenue, New York, 10118, US",
    )
    assert identity.phone_digits == "+12125550134"
    assert identity.to_dict() == {
        "country": "US",
        "name": "John Roe",
        "gender": "Male",
        "phone": "+1 (212) 555-0134",
        "address": "350 5th Avenue, New York, 10118, US",
    }


def test_malformed_user_payload_falls_back_to_default_person(geocoder):
    client = RandomUserClient(base_url="https://randomuser.test/api/", max_retries=0)
    client.session.get = Mock()
    client.session.get.return_value.json.return_value = {
        "results": [{"gender": 1, "name": {"first": "A", "last": "B"}}]
    }
    generator = IdentityGenerator(geocoder=geocoder, user_client=client, max_attempts=1)

    identity = generator.generate("AU")

    assert (identity.name, identity.gender) == ("Alex Smith", "Unknown")
