import random
from unittest.mock import Mock, patch

import pytest

from realaddress.app import app
from realaddress.identity import IdentityGenerator
from realaddress.randomuser import Person


@pytest.fixture
def street_address():
    return {
        "house_number": "12",
        "road": "Collins Street",
        "suburb": "Melbourne",
        "city": "Melbourne",
        "postcode": "3000",
        "country": "Australia",
        "country_code": "au",
    }


@pytest.fixture
def geocoder(street_address):
    geocoder = Mock()
    geocoder.lookup.return_value = street_address
    return geocoder


@pytest.fixture
def user_client():
    client = Mock()
    client.fetch_person.return_value = Person(name="Jane Doe", gender="Female")
    return client


@pytest.fixture
def generator(geocoder, user_client):
    return IdentityGenerator(
        geocoder=geocoder,
        user_client=user_client,
        max_attempts=3,
        rng=random.Random(1234),
    )


@pytest.fixture
def client(generator):
    app.config["TESTING"] = True
    with patch("realaddress.app.identity_generator", generator):
        with app.test_client() as test_client:
            yield test_client
