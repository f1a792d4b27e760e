import pytest

from realaddress.countries import (
    COUNTRIES,
    country_options,
    get_country,
    normalize_country_code,
)
from realaddress.exceptions import UnsupportedCountryError


def test_normalize_country_code():
    assert normalize_country_code(" ch ", "AU") == "CH"
    assert normalize_country_code(None, "AU") == "AU"
    assert normalize_country_code("   ", "AU") == "AU"


def test_get_country_returns_configuration():
    country = get_country("CH")
    assert country.name == "Switzerland"
    assert country.nationality == "ch"
    assert country.cities[0].name == "Zürich"


def test_get_country_rejects_unknown_code():
    with pytest.raises(UnsupportedCountryError) as exc_info:
        get_country("ZZ")
    assert exc_info.value.code == "ZZ"


def test_country_options_marks_selection_in_order():
    options = country_options("CH")
    assert [code for code, _, _ in options] == list(COUNTRIES)
    assert [code for code, _, selected in options if selected] == ["CH"]


def test_fallback_addresses_end_with_country_code():
    for code, country in COUNTRIES.items():
        assert country.fallback_address.endswith(f", {code}")
        assert country.cities
