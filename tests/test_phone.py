import random
import re

import pytest

from realaddress.countries import COUNTRIES
from realaddress.phone import (
    DEFAULT_PHONE,
    PHONE_FORMATS,
    generate_phone_number,
    strip_phone_formatting,
)

PHONE_PATTERNS = {
    "AU": r"^\+61 4 \d{4} \d{4}$",
    "CH": r"^\+41 7[5-9] [1-9]\d{2} [1-9]\d [1-9]\d$",
    "US": r"^\+1 \([2-9]\d{2}\) [2-9]\d{2}-\d{4}$",
    "GB": r"^\+44 7\d{3} \d{6}$",
    "CA": r"^\+1 \((416|437|514|438|604|613|647|778)\) [2-9]\d{2}-\d{4}$",
    "DE": r"^\+49 1[5-7]\d \d{7}$",
    "FR": r"^\+33 [67]( \d{2}){4}$",
    "NZ": r"^\+64 2[127] \d{3} \d{4}$",
}


@pytest.mark.parametrize("code,pattern", sorted(PHONE_PATTERNS.items()))
def test_phone_numbers_match_country_pattern(code, pattern):
    rng = random.Random(42)
    for _ in range(200):
        phone = generate_phone_number(code, rng)
        assert re.match(pattern, phone), phone


def test_every_country_has_a_phone_format():
    assert set(COUNTRIES) == set(PHONE_FORMATS)


def test_unknown_country_uses_default_phone():
    assert generate_phone_number("ZZ") == DEFAULT_PHONE


def test_default_phone_matches_default_country_pattern():
    assert re.match(PHONE_PATTERNS["AU"], DEFAULT_PHONE)


def test_strip_phone_formatting():
    assert strip_phone_formatting("+1 (212) 555-0134") == "+12125550134"
    assert strip_phone_formatting("+41 78 123 45 67") == "+41781234567"
