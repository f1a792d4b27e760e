# phone.py
#
# Random phone numbers in each supported country's mobile format.

import logging
import random
import re
from typing import Callable, Dict

logger = logging.getLogger(__name__)

DEFAULT_PHONE = "+61 4 1234 5678"

CH_MOBILE_PREFIXES = ["75", "76", "77", "78", "79"]
CA_AREA_CODES = ["416", "437", "514", "438", "604", "613", "647", "778"]
DE_MOBILE_PREFIXES = [
    "151", "152", "157", "160", "162", "163",
    "170", "171", "172", "173", "175", "176", "177", "178", "179",
]
NZ_MOBILE_PREFIXES = ["21", "22", "27"]

_FORMATTING_CHARS = re.compile(r"[()\s-]")


def _digits(rng, count: int) -> str:
    return "".join(str(rng.randint(0, 9)) for _ in range(count))


def _au(rng) -> str:
    number = _digits(rng, 8)
    return f"+61 4 {number[:4]} {number[4:]}"


def _ch(rng) -> str:
    prefix = rng.choice(CH_MOBILE_PREFIXES)
    return f"+41 {prefix} {rng.randint(100, 999)} {rng.randint(10, 99)} {rng.randint(10, 99)}"


def _nanp(rng, area_code: str) -> str:
    # North American exchange codes never start with 0 or 1.
    exchange = f"{rng.randint(2, 9)}{_digits(rng, 2)}"
    return f"+1 ({area_code}) {exchange}-{_digits(rng, 4)}"


def _us(rng) -> str:
    area_code = f"{rng.randint(2, 9)}{_digits(rng, 2)}"
    return _nanp(rng, area_code)


def _ca(rng) -> str:
    return _nanp(rng, rng.choice(CA_AREA_CODES))


def _gb(rng) -> str:
    return f"+44 7{_digits(rng, 3)} {_digits(rng, 6)}"


def _de(rng) -> str:
    return f"+49 {rng.choice(DE_MOBILE_PREFIXES)} {_digits(rng, 7)}"


def _fr(rng) -> str:
    pairs = " ".join(_digits(rng, 2) for _ in range(4))
    return f"+33 {rng.choice(['6', '7'])} {pairs}"


def _nz(rng) -> str:
    return f"+64 {rng.choice(NZ_MOBILE_PREFIXES)} {_digits(rng, 3)} {_digits(rng, 4)}"


PHONE_FORMATS: Dict[str, Callable] = {
    "AU": _au,
    "CH": _ch,
    "US": _us,
    "GB": _gb,
    "CA": _ca,
    "DE": _de,
    "FR": _fr,
    "NZ": _nz,
}


def generate_phone_number(code: str, rng=random) -> str:
    """
    Generates a random mobile number for a country.

    Args:
        code: Upper-case country code.
        rng: Source of randomness; the random module or a random.Random.

    Returns:
        The formatted phone number, or DEFAULT_PHONE for unknown codes.
    """
    formatter = PHONE_FORMATS.get(code)
    if formatter is None:
        logger.warning(f"No phone format for country {code!r}, using default phone.")
        return DEFAULT_PHONE
    return formatter(rng)


def strip_phone_formatting(phone: str) -> str:
    """Removes parentheses, whitespace and dashes, leaving '+' and digits."""
    return _FORMATTING_CHARS.sub("", phone)
