class RealAddressError(Exception):
    """Base exception for address generator errors"""
    pass


class UnsupportedCountryError(RealAddressError):
    """Raised when a country code has no configuration"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported country code: {code!r}")


class RandomUserError(RealAddressError):
    """Raised when the random user API cannot provide a person"""
    pass
