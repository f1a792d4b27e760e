"""Random identity generator backed by reverse geocoding and randomuser.me."""

__version__ = "1.0.0"
