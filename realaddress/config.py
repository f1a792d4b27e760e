# config.py

# --- Configuration Section ---
# All settings come from environment variables with defaults suitable for
# local development. A .env file in the working directory is loaded first so
# deployments can keep their overrides out of the process environment.

import os

# Third-party: python-dotenv, loads KEY=VALUE pairs from a local .env file.
from dotenv import load_dotenv

from realaddress import __version__

load_dotenv()


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Application Name - used for logging and the health endpoint.
APP_NAME = os.getenv("APP_NAME", "RealAddressGenerator")
APP_VERSION = __version__

# Flask Application Settings
FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
FLASK_PORT = _env_int("FLASK_PORT", 5000)
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "False").lower() in ("true", "1", "t")

# Country used when the request carries no ?country= parameter.
DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "AU").strip().upper()

# Reverse geocoding (geopy with Nominatim)
# GEO_USER_AGENT: Nominatim's usage policy requires an identifying User-Agent.
NOMINATIM_DOMAIN = os.getenv("NOMINATIM_DOMAIN", "nominatim.openstreetmap.org")
GEO_USER_AGENT = os.getenv("GEO_USER_AGENT", f"{APP_NAME}/{APP_VERSION}")
GEO_TIMEOUT_SECONDS = _env_float("GEO_TIMEOUT_SECONDS", 10)
# Nominatim allows at most one request per second.
GEO_MIN_DELAY_SECONDS = _env_float("GEO_MIN_DELAY_SECONDS", 1.0)
GEO_MAX_RETRIES = _env_int("GEO_MAX_RETRIES", 2)
GEO_ERROR_WAIT_SECONDS = _env_float("GEO_ERROR_WAIT_SECONDS", 1.0)

# ADDRESS_MAX_ATTEMPTS: how many random points are reverse geocoded before
# giving up and using the country's fallback address.
ADDRESS_MAX_ATTEMPTS = _env_int("ADDRESS_MAX_ATTEMPTS", 10)
# LOCATION_JITTER_DEGREES: total width of the random offset applied around a
# city centre, so 0.1 means +/- 0.05 degrees.
LOCATION_JITTER_DEGREES = _env_float("LOCATION_JITTER_DEGREES", 0.1)

# Random user API (randomuser.me)
RANDOMUSER_URL = os.getenv("RANDOMUSER_URL", "https://randomuser.me/api/")
RANDOMUSER_TIMEOUT_SECONDS = _env_float("RANDOMUSER_TIMEOUT_SECONDS", 10)
RANDOMUSER_MAX_RETRIES = _env_int("RANDOMUSER_MAX_RETRIES", 2)
RANDOMUSER_BACKOFF_FACTOR = _env_float("RANDOMUSER_BACKOFF_FACTOR", 0.5)

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", None)
LOG_FILE_MAX_BYTES = _env_int("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024)
LOG_FILE_BACKUP_COUNT = _env_int("LOG_FILE_BACKUP_COUNT", 5)

# Client-side storage key for saved favorites.
SAVED_ADDRESSES_KEY = "savedAddresses"
