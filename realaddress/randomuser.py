# randomuser.py

import logging
from dataclasses import dataclass

# Third-party: requests for HTTP, urllib3's Retry for the session adapter.
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from realaddress import config
from realaddress.exceptions import RandomUserError

logger = logging.getLogger(__name__)


@dataclass
class Person:
    name: str
    gender: str


class RandomUserClient:
    """Fetches random names and genders from randomuser.me"""

    def __init__(self, base_url: str = config.RANDOMUSER_URL,
                 timeout: float = config.RANDOMUSER_TIMEOUT_SECONDS,
                 max_retries: int = config.RANDOMUSER_MAX_RETRIES,
                 backoff_factor: float = config.RANDOMUSER_BACKOFF_FACTOR):
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Creates a requests session with retry strategy

        Returns:
            Configured requests.Session object
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            "User-Agent": config.GEO_USER_AGENT,
            "Accept": "application/json",
        })

        return session

    def fetch_person(self, nationality: str) -> Person:
        """
        Fetches one random person of the given nationality.

        Args:
            nationality: randomuser.me nationality code, e.g. "au".

        Returns:
            Person with a "First Last" name and a capitalized gender.

        Raises:
            RandomUserError: If the request fails or the payload is unusable.
        """
        params = {"nat": nationality, "inc": "name,gender", "noinfo": ""}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout:
            raise RandomUserError(f"Request to {self.base_url} timed out")
        except requests.exceptions.RequestException as e:
            raise RandomUserError(f"Request to {self.base_url} failed: {e}")
        except ValueError as e:
            raise RandomUserError(f"Invalid JSON from {self.base_url}: {e}")

        results = payload.get("results") if isinstance(payload, dict) else None
        if not results or not isinstance(results, list):
            raise RandomUserError("Invalid API response from randomuser.me")

        try:
            user = results[0]
            first = user["name"]["first"]
            last = user["name"]["last"]
            gender = user["gender"]
        except (KeyError, IndexError, TypeError):
            raise RandomUserError("Incomplete user record from randomuser.me") from None
        if not (first and last and isinstance(gender, str) and gender):
            raise RandomUserError("Incomplete user record from randomuser.me")

        logger.debug(f"Fetched random user for nationality {nationality!r}.")
        return Person(name=f"{first} {last}", gender=gender[:1].upper() + gender[1:])
