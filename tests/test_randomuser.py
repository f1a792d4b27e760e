from unittest.mock import Mock

import pytest
import requests

from realaddress.exceptions import RandomUserError
from realaddress.randomuser import Person, RandomUserClient


def make_response(payload=None, json_error=None, http_error=None):
    response = Mock()
    if http_error:
        response.raise_for_status.side_effect = http_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def randomuser():
    client = RandomUserClient(base_url="https://randomuser.test/api/", timeout=3, max_retries=1)
    client.session.get = Mock()
    return client


def test_fetch_person(randomuser):
    randomuser.session.get.return_value = make_response(
        {"results": [{"gender": "female", "name": {"title": "Ms", "first": "Lena", "last": "Keller"}}]}
    )

    assert randomuser.fetch_person("ch") == Person(name="Lena Keller", gender="Female")
    randomuser.session.get.assert_called_once_with(
        "https://randomuser.test/api/",
        params={"nat": "ch", "inc": "name,gender", "noinfo": ""},
        timeout=3,
    )


def test_empty_results_raise(randomuser):
    randomuser.session.get.return_value = make_response({"results": []})
    with pytest.raises(RandomUserError):
        randomuser.fetch_person("au")


def test_missing_fields_raise(randomuser):
    randomuser.session.get.return_value = make_response({"results": [{"gender": "male"}]})
    with pytest.raises(RandomUserError):
        randomuser.fetch_person("au")


def test_error_payload_raises(randomuser):
    randomuser.session.get.return_value = make_response({"error": "Uh oh, something has gone wrong."})
    with pytest.raises(RandomUserError):
        randomuser.fetch_person("au")


def test_http_error_raises(randomuser):
    randomuser.session.get.return_value = make_response(
        http_error=requests.exceptions.HTTPError("503 Server Error")
    )
    with pytest.raises(RandomUserError, match="failed"):
        randomuser.fetch_person("au")


def test_timeout_raises(randomuser):
    randomuser.session.get.side_effect = requests.exceptions.Timeout()
    with pytest.raises(RandomUserError, match="timed out"):
        randomuser.fetch_person("au")


def test_invalid_json_raises(randomuser):
    randomuser.session.get.return_value = make_response(json_error=ValueError("Expecting value"))
    with pytest.raises(RandomUserError, match="Invalid JSON"):
        randomuser.fetch_person("au")


def test_session_mounts_retry_adapter():
    client = RandomUserClient(max_retries=4, backoff_factor=0.25)
    retries = client.session.get_adapter("https://randomuser.me/api/").max_retries
    assert retries.total == 4
    assert retries.backoff_factor == 0.25
    assert 503 in retries.status_forcelist


@pytest.mark.parametrize("payload", [
    {"results": {"a": 1}},
    {"results": "not a list"},
    {"results": [None]},
    {"results": [{"gender": 1, "name": {"first": "A", "last": "B"}}]},
    {"results": [{"gender": "male", "name": "A B"}]},
])
def test_malformed_payloads_raise(randomuser, payload):
    randomuser.session.get.return_value = make_response(payload)
    with pytest.raises(RandomUserError):
        randomuser.fetch_person("au")
