"""
Pytest configuration and shared fixtures
"""
import json
import os
import random
import time
from datetime import datetime

import pytest
import pytz


@pytest.fixture(autouse=True)
def waqi_api_key(monkeypatch):
    """Every test runs with a dummy WAQI token"""
    monkeypatch.setenv("WAQI_API_KEY", "test-token")
    return "test-token"


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 1, 5, 30, tzinfo=pytz.utc)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def waqi_feed():
    """The `data` object of a WAQI /feed/ response"""
    return {
        "aqi": 100,
        "idx": 7021,
        "attributions": [{"url": "https://mpcb.gov.in/", "name": "Maharashtra Pollution Control Board"}],
        "city": {
            "geo": [19.0728, 72.8826],
            "name": "Kurla, Mumbai, India",
            "url": "https://aqicn.org/city/india/mumbai/kurla",
        },
        "dominentpol": "pm25",
        "iaqi": {
            "co": {"v": 6.4},
            "h": {"v": 74},
            "no2": {"v": 12.3},
            "o3": {"v": 21.7},
            "pm10": {"v": 64},
            "pm25": {"v": 100},
            "so2": {"v": 4.1},
            "t": {"v": 29.5},
        },
        "time": {"s": "2024-03-01 11:00:00", "tz": "+05:30", "v": 1709290800},
    }


@pytest.fixture
def waqi_response(waqi_feed):
    return {"status": "ok", "data": waqi_feed}


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager"""

    def __init__(self, status=200, payload=None, body=None):
        self.status = status
        self._payload = payload
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status < 300

    async def json(self, content_type="application/json"):
        if self._body is not None:
            return json.loads(self._body)
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records GET calls and replays a canned response or raises a canned error"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_session():
    def _make(status=200, payload=None, error=None, body=None):
        return FakeSession(FakeResponse(status, payload, body), error)
    return _make


@pytest.fixture
def kolkata_tz():
    """Pin the process local time zone to UTC+05:30"""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "Asia/Kolkata"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
