"""
Tests for the dashboard page states
"""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import dashboard.data_fetch
from aqifinder.exceptions import WAQIRequestError
from aqifinder.transform import build_environmental_data

APP_PATH = str(Path(__file__).resolve().parent.parent / "dashboard" / "app.py")


class FakeLoader:
    """Stands in for the cached loader; records cities and cache clears"""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.cities = []
        self.cleared = 0

    def __call__(self, city):
        self.cities.append(city)
        if self.error is not None:
            raise self.error
        return self.result

    def clear(self):
        self.cleared += 1


@pytest.fixture
def use_loader(monkeypatch):
    def _use(loader):
        monkeypatch.setattr(dashboard.data_fetch, "load_environmental_data", loader)
        return loader
    return _use


def run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    return at.run()


def test_renders_defaults(use_loader, waqi_feed, fixed_now, rng):
    loader = use_loader(FakeLoader(result=build_environmental_data(waqi_feed, now=fixed_now, rng=rng)))

    at = run_app()

    assert not at.exception
    assert len(at.error) == 0
    assert at.title[0].value == "Environmental Analytics"
    assert at.selectbox(key="city").value == "mumbai"
    assert at.radio(key="time_range").value == "daily"
    assert loader.cities == ["mumbai"]


def test_error_banner_with_retry(use_loader):
    use_loader(FakeLoader(error=WAQIRequestError("Failed to fetch WAQI data")))

    at = run_app()

    assert not at.exception
    assert at.error[0].value == "Error: Failed to fetch WAQI data"
    assert [button.label for button in at.button] == ["Retry"]


def test_retry_clears_cached_fetch(use_loader):
    loader = use_loader(FakeLoader(error=WAQIRequestError("Failed to fetch WAQI data")))
    at = run_app()

    at.button[0].click().run()

    assert loader.cleared >= 1
    assert len(loader.cities) >= 2


def test_empty_data_warning(use_loader):
    use_loader(FakeLoader(result=None))

    at = run_app()

    assert not at.exception
    assert at.warning[0].value == "No environmental data available"
    assert len(at.error) == 0


def test_selecting_another_city_refetches(use_loader, waqi_feed, fixed_now, rng):
    loader = use_loader(FakeLoader(result=build_environmental_data(waqi_feed, now=fixed_now, rng=rng)))
    at = run_app()

    at.selectbox(key="city").select("delhi").run()

    assert not at.exception
    assert loader.cities[-1] == "delhi"


def test_station_search_keeps_stations_with_same_name(use_loader, monkeypatch, waqi_feed, fixed_now, rng):
    loader = use_loader(FakeLoader(result=build_environmental_data(waqi_feed, now=fixed_now, rng=rng)))
    monkeypatch.setattr(dashboard.data_fetch, "load_station_search", lambda keyword: {
        "@1437": {"name": "US Consulate", "lat": 19.06, "lon": 72.84, "aqi": "87"},
        "@8554": {"name": "US Consulate", "lat": 28.59, "lon": 77.18, "aqi": "152"},
    })
    at = run_app()

    at.text_input(key="station_keyword").input("consulate").run()

    assert not at.exception
    assert at.selectbox(key="station_name").options == ["US Consulate (@1437)", "US Consulate (@8554)"]
    assert loader.cities[-1] == "@1437"
