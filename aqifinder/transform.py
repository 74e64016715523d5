# file: aqifinder/transform.py

import logging
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from aqifinder import config
from aqifinder.exceptions import WAQIResponseError
from aqifinder.models import (AQIPrediction, AQIReading, CurrentConditions, DailyAverage, EnvironmentalData,
                              HourlyAqi, HourlySample, LocationAverage, MonthlyAverage, Pollutants, StationInfo,
                              TimeRangeAverages, WeeklyAverage, YearlyAverage)
from aqifinder.utils import get_current_time, hour_label, iaqi_value, month_labels, round_half_up
from aqifinder.waqi_api import fetch_waqi_feed

AQI_CATEGORIES = [
    (50, "Good"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive Groups"),
    (200, "Unhealthy"),
    (300, "Very Unhealthy"),
]
HAZARDOUS = "Hazardous"

DEFAULT_TEMPERATURE = 25
DEFAULT_HUMIDITY = 60
DEFAULT_CO2 = 400

PREDICTION_CONFIDENCE = 0.85

# Multipliers applied to the current AQI, in display order
LOCATION_FACTORS = [
    ("downtown", 1.2),
    ("suburbs", 0.8),
    ("industrial", 1.4),
    ("residential", 0.9),
    ("parks", 0.7),
]

FIRST_YEAR = 2020
YEARS = 5
WEEKS = 4
HOURS = 24


def get_aqi_category(aqi: float) -> str:
    """Map an AQI value to its US EPA category name."""
    for upper_bound, category in AQI_CATEGORIES:
        if aqi <= upper_bound:
            return category
    return HAZARDOUS


def generate_variation(base_value: float, rng: random.Random) -> float:
    """Jitter a value by +/-20, never going below zero."""
    return max(0, base_value + (rng.random() * 40 - 20))


def _current_aqi(feed: Dict[str, Any]) -> float:
    aqi = feed.get("aqi")
    # WAQI reports "-" for stations without a current reading
    if isinstance(aqi, bool) or not isinstance(aqi, (int, float)):
        raise WAQIResponseError("No AQI reading available for this location")
    return aqi


def _station_info(feed: Dict[str, Any]) -> Optional[StationInfo]:
    city = feed.get("city") or {}
    if not city.get("name"):
        return None
    geo = city.get("geo") or []
    lat, lon = (geo[0], geo[1]) if len(geo) == 2 else (None, None)
    return StationInfo(name=city["name"], lat=lat, lon=lon, url=city.get("url"))


def _prediction(current_aqi: float, rng: random.Random) -> AQIPrediction:
    return AQIPrediction(
        predicted_aqi=current_aqi + (rng.random() * 20 - 10),
        confidence=PREDICTION_CONFIDENCE,
        trend="improving" if rng.random() > 0.5 else "worsening",
    )


def _hourly(feed: Dict[str, Any], current_aqi: float, now: datetime, rng: random.Random) -> List[HourlySample]:
    temperature = iaqi_value(feed, "t")
    humidity = iaqi_value(feed, "h")
    co2 = iaqi_value(feed, "co")
    pollutants = Pollutants(no2=iaqi_value(feed, "no2"), so2=iaqi_value(feed, "so2"), o3=iaqi_value(feed, "o3"))

    samples = []
    for i in range(HOURS):
        samples.append(HourlySample(
            hour=hour_label(now, i),
            temperature=temperature or DEFAULT_TEMPERATURE + (rng.random() * 5 - 2.5),
            humidity=humidity or DEFAULT_HUMIDITY + (rng.random() * 10 - 5),
            co2=co2 or DEFAULT_CO2 + (rng.random() * 100 - 50),
            aqi=HourlyAqi(value=generate_variation(current_aqi, rng), pollutants=pollutants.model_copy()),
        ))
    return samples


def _time_range_averages(current_aqi: float, rng: random.Random) -> TimeRangeAverages:
    return TimeRangeAverages(
        daily=[DailyAverage(hour=f"{i:02d}:00", average_aqi=generate_variation(current_aqi, rng))
               for i in range(HOURS)],
        weekly=[WeeklyAverage(week=f"Week {i + 1}", average_aqi=generate_variation(current_aqi, rng))
                for i in range(WEEKS)],
        monthly=[MonthlyAverage(month=month, average_aqi=generate_variation(current_aqi, rng))
                 for month in month_labels()],
        yearly=[YearlyAverage(year=str(FIRST_YEAR + i), average_aqi=generate_variation(current_aqi, rng))
                for i in range(YEARS)],
    )


def build_environmental_data(feed: Dict[str, Any], now: Optional[datetime] = None,
                             rng: Optional[random.Random] = None) -> EnvironmentalData:
    """Shape the `data` object of a WAQI feed response into the dashboard view model.

    Only the current AQI and the instant pollutant / weather readings come from
    WAQI. Hourly samples, time-range averages, the prediction and the location
    comparison are synthesised around the current AQI on every call.
    """
    now = now or get_current_time()
    rng = rng or random.Random()
    current_aqi = _current_aqi(feed)

    current = CurrentConditions(
        timestamp=now.isoformat(),
        temperature=iaqi_value(feed, "t") or DEFAULT_TEMPERATURE,
        humidity=iaqi_value(feed, "h") or DEFAULT_HUMIDITY,
        co2=iaqi_value(feed, "co") or DEFAULT_CO2,
        aqi=AQIReading(
            value=current_aqi,
            category=get_aqi_category(current_aqi),
            pollutants=Pollutants(
                pm25=iaqi_value(feed, "pm25"),
                no2=iaqi_value(feed, "no2"),
                so2=iaqi_value(feed, "so2"),
                o3=iaqi_value(feed, "o3"),
            ),
            prediction=_prediction(current_aqi, rng),
        ),
    )

    return EnvironmentalData(
        current=current,
        hourly=_hourly(feed, current_aqi, now, rng),
        time_range_averages=_time_range_averages(current_aqi, rng),
        location_averages=[LocationAverage(location=name, average_aqi=round_half_up(current_aqi * factor))
                           for name, factor in LOCATION_FACTORS],
        station=_station_info(feed),
        dominant_pollutant=feed.get("dominentpol") or None,
    )


async def fetch_environmental_data(city: str = config.DEFAULT_CITY) -> Optional[EnvironmentalData]:
    """Fetch the WAQI feed for `city` and shape it for the dashboard.

    Returns None when WAQI answers "ok" with an empty `data` object.
    """
    try:
        response = await fetch_waqi_feed(city)
        feed = response.get("data")
        if not isinstance(feed, dict) or not feed:
            logging.warning(f"WAQI returned no data for {city}")
            return None
        data = build_environmental_data(feed)
        logging.info(f"Fetched environmental data for {city}: AQI {data.current.aqi.value}")
        return data
    except Exception as e:
        logging.error(f"Error in fetch_environmental_data for {city}: {e}")
        raise
