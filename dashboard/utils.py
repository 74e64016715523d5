#file: dashboard/utils.py

import pandas as pd

from aqifinder.models import EnvironmentalData, Pollutants

TIME_RANGES = ["daily", "weekly", "monthly", "yearly"]

TIME_RANGE_DESCRIPTIONS = {
    "daily" : "24-hour pattern showing typical daily variations in air quality",
    "weekly" : "Recent 4-week trend showing day-to-day variations in air quality",
    "monthly" : "12-month view highlighting seasonal patterns in air quality",
    "yearly" : "5-year historical data showing long-term air quality improvements",
}

TIME_RANGE_AXIS_LABELS = {"daily" : "Hours", "weekly" : "Weeks", "monthly" : "Months", "yearly" : "Years"}

AQI_COLORS = [(50, "#00E396"), (100, "#FEB019"), (150, "#FF4560"), (200, "#775DD0"), (300, "#FF1010")]
HAZARDOUS_COLOR = "#7A0000"

# (high, moderate) thresholds in ppb
POLLUTANT_THRESHOLDS = {"no2" : (100, 50), "so2" : (75, 35), "o3" : (70, 50)}

PRIMARY_POLLUTANT_LABELS = {"pm25" : "PM2.5", "no2" : "NO2", "so2" : "SO2", "o3" : "O3"}

TREND_DISPLAY = {
    "improving" : {"icon" : "↓", "color" : "green", "text" : "Improving"},
    "stable" : {"icon" : "→", "color" : "blue", "text" : "Stable"},
    "worsening" : {"icon" : "↑", "color" : "red", "text" : "Worsening"},
}


def get_aqi_color(value) :
    """Return the hex colour used for an AQI value."""
    for upper_bound, color in AQI_COLORS :
        if value <= upper_bound :
            return color
    return HAZARDOUS_COLOR


def time_range_frame(data: EnvironmentalData, time_range: str) -> pd.DataFrame :
    """Flatten one of the time-range series into period/value rows."""
    averages = data.time_range_averages
    if time_range == "daily" :
        rows = [{"period" : d.hour, "value" : d.average_aqi} for d in averages.daily]
    elif time_range == "weekly" :
        rows = [{"period" : d.week, "value" : d.average_aqi} for d in averages.weekly]
    elif time_range == "monthly" :
        rows = [{"period" : d.month, "value" : d.average_aqi} for d in averages.monthly]
    elif time_range == "yearly" :
        rows = [{"period" : d.year, "value" : d.average_aqi} for d in averages.yearly]
    else :
        raise ValueError(f"Unknown time range: {time_range}")
    return pd.DataFrame(rows, columns = ["period", "value"])


def location_frame(data: EnvironmentalData) -> pd.DataFrame :
    rows = [{"location" : loc.location[:1].upper() + loc.location[1:], "value" : loc.average_aqi}
            for loc in data.location_averages]
    return pd.DataFrame(rows, columns = ["location", "value"])


def hourly_frame(data: EnvironmentalData) -> pd.DataFrame :
    """Hourly samples as a DataFrame, oldest first so lines read left to right."""
    rows = [{"hour" : sample.hour, "aqi" : sample.aqi.value, "temperature" : sample.temperature,
             "humidity" : sample.humidity, "co2" : sample.co2} for sample in reversed(data.hourly)]
    return pd.DataFrame(rows, columns = ["hour", "aqi", "temperature", "humidity", "co2"])


def get_pollutant_value(data: EnvironmentalData, pollutant: str) :
    """Current reading for a pollutant, 0 when WAQI did not report it."""
    value = getattr(data.current.aqi.pollutants, pollutant)
    return value if value is not None else 0


def get_primary_pollutant(pollutants: Pollutants) -> str :
    """Label of the pollutant with the highest reading; later labels win ties."""
    primary, primary_value = None, None
    for field, label in PRIMARY_POLLUTANT_LABELS.items() :
        value = getattr(pollutants, field)
        value = value if value is not None else 0
        if primary is None or not primary_value > value :
            primary, primary_value = label, value
    return primary


def pollutant_level(pollutant: str, value) -> str :
    high, moderate = POLLUTANT_THRESHOLDS[pollutant]
    if value > high :
        return "(High)"
    if value > moderate :
        return "(Moderate)"
    return "(Normal)"


def format_value(value) -> str :
    """Drop a trailing .0 so whole readings display as integers."""
    if isinstance(value, float) and value.is_integer() :
        return str(int(value))
    return f"{value:.1f}" if isinstance(value, float) else str(value)
