#file: aqifinder/utils.py

import math
from datetime import datetime, timedelta
import pytz
from typing import Any, Dict, Optional


def get_current_time() -> datetime:
    """Get current time as a timezone-aware UTC datetime."""
    return datetime.now(pytz.utc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def hour_label(moment: datetime, hours_back: int = 0) -> str:
    """Format the hour `hours_back` hours before `moment` as HH:00 on the local clock."""
    return (moment - timedelta(hours=hours_back)).astimezone().strftime("%H:00")


def month_labels() -> list:
    """Abbreviated month names, January first."""
    return [datetime(2024, month, 1).strftime("%b") for month in range(1, 13)]


def iaqi_value(feed: Dict[str, Any], key: str) -> Optional[float]:
    """Return feed["iaqi"][key]["v"] or None when any level is missing."""
    reading = (feed.get("iaqi") or {}).get(key) or {}
    value = reading.get("v")
    return float(value) if isinstance(value, (int, float)) else None
