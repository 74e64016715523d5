# file: aqifinder/config.py

import os
from dotenv import load_dotenv

from aqifinder.exceptions import ConfigurationError

load_dotenv()

WAQI_API_KEY = os.getenv("WAQI_API_KEY", "")
WAQI_API_BASE_URL = os.getenv("WAQI_API_BASE_URL", "https://api.waqi.info").rstrip("/")
WAQI_TIMEOUT = float(os.getenv("WAQI_TIMEOUT", "15"))

REFRESH_INTERVAL_SECONDS = int(os.getenv("REFRESH_INTERVAL_SECONDS", "300"))
DEFAULT_CITY = os.getenv("DEFAULT_CITY", "mumbai")

CITIES = {
    "mumbai": "Mumbai",
    "delhi": "Delhi",
    "bangalore": "Bangalore",
    "chennai": "Chennai",
    "kolkata": "Kolkata",
}


def require_api_key() -> str:
    """Return the WAQI token or fail loudly when it is not configured."""
    api_key = os.getenv("WAQI_API_KEY") or WAQI_API_KEY
    if not api_key:
        raise ConfigurationError("Missing required WAQI_API_KEY environment variable")
    return api_key
