#file: dashboard/data_fetch.py

import asyncio
from typing import Optional
import streamlit as st

from aqifinder import config
from aqifinder.models import EnvironmentalData
from aqifinder.transform import fetch_environmental_data
from dashboard.waqi_search import search_stations


@st.cache_data(ttl = config.REFRESH_INTERVAL_SECONDS, show_spinner = False)
def load_environmental_data(city: str) -> Optional[EnvironmentalData] :
    """Fetch and shape data for a city, cached until the next refresh interval."""
    return asyncio.run(fetch_environmental_data(city))


@st.cache_data(ttl = 3600, show_spinner = False)
def load_station_search(keyword: str) :
    return search_stations(keyword)
