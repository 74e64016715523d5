#file: dashboard/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import logging
import streamlit as st

st.set_page_config(page_title="Environmental Analytics", page_icon="🌍", layout="wide")

from aqifinder import config
from aqifinder.exceptions import ConfigurationError, WAQIError
from dashboard.data_fetch import load_environmental_data, load_station_search
from dashboard.utils import TIME_RANGES
from dashboard.ui_elements import (display_hourly_chart, display_location_chart, display_station_map,
                                   display_summary_cards, display_time_range_chart)

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

st.title("Environmental Analytics")

# Station search overrides the preset city list
with st.sidebar:
    st.header("Find a station")
    keyword = st.text_input("Search WAQI stations", key="station_keyword")
    station_ref = None
    if keyword:
        stations = load_station_search(keyword)
        if stations:
            station_options = {f"{info['name']} ({ref})": ref for ref, info in stations.items()}
            station_name = st.selectbox("Matching stations", sorted(station_options), key="station_name")
            station_ref = station_options[station_name]
        else:
            st.warning("No stations found.")

city_keys = list(config.CITIES)
default_index = city_keys.index(config.DEFAULT_CITY) if config.DEFAULT_CITY in city_keys else 0
selected_city = st.selectbox("City", city_keys, index=default_index, format_func=lambda key: config.CITIES[key],
                             key="city", disabled=station_ref is not None)
city = station_ref or selected_city


@st.fragment(run_every=config.REFRESH_INTERVAL_SECONDS)
def analytics(city: str):
    try:
        with st.spinner("Loading environmental data..."):
            env_data = load_environmental_data(city)
    except (WAQIError, ConfigurationError) as e:
        st.error(f"Error: {e}")
        if st.button("Retry"):
            load_environmental_data.clear()
            st.rerun()
        return

    if env_data is None:
        st.warning("No environmental data available")
        return

    with st.container(border=True):
        st.subheader("Air Quality Index Trends")
        time_range = st.radio("Time range", TIME_RANGES, horizontal=True, key="time_range",
                              format_func=lambda value: value.capitalize(), label_visibility="collapsed")
        display_time_range_chart(env_data, time_range)

    display_summary_cards(env_data)

    col1, col2 = st.columns([3, 2])
    with col1:
        with st.container(border=True):
            display_location_chart(env_data)
    with col2:
        with st.container(border=True):
            display_station_map(env_data)

    display_hourly_chart(env_data)


analytics(city)
