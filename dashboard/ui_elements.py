#file: dashboard/ui_elements.py

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from aqifinder.models import EnvironmentalData
from dashboard.utils import (TIME_RANGE_AXIS_LABELS, TIME_RANGE_DESCRIPTIONS, TREND_DISPLAY, format_value,
                             get_aqi_color, get_pollutant_value, get_primary_pollutant, hourly_frame, location_frame,
                             pollutant_level, time_range_frame)

AQI_AXIS_LABEL = "Air Quality Index (AQI)"

POLLUTANT_CARDS = [
    ("no2", "NO₂ Levels", "Nitrogen Dioxide"),
    ("so2", "SO₂ Levels", "Sulfur Dioxide"),
    ("o3", "O₃ Levels", "Ozone"),
]


def aqi_bar_chart(data_frame, x, x_label, title = None) :
    """Bar chart with every bar coloured by its own AQI category."""
    fig = px.bar(
        data_frame,
        x = x,
        y = "value",
        title = title,
        labels = {
            x : x_label,
            "value" : AQI_AXIS_LABEL
        }
    )
    fig.update_traces(
        marker_color = [get_aqi_color(value) for value in data_frame["value"]],
        hovertemplate = "<b>%{x}</b><br>AQI: %{y:.0f}<extra></extra>"
    )
    fig.update_layout(
        xaxis_tickangle = -45,
        showlegend = False,
        margin = {
            "r" : 20,
            "t" : 30 if title else 20,
            "l" : 60,
            "b" : 50
        }
    )
    fig.update_yaxes(showgrid = False)
    return fig


def display_time_range_chart(data: EnvironmentalData, time_range: str) :
    """Display the AQI trends chart for the selected time range."""
    st.info(TIME_RANGE_DESCRIPTIONS[time_range])
    fig = aqi_bar_chart(time_range_frame(data, time_range), "period", TIME_RANGE_AXIS_LABELS[time_range])
    if time_range == "daily" :
        fig.update_xaxes(nticks = 12)
    st.plotly_chart(fig, use_container_width = True)


def display_current_aqi_card(data: EnvironmentalData) :
    aqi = data.current.aqi
    color = get_aqi_color(aqi.value)
    st.subheader("Current AQI")
    st.markdown(f"<div style='font-size:2.5rem;font-weight:700;color:{color}'>{format_value(aqi.value)}</div>"
                f"<div style='font-size:1.1rem;color:{color}'>{aqi.category}</div>", unsafe_allow_html = True)

    if aqi.prediction :
        prediction = aqi.prediction
        trend = TREND_DISPLAY[prediction.trend]
        st.markdown(
            f"Predicted: <span style='color:{get_aqi_color(prediction.predicted_aqi)}'>"
            f"{prediction.predicted_aqi:.0f} AQI</span><br>"
            f"Confidence: {round(prediction.confidence * 100)}%<br>"
            f"<span style='color:{trend['color']}'>{trend['icon']} {trend['text']}</span>",
            unsafe_allow_html = True
        )

    primary = data.dominant_pollutant.upper() if data.dominant_pollutant else get_primary_pollutant(aqi.pollutants)
    updated = datetime.fromisoformat(data.current.timestamp).astimezone()
    st.caption(f"Primary pollutant: {primary} · Last updated: {updated.strftime('%H:%M:%S')}")


def display_pollutant_card(data: EnvironmentalData, pollutant: str, title: str, name: str) :
    value = get_pollutant_value(data, pollutant)
    st.subheader(title)
    st.metric(name, f"{format_value(value)} ppb", help = "Real-time monitoring")
    st.caption(f"{name} {pollutant_level(pollutant, value)}")


def display_summary_cards(data: EnvironmentalData) :
    """Display the current AQI card followed by one card per gas pollutant."""
    columns = st.columns(4)
    with columns[0] :
        with st.container(border = True) :
            display_current_aqi_card(data)
    for column, (pollutant, title, name) in zip(columns[1:], POLLUTANT_CARDS) :
        with column :
            with st.container(border = True) :
                display_pollutant_card(data, pollutant, title, name)


def display_location_chart(data: EnvironmentalData) :
    """Display the location-wise AQI comparison."""
    fig = aqi_bar_chart(location_frame(data), "location", "Location", title = "Location-wise AQI Comparison")
    st.plotly_chart(fig, use_container_width = True)


def display_hourly_chart(data: EnvironmentalData) :
    """Display the last 24 hours of AQI as a line chart."""
    fig = px.line(
        hourly_frame(data),
        x = "hour",
        y = "aqi",
        markers = True,
        title = "Last 24 Hours",
        labels = {
            "hour" : "Hour",
            "aqi" : AQI_AXIS_LABEL
        }
    )
    fig.update_layout(
        legend = dict(
            orientation = "h",
            yanchor = "top",
            y = -0.2,
            xanchor = "center",
            x = 0.5
        )
    )
    st.plotly_chart(fig, use_container_width = True)


def display_station_map(data: EnvironmentalData) :
    """Display the monitoring station reporting the current reading."""
    station = data.station
    if station is None or station.lat is None or station.lon is None :
        return

    station_df = pd.DataFrame([{"name" : station.name, "lat" : station.lat, "lon" : station.lon, "size" : 10}])
    fig_map = px.scatter_mapbox(
        station_df,
        lat = "lat",
        lon = "lon",
        hover_name = "name",
        size = "size",
        color_discrete_sequence = [get_aqi_color(data.current.aqi.value)],
        zoom = 9,
        height = 380,
        title = "Station Location"
    )
    fig_map.update_layout(
        mapbox_style = "open-street-map",
        margin = {
            "r" : 0,
            "t" : 30,
            "l" : 0,
            "b" : 0
        }
    )
    st.plotly_chart(fig_map, use_container_width = True)
    if station.url :
        st.caption(f"[{station.name}]({station.url})")
