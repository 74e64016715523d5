"""
Tests for chart construction
"""
import pandas as pd

from dashboard.ui_elements import aqi_bar_chart


def test_bars_coloured_by_aqi():
    df = pd.DataFrame({"period": ["a", "b", "c"], "value": [20, 120, 320]})

    fig = aqi_bar_chart(df, "period", "Hours")

    assert list(fig.data[0].marker.color) == ["#00E396", "#FF4560", "#7A0000"]
    assert fig.layout.xaxis.title.text == "Hours"
    assert fig.layout.yaxis.title.text == "Air Quality Index (AQI)"


def test_chart_title():
    df = pd.DataFrame({"location": ["Parks"], "value": [35]})

    fig = aqi_bar_chart(df, "location", "Location", title="Location-wise AQI Comparison")

    assert fig.layout.title.text == "Location-wise AQI Comparison"
    assert list(fig.data[0].marker.color) == ["#00E396"]
