#file: aqifinder/models.py

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

Trend = Literal["improving", "stable", "worsening"]


class Pollutants(BaseModel):
    pm25: Optional[float] = Field(None, description="PM2.5 sub-index reported by WAQI")
    no2: Optional[float] = Field(None, description="NO2 reading (ppb)")
    so2: Optional[float] = Field(None, description="SO2 reading (ppb)")
    o3: Optional[float] = Field(None, description="O3 reading (ppb)")


class AQIPrediction(BaseModel):
    predicted_aqi: float = Field(..., description="Synthetic next-period AQI")
    confidence: float = Field(..., ge=0, le=1, description="Confidence of the prediction (0-1)")
    trend: Trend = Field(..., description="Direction the AQI is expected to move")


class AQIReading(BaseModel):
    value: float = Field(..., description="Current AQI as reported by WAQI")
    category: str = Field(..., description="Human readable AQI category")
    pollutants: Pollutants = Field(default_factory=Pollutants)
    prediction: Optional[AQIPrediction] = None


class CurrentConditions(BaseModel):
    timestamp: str = Field(..., description="Fetch time in ISO format (UTC)")
    temperature: float
    humidity: float
    co2: float
    aqi: AQIReading


class HourlyAqi(BaseModel):
    value: float = Field(..., ge=0)
    pollutants: Optional[Pollutants] = None


class HourlySample(BaseModel):
    hour: str = Field(..., description="Hour label, HH:00")
    temperature: float
    humidity: float
    co2: float
    aqi: HourlyAqi


class DailyAverage(BaseModel):
    hour: str
    average_aqi: float = Field(..., ge=0)


class WeeklyAverage(BaseModel):
    week: str
    average_aqi: float = Field(..., ge=0)


class MonthlyAverage(BaseModel):
    month: str
    average_aqi: float = Field(..., ge=0)


class YearlyAverage(BaseModel):
    year: str
    average_aqi: float = Field(..., ge=0)


class TimeRangeAverages(BaseModel):
    daily: List[DailyAverage]
    weekly: List[WeeklyAverage]
    monthly: List[MonthlyAverage]
    yearly: List[YearlyAverage]


class LocationAverage(BaseModel):
    location: str
    average_aqi: int


class StationInfo(BaseModel):
    name: str = Field(..., description="Station name as published by WAQI")
    lat: Optional[float] = None
    lon: Optional[float] = None
    url: Optional[str] = None


class EnvironmentalData(BaseModel):
    current: CurrentConditions
    hourly: List[HourlySample]
    time_range_averages: TimeRangeAverages
    location_averages: List[LocationAverage]
    station: Optional[StationInfo] = None
    dominant_pollutant: Optional[str] = None
