"""Data models for precipitation data."""

from precip_analyzer.models.weather_data import (
    DailyData,
    Location,
    MeasureAndModel,
    PrecipitationUnit,
    SourceResult,
    WeatherDataSource,
)

__all__ = [
    "DailyData",
    "Location",
    "MeasureAndModel",
    "PrecipitationUnit",
    "SourceResult",
    "WeatherDataSource",
]
