"""Data models for precipitation data."""

from dataclasses import dataclass, field
from enum import Enum


class WeatherDataSource(Enum):
    """Open-Meteo API a dataset comes from."""

    HISTORICAL_ARCHIVE = "Historical Archive"
    FORECAST_STANDARD = "Standard Forecast"
    FORECAST_ENSEMBLE = "Ensemble Forecast"

    def __str__(self) -> str:
        return self.value


class PrecipitationUnit(Enum):
    """Unit accepted by the `precipitation_unit` query parameter."""

    MILLIMETERS = "mm"
    INCHES = "inch"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "PrecipitationUnit":
        for unit in cls:
            if unit.value == text:
                return unit
        raise ValueError(f"Invalid precipitation unit: {text}")


@dataclass(frozen=True)
class Location:
    """A named point to query."""

    name: str
    lat: float
    lon: float

    @classmethod
    def from_coordinates(cls, lat: float, lon: float) -> "Location":
        return cls(name=f"Lat: {lat:.4f}, Lon: {lon:.4f}", lat=lat, lon=lon)


@dataclass(frozen=True)
class MeasureAndModel:
    """Column identity in a daily response, e.g. rain_sum from gfs_global."""

    measure: str
    model: str


@dataclass
class DailyData:
    """Daily values in columnar form, one column per measure/model pair."""

    time: list[str]
    data_fields: dict[MeasureAndModel, list[float | None]] = field(default_factory=dict)


@dataclass
class SourceResult:
    """Data retrieved from one source."""

    source: WeatherDataSource
    data: DailyData
