"""Configuration settings for the analyzer."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv

from precip_analyzer.models.weather_data import WeatherDataSource


load_dotenv()


# Open-Meteo endpoints per data source
SOURCE_URLS: dict[WeatherDataSource, str] = {
    WeatherDataSource.HISTORICAL_ARCHIVE: "https://archive-api.open-meteo.com/v1/archive",
    WeatherDataSource.FORECAST_STANDARD: "https://api.open-meteo.com/v1/forecast",
    WeatherDataSource.FORECAST_ENSEMBLE: "https://ensemble-api.open-meteo.com/v1/ensemble",
}

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

# Forecasts only reach this far ahead
FORECAST_HORIZON_DAYS = 16

ARCHIVE_MODELS: tuple[str, ...] = (
    "best_match",
    "ecmwf_ifs",
    "ecmwf_ifs_analysis_long_window",
    "era5_seamless",
    "era5",
    "era5_land",
    "era5_ensemble",
    "cerra",
)

ARCHIVE_MEASURES: tuple[str, ...] = (
    "rain_sum",
    "snowfall_sum",
    "precipitation_sum",
    "precipitation_hours",
)

FORECAST_MODELS: tuple[str, ...] = (
    "best_match",
    "ecmwf_ifs",
    "ecmwf_ifs025",
    "ecmwf_aifs025_single",
    "cma_grapes_global",
    "bom_access_global",
    "icon_seamless",
    "icon_global",
    "icon_eu",
    "icon_d2",
    "metno_seamless",
    "metno_nordic",
    "dmi_harmonie_arome_europe",
    "dmi_seamless",
    "knmi_harmonie_arome_netherlands",
    "knmi_harmonie_arome_europe",
    "knmi_seamless",
    "gem_hrdps_west",
    "gem_hrdps_continental",
    "gem_regional",
    "gem_global",
    "gem_seamless",
    "ncep_hgefs025_ensemble_mean",
    "ncep_aigfs025",
    "gfs_graphcast025",
    "ncep_nam_conus",
    "ncep_nbm_conus",
    "gfs_hrrr",
    "gfs_global",
    "gfs_seamless",
    "jma_seamless",
    "jma_msm",
    "jma_gsm",
    "meteofrance_seamless",
    "meteofrance_arpege_world",
    "meteofrance_arpege_europe",
    "meteofrance_arome_france",
    "meteofrance_arome_france_hd",
    "ukmo_seamless",
    "ukmo_global_deterministic_10km",
    "ukmo_uk_deterministic_2km",
    "meteoswiss_icon_ch2",
    "meteoswiss_icon_ch1",
    "meteoswiss_icon_seamless",
    "italia_meteo_arpae_icon_2i",
    "kma_gdps",
    "kma_ldps",
    "kma_seamless",
)

FORECAST_MEASURES: tuple[str, ...] = (
    "rain_sum",
    "showers_sum",
    "snowfall_sum",
    "precipitation_sum",
    "precipitation_hours",
)

ENSEMBLE_MODELS: tuple[str, ...] = (
    "icon_seamless_eps",
    "icon_global_eps",
    "icon_eu_eps",
    "icon_d2_eps",
    "meteoswiss_icon_ch1_ensemble",
    "meteoswiss_icon_ch2_ensemble",
    "ncep_aigefs025",
    "ncep_gefs025",
    "ncep_gefs05",
    "ncep_gefs_seamless",
    "bom_access_global_ensemble",
    "gem_global_ensemble",
    "ecmwf_ifs025_ensemble",
    "ecmwf_aifs025_ensemble",
    "ukmo_global_ensemble_20km",
    "ukmo_uk_ensemble_2km",
)

ENSEMBLE_MEASURES: tuple[str, ...] = (
    "rain_sum",
    "snowfall_sum",
    "precipitation_sum",
    "precipitation_hours",
)

# Longest first: response keys are matched by suffix and the longest model must win
ALL_DISTINCT_MODELS: tuple[str, ...] = tuple(
    sorted(
        set(ARCHIVE_MODELS) | set(FORECAST_MODELS) | set(ENSEMBLE_MODELS),
        key=lambda m: (-len(m), m),
    )
)

_SOURCE_MODELS = {
    WeatherDataSource.HISTORICAL_ARCHIVE: ARCHIVE_MODELS,
    WeatherDataSource.FORECAST_STANDARD: FORECAST_MODELS,
    WeatherDataSource.FORECAST_ENSEMBLE: ENSEMBLE_MODELS,
}

_SOURCE_MEASURES = {
    WeatherDataSource.HISTORICAL_ARCHIVE: ARCHIVE_MEASURES,
    WeatherDataSource.FORECAST_STANDARD: FORECAST_MEASURES,
    WeatherDataSource.FORECAST_ENSEMBLE: ENSEMBLE_MEASURES,
}


def models_for_source(source: WeatherDataSource) -> tuple[str, ...]:
    """Models requested from a data source."""
    return _SOURCE_MODELS[source]


def measures_for_source(source: WeatherDataSource) -> tuple[str, ...]:
    """Summable daily precipitation measures offered by a data source."""
    return _SOURCE_MEASURES[source]


@dataclass
class Settings:
    """Application settings."""

    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("PRECIP_CACHE_DIR", Path.home() / ".cache" / "precip-analyzer")
        )
    )
    cache_ttl_seconds: int = field(
        default_factory=lambda: int(os.getenv("PRECIP_CACHE_TTL_SECONDS", "3600"))
    )
    http_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("PRECIP_HTTP_TIMEOUT", "30.0"))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("PRECIP_LOG_LEVEL", "WARNING").upper()
    )
    db_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.db_path = self.cache_dir / "responses.db"

    def validate(self) -> None:
        """Validate settings."""
        if self.cache_ttl_seconds <= 0:
            raise ValueError(
                f"PRECIP_CACHE_TTL_SECONDS must be positive, got {self.cache_ttl_seconds}"
            )
        if self.http_timeout_seconds <= 0:
            raise ValueError(
                f"PRECIP_HTTP_TIMEOUT must be positive, got {self.http_timeout_seconds}"
            )
