"""Settings and Open-Meteo model catalogs."""

from precip_analyzer.config.settings import (
    ALL_DISTINCT_MODELS,
    FORECAST_HORIZON_DAYS,
    GEOCODING_URL,
    SOURCE_URLS,
    Settings,
    measures_for_source,
    models_for_source,
)

__all__ = [
    "ALL_DISTINCT_MODELS",
    "FORECAST_HORIZON_DAYS",
    "GEOCODING_URL",
    "SOURCE_URLS",
    "Settings",
    "measures_for_source",
    "models_for_source",
]
