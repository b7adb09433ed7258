"""Data fetching and caching."""

from .cache import ResponseCache
from .http_fetcher import CachedFetcher
from .geocoding import Geocoder
from .open_meteo_fetcher import OpenMeteoFetcher

__all__ = ["ResponseCache", "CachedFetcher", "Geocoder", "OpenMeteoFetcher"]
