"""Pytest fixtures and configuration."""

import json

import httpx
import pytest

from precip_analyzer.config import Settings
from precip_analyzer.data import CachedFetcher


SAMPLE_DAILY_RESPONSE = {
    "latitude": 40.710335,
    "longitude": -73.99308,
    "generationtime_ms": 1.6531944274902344,
    "utc_offset_seconds": 0,
    "timezone": "GMT",
    "timezone_abbreviation": "GMT",
    "elevation": 51.0,
    "daily_units": {
        "time": "iso8601",
        "rain_sum_best_match": "mm",
        "showers_sum_best_match": "mm",
    },
    "daily": {
        "time": ["2026-02-13", "2026-02-14", "2026-02-15", "2026-02-16"],
        "rain_sum_best_match": [0.0, 0.5, None, 2.6],
        "showers_sum_best_match": [0.0, 0.0, 0.0, None],
    },
}

SAMPLE_GEOCODING_RESPONSE = {
    "results": [
        {
            "id": 5809844,
            "name": "Seattle",
            "latitude": 47.60621,
            "longitude": -122.33207,
            "country": "United States",
            "admin1": "Washington",
        }
    ],
    "generationtime_ms": 0.8,
}


@pytest.fixture
def settings(tmp_path):
    """Settings with an isolated cache directory."""
    return Settings(cache_dir=tmp_path / "cache", cache_ttl_seconds=3600, http_timeout_seconds=5.0)


@pytest.fixture
def sample_daily_body():
    return json.dumps(SAMPLE_DAILY_RESPONSE)


@pytest.fixture
def sample_geocoding_body():
    return json.dumps(SAMPLE_GEOCODING_RESPONSE)


@pytest.fixture
def make_fetcher(settings):
    """Build a CachedFetcher backed by an httpx.MockTransport handler."""
    fetchers = []

    def _make(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        fetcher = CachedFetcher(settings, client=client)
        fetchers.append(fetcher)
        return fetcher

    yield _make

    for fetcher in fetchers:
        fetcher.close()
