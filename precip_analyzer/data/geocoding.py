"""City name lookup through the Open-Meteo geocoding API."""

import json
import logging

from precip_analyzer.config import GEOCODING_URL
from precip_analyzer.data.http_fetcher import CachedFetcher
from precip_analyzer.models import Location


logger = logging.getLogger(__name__)


class Geocoder:
    """Resolves city names to coordinates."""

    def __init__(self, fetcher: CachedFetcher) -> None:
        self.fetcher = fetcher

    def geocode_city(self, city: str, refresh: bool = False) -> Location:
        """
        Look up a city and return its best match.

        Raises:
            ValueError: If the response is not JSON or the city is unknown
        """
        body = self.fetcher.fetch_text(
            GEOCODING_URL,
            params={"name": city, "count": 1, "language": "en", "format": "json"},
            refresh=refresh,
        )

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ValueError("Failed to parse geocoding response") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            raise ValueError(f"City '{city}' not found")

        if not isinstance(results, list):
            raise ValueError("Failed to parse geocoding response")

        match = results[-1]
        try:
            region = match.get("admin1") or match.get("country") or "Unknown"
            location = Location(
                name=f"{match['name']}, {region}",
                lat=float(match["latitude"]),
                lon=float(match["longitude"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError("Failed to parse geocoding response") from e

        logger.debug(f"Geocoded {city!r} to {location}")
        return location
