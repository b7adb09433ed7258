"""Open-Meteo daily precipitation fetcher."""

import json
import logging
from datetime import date
from typing import Sequence

from precip_analyzer.config import (
    ALL_DISTINCT_MODELS,
    SOURCE_URLS,
    measures_for_source,
    models_for_source,
)
from precip_analyzer.data.http_fetcher import CachedFetcher
from precip_analyzer.models import (
    DailyData,
    Location,
    MeasureAndModel,
    PrecipitationUnit,
    WeatherDataSource,
)


logger = logging.getLogger(__name__)


def response_key_to_measure_and_model(key: str) -> MeasureAndModel:
    """
    Split a daily column key such as `rain_sum_gfs_global` into measure and model.

    The model is the longest known model name the key ends with, so
    `rain_sum_meteoswiss_icon_seamless` never resolves to `icon_seamless`.
    """
    model = next((m for m in ALL_DISTINCT_MODELS if key.endswith(m)), None)
    if model is None:
        raise ValueError(f"No matching model for field: {key}")

    suffix = f"_{model}"
    if not key.endswith(suffix):
        raise ValueError(
            f"Key does not contain expected separator before model: {key}"
        )

    return MeasureAndModel(measure=key[: -len(suffix)], model=model)


def decode_daily_response(text: str) -> DailyData:
    """Decode an Open-Meteo response body into columnar daily data."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError("Failed to parse weather data response") from e

    daily = payload.get("daily") if isinstance(payload, dict) else None
    if not isinstance(daily, dict):
        raise ValueError("No daily data in response")

    time = daily.get("time")
    if not isinstance(time, list) or not all(isinstance(t, str) for t in time):
        raise ValueError("Failed to parse weather data response: bad 'time' column")

    data_fields = {}
    for key, values in daily.items():
        if key == "time":
            continue
        if not isinstance(values, list) or not all(_is_number_or_null(v) for v in values):
            raise ValueError(f"Failed to parse weather data response: bad column {key!r}")
        data_fields[response_key_to_measure_and_model(key)] = [
            None if v is None else float(v) for v in values
        ]

    return DailyData(time=list(time), data_fields=data_fields)


def _is_number_or_null(value) -> bool:
    # bool is an int subclass but never a measurement
    return value is None or (isinstance(value, (int, float)) and not isinstance(value, bool))


class OpenMeteoFetcher:
    """Fetches summable daily precipitation measures for many models at once."""

    def __init__(self, fetcher: CachedFetcher, refresh: bool = False) -> None:
        self.fetcher = fetcher
        self.refresh = refresh

    def fetch_weather_data(
        self,
        url_base: str,
        location: Location,
        start_date: date,
        end_date: date,
        unit: PrecipitationUnit,
        timezone: str,
        models: Sequence[str],
        measures: Sequence[str],
    ) -> DailyData:
        """Fetch daily data for the given models and measures from one endpoint."""
        params = {
            "latitude": location.lat,
            "longitude": location.lon,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "daily": ",".join(measures),
            "precipitation_unit": str(unit),
            "timezone": timezone,
            "models": ",".join(models),
        }

        body = self.fetcher.fetch_text(url_base, params=params, refresh=self.refresh)
        daily = decode_daily_response(body)
        logger.info(
            f"Decoded {len(daily.data_fields)} columns over {len(daily.time)} days"
        )
        return daily

    def fetch_all_summable_precipitation_data(
        self,
        source: WeatherDataSource,
        location: Location,
        start_date: date,
        end_date: date,
        unit: PrecipitationUnit,
        timezone: str,
    ) -> DailyData:
        """Fetch every summable precipitation measure for every model of a source."""
        logger.info(f"Fetching {source} for {location.name} ({start_date} to {end_date})")
        return self.fetch_weather_data(
            SOURCE_URLS[source],
            location,
            start_date,
            end_date,
            unit,
            timezone,
            models_for_source(source),
            measures_for_source(source),
        )
