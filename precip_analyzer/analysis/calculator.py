"""Aggregate daily precipitation data into per-model totals."""

from dataclasses import dataclass
from datetime import date, timedelta

import pandas as pd

from precip_analyzer.config import FORECAST_HORIZON_DAYS
from precip_analyzer.models import DailyData, MeasureAndModel, WeatherDataSource


@dataclass(frozen=True)
class FetchWindow:
    """Date range to request from one source."""

    source: WeatherDataSource
    start: date
    end: date


def plan_fetch_windows(
    start: date,
    end: date,
    today: date,
    historical: bool = True,
    forecast: bool = True,
    ensemble: bool = True,
) -> list[FetchWindow]:
    """
    Decide which sources cover a requested period.

    A period straddling today is split: the archive covers up to yesterday
    and the forecasts start today. Forecast windows are clipped to the
    forecast horizon. Order is archive, standard forecast, ensemble.
    """
    horizon = today + timedelta(days=FORECAST_HORIZON_DAYS)
    is_historical = end < today
    is_forecast = start <= horizon
    is_mixed = start < today <= end

    windows = []

    if historical and (is_historical or is_mixed):
        hist_end = today - timedelta(days=1) if is_mixed else end
        windows.append(FetchWindow(WeatherDataSource.HISTORICAL_ARCHIVE, start, hist_end))

    if forecast and is_forecast:
        forecast_start = today if is_mixed else start
        forecast_end = min(end, horizon)
        windows.append(
            FetchWindow(WeatherDataSource.FORECAST_STANDARD, forecast_start, forecast_end)
        )
        if ensemble:
            windows.append(
                FetchWindow(WeatherDataSource.FORECAST_ENSEMBLE, forecast_start, forecast_end)
            )

    return windows


def aggregate_data(daily: DailyData) -> dict[MeasureAndModel, float]:
    """Sum each measure/model column over the period, skipping nulls."""
    return {
        key: float(sum(v for v in values if v is not None))
        for key, values in daily.data_fields.items()
    }


def build_model_measure_table(aggregated: dict[MeasureAndModel, float]) -> pd.DataFrame:
    """
    Pivot totals into one row per model and one column per measure.

    Returns:
        DataFrame indexed by model (sorted) with measures as sorted columns
    """
    if not aggregated:
        return pd.DataFrame(index=pd.Index([], name="Model"))

    df = pd.DataFrame(
        {
            "Measure": [k.measure for k in aggregated],
            "Model": [k.model for k in aggregated],
            "Value": list(aggregated.values()),
        }
    )
    table = df.pivot(index="Model", columns="Measure", values="Value")
    table = table.sort_index().reindex(sorted(table.columns), axis=1)
    table.columns.name = None
    return table


def daily_breakdown(
    daily: DailyData,
) -> list[tuple[str, list[tuple[str, str, float | None]]]]:
    """Group values by date as (model, measure, value) entries, dates ascending."""
    by_date: dict[str, list[tuple[str, str, float | None]]] = {}

    for key, values in daily.data_fields.items():
        for i, day in enumerate(daily.time):
            if i < len(values):
                by_date.setdefault(day, []).append((key.model, key.measure, values[i]))

    return sorted(by_date.items())
