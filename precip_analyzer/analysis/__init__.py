"""Precipitation aggregation."""

from precip_analyzer.analysis.calculator import (
    FetchWindow,
    aggregate_data,
    build_model_measure_table,
    daily_breakdown,
    plan_fetch_windows,
)

__all__ = [
    "FetchWindow",
    "aggregate_data",
    "build_model_measure_table",
    "daily_breakdown",
    "plan_fetch_windows",
]
