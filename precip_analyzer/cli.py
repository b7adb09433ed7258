"""Command-line precipitation analyzer.

Compares precipitation totals for a location and period across the
historical archive, standard forecast and ensemble forecast models of
Open-Meteo.
"""

import argparse
import logging
import sys
from datetime import date, datetime, timezone

import httpx
import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from precip_analyzer.analysis import (
    aggregate_data,
    build_model_measure_table,
    daily_breakdown,
    plan_fetch_windows,
)
from precip_analyzer.config import Settings
from precip_analyzer.data import CachedFetcher, Geocoder, OpenMeteoFetcher
from precip_analyzer.models import (
    Location,
    PrecipitationUnit,
    SourceResult,
    WeatherDataSource,
)


logger = logging.getLogger(__name__)

RULE_STYLE = "bright_blue"

# The ensemble fetch shares the forecast header
FETCH_HEADERS = {
    WeatherDataSource.HISTORICAL_ARCHIVE: "📊 Fetching historical data...",
    WeatherDataSource.FORECAST_STANDARD: "🔮 Fetching forecast data...",
}

# (success line, error prefix) per source
SOURCE_MESSAGES = {
    WeatherDataSource.HISTORICAL_ARCHIVE: (
        "Historical archive data retrieved",
        "Historical data error",
    ),
    WeatherDataSource.FORECAST_STANDARD: (
        "Standard forecast data retrieved",
        "Forecast data error",
    ),
    WeatherDataSource.FORECAST_ENSEMBLE: (
        "Ensemble forecast data retrieved",
        "Ensemble forecast error",
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="precip-analyzer",
        description="Analyze and compare precipitation data from multiple sources",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument(
        "-c", "--city", help='City name (e.g., "Seattle, WA" or "New York")'
    )
    location.add_argument("--lat", type=float, help="Latitude (use with --lon)")
    parser.add_argument("--lon", type=float, help="Longitude (use with --lat)")
    parser.add_argument("-s", "--start", required=True, help="Start date (YYYY-MM-DD)")
    parser.add_argument("-e", "--end", required=True, help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "-u", "--unit", default="mm", help="Precipitation unit (mm or inch)"
    )
    parser.add_argument(
        "-z",
        "--timezone",
        default="UTC",
        help='Time zone (e.g., "America/New_York", "UTC")',
    )
    parser.add_argument(
        "--ensemble",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Include ensemble forecast models",
    )
    parser.add_argument(
        "--historical",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch historical archive data",
    )
    parser.add_argument(
        "--forecast",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch forecast data",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show detailed daily breakdown"
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Ignore cached responses and query the APIs again",
    )
    return parser


def parse_date(text: str, label: str) -> date:
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"Invalid {label} date format. Use YYYY-MM-DD") from e


def resolve_location(
    args: argparse.Namespace, geocoder: Geocoder, console: Console
) -> Location:
    """Geocode --city or build a location from --lat/--lon."""
    if args.city:
        console.print(f"🌍 Geocoding '{args.city}'...", style="cyan", markup=False)
        return geocoder.geocode_city(args.city, refresh=args.refresh)
    if args.lat is not None and args.lon is not None:
        return Location.from_coordinates(args.lat, args.lon)
    raise ValueError("Must specify either --city or both --lat and --lon")


def render_table(table: pd.DataFrame) -> Table:
    """Convert a model/measure pivot into a rich table."""
    out = Table(show_header=True, header_style="bold")
    out.add_column("Model", style="cyan", no_wrap=True)
    for measure in table.columns:
        out.add_column(str(measure), justify="right")

    for model, row in table.iterrows():
        out.add_row(
            str(model),
            *("-" if pd.isna(v) else f"{v:.2f}" for v in row.tolist()),
        )
    return out


def print_banner(console: Console, title: str) -> None:
    console.print(Rule(style=RULE_STYLE))
    console.print(title, style=f"bold {RULE_STYLE}")
    console.print(Rule(style=RULE_STYLE))
    console.print()


def run_analysis(
    args: argparse.Namespace,
    fetcher: CachedFetcher,
    console: Console,
    today: date | None = None,
) -> list[SourceResult]:
    """
    Fetch, aggregate and print precipitation data for parsed arguments.

    Failures of individual sources are reported and skipped.

    Raises:
        ValueError: On invalid input or when no source returned data
    """
    start_date = parse_date(args.start, "start")
    end_date = parse_date(args.end, "end")
    if end_date < start_date:
        raise ValueError("End date must be after start date")

    unit = PrecipitationUnit.parse(args.unit)

    location = resolve_location(args, Geocoder(fetcher), console)
    console.print(f"📍 Location: {location.name}", style="green", markup=False)
    console.print(f"📅 Period: {start_date} to {end_date}", style="green")
    console.print()

    today = today or datetime.now(timezone.utc).date()
    windows = plan_fetch_windows(
        start_date,
        end_date,
        today,
        historical=args.historical,
        forecast=args.forecast,
        ensemble=args.ensemble,
    )

    open_meteo = OpenMeteoFetcher(fetcher, refresh=args.refresh)
    results: list[SourceResult] = []

    for window in windows:
        header = FETCH_HEADERS.get(window.source)
        if header:
            console.print(header, style="yellow")
        retrieved, failed = SOURCE_MESSAGES[window.source]
        try:
            data = open_meteo.fetch_all_summable_precipitation_data(
                window.source,
                location,
                window.start,
                window.end,
                unit,
                args.timezone,
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"{window.source} fetch failed: {e}")
            console.print(f"  ⚠ {failed}: {e}", style="red", markup=False)
            continue

        console.print(f"  ✓ {retrieved}")
        results.append(SourceResult(source=window.source, data=data))

    if not results:
        raise ValueError("No data retrieved from any source")

    console.print()

    for result in results:
        print_banner(console, f"{result.source} - PRECIPITATION BY MODEL AND MEASURE")
        table = build_model_measure_table(aggregate_data(result.data))
        console.print(render_table(table))
        console.print()

    if args.verbose:
        print_banner(console, "DETAILED DAILY BREAKDOWN")
        for result in results:
            console.print(f"Source: {result.source}", style="bold yellow")
            console.print()
            for day, entries in daily_breakdown(result.data):
                console.print(f"  Date: [bright_cyan]{escape(day)}[/bright_cyan]")
                for model, measure, value in entries:
                    shown = "" if value is None else f"{value:.1f}"
                    console.print(
                        f"    {model} - {measure}: {shown} {unit}", highlight=False
                    )
                console.print()

    logger.debug(f"Cache status: {fetcher.cache.get_cache_status()}")
    console.print("✨ Analysis complete!", style="bold green")
    return results


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        settings = Settings()
        logging.basicConfig(
            level=getattr(logging, settings.log_level, logging.WARNING),
            format="%(asctime)s - %(levelname)s - %(message)s",
        )
        logger.debug("Starting precipitation analysis")

        console = Console()
        with CachedFetcher(settings) as fetcher:
            run_analysis(args, fetcher, console)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Network error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
