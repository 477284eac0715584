"""
Sample data generator for the WaVer water-usage log.

Writes deterministic pseudo-random daily usage through the same DelimitedLog
the application uses, so the output is always a valid log.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Tuple

import typer

from quwatro.config import get_settings
from quwatro.domain.models import USAGE_ORDER, UsageCategory, WaterUsage
from quwatro.infrastructure.codecs import WaterUsageCodec
from quwatro.infrastructure.log_files import DelimitedLog

app = typer.Typer(help="Generate a sample water-usage log for WaVer.")

# Plausible liters per day for each activity.
_RANGES: Dict[UsageCategory, Tuple[float, float]] = {
    UsageCategory.SHOWER: (40.0, 150.0),
    UsageCategory.LAUNDRY: (0.0, 200.0),
    UsageCategory.DISHWASHING: (10.0, 60.0),
    UsageCategory.TOILET: (20.0, 80.0),
    UsageCategory.IRRIGATION: (0.0, 150.0),
}


def _generate_usages(days: int, start: date, seed: int) -> List[WaterUsage]:
    rng = random.Random(seed)
    usages: List[WaterUsage] = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        liters = [round(rng.uniform(*_RANGES[category]), 2) for category in USAGE_ORDER]
        usages.append(WaterUsage.from_liters(day.isoformat(), liters))
    return usages


def _write_log(path: Path, usages: List[WaterUsage]) -> int:
    usage_log = DelimitedLog(path, WaterUsageCodec())
    for usage in usages:
        usage_log.append(usage)
    return len(usages)


@app.command()
def main(
    days: int = typer.Option(
        30,
        "--days",
        "-d",
        min=1,
        help="Number of consecutive days to generate.",
    ),
    start: str = typer.Option(
        "2025-01-01",
        "--start",
        help="First date (YYYY-MM-DD).",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Log file to append to (defaults to the configured WaVer log).",
    ),
) -> None:
    """
    Append generated days to a water-usage log.
    """
    try:
        first_day = date.fromisoformat(start)
    except ValueError:
        raise typer.BadParameter(f"invalid date: {start}", param_hint="--start") from None

    path = output or get_settings().water_log_path
    usages = _generate_usages(days, first_day, seed)
    written = _write_log(path, usages)
    high = sum(1 for usage in usages if usage.total > get_settings().high_usage_threshold)
    typer.echo(f"Appended {written} days to {path} ({high} above the high-usage threshold).")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
