from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quwatro.aggregator import Alert, Summary
from quwatro.domain.models import ClimateReading, HeatIndexReading, Location, WaterUsage


def _num(value: float, decimals: int = 2) -> str:
    return f"{value:,.{decimals}f}"


def print_menu(console: Console, title: str, options: Sequence[str]) -> None:
    console.print()
    console.print(f"[bold cyan]===== {escape(title)} =====[/bold cyan]")
    for number, label in enumerate(options, start=1):
        console.print(f"{number}. {escape(label)}")


def print_location_details(console: Console, location: Location) -> None:
    console.print()
    console.print(f"Location: {escape(location.name)} ({location.kind.value})")
    console.print(f"Risk Level: {location.risk_level.value}")
    console.print(f"Historical Earthquakes: {location.historical_quakes}")
    console.print(f"Last Major Magnitude: {location.last_magnitude:.1f}")
    console.print(f"Distance to Fault Line: {location.fault_distance_km:.1f} km")


def print_locations(console: Console, locations: Sequence[Location], title: str) -> None:
    if not locations:
        console.print("[yellow]No locations to display.[/yellow]")
        return

    table = Table(title=escape(title), box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Risk", style="bold")
    table.add_column("Quakes", justify="right", style="magenta")
    table.add_column("Last Mag.", justify="right", style="red")
    table.add_column("Fault (km)", justify="right", style="green")

    for number, loc in enumerate(locations, start=1):
        table.add_row(
            str(number),
            escape(loc.name),
            loc.kind.value,
            loc.risk_level.value,
            str(loc.historical_quakes),
            f"{loc.last_magnitude:.1f}",
            f"{loc.fault_distance_km:.1f}",
        )
    console.print(table)


def print_water_usage(console: Console, usage: WaterUsage) -> None:
    table = Table(title=f"Date: {escape(usage.date)}", box=box.SIMPLE)
    table.add_column("Activity", style="cyan")
    table.add_column("Liters", justify="right", style="green")
    for entry in usage.entries:
        table.add_row(entry.category.value, _num(entry.liters))
    table.add_row("[bold]Total[/bold]", f"[bold]{_num(usage.total)}[/bold]")
    console.print(table)


def print_usage_summary(console: Console, summary: Summary[WaterUsage]) -> None:
    if not summary.has_data:
        console.print("[yellow]No data available.[/yellow]")
        return
    console.print(f"\nTotal recorded days: {summary.count}")
    console.print(f"Grand total usage: {_num(summary.total)} liters")
    average = summary.average if summary.average is not None else 0.0
    console.print(f"Average daily usage: {_num(average)} liters")


def print_high_usage_days(console: Console, summary: Summary[WaterUsage]) -> None:
    if not summary.breaches:
        console.print("No high usage days found.")
        return
    for usage in summary.breaches:
        console.print(
            f"[red]High usage on {escape(usage.date)}: {_num(usage.total)} liters[/red]"
        )


def print_heat_indexes(console: Console, readings: Sequence[HeatIndexReading]) -> None:
    if not readings:
        console.print("No entries to display.")
        return

    table = Table(title="Stored Heat Indexes", box=box.ROUNDED)
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Heat Index (°C)", justify="right", style="bold red")
    table.add_column("Temperature (°C)", justify="right")
    table.add_column("Humidity (%)", justify="right")
    for index, reading in enumerate(readings):
        table.add_row(
            str(index),
            _num(reading.heat_index),
            _num(reading.temperature),
            _num(reading.humidity),
        )
    console.print(table)


def print_climate_readings(console: Console, readings: Sequence[ClimateReading]) -> None:
    if not readings:
        console.print("No climate records yet.")
        return

    table = Table(title="Climate Entries", box=box.ROUNDED)
    table.add_column("Entry", justify="right", style="dim")
    table.add_column("Recorded", style="cyan")
    table.add_column("Temperature (°C)", justify="right", style="red")
    table.add_column("Rainfall (mm)", justify="right", style="blue")
    table.add_column("Humidity (%)", justify="right", style="green")
    for number, reading in enumerate(readings, start=1):
        table.add_row(
            str(number),
            reading.recorded_at.strftime("%Y-%m-%d %H:%M:%S"),
            _num(reading.temperature),
            _num(reading.rainfall),
            _num(reading.humidity),
        )
    console.print(table)


def print_alerts(console: Console, alerts: Iterable[Alert]) -> None:
    raised: List[Alert] = list(alerts)
    if not raised:
        console.print("[green]No critical alerts. Weather is stable.[/green]")
        return
    for alert in raised:
        console.print(f"[bold red]{escape(alert.message)}[/bold red]")


def print_log_lines(console: Console, lines: Iterable[str], title: Optional[str] = None) -> int:
    """Echo log lines verbatim; returns how many were printed."""
    if title:
        console.print(f"\n--- {escape(title)} ---")
    count = 0
    for line in lines:
        console.print(line, markup=False, highlight=False)
        count += 1
    return count


__all__ = [
    "print_menu",
    "print_location_details",
    "print_locations",
    "print_water_usage",
    "print_usage_summary",
    "print_high_usage_days",
    "print_heat_indexes",
    "print_climate_readings",
    "print_alerts",
    "print_log_lines",
]
