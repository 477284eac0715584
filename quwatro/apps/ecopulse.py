"""
EcoPulse: climate-reading monitor with threshold alerts.

Readings are kept in a bounded history; "Save" appends the entries that have
not been written yet to a timestamped text log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from quwatro.aggregator import AlertRule, climate_alert_rules, evaluate_alerts
from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction
from quwatro.config import Settings
from quwatro.domain.models import ClimateReading
from quwatro.domain.validation import CLIMATE_FIELDS
from quwatro.errors import LogNotFound
from quwatro.infrastructure.codecs import format_climate_block
from quwatro.infrastructure.log_files import TextLog
from quwatro.reporter import print_alerts, print_climate_readings, print_log_lines
from quwatro.store.record_store import RecordStore, SortDiscipline
from quwatro.utils.logging import get_logger

log = get_logger(__name__)


def build_climate_history(capacity: int) -> RecordStore[ClimateReading]:
    return RecordStore(
        key=lambda reading: reading.recorded_at,
        name="climate_history",
        capacity=capacity,
        discipline=SortDiscipline.ON_DEMAND,
    )


class EcoPulseApp(AbstractMenuApp):
    name = "ecopulse"
    title = "EcoPulse: Real-Time Climate Impact Monitor"

    def __init__(
        self,
        settings: Settings,
        read_line: LineReader,
        console: Console,
        history: Optional[RecordStore[ClimateReading]] = None,
        climate_log: Optional[TextLog[ClimateReading]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(read_line, console)
        self.history = (
            history if history is not None else build_climate_history(settings.climate_history_capacity)
        )
        self.climate_log = (
            climate_log
            if climate_log is not None
            else TextLog(settings.climate_log_path, format_climate_block)
        )
        self.rules: Tuple[AlertRule, ...] = climate_alert_rules(settings)
        self._clock = clock
        self._saved = 0

    def actions(self) -> List[MenuAction]:
        return [
            MenuAction("Input New Climate Data", self.input_data),
            MenuAction("Analyze All Data", self.analyze_all),
            MenuAction("Save All Entries to Log File", self.save_all),
            MenuAction("View Climate Entries", self.view_entries),
            MenuAction("View Saved Log", self.view_log),
            MenuAction("About System", self.show_about),
        ]

    @property
    def unsaved(self) -> int:
        return self.history.size - self._saved

    def input_data(self) -> None:
        temperature = self.ask(CLIMATE_FIELDS, "temperature", "\nEnter Temperature (°C): ")
        rainfall = self.ask(CLIMATE_FIELDS, "rainfall", "Enter Rainfall (mm): ")
        humidity = self.ask(CLIMATE_FIELDS, "humidity", "Enter Humidity (%): ")
        reading = ClimateReading(
            temperature=temperature,
            rainfall=rainfall,
            humidity=humidity,
            recorded_at=self._clock(),
        )
        self.history.insert(reading)
        self.console.print("[green]Entry added![/green]")

    def analyze_all(self) -> None:
        readings = self.history.all()
        if not readings:
            self.console.print("No data to analyze.")
            return
        self.console.print("\nAnalyzing all entries...")
        for number, reading in enumerate(readings, start=1):
            self.console.print(f"\n>> Entry #{number}")
            print_alerts(self.console, evaluate_alerts(reading, self.rules))

    def save_all(self) -> None:
        if self.history.size == 0:
            self.console.print("No entries to save.")
            return
        if self.unsaved == 0:
            self.console.print("All entries are already saved.")
            return
        # History never shrinks, so entries past the saved mark are the new ones.
        for reading in self.history.all()[self._saved :]:
            self.climate_log.append(reading)
            self._saved += 1
        log.info("Climate entries saved", extra={"saved": self._saved, "path": str(self.climate_log.path)})
        self.console.print(f"All entries saved to {self.climate_log.path.name}")

    def view_entries(self) -> None:
        print_climate_readings(self.console, self.history.all())

    def view_log(self) -> None:
        try:
            lines = self.climate_log.read_all()
        except LogNotFound:
            self.console.print("No logs found.")
            return
        print_log_lines(self.console, lines, title="Saved Climate Log")

    def show_about(self) -> None:
        self.console.print("\n--- About EcoPulse ---")
        self.console.print("Climate data: temperature (°C), rainfall (mm) and humidity (%) per entry.")
        self.console.print("Alert system:")
        for rule in self.rules:
            self.console.print(
                f"- {escape(rule.message)} ({rule.attribute} {rule.comparison.value} {rule.threshold:g})"
            )
        self.console.print(f"Logger: appends entries to {escape(self.climate_log.path.name)}")
        self.console.print(
            f"History: {self.history.size} of {self.history.capacity} entries stored, "
            f"{self.unsaved} unsaved."
        )


__all__ = ["EcoPulseApp", "build_climate_history"]
