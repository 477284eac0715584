"""
TempTerra: heat-index calculator with a bounded, on-demand-sorted store.

Every calculation is appended to a text log and inserted into the store;
the store is only sorted when the user asks (or as part of the calculate
flow), never automatically.
"""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction
from quwatro.config import Settings
from quwatro.domain.models import HeatIndexReading
from quwatro.domain.validation import HEAT_INDEX_FIELDS
from quwatro.errors import CapacityExceeded, LogNotFound, WriteError
from quwatro.infrastructure.codecs import format_heat_index_line
from quwatro.infrastructure.log_files import TextLog
from quwatro.reporter import print_heat_indexes, print_log_lines
from quwatro.store.record_store import RecordStore, SortDiscipline
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

CLIMATE_FACTS = (
    "The Earth is heating up, causing extreme weather and ecosystem disruptions.",
    "Water scarcity affects over 2 billion people due to climate change.",
    "Deforestation increases carbon emissions and destroys habitats.",
    "Switching to renewable energy can reduce global warming.",
    "Rising sea levels threaten coastal communities worldwide.",
)


def build_heat_index_store(capacity: int) -> RecordStore[HeatIndexReading]:
    return RecordStore(
        key=lambda reading: reading.heat_index,
        name="heat_indexes",
        capacity=capacity,
        discipline=SortDiscipline.ON_DEMAND,
    )


class TempTerraApp(AbstractMenuApp):
    name = "tempterra"
    title = "TempTerra Knowledge Hub"

    def __init__(
        self,
        settings: Settings,
        read_line: LineReader,
        console: Console,
        store: Optional[RecordStore[HeatIndexReading]] = None,
        heat_log: Optional[TextLog[HeatIndexReading]] = None,
    ) -> None:
        super().__init__(read_line, console)
        self.store = store if store is not None else build_heat_index_store(settings.heat_index_capacity)
        self.heat_log = (
            heat_log
            if heat_log is not None
            else TextLog(settings.heat_index_log_path, format_heat_index_line)
        )

    def actions(self) -> List[MenuAction]:
        return [
            MenuAction("Calculate Heat Index", self.calculate_heat_index),
            MenuAction("View Saved Logs", self.view_logs),
            MenuAction("Sort Entries", self.sort_entries),
            MenuAction("Search Entries", self.search_entries),
            MenuAction("Delete Entry", self.delete_entry),
            MenuAction("Climate Facts", self.show_facts),
        ]

    def calculate_heat_index(self) -> None:
        temperature = self.ask(HEAT_INDEX_FIELDS, "temperature", "Enter temperature (°C): ")
        humidity = self.ask(HEAT_INDEX_FIELDS, "humidity", "Enter humidity (%): ")
        reading = HeatIndexReading.from_conditions(temperature, humidity)
        self.console.print(f"Calculated Heat Index: {reading.heat_index:.2f}°C")

        try:
            self.heat_log.append(reading)
            self.console.print("Data logged successfully.")
        except WriteError as exc:
            self.console.print(f"[red]{escape(str(exc))}[/red]")

        try:
            self.store.insert(reading)
            self.console.print(f"Inserted Heat Index: {reading.heat_index:.2f}°C")
        except CapacityExceeded as exc:
            self.console.print(f"[red]{escape(str(exc))} Cannot insert more data.[/red]")
        print_heat_indexes(self.console, self.store.all())
        self.sort_entries()

        raw = self.read_line("Search for Heat Index value (°C), blank to skip: ")
        if raw.strip():
            self._report_matches(HEAT_INDEX_FIELDS.validate("heat_index", raw))

    def view_logs(self) -> None:
        try:
            lines = self.heat_log.read_all()
        except LogNotFound:
            self.console.print("No logs found.")
            return
        print_log_lines(self.console, lines, title="Saved Logs")

    def sort_entries(self) -> None:
        self.store.sort_by_key()
        self.console.print("Heat Index entries sorted.")
        print_heat_indexes(self.console, self.store.all())

    def search_entries(self) -> None:
        value = self.ask(HEAT_INDEX_FIELDS, "heat_index", "Search for Heat Index value (°C): ")
        self._report_matches(value)

    def delete_entry(self) -> None:
        if self.store.size == 0:
            self.console.print("No entries to delete.")
            return
        print_heat_indexes(self.console, self.store.all())
        index = self.ask(
            HEAT_INDEX_FIELDS,
            "index",
            f"Delete Heat Index at index (0 to {self.store.size - 1}): ",
        )
        removed = self.store.delete_at(index)
        log.info("Heat index deleted", extra={"index": index, "heat_index": removed.heat_index})
        self.console.print(f"Deleted index {index} from array.")
        print_heat_indexes(self.console, self.store.all())

    def show_facts(self) -> None:
        self.console.print("\n========= Climate Awareness =========")
        for number, fact in enumerate(CLIMATE_FACTS, start=1):
            self.console.print(f"{number}. {fact}\n")

    def _report_matches(self, value: float) -> None:
        indices = self.store.search_by_value(value)
        if not indices:
            self.console.print(f"Heat Index {value:.2f}°C not found.")
            return
        for index in indices:
            self.console.print(f"Found at index {index}: {self.store.get(index).heat_index:.2f}°C")


__all__ = ["TempTerraApp", "build_heat_index_store", "CLIMATE_FACTS"]
