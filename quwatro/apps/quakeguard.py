"""
QuakeGuard: earthquake-risk lookup over a registry of Philippine locations.

The registry is an auto-sorted store keyed by location name (names are unique,
compared case-insensitively), seeded with default locations at startup.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction
from quwatro.config import Settings
from quwatro.domain.models import Location, RiskLevel
from quwatro.domain.seed import seed_locations
from quwatro.domain.validation import LOCATION_FIELDS
from quwatro.reporter import print_location_details, print_locations
from quwatro.store.record_store import RecordStore, SortDiscipline
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

HIGH_RISK_TIPS = (
    "Keep a Go-Bag ready (food, water, medicine).",
    "Know safe spots in your home.",
    "Secure heavy objects and join drills.",
)
LOW_RISK_TIPS = ("Stay alert and aware of PHIVOLCS updates.",)


def preparedness_tips(risk: RiskLevel) -> tuple:
    if risk in (RiskLevel.HIGH, RiskLevel.MODERATE):
        return HIGH_RISK_TIPS
    return LOW_RISK_TIPS


def build_registry(
    capacity: Optional[int] = None, locations: Optional[Iterable[Location]] = None
) -> RecordStore[Location]:
    """Location registry, alphabetical by name; seeded defaults unless locations is given."""
    return RecordStore(
        key=lambda loc: loc.name,
        name="locations",
        capacity=capacity,
        discipline=SortDiscipline.AUTO,
        unique_keys=True,
        records=seed_locations() if locations is None else locations,
    )


class QuakeGuardApp(AbstractMenuApp):
    name = "quakeguard"
    title = "PH Earthquake Risk System (QuakeGuard)"

    def __init__(
        self,
        settings: Settings,
        read_line: LineReader,
        console: Console,
        registry: Optional[RecordStore[Location]] = None,
    ) -> None:
        super().__init__(read_line, console)
        self.registry = registry if registry is not None else build_registry(settings.location_capacity)

    def actions(self) -> List[MenuAction]:
        return [
            MenuAction("Search Location Info", self.search_location),
            MenuAction("Add New Location", self.add_location),
            MenuAction("View All Locations", self.list_all),
            MenuAction("Filter by Risk Level", self.filter_by_risk),
            MenuAction("Delete Location", self.delete_location),
        ]

    def search_location(self) -> None:
        name = self.ask(LOCATION_FIELDS, "name", "\nEnter location to search: ")
        location = self.registry.search_by_key(name)
        if location is None:
            self.console.print("Location not found.")
            return
        print_location_details(self.console, location)
        self.console.print("\nPreparedness Tips:")
        for tip in preparedness_tips(location.risk_level):
            self.console.print(f"- {tip}")

    def add_location(self) -> None:
        fields = LOCATION_FIELDS
        name = self.ask(fields, "name", "\nEnter Location Name: ")
        kind = self.ask(fields, "kind", "Location Type (City/Province, blank for City): ")
        risk = self.ask(fields, "risk_level", "Enter Risk Level (Low/Moderate/High): ")
        quakes = self.ask(fields, "historical_quakes", "Historical Earthquakes: ")
        magnitude = self.ask(fields, "last_magnitude", "Last Major Magnitude: ")
        distance = self.ask(fields, "fault_distance_km", "Distance to Fault Line (km): ")

        location = Location(
            name=name,
            kind=kind,
            risk_level=risk,
            historical_quakes=quakes,
            last_magnitude=magnitude,
            fault_distance_km=distance,
        )
        self.registry.insert(location)
        log.info("Location added", extra={"location": location.name, "size": self.registry.size})
        self.console.print("[green]Location added successfully![/green]")

    def list_all(self) -> None:
        print_locations(self.console, self.registry.all(), "All Locations (Alphabetical)")

    def filter_by_risk(self) -> None:
        risk = RiskLevel(
            self.ask(LOCATION_FIELDS, "risk_level", "\nEnter risk level to filter (Low/Moderate/High): ")
        )
        matches = self.registry.filter(lambda loc: loc.risk_level is risk)
        print_locations(self.console, matches, f"Locations with Risk Level {risk.value}")

    def delete_location(self) -> None:
        name = self.ask(LOCATION_FIELDS, "name", "\nEnter location to delete: ")
        index = self.registry.index_of_key(name)
        if index is None:
            self.console.print("Location not found.")
            return
        removed = self.registry.delete_at(index)
        log.info("Location deleted", extra={"location": removed.name, "size": self.registry.size})
        self.console.print(f"Deleted {escape(removed.name)}.")


__all__ = ["QuakeGuardApp", "build_registry", "preparedness_tips"]
