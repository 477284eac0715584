"""
Hub menu and application registry.

Usage:
    from quwatro.apps.hub import create_app

    app = create_app("waver", settings, console.input, console)
    app.run()
"""

from __future__ import annotations

from typing import Callable, Dict, List

from rich.console import Console

from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction
from quwatro.apps.ecopulse import EcoPulseApp
from quwatro.apps.quakeguard import QuakeGuardApp
from quwatro.apps.tempterra import TempTerraApp
from quwatro.apps.waver import WaVerApp
from quwatro.config import Settings

AppFactory = Callable[[Settings, LineReader, Console], AbstractMenuApp]

# Order the hub lists the modules in.
MODULE_ORDER = ("quakeguard", "waver", "tempterra", "ecopulse")

ABOUT_TEXT = {
    "quakeguard": "Search, filter and maintain earthquake risk data for locations across "
    "the Philippines, with preparedness tips for each risk level.",
    "waver": "Log daily household water use by activity, review totals and averages, "
    "and flag days above the high-usage threshold.",
    "tempterra": "Calculate the heat index from temperature and humidity, keep a sortable "
    "list of results and a running log of every calculation.",
    "ecopulse": "Record temperature, rainfall and humidity readings and raise heatwave, "
    "flood and dry-spell alerts.",
}

HELP_TEXT = (
    "Choose an option by typing its number and pressing Enter.",
    "Each module has a 'Back' option that returns to this menu.",
    "Invalid input is reported and the menu is shown again.",
    "Logs are written to the configured data directory (QUWATRO_DATA_DIR).",
)


def _app_factories() -> Dict[str, AppFactory]:
    """Registry of available applications."""
    return {
        "quakeguard": QuakeGuardApp,
        "waver": WaVerApp,
        "tempterra": TempTerraApp,
        "ecopulse": EcoPulseApp,
    }


def available_apps() -> List[str]:
    """List available application names."""
    return sorted(_app_factories().keys())


def create_app(
    name: str, settings: Settings, read_line: LineReader, console: Console
) -> AbstractMenuApp:
    factories = _app_factories()
    if name not in factories:
        raise ValueError(f"Unknown application '{name}'. Available: {', '.join(factories)}")
    return factories[name](settings, read_line, console)


class HubApp(AbstractMenuApp):
    """
    Top-level menu. Module instances live as long as the hub, so in-memory
    stores survive leaving and re-entering a module.
    """

    name = "hub"
    title = "QUWATRO - Your Compass for a Safer Future"
    exit_label = "Exit"
    exit_message = "Stay safe, stay bright, and do what's right!"

    def __init__(self, settings: Settings, read_line: LineReader, console: Console) -> None:
        super().__init__(read_line, console)
        self.modules = [create_app(name, settings, read_line, console) for name in MODULE_ORDER]

    def actions(self) -> List[MenuAction]:
        entries = [MenuAction(module.title, module.run) for module in self.modules]
        entries.append(MenuAction("Help", self.show_help))
        entries.append(MenuAction("About the Project", self.show_about))
        return entries

    def show_help(self) -> None:
        self.console.print("\n--- Help ---")
        for line in HELP_TEXT:
            self.console.print(f"- {line}")

    def show_about(self) -> None:
        self.console.print("\n--- About the Project ---")
        self.console.print("This suite combines environmental and disaster management tools:")
        for module in self.modules:
            self.console.print(f"\n[bold]{module.title}[/bold]")
            self.console.print(ABOUT_TEXT[module.name])


__all__ = ["HubApp", "MODULE_ORDER", "available_apps", "create_app"]
