"""
Applications package for the QUWATRO suite.

Re-exports the menu-driver interfaces and the concrete applications so
downstream code can import from `quwatro.apps` directly.
"""

from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction, MenuApp
from quwatro.apps.ecopulse import EcoPulseApp
from quwatro.apps.hub import HubApp, available_apps, create_app
from quwatro.apps.quakeguard import QuakeGuardApp
from quwatro.apps.tempterra import TempTerraApp
from quwatro.apps.waver import WaVerApp

__all__ = [
    # Interfaces
    "AbstractMenuApp",
    "LineReader",
    "MenuAction",
    "MenuApp",
    # Applications
    "EcoPulseApp",
    "HubApp",
    "QuakeGuardApp",
    "TempTerraApp",
    "WaVerApp",
    # Registry
    "available_apps",
    "create_app",
]
