"""
QUWATRO - a suite of console tools for environmental and disaster awareness.

The package bundles four menu-driven applications that share one core:

- QuakeGuard: earthquake-risk lookup over an auto-sorted location registry
- WaVer: daily water-usage logging with high-usage alerts
- TempTerra: heat-index calculation over a bounded, on-demand-sorted store
- EcoPulse: climate readings with heatwave, flood and dry-spell alerts

The core is a bounded record store, append-only log files, field validation
and summary aggregation, each usable on its own.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from quwatro.aggregator import Summary, evaluate_alerts, summarize
from quwatro.config import Settings, get_settings
from quwatro.domain.validation import FieldKind, FieldSpec, FieldValidator
from quwatro.errors import QuwatroError
from quwatro.infrastructure.log_files import DelimitedLog, TextLog
from quwatro.store.record_store import RecordStore, SortDiscipline
from quwatro.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core
    "RecordStore",
    "SortDiscipline",
    "DelimitedLog",
    "TextLog",
    "FieldKind",
    "FieldSpec",
    "FieldValidator",
    "Summary",
    "summarize",
    "evaluate_alerts",
    # Errors
    "QuwatroError",
    # Logging
    "configure_logging",
    "get_logger",
]
