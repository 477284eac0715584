"""
Domain package for the QUWATRO suite.

Exports the record models and field validation used by the stores, logs and
menu drivers. Keep this package focused on data definitions and validation.
"""

from quwatro.domain.models import (
    USAGE_ORDER,
    ClimateReading,
    HeatIndexReading,
    Location,
    LocationKind,
    RiskLevel,
    UsageCategory,
    UsageEntry,
    WaterUsage,
    compute_heat_index,
)
from quwatro.domain.seed import seed_locations
from quwatro.domain.validation import FieldKind, FieldSpec, FieldValidator

__all__ = [
    "USAGE_ORDER",
    "ClimateReading",
    "HeatIndexReading",
    "Location",
    "LocationKind",
    "RiskLevel",
    "UsageCategory",
    "UsageEntry",
    "WaterUsage",
    "compute_heat_index",
    "seed_locations",
    "FieldKind",
    "FieldSpec",
    "FieldValidator",
]
