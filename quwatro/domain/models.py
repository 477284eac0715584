"""
Domain models for the QUWATRO suite.

Each application keeps one record type. Variants that only differ by a label
(city vs province, shower vs laundry) are carried as an enum field on a single
model rather than as separate classes. Models are frozen: records are
replaced, never edited in place.
"""
from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Sequence, Tuple

from pydantic import BaseModel, Field, model_validator

from quwatro.errors import ValidationError


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class LocationKind(str, Enum):
    CITY = "City"
    PROVINCE = "Province"


class UsageCategory(str, Enum):
    SHOWER = "Shower"
    LAUNDRY = "Laundry"
    DISHWASHING = "Dishwashing"
    TOILET = "Toilet"
    IRRIGATION = "Irrigation"


# Column order of the water-usage log.
USAGE_ORDER: Tuple[UsageCategory, ...] = tuple(UsageCategory)


class Location(BaseModel):
    """
    A place in the earthquake-risk registry, keyed by name.
    """

    name: str = Field(..., min_length=1, description="Location name (registry key).")
    kind: LocationKind = Field(LocationKind.CITY, description="City or province.")
    risk_level: RiskLevel = Field(..., description="Assessed earthquake risk.")
    historical_quakes: int = Field(..., ge=0, description="Recorded historical earthquakes.")
    last_magnitude: float = Field(
        ..., allow_inf_nan=False, description="Magnitude of the last major earthquake."
    )
    fault_distance_km: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Distance to the nearest fault line."
    )

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }


class UsageEntry(BaseModel):
    """Liters used for one household activity."""

    category: UsageCategory
    liters: float = Field(..., ge=0, allow_inf_nan=False)

    model_config = {"frozen": True}


class WaterUsage(BaseModel):
    """
    One day of household water usage, one entry per UsageCategory in log order.
    """

    date: str = Field(..., min_length=1, description="Day the usage was logged for.")
    entries: Tuple[UsageEntry, ...]

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @model_validator(mode="after")
    def _one_entry_per_category(self) -> "WaterUsage":
        categories = tuple(entry.category for entry in self.entries)
        if categories != USAGE_ORDER:
            expected = ", ".join(c.value for c in USAGE_ORDER)
            raise ValueError(f"entries must cover exactly: {expected}")
        return self

    @classmethod
    def from_liters(cls, date: str, liters: Sequence[float]) -> "WaterUsage":
        """Build a day's usage from liters given in USAGE_ORDER."""
        if len(liters) != len(USAGE_ORDER):
            raise ValueError(f"expected {len(USAGE_ORDER)} liter values, got {len(liters)}")
        entries = tuple(
            UsageEntry(category=category, liters=value)
            for category, value in zip(USAGE_ORDER, liters)
        )
        return cls(date=date, entries=entries)

    @property
    def total(self) -> float:
        return sum(entry.liters for entry in self.entries)

    def liters_for(self, category: UsageCategory) -> float:
        for entry in self.entries:
            if entry.category is category:
                return entry.liters
        raise KeyError(category)


def compute_heat_index(temperature_c: float, humidity_pct: float) -> float:
    """
    Apparent temperature in °C using the NWS method.

    The Steadman approximation is used below 80 °F; above it the Rothfusz
    regression applies. Both operate in Fahrenheit.
    """
    t = temperature_c * 9.0 / 5.0 + 32.0
    rh = humidity_pct
    simple = 0.5 * (t + 61.0 + (t - 68.0) * 1.2 + rh * 0.094)
    if (simple + t) / 2.0 < 80.0:
        heat_index_f = simple
    else:
        heat_index_f = (
            -42.379
            + 2.04901523 * t
            + 10.14333127 * rh
            - 0.22475541 * t * rh
            - 0.00683783 * t * t
            - 0.05481717 * rh * rh
            + 0.00122874 * t * t * rh
            + 0.00085282 * t * rh * rh
            - 0.00000199 * t * t * rh * rh
        )
    return (heat_index_f - 32.0) * 5.0 / 9.0


class HeatIndexReading(BaseModel):
    """
    A temperature/humidity pair and the heat index derived from it.

    heat_index is stored with two decimals, the precision it is shown and
    logged with, so exact-value searches match what the user sees.
    """

    temperature: float = Field(..., allow_inf_nan=False)
    humidity: float = Field(..., ge=0, allow_inf_nan=False)
    heat_index: float = Field(..., allow_inf_nan=False)

    model_config = {"frozen": True}

    @classmethod
    def from_conditions(cls, temperature: float, humidity: float) -> "HeatIndexReading":
        """Raises ValidationError when the conditions push the index out of float range."""
        heat_index = compute_heat_index(temperature, humidity)
        if not math.isfinite(heat_index):
            raise ValidationError(
                "Heat index",
                f"Heat index is out of range for temperature {temperature:g} and humidity {humidity:g}.",
            )
        heat_index = round(heat_index, 2)
        return cls(temperature=temperature, humidity=humidity, heat_index=heat_index)


class ClimateReading(BaseModel):
    """A climate observation captured by EcoPulse."""

    temperature: float = Field(..., allow_inf_nan=False, description="Temperature in °C.")
    rainfall: float = Field(..., ge=0, allow_inf_nan=False, description="Rainfall in mm.")
    humidity: float = Field(..., ge=0, allow_inf_nan=False, description="Relative humidity in %.")
    recorded_at: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}


__all__ = [
    "RiskLevel",
    "LocationKind",
    "UsageCategory",
    "USAGE_ORDER",
    "Location",
    "UsageEntry",
    "WaterUsage",
    "compute_heat_index",
    "HeatIndexReading",
    "ClimateReading",
]
