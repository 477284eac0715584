"""
On-disk formats of the QUWATRO logs.

- Water usage: `date,shower,laundry,dishwashing,toilet,irrigation`, liters
  with two decimals.
- Heat index: `Temperature: 31.00°C, Humidity: 70.00%, Heat Index: 38.20°C`.
- Climate readings: a timestamped block of labeled lines.
"""
from __future__ import annotations

from typing import List, Sequence

from quwatro.domain.models import USAGE_ORDER, ClimateReading, HeatIndexReading, WaterUsage

CLIMATE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _fmt(value: float) -> str:
    return f"{value:.2f}"


class WaterUsageCodec:
    """Delimited-line codec for WaterUsage records."""

    field_count: int = 1 + len(USAGE_ORDER)

    def encode(self, record: WaterUsage) -> List[str]:
        return [record.date] + [_fmt(record.liters_for(category)) for category in USAGE_ORDER]

    def decode(self, fields: Sequence[str]) -> WaterUsage:
        liters = [float(value) for value in fields[1 : self.field_count]]
        return WaterUsage.from_liters(fields[0], liters)


def format_heat_index_line(reading: HeatIndexReading) -> str:
    return (
        f"Temperature: {_fmt(reading.temperature)}°C, "
        f"Humidity: {_fmt(reading.humidity)}%, "
        f"Heat Index: {_fmt(reading.heat_index)}°C\n"
    )


def format_climate_block(reading: ClimateReading) -> str:
    return (
        f"=== {reading.recorded_at.strftime(CLIMATE_TIMESTAMP_FORMAT)} ===\n"
        f"Temperature: {_fmt(reading.temperature)} °C\n"
        f"Rainfall   : {_fmt(reading.rainfall)} mm\n"
        f"Humidity   : {_fmt(reading.humidity)} %\n"
        "------------------------\n"
    )


__all__ = [
    "CLIMATE_TIMESTAMP_FORMAT",
    "WaterUsageCodec",
    "format_heat_index_line",
    "format_climate_block",
]
