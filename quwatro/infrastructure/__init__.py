"""
Infrastructure package for the QUWATRO suite.

Centralizes file persistence: the append-only log classes and the line
formats of each application's log. Keep this layer focused on I/O, decoupled
from menu and aggregation logic.
"""

from quwatro.infrastructure.codecs import (
    WaterUsageCodec,
    format_climate_block,
    format_heat_index_line,
)
from quwatro.infrastructure.log_files import AppendOnlyLog, DelimitedLog, RecordCodec, TextLog

__all__ = [
    "AppendOnlyLog",
    "DelimitedLog",
    "RecordCodec",
    "TextLog",
    "WaterUsageCodec",
    "format_climate_block",
    "format_heat_index_line",
]
