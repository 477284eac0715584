"""
Utilities package for the QUWATRO suite.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from quwatro.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
