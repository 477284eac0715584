"""
Error taxonomy for the QUWATRO suite.

Every failure the core can report is a subclass of QuwatroError so menu
drivers can catch one base class at the action boundary, report the message
and re-prompt.
"""

from __future__ import annotations

from typing import Iterable


class QuwatroError(Exception):
    """Base class for all reportable failures."""


class ValidationError(QuwatroError):
    """Bad user input for a named field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidEnumValue(ValidationError):
    def __init__(self, field: str, raw: str, allowed: Iterable[str]) -> None:
        self.allowed = tuple(allowed)
        self.raw = raw
        super().__init__(field, f"Allowed: {', '.join(self.allowed)} only.")


class InvalidNumericFormat(ValidationError):
    def __init__(self, field: str, raw: str, expected: str = "number") -> None:
        self.raw = raw
        super().__init__(field, f"Invalid {expected} for {field}: {raw!r}")


class NegativeValueError(ValidationError):
    def __init__(self, field: str, value: float) -> None:
        self.value = value
        super().__init__(field, f"{field} must not be negative (got {value}).")


class EmptyKeyError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} must not be empty.")


class StoreError(QuwatroError):
    """A record store refused a mutation; the store is unchanged."""


class CapacityExceeded(StoreError):
    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Storage full: capacity of {capacity} entries reached.")


class IndexOutOfRange(StoreError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size:
            message = f"Invalid index {index}; expected 0 to {size - 1}."
        else:
            message = f"Invalid index {index}; the store is empty."
        super().__init__(message)


class DuplicateKeyError(StoreError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"A record named '{key}' already exists.")


class LogError(QuwatroError):
    """File I/O failure on a persistence log."""


class WriteError(LogError):
    pass


class ReadError(LogError):
    pass


class NotFound(QuwatroError):
    """Nothing to show yet. Reported as an empty state, never escalated."""


class LogNotFound(NotFound):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No log found at {path}.")


__all__ = [
    "QuwatroError",
    "ValidationError",
    "InvalidEnumValue",
    "InvalidNumericFormat",
    "NegativeValueError",
    "EmptyKeyError",
    "StoreError",
    "CapacityExceeded",
    "IndexOutOfRange",
    "DuplicateKeyError",
    "LogError",
    "WriteError",
    "ReadError",
    "NotFound",
    "LogNotFound",
]
