"""
Field validation for user-entered values.

A FieldValidator is built once per application from FieldSpec entries and
turns raw console input into typed values:

    validator = FieldValidator([FieldSpec("risk_level", FieldKind.ENUM, allowed=("Low", "High"))])
    validator.validate("risk_level", " high ")   # -> "High"

Validation is pure; failures raise subclasses of quwatro.errors.ValidationError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from quwatro.domain.models import LocationKind, RiskLevel
from quwatro.errors import (
    EmptyKeyError,
    InvalidEnumValue,
    InvalidNumericFormat,
    NegativeValueError,
)


class FieldKind(str, Enum):
    KEY = "key"
    ENUM = "enum"
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class FieldSpec:
    """
    Declaration of one input field.

    Attributes
    ----------
    name : str
        Field identifier used by callers of FieldValidator.validate.
    kind : FieldKind
        How the raw string is parsed.
    label : str | None
        Human-friendly name used in error messages. Defaults to name.
    allowed : tuple[str, ...]
        Canonical spellings accepted by ENUM fields.
    non_negative : bool
        Reject numeric values below zero.
    default : str | None
        Raw value substituted when the input is blank.
    """

    name: str
    kind: FieldKind
    label: Optional[str] = None
    allowed: Tuple[str, ...] = ()
    non_negative: bool = False
    default: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.name


def parse_key(field: str, raw: str) -> str:
    value = raw.strip()
    if not value:
        raise EmptyKeyError(field)
    return value


def parse_enum(field: str, raw: str, allowed: Iterable[str]) -> str:
    """Return the canonical spelling of raw from allowed, ignoring case."""
    candidate = raw.strip().casefold()
    for option in allowed:
        if option.casefold() == candidate:
            return option
    raise InvalidEnumValue(field, raw, allowed)


def parse_number(
    field: str, raw: str, kind: FieldKind = FieldKind.FLOAT, non_negative: bool = False
) -> Union[int, float]:
    text = raw.strip()
    value: Union[int, float]
    if kind is FieldKind.INT:
        try:
            value = int(text)
        except ValueError:
            raise InvalidNumericFormat(field, raw, "whole number") from None
    else:
        try:
            value = float(text)
        except ValueError:
            raise InvalidNumericFormat(field, raw) from None
        if not math.isfinite(value):
            raise InvalidNumericFormat(field, raw, "finite number")
    if non_negative and value < 0:
        raise NegativeValueError(field, value)
    return value


class FieldValidator:
    """Validates raw input against a fixed set of FieldSpecs."""

    def __init__(self, specs: Iterable[FieldSpec]) -> None:
        self._specs: Dict[str, FieldSpec] = {}
        for spec in specs:
            if spec.kind is FieldKind.ENUM and not spec.allowed:
                raise ValueError(f"Enum field '{spec.name}' needs an allowed set")
            self._specs[spec.name] = spec

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self._specs)

    def spec(self, field_name: str) -> FieldSpec:
        return self._specs[field_name]

    def validate(self, field_name: str, raw_input: str) -> Any:
        """
        Parse raw_input for field_name.

        Raises KeyError for an undeclared field and a ValidationError subclass
        for bad input.
        """
        spec = self._specs[field_name]
        raw = raw_input
        if not raw.strip() and spec.default is not None:
            raw = spec.default
        label = spec.display_name

        if spec.kind is FieldKind.KEY:
            return parse_key(label, raw)
        if spec.kind is FieldKind.ENUM:
            return parse_enum(label, raw, spec.allowed)
        return parse_number(label, raw, spec.kind, spec.non_negative)


def _values(enum_cls: type) -> Tuple[str, ...]:
    return tuple(member.value for member in enum_cls)


LOCATION_FIELDS = FieldValidator(
    [
        FieldSpec("name", FieldKind.KEY, label="Location name"),
        FieldSpec("kind", FieldKind.ENUM, label="Location type", allowed=_values(LocationKind), default="City"),
        FieldSpec("risk_level", FieldKind.ENUM, label="Risk level", allowed=_values(RiskLevel)),
        FieldSpec("historical_quakes", FieldKind.INT, label="Historical earthquakes", non_negative=True),
        FieldSpec("last_magnitude", FieldKind.FLOAT, label="Last major magnitude"),
        FieldSpec("fault_distance_km", FieldKind.FLOAT, label="Distance to fault line", non_negative=True),
    ]
)

WATER_USAGE_FIELDS = FieldValidator(
    [
        FieldSpec("date", FieldKind.KEY, label="Date"),
        FieldSpec("liters", FieldKind.FLOAT, label="Liters used", non_negative=True),
    ]
)

HEAT_INDEX_FIELDS = FieldValidator(
    [
        FieldSpec("temperature", FieldKind.FLOAT, label="Temperature"),
        FieldSpec("humidity", FieldKind.FLOAT, label="Humidity", non_negative=True),
        FieldSpec("heat_index", FieldKind.FLOAT, label="Heat index"),
        FieldSpec("index", FieldKind.INT, label="Index"),
    ]
)

CLIMATE_FIELDS = FieldValidator(
    [
        FieldSpec("temperature", FieldKind.FLOAT, label="Temperature"),
        FieldSpec("rainfall", FieldKind.FLOAT, label="Rainfall", non_negative=True),
        FieldSpec("humidity", FieldKind.FLOAT, label="Humidity", non_negative=True),
    ]
)


__all__ = [
    "FieldKind",
    "FieldSpec",
    "FieldValidator",
    "parse_key",
    "parse_enum",
    "parse_number",
    "LOCATION_FIELDS",
    "WATER_USAGE_FIELDS",
    "HEAT_INDEX_FIELDS",
    "CLIMATE_FIELDS",
]
