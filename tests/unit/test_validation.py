from __future__ import annotations

import pytest

from quwatro.domain.validation import (
    CLIMATE_FIELDS,
    HEAT_INDEX_FIELDS,
    LOCATION_FIELDS,
    WATER_USAGE_FIELDS,
    FieldKind,
    FieldSpec,
    FieldValidator,
)
from quwatro.errors import (
    EmptyKeyError,
    InvalidEnumValue,
    InvalidNumericFormat,
    NegativeValueError,
    ValidationError,
)


@pytest.mark.parametrize("raw", ["moderate", "MODERATE", "  Moderate  ", "mOdErAtE"])
def test_enum_matches_case_insensitively_and_returns_canonical_spelling(raw: str) -> None:
    assert LOCATION_FIELDS.validate("risk_level", raw) == "Moderate"


def test_enum_mismatch_lists_allowed_values() -> None:
    with pytest.raises(InvalidEnumValue) as excinfo:
        LOCATION_FIELDS.validate("risk_level", "extreme")

    assert excinfo.value.allowed == ("Low", "Moderate", "High")
    assert str(excinfo.value) == "Allowed: Low, Moderate, High only."


def test_blank_enum_uses_declared_default() -> None:
    assert LOCATION_FIELDS.validate("kind", "   ") == "City"
    assert LOCATION_FIELDS.validate("kind", "province") == "Province"


@pytest.mark.parametrize("raw", ["abc", "", "12,5", "1.2.3"])
def test_unparsable_float_is_rejected(raw: str) -> None:
    with pytest.raises(InvalidNumericFormat):
        LOCATION_FIELDS.validate("last_magnitude", raw)


@pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity"])
def test_non_finite_float_is_rejected(raw: str) -> None:
    with pytest.raises(InvalidNumericFormat):
        HEAT_INDEX_FIELDS.validate("temperature", raw)


def test_int_field_rejects_fractional_input() -> None:
    with pytest.raises(InvalidNumericFormat):
        LOCATION_FIELDS.validate("historical_quakes", "6.5")
    assert LOCATION_FIELDS.validate("historical_quakes", " 12 ") == 12


def test_non_negative_fields_reject_negative_values() -> None:
    with pytest.raises(NegativeValueError):
        WATER_USAGE_FIELDS.validate("liters", "-0.5")
    with pytest.raises(NegativeValueError):
        CLIMATE_FIELDS.validate("rainfall", "-1")
    assert WATER_USAGE_FIELDS.validate("liters", "0") == 0.0


def test_signed_fields_accept_negative_values() -> None:
    assert LOCATION_FIELDS.validate("last_magnitude", "-1.5") == -1.5
    assert CLIMATE_FIELDS.validate("temperature", "-4") == -4.0


def test_key_fields_are_trimmed_and_must_not_be_blank() -> None:
    assert LOCATION_FIELDS.validate("name", "  Baguio ") == "Baguio"
    with pytest.raises(EmptyKeyError):
        LOCATION_FIELDS.validate("name", "   ")
    with pytest.raises(EmptyKeyError):
        WATER_USAGE_FIELDS.validate("date", "")


def test_all_input_failures_share_the_validation_error_base() -> None:
    for field, raw in [("risk_level", "x"), ("last_magnitude", "x"), ("name", "")]:
        with pytest.raises(ValidationError):
            LOCATION_FIELDS.validate(field, raw)


def test_unknown_field_is_a_programming_error() -> None:
    with pytest.raises(KeyError):
        LOCATION_FIELDS.validate("population", "1000")


def test_enum_spec_without_allowed_values_is_rejected() -> None:
    with pytest.raises(ValueError):
        FieldValidator([FieldSpec("risk", FieldKind.ENUM)])


def test_error_messages_use_field_labels() -> None:
    validator = FieldValidator([FieldSpec("qty", FieldKind.INT, label="Quantity", non_negative=True)])
    with pytest.raises(NegativeValueError, match="Quantity"):
        validator.validate("qty", "-3")
    assert validator.fields == ("qty",)
