from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

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
from quwatro.errors import QuwatroError


def test_water_usage_total_sums_all_categories() -> None:
    usage = WaterUsage.from_liters("2025-01-01", [100, 150, 50, 120, 90])

    assert usage.total == pytest.approx(510)
    assert usage.liters_for(UsageCategory.TOILET) == 120
    assert tuple(entry.category for entry in usage.entries) == USAGE_ORDER


def test_water_usage_requires_five_values() -> None:
    with pytest.raises(ValueError):
        WaterUsage.from_liters("2025-01-01", [1, 2, 3])


def test_water_usage_rejects_negative_liters() -> None:
    with pytest.raises(ValueError):
        WaterUsage.from_liters("2025-01-01", [1, 2, -3, 4, 5])


def test_water_usage_rejects_entries_out_of_order() -> None:
    entries = tuple(UsageEntry(category=c, liters=1) for c in reversed(USAGE_ORDER))
    with pytest.raises(ValidationError):
        WaterUsage(date="2025-01-01", entries=entries)


def test_location_is_frozen_and_defaults_to_city() -> None:
    location = Location(
        name="  Baguio  ",
        risk_level="High",
        historical_quakes=6,
        last_magnitude=7.8,
        fault_distance_km=4.5,
    )

    assert location.name == "Baguio"
    assert location.kind is LocationKind.CITY
    assert location.risk_level is RiskLevel.HIGH
    with pytest.raises(ValidationError):
        location.name = "Other"  # type: ignore[misc]


def test_location_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        Location(
            name="Nowhere",
            risk_level=RiskLevel.LOW,
            historical_quakes=-1,
            last_magnitude=1.0,
            fault_distance_km=1.0,
        )


def test_heat_index_below_80f_uses_simple_formula() -> None:
    assert HeatIndexReading.from_conditions(20, 50).heat_index == pytest.approx(19.36)


def test_heat_index_hot_and_humid_exceeds_air_temperature() -> None:
    reading = HeatIndexReading.from_conditions(32, 70)

    assert 40 < reading.heat_index < 41
    assert reading.heat_index == round(reading.heat_index, 2)
    assert compute_heat_index(32, 70) == pytest.approx(reading.heat_index, abs=0.005)


@pytest.mark.parametrize(("temperature", "humidity"), [(1e200, 50), (40, 1e160)])
def test_heat_index_outside_float_range_is_a_reportable_error(
    temperature: float, humidity: float
) -> None:
    with pytest.raises(QuwatroError, match="out of range"):
        HeatIndexReading.from_conditions(temperature, humidity)


def test_climate_reading_rejects_negative_rainfall() -> None:
    with pytest.raises(ValueError):
        ClimateReading(temperature=30, rainfall=-1, humidity=50)


def test_climate_reading_rejects_non_finite_values() -> None:
    with pytest.raises(ValueError):
        ClimateReading(temperature=float("nan"), rainfall=0, humidity=50)


def test_climate_reading_stamps_creation_time() -> None:
    before = datetime.now()
    reading = ClimateReading(temperature=30, rainfall=0, humidity=50)
    assert reading.recorded_at >= before


def test_seed_locations_have_unique_names() -> None:
    names = [location.name.casefold() for location in seed_locations()]
    assert len(names) == len(set(names)) == 43


def test_seed_contains_provinces() -> None:
    provinces = {loc.name for loc in seed_locations() if loc.kind is LocationKind.PROVINCE}
    assert provinces == {"Abra", "Albay", "Antique", "Ilocos Region"}
