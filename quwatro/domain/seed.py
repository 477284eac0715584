"""
Default contents of the earthquake-risk registry.

Rows are (name, kind, risk level, historical quakes, last magnitude,
distance to fault line in km).
"""
from __future__ import annotations

from typing import List, Tuple

from quwatro.domain.models import Location, LocationKind, RiskLevel

_C = LocationKind.CITY
_P = LocationKind.PROVINCE
_LOW = RiskLevel.LOW
_MOD = RiskLevel.MODERATE
_HIGH = RiskLevel.HIGH

_SEED_ROWS: Tuple[Tuple[str, LocationKind, RiskLevel, int, float, float], ...] = (
    ("Abra", _P, _MOD, 25, 6.3, 22.0),
    ("Albay", _P, _HIGH, 42, 6.9, 12.5),
    ("Angeles City", _C, _MOD, 19, 6.0, 28.0),
    ("Antipolo City", _C, _HIGH, 31, 6.7, 10.0),
    ("Antique", _P, _MOD, 22, 6.1, 35.0),
    ("Bacolod City", _C, _MOD, 18, 5.8, 40.0),
    ("Batangas City", _C, _HIGH, 38, 6.5, 14.0),
    ("Cagayan de Oro City", _C, _LOW, 6, 4.9, 80.0),
    ("Caloocan City", _C, _HIGH, 30, 6.6, 11.5),
    ("Cebu City", _C, _MOD, 20, 6.0, 34.0),
    ("Davao City", _C, _MOD, 18, 6.2, 30.0),
    ("Dagupan City", _C, _MOD, 27, 6.4, 26.0),
    ("Dasmariñas City", _C, _MOD, 21, 6.2, 20.0),
    ("General Santos City", _C, _MOD, 15, 5.9, 37.0),
    ("Ilocos Region", _P, _MOD, 29, 6.3, 24.0),
    ("Ilagan City", _C, _MOD, 17, 6.0, 32.0),
    ("Kalibo City", _C, _LOW, 5, 4.8, 90.0),
    ("Laoag City", _C, _LOW, 8, 5.0, 70.0),
    ("Las Piñas City", _C, _HIGH, 33, 6.8, 13.5),
    ("Legazpi City", _C, _HIGH, 45, 7.0, 10.0),
    ("Manila", _C, _HIGH, 56, 7.1, 15.5),
    ("Makati City", _C, _HIGH, 34, 6.6, 14.0),
    ("Marikina City", _C, _HIGH, 36, 6.7, 9.0),
    ("Masbate City", _C, _HIGH, 40, 6.8, 18.0),
    ("Muntinlupa City", _C, _HIGH, 32, 6.5, 16.0),
    ("Naga City", _C, _MOD, 23, 6.1, 25.0),
    ("Olongapo City", _C, _MOD, 20, 6.2, 29.0),
    ("Pagadian City", _C, _MOD, 16, 5.9, 38.0),
    ("Parañaque City", _C, _HIGH, 31, 6.4, 17.0),
    ("Pasig City", _C, _HIGH, 30, 6.5, 12.0),
    ("Puerto Princesa City", _C, _LOW, 3, 4.6, 150.0),
    ("Quezon City", _C, _HIGH, 35, 6.9, 11.0),
    ("Roxas City", _C, _LOW, 4, 4.7, 110.0),
    ("San Jose del Monte City", _C, _MOD, 22, 6.0, 27.0),
    ("San Pablo City", _C, _MOD, 18, 6.1, 30.0),
    ("Tacloban City", _C, _MOD, 20, 6.3, 28.0),
    ("Tagbilaran City", _C, _MOD, 17, 6.0, 33.0),
    ("Taguig City", _C, _HIGH, 28, 6.5, 14.0),
    ("Tagum City", _C, _MOD, 15, 5.8, 36.0),
    ("Tarlac City", _C, _MOD, 19, 6.1, 25.0),
    ("Tuguegarao City", _C, _LOW, 10, 5.4, 65.0),
    ("Valenzuela City", _C, _HIGH, 30, 6.4, 15.0),
    ("Vigan City", _C, _MOD, 24, 6.2, 22.5),
)


def seed_locations() -> List[Location]:
    """Fresh Location records for a new registry, in declaration order."""
    return [
        Location(
            name=name,
            kind=kind,
            risk_level=risk,
            historical_quakes=quakes,
            last_magnitude=magnitude,
            fault_distance_km=distance,
        )
        for name, kind, risk, quakes, magnitude, distance in _SEED_ROWS
    ]


__all__ = ["seed_locations"]
