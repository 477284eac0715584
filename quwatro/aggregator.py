"""
Summary statistics and threshold alerts over record sequences.

Usage:
    from quwatro.aggregator import summarize

    summary = summarize(usages, value=lambda u: u.total, threshold=500.0)
    print(summary.count, summary.total, summary.average, len(summary.breaches))

All functions are pure: they read the records they are given and never touch
stores or log files.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from quwatro.config import Settings

R = TypeVar("R")


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


@dataclass(frozen=True)
class Summary(Generic[R]):
    """
    Aggregate view of a record sequence.

    `average` is None when there are no records ("no data").
    """

    count: int
    total: float
    average: Optional[float]
    threshold: float
    breaches: Tuple[R, ...] = field(default=())

    @property
    def has_data(self) -> bool:
        return self.count > 0

    def as_dict(self) -> dict:
        return {
            "count": self.count,
            "total": _round_float(self.total),
            "average": _round_float(self.average) if self.average is not None else None,
            "threshold": self.threshold,
            "breaches": len(self.breaches),
        }


def summarize(
    records: Iterable[R],
    value: Callable[[R], float],
    threshold: float,
) -> Summary[R]:
    """
    Count, total and average `value` over records, and collect threshold breaches.

    Parameters
    ----------
    records : Iterable[R]
        Records to aggregate; consumed once, so a log replay can be passed directly.
    value : Callable[[R], float]
        Per-record total (e.g. the sum of a day's usage categories).
    threshold : float
        A record breaches when its value is strictly greater than this.

    Returns
    -------
    Summary[R]
        With `average=None` when no records were given.
    """
    count = 0
    total = 0.0
    breaches: List[R] = []
    for record in records:
        amount = value(record)
        count += 1
        total += amount
        if amount > threshold:
            breaches.append(record)

    average = total / count if count else None
    return Summary(
        count=count,
        total=total,
        average=average,
        threshold=threshold,
        breaches=tuple(breaches),
    )


class Comparison(str, Enum):
    ABOVE = "above"
    BELOW = "below"


_COMPARATORS = {
    Comparison.ABOVE: operator.gt,
    Comparison.BELOW: operator.lt,
}


@dataclass(frozen=True)
class AlertRule:
    """Fires when `attribute` of a reading is strictly above/below `threshold`."""

    name: str
    message: str
    attribute: str
    comparison: Comparison
    threshold: float

    def triggered_by(self, reading: Any) -> bool:
        return _COMPARATORS[self.comparison](getattr(reading, self.attribute), self.threshold)


@dataclass(frozen=True)
class Alert:
    rule: AlertRule
    value: float

    @property
    def message(self) -> str:
        return self.rule.message


def evaluate_alerts(reading: Any, rules: Sequence[AlertRule]) -> List[Alert]:
    """Alerts raised by one reading, in rule order."""
    return [
        Alert(rule=rule, value=getattr(reading, rule.attribute))
        for rule in rules
        if rule.triggered_by(reading)
    ]


def climate_alert_rules(settings: Settings) -> Tuple[AlertRule, ...]:
    return (
        AlertRule(
            name="heatwave",
            message="Heatwave Alert!",
            attribute="temperature",
            comparison=Comparison.ABOVE,
            threshold=settings.heatwave_threshold_c,
        ),
        AlertRule(
            name="flood_risk",
            message="Flood Risk Alert!",
            attribute="rainfall",
            comparison=Comparison.ABOVE,
            threshold=settings.flood_threshold_mm,
        ),
        AlertRule(
            name="dry_spell",
            message="Dry Spell Warning!",
            attribute="humidity",
            comparison=Comparison.BELOW,
            threshold=settings.dry_spell_humidity_pct,
        ),
    )


__all__ = [
    "Summary",
    "summarize",
    "Comparison",
    "AlertRule",
    "Alert",
    "evaluate_alerts",
    "climate_alert_rules",
]
