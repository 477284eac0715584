from __future__ import annotations

from datetime import datetime

import pytest

from quwatro.aggregator import (
    AlertRule,
    Comparison,
    climate_alert_rules,
    evaluate_alerts,
    summarize,
)
from quwatro.config import Settings
from quwatro.domain.models import ClimateReading, WaterUsage

THRESHOLD = 250.0


def _usage(date: str, total: float) -> WaterUsage:
    return WaterUsage.from_liters(date, [total, 0, 0, 0, 0])


def _reading(temperature: float, rainfall: float, humidity: float) -> ClimateReading:
    return ClimateReading(
        temperature=temperature,
        rainfall=rainfall,
        humidity=humidity,
        recorded_at=datetime(2025, 1, 1, 12, 0, 0),
    )


def test_summarize_empty_reports_no_data() -> None:
    summary = summarize([], value=lambda u: u.total, threshold=THRESHOLD)

    assert summary.count == 0
    assert summary.total == 0
    assert summary.average is None
    assert not summary.has_data
    assert summary.breaches == ()


def test_summarize_counts_totals_and_breaches() -> None:
    usages = [_usage("d1", 100), _usage("d2", 200), _usage("d3", 300)]

    summary = summarize(usages, value=lambda u: u.total, threshold=THRESHOLD)

    assert summary.count == 3
    assert summary.total == pytest.approx(600)
    assert summary.average == pytest.approx(200)
    assert [u.date for u in summary.breaches] == ["d3"]


def test_value_equal_to_threshold_is_not_a_breach() -> None:
    summary = summarize([_usage("d1", THRESHOLD)], value=lambda u: u.total, threshold=THRESHOLD)
    assert summary.breaches == ()


def test_summarize_consumes_a_generator_once() -> None:
    records = (_usage(f"d{i}", 10.0 * i) for i in range(1, 5))

    summary = summarize(records, value=lambda u: u.total, threshold=25)

    assert summary.count == 4
    assert summary.total == pytest.approx(100)
    assert len(summary.breaches) == 2


def test_water_usage_total_is_the_summarized_value() -> None:
    usage = WaterUsage.from_liters("2025-01-01", [100, 150, 50, 120, 90])

    summary = summarize([usage], value=lambda u: u.total, threshold=500)

    assert summary.total == pytest.approx(510)
    assert summary.breaches == (usage,)


def test_summary_as_dict_rounds_and_counts_breaches() -> None:
    summary = summarize(
        [_usage("d1", 100.004), _usage("d2", 300.0)], value=lambda u: u.total, threshold=THRESHOLD
    )

    assert summary.as_dict() == {
        "count": 2,
        "total": 400.0,
        "average": 200.0,
        "threshold": THRESHOLD,
        "breaches": 1,
    }


def test_empty_summary_as_dict_keeps_average_none() -> None:
    summary = summarize([], value=lambda u: u.total, threshold=THRESHOLD)
    assert summary.as_dict()["average"] is None


def test_climate_rules_raise_all_three_alerts() -> None:
    rules = climate_alert_rules(Settings())

    alerts = evaluate_alerts(_reading(40, 150, 20), rules)

    assert [alert.message for alert in alerts] == [
        "Heatwave Alert!",
        "Flood Risk Alert!",
        "Dry Spell Warning!",
    ]
    assert [alert.value for alert in alerts] == [40, 150, 20]


def test_stable_weather_raises_no_alerts() -> None:
    assert evaluate_alerts(_reading(30, 10, 60), climate_alert_rules(Settings())) == []


def test_alert_thresholds_are_strict() -> None:
    assert evaluate_alerts(_reading(38, 100, 30), climate_alert_rules(Settings())) == []


def test_alert_thresholds_follow_settings() -> None:
    settings = Settings(heatwave_threshold_c=30)

    alerts = evaluate_alerts(_reading(31, 0, 50), climate_alert_rules(settings))

    assert [alert.rule.name for alert in alerts] == ["heatwave"]


def test_custom_rule_below_comparison() -> None:
    rule = AlertRule(
        name="cold",
        message="Cold snap!",
        attribute="temperature",
        comparison=Comparison.BELOW,
        threshold=5,
    )

    assert rule.triggered_by(_reading(4.9, 0, 50))
    assert not rule.triggered_by(_reading(5, 0, 50))
