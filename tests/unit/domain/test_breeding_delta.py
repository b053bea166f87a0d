from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.domain.services.breeding_delta import (
    Improvement,
    KeyChange,
    compare_periods,
    previous_range,
)
from src.domain.value_objects.breeding_metrics import BreedingMetrics, ChangeDirection
from src.domain.value_objects.month_period import DateRange


def test_previous_range_has_equal_length_and_ends_before_current():
    current = DateRange(
        datetime(2024, 7, 1, tzinfo=timezone.utc),
        datetime(2024, 12, 31, tzinfo=timezone.utc),
    )
    previous = previous_range(current)

    assert previous.end == current.start - timedelta(microseconds=1)
    assert previous.end - previous.start == current.end - current.start
    assert not previous.contains(current.start)


def test_compare_periods_reports_improvement_and_key_changes():
    previous = BreedingMetrics.create(50.0, 100, 400, 2.2)
    current = BreedingMetrics.create(60.0, 95, 395, 1.5)
    comparison = compare_periods(current, previous)

    assert comparison.differences.conception_rate == 10.0
    assert comparison.differences.avg_days_open == -5.0
    assert comparison.changes.conception_rate is ChangeDirection.IMPROVING
    assert comparison.changes.avg_days_open is ChangeDirection.IMPROVING
    assert comparison.changes.avg_calving_interval is ChangeDirection.STABLE
    assert comparison.improvement is Improvement.POSITIVE
    assert comparison.key_changes == (
        KeyChange(metric="conception_rate", difference=10.0),
        KeyChange(metric="ai_per_conception", difference=-0.7),
    )


def test_compare_periods_negative_when_declines_dominate():
    previous = BreedingMetrics.create(60.0, 80, None, 1.2)
    current = BreedingMetrics.create(45.0, 100, None, 1.2)
    comparison = compare_periods(current, previous)

    assert comparison.improvement is Improvement.NEGATIVE
    assert [c.metric for c in comparison.key_changes] == ["conception_rate", "avg_days_open"]


def test_compare_against_empty_previous_period_is_neutral():
    comparison = compare_periods(
        BreedingMetrics.create(60.0, 80, 380, 1.5), BreedingMetrics.empty()
    )

    assert comparison.improvement is Improvement.NEUTRAL
    assert comparison.key_changes == ()
    assert all(d is ChangeDirection.UNKNOWN for _, d in comparison.changes.items())
    assert comparison.differences.conception_rate is None
