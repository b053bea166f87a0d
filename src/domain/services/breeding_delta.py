from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from src.domain.models.trend_analysis import MetricChanges, MetricDifferences
from src.domain.value_objects.breeding_metrics import (
    BreedingMetrics,
    ChangeDirection,
    compare_metrics,
    metric_differences,
)
from src.domain.value_objects.month_period import DateRange


class Improvement(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


# Absolute differences above these are reported as key changes
KEY_CHANGE_THRESHOLDS: dict[str, float] = {
    "conception_rate": 5.0,
    "avg_days_open": 10.0,
    "ai_per_conception": 0.5,
}


@dataclass(frozen=True, slots=True)
class KeyChange:
    metric: str
    difference: float


@dataclass(frozen=True, slots=True)
class KpiComparison:
    differences: MetricDifferences
    changes: MetricChanges
    improvement: Improvement
    key_changes: tuple[KeyChange, ...]


def previous_range(current: DateRange) -> DateRange:
    """The window of equal length that ends where ``current`` starts."""
    length = current.end - current.start
    end = current.start - timedelta(microseconds=1)
    return DateRange(end - length, end)


def compare_periods(current: BreedingMetrics, previous: BreedingMetrics) -> KpiComparison:
    changes = compare_metrics(current, previous)
    diffs = metric_differences(current, previous)

    improving = sum(1 for d in changes.values() if d is ChangeDirection.IMPROVING)
    declining = sum(1 for d in changes.values() if d is ChangeDirection.DECLINING)
    if improving > declining:
        improvement = Improvement.POSITIVE
    elif declining > improving:
        improvement = Improvement.NEGATIVE
    else:
        improvement = Improvement.NEUTRAL

    key_changes = tuple(
        KeyChange(metric=key, difference=diffs[key])
        for key, threshold in KEY_CHANGE_THRESHOLDS.items()
        if diffs[key] is not None and abs(diffs[key]) > threshold
    )
    return KpiComparison(
        differences=MetricDifferences(**diffs),
        changes=MetricChanges(**changes),
        improvement=improvement,
        key_changes=key_changes,
    )
