from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


class InvalidMetricValue(ValueError):
    """Raised when a metric value object is built from an out-of-range number."""


class ChangeDirection(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    UNKNOWN = "unknown"


# Changes below this percentage of the previous value are considered stable
STABLE_CHANGE_PERCENT = 5.0


def round_half_up(value: float, digits: int = 1) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _ensure_valid(value: float, label: str) -> None:
    if value is None or math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidMetricValue(f"{label} must be a valid non-negative number")


@dataclass(frozen=True, slots=True)
class ConceptionRate:
    value: float
    unit: str = "%"

    @classmethod
    def create(cls, value: float) -> ConceptionRate:
        _ensure_valid(value, "Conception rate")
        if value > 100:
            raise InvalidMetricValue("Conception rate cannot exceed 100%")
        return cls(value=round_half_up(value, 1))

    @property
    def display(self) -> str:
        return f"{self.value}%"


@dataclass(frozen=True, slots=True)
class AverageDaysOpen:
    value: int
    unit: str = "days"

    @classmethod
    def create(cls, value: float) -> AverageDaysOpen:
        _ensure_valid(value, "Average days open")
        return cls(value=int(round_half_up(value, 0)))

    @property
    def display(self) -> str:
        return f"{self.value} days"


@dataclass(frozen=True, slots=True)
class AverageCalvingInterval:
    value: int
    unit: str = "days"

    @classmethod
    def create(cls, value: float) -> AverageCalvingInterval:
        _ensure_valid(value, "Average calving interval")
        return cls(value=int(round_half_up(value, 0)))

    @property
    def display(self) -> str:
        return f"{self.value} days"


@dataclass(frozen=True, slots=True)
class AIPerConception:
    value: float
    unit: str = "count"

    @classmethod
    def create(cls, value: float) -> AIPerConception:
        _ensure_valid(value, "AI per conception")
        if value < 1:
            raise InvalidMetricValue("AI per conception must be at least 1")
        return cls(value=round_half_up(value, 1))

    @property
    def display(self) -> str:
        return f"{self.value} AI/conception"


@dataclass(frozen=True, slots=True)
class BreedingMetrics:
    """The four headline breeding indicators of one period.

    A ``None`` field means there was not enough data to compute it, which is
    different from a measured zero.
    """

    conception_rate: ConceptionRate | None = None
    average_days_open: AverageDaysOpen | None = None
    average_calving_interval: AverageCalvingInterval | None = None
    ai_per_conception: AIPerConception | None = None

    @classmethod
    def create(
        cls,
        conception_rate: float | None,
        average_days_open: float | None,
        average_calving_interval: float | None,
        ai_per_conception: float | None,
    ) -> BreedingMetrics:
        return cls(
            conception_rate=(
                ConceptionRate.create(conception_rate) if conception_rate is not None else None
            ),
            average_days_open=(
                AverageDaysOpen.create(average_days_open)
                if average_days_open is not None
                else None
            ),
            average_calving_interval=(
                AverageCalvingInterval.create(average_calving_interval)
                if average_calving_interval is not None
                else None
            ),
            ai_per_conception=(
                AIPerConception.create(ai_per_conception)
                if ai_per_conception is not None
                else None
            ),
        )

    @classmethod
    def empty(cls) -> BreedingMetrics:
        return cls()

    def is_empty(self) -> bool:
        return all(value is None for value in self.values().values())

    def values(self) -> dict[str, float | int | None]:
        return {
            "conception_rate": _value_of(self.conception_rate),
            "avg_days_open": _value_of(self.average_days_open),
            "avg_calving_interval": _value_of(self.average_calving_interval),
            "ai_per_conception": _value_of(self.ai_per_conception),
        }

    def summary(self) -> str:
        parts = []
        if self.conception_rate:
            parts.append(f"conception rate: {self.conception_rate.display}")
        if self.average_days_open:
            parts.append(f"average days open: {self.average_days_open.display}")
        if self.average_calving_interval:
            parts.append(f"average calving interval: {self.average_calving_interval.display}")
        if self.ai_per_conception:
            parts.append(f"AI per conception: {self.ai_per_conception.display}")
        return ", ".join(parts) if parts else "no metric data"


def _value_of(metric) -> float | int | None:
    return metric.value if metric is not None else None


# Metric key -> True when a higher value is better
HIGHER_IS_BETTER: dict[str, bool] = {
    "conception_rate": True,
    "avg_days_open": False,
    "avg_calving_interval": False,
    "ai_per_conception": False,
}


def compare_values(
    current: float | None, previous: float | None, *, higher_is_better: bool
) -> ChangeDirection:
    if current is None or previous is None:
        return ChangeDirection.UNKNOWN
    change = current - previous
    if previous == 0:
        if change == 0:
            return ChangeDirection.STABLE
    elif abs(change / previous) * 100 < STABLE_CHANGE_PERCENT:
        return ChangeDirection.STABLE
    improved = change > 0 if higher_is_better else change < 0
    return ChangeDirection.IMPROVING if improved else ChangeDirection.DECLINING


def compare_metrics(
    current: BreedingMetrics, previous: BreedingMetrics
) -> dict[str, ChangeDirection]:
    """Classify each metric of ``current`` against ``previous``."""
    current_values = current.values()
    previous_values = previous.values()
    return {
        key: compare_values(
            current_values[key], previous_values[key], higher_is_better=higher_is_better
        )
        for key, higher_is_better in HIGHER_IS_BETTER.items()
    }


def metric_differences(
    current: BreedingMetrics, previous: BreedingMetrics
) -> dict[str, float | None]:
    current_values = current.values()
    previous_values = previous.values()
    diffs: dict[str, float | None] = {}
    for key in HIGHER_IS_BETTER:
        cur, prev = current_values[key], previous_values[key]
        diffs[key] = round_half_up(cur - prev, 1) if cur is not None and prev is not None else None
    return diffs
