from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.domain.value_objects.breeding_metrics import BreedingMetrics, ChangeDirection
from src.domain.value_objects.month_period import DateRange, MonthPeriod


class OverallDirection(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    MIXED = "mixed"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class EventCounts:
    inseminations: int = 0
    conceptions: int = 0
    calvings: int = 0
    pairs_for_days_open: int = 0
    total_events: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "inseminations": self.inseminations,
            "conceptions": self.conceptions,
            "calvings": self.calvings,
            "pairs_for_days_open": self.pairs_for_days_open,
            "total_events": self.total_events,
        }


@dataclass(frozen=True, slots=True)
class MetricChanges:
    conception_rate: ChangeDirection = ChangeDirection.UNKNOWN
    avg_days_open: ChangeDirection = ChangeDirection.UNKNOWN
    avg_calving_interval: ChangeDirection = ChangeDirection.UNKNOWN
    ai_per_conception: ChangeDirection = ChangeDirection.UNKNOWN

    def items(self) -> list[tuple[str, ChangeDirection]]:
        return [
            ("conception_rate", self.conception_rate),
            ("avg_days_open", self.avg_days_open),
            ("avg_calving_interval", self.avg_calving_interval),
            ("ai_per_conception", self.ai_per_conception),
        ]


@dataclass(frozen=True, slots=True)
class MetricDifferences:
    conception_rate: float | None = None
    avg_days_open: float | None = None
    avg_calving_interval: float | None = None
    ai_per_conception: float | None = None


@dataclass(frozen=True, slots=True)
class TrendPoint:
    period: MonthPeriod
    metrics: BreedingMetrics
    counts: EventCounts

    @property
    def period_label(self) -> str:
        return self.period.label


@dataclass(frozen=True, slots=True)
class TrendDelta:
    period: MonthPeriod
    metrics: BreedingMetrics
    changes: MetricChanges = field(default_factory=MetricChanges)
    differences: MetricDifferences = field(default_factory=MetricDifferences)

    @property
    def period_label(self) -> str:
        return self.period.label


@dataclass(frozen=True, slots=True)
class OverallTrend:
    direction: OverallDirection
    confidence: Confidence
    insights: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TrendAnalysis:
    series: tuple[TrendPoint, ...]
    deltas: tuple[TrendDelta, ...]
    overall_trend: OverallTrend
    period_range: DateRange | None
    summary: str
