from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.domain.models.breeding_event import BreedingEvent
from src.domain.models.trend_analysis import (
    Confidence,
    MetricChanges,
    MetricDifferences,
    OverallDirection,
    OverallTrend,
    TrendAnalysis,
    TrendDelta,
    TrendPoint,
)
from src.domain.ports.kpi_narrator import KpiNarrator
from src.domain.services.breeding_kpi import (
    AnimalBreedingRecord,
    aggregate_period,
    match_herd,
    partition_events,
)
from src.domain.value_objects.breeding_metrics import (
    ChangeDirection,
    compare_metrics,
    metric_differences,
)
from src.domain.value_objects.month_period import DateRange, MonthPeriod, month_span

HIGH_CONFIDENCE_POINTS = 12
MEDIUM_CONFIDENCE_POINTS = (3, 6)


def bucketize(
    records: Sequence[AnimalBreedingRecord], start: MonthPeriod, end: MonthPeriod
) -> tuple[TrendPoint, ...]:
    """One trend point per calendar month, all folded from the same records."""
    points = []
    for month in month_span(start, end):
        kpi = aggregate_period(records, month.date_range())
        points.append(TrendPoint(period=month, metrics=kpi.metrics, counts=kpi.counts))
    return tuple(points)


def compute_series(
    events: Iterable[BreedingEvent], start: MonthPeriod, end: MonthPeriod
) -> tuple[TrendPoint, ...]:
    return bucketize(match_herd(partition_events(events)), start, end)


def build_deltas(series: Sequence[TrendPoint]) -> tuple[TrendDelta, ...]:
    deltas = []
    previous: TrendPoint | None = None
    for point in series:
        if previous is None:
            deltas.append(TrendDelta(period=point.period, metrics=point.metrics))
        else:
            deltas.append(
                TrendDelta(
                    period=point.period,
                    metrics=point.metrics,
                    changes=MetricChanges(**compare_metrics(point.metrics, previous.metrics)),
                    differences=MetricDifferences(
                        **metric_differences(point.metrics, previous.metrics)
                    ),
                )
            )
        previous = point
    return tuple(deltas)


def calculate_confidence(series_count: int, deltas_count: int) -> Confidence:
    # Totals 6-11 fall through to LOW; kept as-is for consumers relying on it.
    total = series_count + deltas_count
    if total >= HIGH_CONFIDENCE_POINTS:
        return Confidence.HIGH
    low, high = MEDIUM_CONFIDENCE_POINTS
    if low <= total < high:
        return Confidence.MEDIUM
    return Confidence.LOW


@dataclass(frozen=True, slots=True)
class TrendAssessment:
    """Locale-free classification of a series of deltas."""

    direction: OverallDirection
    confidence: Confidence
    improving: tuple[str, ...] = ()
    declining: tuple[str, ...] = ()
    stable: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()
    months: int = 0

    @property
    def has_data(self) -> bool:
        return self.months > 0


def _unique(keys: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(keys))


def assess_trend(series: Sequence[TrendPoint], deltas: Sequence[TrendDelta]) -> TrendAssessment:
    confidence = calculate_confidence(len(series), len(deltas))
    if not series:
        return TrendAssessment(direction=OverallDirection.STABLE, confidence=Confidence.LOW)

    buckets: dict[ChangeDirection, list[str]] = {direction: [] for direction in ChangeDirection}
    for delta in deltas:
        for key, direction in delta.changes.items():
            buckets[direction].append(key)

    improving = len(buckets[ChangeDirection.IMPROVING])
    declining = len(buckets[ChangeDirection.DECLINING])
    if improving > declining:
        direction = OverallDirection.IMPROVING
    elif declining > improving:
        direction = OverallDirection.DECLINING
    elif improving > 0:
        direction = OverallDirection.MIXED
    else:
        direction = OverallDirection.STABLE

    return TrendAssessment(
        direction=direction,
        confidence=confidence,
        improving=_unique(buckets[ChangeDirection.IMPROVING]),
        declining=_unique(buckets[ChangeDirection.DECLINING]),
        stable=_unique(buckets[ChangeDirection.STABLE]),
        unknown=_unique(buckets[ChangeDirection.UNKNOWN]),
        months=len(series),
    )


def period_range(series: Sequence[TrendPoint]) -> DateRange | None:
    if not series:
        return None
    months = sorted(point.period for point in series)
    return DateRange(months[0].first_moment(), months[-1].last_moment())


def analyze_trends(
    series: Sequence[TrendPoint], narrator: KpiNarrator, deltas: Sequence[TrendDelta] | None = None
) -> TrendAnalysis:
    if deltas is None:
        deltas = build_deltas(series)
    assessment = assess_trend(series, deltas)
    insights = tuple(narrator.trend_insights(assessment))
    overall = OverallTrend(
        direction=assessment.direction,
        confidence=assessment.confidence,
        insights=insights,
        recommendations=tuple(narrator.trend_recommendations(assessment)),
    )
    return TrendAnalysis(
        series=tuple(series),
        deltas=tuple(deltas),
        overall_trend=overall,
        period_range=period_range(series),
        summary=narrator.trend_summary(assessment, insights),
    )
