from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.models.breeding_event import BreedingEvent
from src.domain.models.trend_analysis import (
    Confidence,
    EventCounts,
    MetricChanges,
    OverallDirection,
    TrendDelta,
    TrendPoint,
)
from src.domain.services.breeding_trends import (
    analyze_trends,
    assess_trend,
    build_deltas,
    calculate_confidence,
    compute_series,
)
from src.domain.value_objects.breeding_metrics import BreedingMetrics, ChangeDirection
from src.domain.value_objects.month_period import MonthPeriod
from src.infrastructure.messages.kpi_narrator import JinjaKpiNarrator

UP = ChangeDirection.IMPROVING
DOWN = ChangeDirection.DECLINING
FLAT = ChangeDirection.STABLE
UNK = ChangeDirection.UNKNOWN


def point(month: int, metrics: BreedingMetrics | None = None) -> TrendPoint:
    return TrendPoint(
        period=MonthPeriod(2024, month),
        metrics=metrics or BreedingMetrics.empty(),
        counts=EventCounts(),
    )


def delta(month: int, *changes: ChangeDirection) -> TrendDelta:
    return TrendDelta(
        period=MonthPeriod(2024, month),
        metrics=BreedingMetrics.empty(),
        changes=MetricChanges(*changes),
    )


def test_series_links_events_across_months():
    inseminated = datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)
    calved = inseminated + timedelta(days=280)
    events = [
        BreedingEvent.create("cow-1", "CALVING", inseminated - timedelta(days=70)),
        BreedingEvent.create("cow-1", "INSEMINATION", inseminated),
        BreedingEvent.create("cow-1", "CALVING", calved),
    ]
    series = compute_series(events, MonthPeriod(2024, 1), MonthPeriod(2024, 12))
    by_label = {p.period_label: p for p in series}

    assert len(series) == 12
    january = by_label["2024-01"]
    assert january.counts.inseminations == 1
    assert january.counts.conceptions == 0
    assert january.metrics.conception_rate.value == 0.0
    assert january.metrics.average_days_open.value == 70

    calving_month = by_label[MonthPeriod.of(calved).label]
    assert calving_month.counts.conceptions == 1
    assert calving_month.counts.calvings == 1
    assert calving_month.metrics.conception_rate is None
    assert calving_month.metrics.ai_per_conception.value == 1.0
    assert calving_month.metrics.average_calving_interval.value == 350


def test_empty_months_have_null_metrics():
    series = compute_series([], MonthPeriod(2024, 1), MonthPeriod(2024, 3))
    assert [p.period_label for p in series] == ["2024-01", "2024-02", "2024-03"]
    assert all(p.metrics.is_empty() for p in series)


def test_first_delta_is_unknown():
    series = [
        point(1, BreedingMetrics.create(50.0, 90, 380, 1.5)),
        point(2, BreedingMetrics.create(60.0, 80, 380, 1.2)),
    ]
    deltas = build_deltas(series)

    assert len(deltas) == len(series)
    assert all(direction is UNK for _, direction in deltas[0].changes.items())
    assert deltas[0].differences.conception_rate is None
    assert deltas[1].changes.conception_rate is UP
    assert deltas[1].changes.avg_days_open is UP
    assert deltas[1].changes.avg_calving_interval is FLAT
    assert deltas[1].changes.ai_per_conception is UP
    assert deltas[1].differences.conception_rate == 10.0
    assert deltas[1].differences.ai_per_conception == -0.3


def test_month_over_month_stability_threshold():
    series = [
        point(1, BreedingMetrics.create(60.0, None, None, None)),
        point(2, BreedingMetrics.create(63.1, None, None, None)),
        point(3, BreedingMetrics.create(66.1, None, None, None)),
    ]
    deltas = build_deltas(series)
    # 63.1 is +5.2% of 60.0, 66.1 is +4.8% of 63.1
    assert deltas[1].changes.conception_rate is UP
    assert deltas[2].changes.conception_rate is FLAT


@pytest.mark.parametrize(
    "series_count, deltas_count, expected",
    [
        (0, 0, Confidence.LOW),
        (1, 1, Confidence.LOW),
        (2, 2, Confidence.MEDIUM),
        (3, 2, Confidence.MEDIUM),
        (6, 6, Confidence.HIGH),
        (12, 12, Confidence.HIGH),
    ],
)
def test_confidence_tiers(series_count, deltas_count, expected):
    assert calculate_confidence(series_count, deltas_count) is expected


@pytest.mark.parametrize("total", [6, 7, 8, 9, 10, 11])
def test_confidence_between_medium_and_high_falls_to_low(total):
    # Known gap in the tiers: 6 to 11 points are reported as low
    assert calculate_confidence(total // 2, total - total // 2) is Confidence.LOW


@pytest.mark.parametrize(
    "changes, expected",
    [
        ([(UNK, UNK, UNK, UNK), (UP, UP, FLAT, DOWN)], OverallDirection.IMPROVING),
        ([(UNK, UNK, UNK, UNK), (DOWN, DOWN, UP, UNK)], OverallDirection.DECLINING),
        ([(UNK, UNK, UNK, UNK), (UP, DOWN, FLAT, FLAT)], OverallDirection.MIXED),
        ([(UNK, UNK, UNK, UNK), (FLAT, FLAT, FLAT, FLAT)], OverallDirection.STABLE),
        ([(UNK, UNK, UNK, UNK), (UNK, UNK, UNK, UNK)], OverallDirection.STABLE),
    ],
)
def test_overall_direction(changes, expected):
    series = [point(i + 1) for i in range(len(changes))]
    deltas = [delta(i + 1, *c) for i, c in enumerate(changes)]
    assert assess_trend(series, deltas).direction is expected


def test_assessment_groups_metric_keys_without_duplicates():
    series = [point(1), point(2), point(3)]
    deltas = [
        delta(1, UNK, UNK, UNK, UNK),
        delta(2, UP, DOWN, FLAT, UNK),
        delta(3, UP, FLAT, FLAT, UNK),
    ]
    assessment = assess_trend(series, deltas)

    assert assessment.improving == ("conception_rate",)
    assert assessment.declining == ("avg_days_open",)
    assert assessment.stable == ("avg_calving_interval", "avg_days_open")
    assert "ai_per_conception" in assessment.unknown
    assert assessment.months == 3
    assert assessment.direction is OverallDirection.IMPROVING


def test_analyze_empty_series():
    analysis = analyze_trends([], JinjaKpiNarrator.for_locale("en"))

    assert analysis.series == ()
    assert analysis.deltas == ()
    assert analysis.period_range is None
    assert analysis.overall_trend.direction is OverallDirection.STABLE
    assert analysis.overall_trend.confidence is Confidence.LOW
    assert analysis.overall_trend.insights == ("Not enough data to analyze the trend",)
    assert analysis.overall_trend.recommendations == ("Record more breeding events",)
    assert analysis.summary == "Not enough data for trend analysis"


def test_analyze_series_builds_summary_and_range():
    series = [
        point(1, BreedingMetrics.create(40.0, 120, None, 2.0)),
        point(2, BreedingMetrics.create(50.0, 100, None, 1.5)),
    ]
    analysis = analyze_trends(series, JinjaKpiNarrator.for_locale("en"))

    assert analysis.period_range.start == MonthPeriod(2024, 1).first_moment()
    assert analysis.period_range.end == MonthPeriod(2024, 2).last_moment()
    assert analysis.overall_trend.direction is OverallDirection.IMPROVING
    assert analysis.overall_trend.confidence is Confidence.MEDIUM
    assert analysis.overall_trend.insights[0] == (
        "Improving: conception rate, average days open, AI per conception"
    )
    assert analysis.summary.startswith("2-month analysis: overall improving trend.")
