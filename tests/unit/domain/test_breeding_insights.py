from __future__ import annotations

import pytest

from src.domain.models.trend_analysis import EventCounts
from src.domain.services.breeding_insights import InsightCode, generate_insights
from src.domain.value_objects.breeding_metrics import BreedingMetrics

SOME_EVENTS = EventCounts(inseminations=4, calvings=2, total_events=6)


def test_no_events_in_period():
    assert generate_insights(BreedingMetrics.empty(), EventCounts()) == (InsightCode.NO_EVENTS,)


def test_events_without_any_metric_are_insufficient_data():
    codes = generate_insights(BreedingMetrics.empty(), EventCounts(calvings=1, total_events=1))
    assert codes == (InsightCode.INSUFFICIENT_DATA,)


@pytest.mark.parametrize(
    "rate, expected",
    [
        (60.0, InsightCode.CONCEPTION_RATE_GOOD),
        (59.9, InsightCode.CONCEPTION_RATE_STANDARD),
        (40.0, InsightCode.CONCEPTION_RATE_STANDARD),
        (39.9, InsightCode.CONCEPTION_RATE_NEEDS_IMPROVEMENT),
    ],
)
def test_conception_rate_bands(rate, expected):
    metrics = BreedingMetrics.create(rate, None, None, None)
    assert generate_insights(metrics, SOME_EVENTS) == (expected,)


@pytest.mark.parametrize(
    "days, expected",
    [
        (90, InsightCode.DAYS_OPEN_WELL_MANAGED),
        (91, InsightCode.DAYS_OPEN_ACCEPTABLE),
        (120, InsightCode.DAYS_OPEN_ACCEPTABLE),
        (121, InsightCode.DAYS_OPEN_NEEDS_SHORTENING),
    ],
)
def test_days_open_bands(days, expected):
    metrics = BreedingMetrics.create(None, days, None, None)
    assert generate_insights(metrics, SOME_EVENTS) == (expected,)


@pytest.mark.parametrize(
    "ai, expected",
    [
        (1.5, InsightCode.AI_EFFICIENCY_GOOD),
        (1.6, InsightCode.AI_EFFICIENCY_STANDARD),
        (2.0, InsightCode.AI_EFFICIENCY_STANDARD),
        (2.1, InsightCode.AI_EFFICIENCY_NEEDS_IMPROVEMENT),
    ],
)
def test_ai_per_conception_bands(ai, expected):
    metrics = BreedingMetrics.create(None, None, None, ai)
    assert generate_insights(metrics, SOME_EVENTS) == (expected,)


def test_insights_follow_metric_order():
    metrics = BreedingMetrics.create(30.0, 130, 400, 2.5)
    assert generate_insights(metrics, SOME_EVENTS) == (
        InsightCode.CONCEPTION_RATE_NEEDS_IMPROVEMENT,
        InsightCode.DAYS_OPEN_NEEDS_SHORTENING,
        InsightCode.AI_EFFICIENCY_NEEDS_IMPROVEMENT,
    )
