from __future__ import annotations

from enum import Enum

from src.domain.models.trend_analysis import EventCounts
from src.domain.value_objects.breeding_metrics import BreedingMetrics


class InsightCode(str, Enum):
    NO_EVENTS = "no_events"
    INSUFFICIENT_DATA = "insufficient_data"
    CONCEPTION_RATE_GOOD = "conception_rate_good"
    CONCEPTION_RATE_STANDARD = "conception_rate_standard"
    CONCEPTION_RATE_NEEDS_IMPROVEMENT = "conception_rate_needs_improvement"
    DAYS_OPEN_WELL_MANAGED = "days_open_well_managed"
    DAYS_OPEN_ACCEPTABLE = "days_open_acceptable"
    DAYS_OPEN_NEEDS_SHORTENING = "days_open_needs_shortening"
    AI_EFFICIENCY_GOOD = "ai_efficiency_good"
    AI_EFFICIENCY_STANDARD = "ai_efficiency_standard"
    AI_EFFICIENCY_NEEDS_IMPROVEMENT = "ai_efficiency_needs_improvement"


CONCEPTION_RATE_GOOD = 60.0
CONCEPTION_RATE_STANDARD = 40.0
DAYS_OPEN_WELL_MANAGED = 90
DAYS_OPEN_ACCEPTABLE = 120
AI_PER_CONCEPTION_GOOD = 1.5
AI_PER_CONCEPTION_STANDARD = 2.0


def generate_insights(metrics: BreedingMetrics, counts: EventCounts) -> tuple[InsightCode, ...]:
    if counts.total_events == 0:
        return (InsightCode.NO_EVENTS,)

    insights: list[InsightCode] = []
    if metrics.conception_rate is not None:
        rate = metrics.conception_rate.value
        if rate >= CONCEPTION_RATE_GOOD:
            insights.append(InsightCode.CONCEPTION_RATE_GOOD)
        elif rate >= CONCEPTION_RATE_STANDARD:
            insights.append(InsightCode.CONCEPTION_RATE_STANDARD)
        else:
            insights.append(InsightCode.CONCEPTION_RATE_NEEDS_IMPROVEMENT)

    if metrics.average_days_open is not None:
        days = metrics.average_days_open.value
        if days <= DAYS_OPEN_WELL_MANAGED:
            insights.append(InsightCode.DAYS_OPEN_WELL_MANAGED)
        elif days <= DAYS_OPEN_ACCEPTABLE:
            insights.append(InsightCode.DAYS_OPEN_ACCEPTABLE)
        else:
            insights.append(InsightCode.DAYS_OPEN_NEEDS_SHORTENING)

    if metrics.ai_per_conception is not None:
        ai = metrics.ai_per_conception.value
        if ai <= AI_PER_CONCEPTION_GOOD:
            insights.append(InsightCode.AI_EFFICIENCY_GOOD)
        elif ai <= AI_PER_CONCEPTION_STANDARD:
            insights.append(InsightCode.AI_EFFICIENCY_STANDARD)
        else:
            insights.append(InsightCode.AI_EFFICIENCY_NEEDS_IMPROVEMENT)

    return tuple(insights) or (InsightCode.INSUFFICIENT_DATA,)
