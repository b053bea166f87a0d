from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from src.application.use_cases.kpi.get_breeding_kpi import BreedingKpiOutput
from src.application.use_cases.kpi.get_breeding_kpi_delta import BreedingKpiDeltaOutput
from src.domain.models.trend_analysis import EventCounts, TrendAnalysis
from src.domain.value_objects.breeding_metrics import BreedingMetrics

ChangeLiteral = Literal["improving", "declining", "stable", "unknown"]


class BreedingMetricsSchema(BaseModel):
    conception_rate: float | None = None
    avg_days_open: int | None = None
    avg_calving_interval: int | None = None
    ai_per_conception: float | None = None

    @classmethod
    def from_domain(cls, metrics: BreedingMetrics) -> BreedingMetricsSchema:
        return cls(**metrics.values())


class EventCountsSchema(BaseModel):
    inseminations: int
    conceptions: int
    calvings: int
    pairs_for_days_open: int
    total_events: int

    @classmethod
    def from_domain(cls, counts: EventCounts) -> EventCountsSchema:
        return cls(**counts.as_dict())


class BreedingKpiResponse(BaseModel):
    metrics: BreedingMetricsSchema
    counts: EventCountsSchema
    period_from: datetime
    period_to: datetime
    insights: list[str]

    @classmethod
    def from_output(cls, output: BreedingKpiOutput) -> BreedingKpiResponse:
        return cls(
            metrics=BreedingMetricsSchema.from_domain(output.metrics),
            counts=EventCountsSchema.from_domain(output.counts),
            period_from=output.period.start,
            period_to=output.period.end,
            insights=output.insights,
        )


class MetricChangesSchema(BaseModel):
    conception_rate: ChangeLiteral
    avg_days_open: ChangeLiteral
    avg_calving_interval: ChangeLiteral
    ai_per_conception: ChangeLiteral


class MetricDifferencesSchema(BaseModel):
    conception_rate: float | None = None
    avg_days_open: float | None = None
    avg_calving_interval: float | None = None
    ai_per_conception: float | None = None


class TrendPointSchema(BaseModel):
    month: str
    metrics: BreedingMetricsSchema
    counts: EventCountsSchema


class TrendDeltaSchema(BaseModel):
    month: str
    metrics: MetricDifferencesSchema
    changes: MetricChangesSchema


class OverallTrendSchema(BaseModel):
    direction: Literal["improving", "declining", "stable", "mixed"]
    confidence: Literal["high", "medium", "low"]
    insights: list[str]
    recommendations: list[str]


class BreedingTrendsResponse(BaseModel):
    series: list[TrendPointSchema]
    deltas: list[TrendDeltaSchema]
    overall_trend: OverallTrendSchema
    summary: str

    @classmethod
    def from_analysis(cls, analysis: TrendAnalysis) -> BreedingTrendsResponse:
        return cls(
            series=[
                TrendPointSchema(
                    month=point.period_label,
                    metrics=BreedingMetricsSchema.from_domain(point.metrics),
                    counts=EventCountsSchema.from_domain(point.counts),
                )
                for point in analysis.series
            ],
            deltas=[
                TrendDeltaSchema(
                    month=delta.period_label,
                    metrics=MetricDifferencesSchema(
                        conception_rate=delta.differences.conception_rate,
                        avg_days_open=delta.differences.avg_days_open,
                        avg_calving_interval=delta.differences.avg_calving_interval,
                        ai_per_conception=delta.differences.ai_per_conception,
                    ),
                    changes=MetricChangesSchema(
                        **{key: direction.value for key, direction in delta.changes.items()}
                    ),
                )
                for delta in analysis.deltas
            ],
            overall_trend=OverallTrendSchema(
                direction=analysis.overall_trend.direction.value,
                confidence=analysis.overall_trend.confidence.value,
                insights=list(analysis.overall_trend.insights),
                recommendations=list(analysis.overall_trend.recommendations),
            ),
            summary=analysis.summary,
        )


class DeltaPeriodSchema(BaseModel):
    period_from: datetime
    period_to: datetime
    previous_from: datetime
    previous_to: datetime


class DeltaSummarySchema(BaseModel):
    improvement: Literal["positive", "negative", "neutral"]
    key_changes: list[str]


class BreedingKpiDeltaResponse(BaseModel):
    metrics: MetricDifferencesSchema
    changes: MetricChangesSchema
    current: BreedingMetricsSchema
    previous: BreedingMetricsSchema
    period: DeltaPeriodSchema
    summary: DeltaSummarySchema

    @classmethod
    def from_output(cls, output: BreedingKpiDeltaOutput) -> BreedingKpiDeltaResponse:
        comparison = output.comparison
        return cls(
            metrics=MetricDifferencesSchema(
                conception_rate=comparison.differences.conception_rate,
                avg_days_open=comparison.differences.avg_days_open,
                avg_calving_interval=comparison.differences.avg_calving_interval,
                ai_per_conception=comparison.differences.ai_per_conception,
            ),
            changes=MetricChangesSchema(
                **{key: direction.value for key, direction in comparison.changes.items()}
            ),
            current=BreedingMetricsSchema.from_domain(output.current.metrics),
            previous=BreedingMetricsSchema.from_domain(output.previous.metrics),
            period=DeltaPeriodSchema(
                period_from=output.period.start,
                period_to=output.period.end,
                previous_from=output.previous_period.start,
                previous_to=output.previous_period.end,
            ),
            summary=DeltaSummarySchema(
                improvement=comparison.improvement.value,
                key_changes=output.key_changes,
            ),
        )
