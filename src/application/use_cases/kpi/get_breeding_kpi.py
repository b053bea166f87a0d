from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.kpi.event_window import KpiOptions, as_utc, fetch_events, utc_now
from src.domain.models.trend_analysis import EventCounts
from src.domain.ports.kpi_narrator import KpiNarrator
from src.domain.services.breeding_insights import InsightCode, generate_insights
from src.domain.services.breeding_kpi import compute_period_kpi
from src.domain.value_objects.breeding_metrics import BreedingMetrics
from src.domain.value_objects.month_period import DateRange

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BreedingKpiOutput:
    metrics: BreedingMetrics
    counts: EventCounts
    period: DateRange
    insight_codes: tuple[InsightCode, ...]
    insights: list[str]


def resolve_period(
    date_from: datetime | None,
    date_to: datetime | None,
    options: KpiOptions,
    now: datetime | None = None,
) -> DateRange:
    end = as_utc(date_to) if date_to is not None else utc_now(now)
    start = (
        as_utc(date_from)
        if date_from is not None
        else end - timedelta(days=options.default_period_days)
    )
    if start > end:
        raise ValidationError(
            "from must be before or equal to to",
            details={"from": start.isoformat(), "to": end.isoformat()},
        )
    return DateRange(start, end)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    narrator: KpiNarrator,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    options: KpiOptions | None = None,
    now: datetime | None = None,
) -> BreedingKpiOutput:
    options = options or KpiOptions()
    period = resolve_period(date_from, date_to, options, now)
    events = await fetch_events(uow, tenant_id, period, options)

    kpi = compute_period_kpi(events, period)
    codes = generate_insights(kpi.metrics, kpi.counts)
    logger.info(
        "Breeding KPI computed for tenant %s: %d events fetched, %d in period",
        tenant_id,
        len(events),
        kpi.counts.total_events,
    )
    return BreedingKpiOutput(
        metrics=kpi.metrics,
        counts=kpi.counts,
        period=period,
        insight_codes=codes,
        insights=[narrator.insight(code) for code in codes],
    )
