from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.kpi.event_window import KpiOptions, fetch_events
from src.application.use_cases.kpi.get_breeding_kpi import resolve_period
from src.domain.ports.kpi_narrator import KpiNarrator
from src.domain.services.breeding_delta import KpiComparison, compare_periods, previous_range
from src.domain.services.breeding_kpi import (
    PeriodKpi,
    aggregate_period,
    match_herd,
    partition_events,
)
from src.domain.value_objects.month_period import DateRange

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BreedingKpiDeltaOutput:
    current: PeriodKpi
    previous: PeriodKpi
    period: DateRange
    previous_period: DateRange
    comparison: KpiComparison
    key_changes: list[str]


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    narrator: KpiNarrator,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    options: KpiOptions | None = None,
    now: datetime | None = None,
) -> BreedingKpiDeltaOutput:
    options = options or KpiOptions()
    period = resolve_period(date_from, date_to, options, now)
    earlier = previous_range(period)
    events = await fetch_events(uow, tenant_id, DateRange(earlier.start, period.end), options)

    records = match_herd(partition_events(events))
    current = aggregate_period(records, period)
    previous = aggregate_period(records, earlier)
    comparison = compare_periods(current.metrics, previous.metrics)
    logger.debug(
        "Breeding KPI delta for tenant %s: improvement=%s",
        tenant_id,
        comparison.improvement.value,
    )
    return BreedingKpiDeltaOutput(
        current=current,
        previous=previous,
        period=period,
        previous_period=earlier,
        comparison=comparison,
        key_changes=[narrator.key_change(change) for change in comparison.key_changes],
    )
