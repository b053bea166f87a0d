from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.kpi.event_window import KpiOptions, fetch_events, utc_now
from src.domain.models.trend_analysis import TrendAnalysis
from src.domain.ports.kpi_narrator import KpiNarrator
from src.domain.services.breeding_trends import analyze_trends, compute_series
from src.domain.value_objects.month_period import DateRange, MonthPeriod

logger = logging.getLogger(__name__)


def _parse_month(value: str, field: str) -> MonthPeriod:
    try:
        return MonthPeriod.parse(value)
    except ValueError as exc:
        raise ValidationError(str(exc), details={"field": field}) from exc


def resolve_months(
    from_month: str | None,
    to_month: str | None,
    months_back: int | None,
    options: KpiOptions,
    now: datetime | None = None,
) -> tuple[MonthPeriod, MonthPeriod]:
    end = _parse_month(to_month, "to_month") if to_month else MonthPeriod.of(utc_now(now))
    if from_month:
        # An explicit start wins over months_back
        start = _parse_month(from_month, "from_month")
    else:
        count = months_back if months_back is not None else options.default_months
        if count < 1 or count > options.max_months:
            raise ValidationError(
                f"months must be between 1 and {options.max_months}",
                details={"field": "months"},
            )
        start = end.shift(-(count - 1))

    if start > end:
        raise ValidationError(
            "from_month must be before or equal to to_month",
            details={"from_month": start.label, "to_month": end.label},
        )
    span = (end.year - start.year) * 12 + end.month - start.month + 1
    if span > options.max_months:
        raise ValidationError(
            f"Trend range cannot exceed {options.max_months} months",
            details={"from_month": start.label, "to_month": end.label},
        )
    return start, end


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    narrator: KpiNarrator,
    from_month: str | None = None,
    to_month: str | None = None,
    months_back: int | None = None,
    options: KpiOptions | None = None,
    now: datetime | None = None,
) -> TrendAnalysis:
    options = options or KpiOptions()
    start, end = resolve_months(from_month, to_month, months_back, options, now)
    events = await fetch_events(
        uow, tenant_id, DateRange(start.first_moment(), end.last_moment()), options
    )

    series = compute_series(events, start, end)
    analysis = analyze_trends(series, narrator)
    logger.info(
        "Breeding trends computed for tenant %s: %s..%s (%d events), direction=%s confidence=%s",
        tenant_id,
        start.label,
        end.label,
        len(events),
        analysis.overall_trend.direction.value,
        analysis.overall_trend.confidence.value,
    )
    return analysis
