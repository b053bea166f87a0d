from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.config.settings import Settings
from src.domain.models.breeding_event import BreedingEvent
from src.domain.value_objects.month_period import DateRange


@dataclass(frozen=True, slots=True)
class KpiOptions:
    lookback_days: int = 500
    lookahead_days: int = 300
    default_period_days: int = 365
    default_months: int = 6
    max_months: int = 60

    @classmethod
    def from_settings(cls, settings: Settings) -> KpiOptions:
        return cls(
            lookback_days=settings.kpi_lookback_days,
            lookahead_days=settings.kpi_lookahead_days,
            default_period_days=settings.kpi_default_period_days,
            default_months=settings.kpi_default_months,
            max_months=settings.kpi_max_months,
        )


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_now(now: datetime | None = None) -> datetime:
    return as_utc(now) if now is not None else datetime.now(timezone.utc)


def widen(period: DateRange, options: KpiOptions) -> DateRange:
    """Fetch window that keeps conception links crossing the period edges."""
    return DateRange(
        period.start - timedelta(days=options.lookback_days),
        period.end + timedelta(days=options.lookahead_days),
    )


async def fetch_events(
    uow: UnitOfWork, tenant_id: UUID, period: DateRange, options: KpiOptions
) -> list[BreedingEvent]:
    window = widen(period, options)
    return await uow.breeding_events.list_for_kpi(tenant_id, window.start, window.end)
