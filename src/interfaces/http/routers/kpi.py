from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.kpi import (
    get_breeding_kpi,
    get_breeding_kpi_delta,
    get_breeding_trends,
)
from src.application.use_cases.kpi.event_window import KpiOptions
from src.config.settings import Settings
from src.infrastructure.messages.kpi_narrator import JinjaKpiNarrator
from src.interfaces.http.deps import get_app_settings, get_tenant_id, get_uow
from src.interfaces.http.schemas.kpi import (
    BreedingKpiDeltaResponse,
    BreedingKpiResponse,
    BreedingTrendsResponse,
)

router = APIRouter(prefix="/kpi", tags=["kpi"])


def _narrator(settings: Settings, locale: str | None) -> JinjaKpiNarrator:
    return JinjaKpiNarrator.for_locale(locale or settings.kpi_locale)


@router.get("/breeding", response_model=BreedingKpiResponse)
async def get_breeding_kpi_endpoint(
    date_from: datetime | None = Query(alias="from", default=None),
    date_to: datetime | None = Query(alias="to", default=None),
    locale: str | None = Query(default=None, max_length=8),
    tenant_id: UUID = Depends(get_tenant_id),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> BreedingKpiResponse:
    """Breeding KPIs for one period (default: trailing 12 months)."""
    result = await get_breeding_kpi.execute(
        uow,
        tenant_id,
        narrator=_narrator(settings, locale),
        date_from=date_from,
        date_to=date_to,
        options=KpiOptions.from_settings(settings),
    )
    return BreedingKpiResponse.from_output(result)


@router.get("/breeding/trends", response_model=BreedingTrendsResponse)
async def get_breeding_trends_endpoint(
    from_month: str | None = Query(default=None, pattern=r"^\d{4}-\d{2}$"),
    to_month: str | None = Query(default=None, pattern=r"^\d{4}-\d{2}$"),
    months: int | None = Query(default=None),
    locale: str | None = Query(default=None, max_length=8),
    tenant_id: UUID = Depends(get_tenant_id),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> BreedingTrendsResponse:
    """Monthly breeding KPI series with month-over-month changes."""
    analysis = await get_breeding_trends.execute(
        uow,
        tenant_id,
        narrator=_narrator(settings, locale),
        from_month=from_month,
        to_month=to_month,
        months_back=months,
        options=KpiOptions.from_settings(settings),
    )
    return BreedingTrendsResponse.from_analysis(analysis)


@router.get("/breeding/delta", response_model=BreedingKpiDeltaResponse)
async def get_breeding_kpi_delta_endpoint(
    date_from: datetime | None = Query(alias="from", default=None),
    date_to: datetime | None = Query(alias="to", default=None),
    locale: str | None = Query(default=None, max_length=8),
    tenant_id: UUID = Depends(get_tenant_id),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> BreedingKpiDeltaResponse:
    """Breeding KPIs compared with the preceding period of equal length."""
    result = await get_breeding_kpi_delta.execute(
        uow,
        tenant_id,
        narrator=_narrator(settings, locale),
        date_from=date_from,
        date_to=date_to,
        options=KpiOptions.from_settings(settings),
    )
    return BreedingKpiDeltaResponse.from_output(result)
