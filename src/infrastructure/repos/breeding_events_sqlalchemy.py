from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.breeding_events import BreedingEventsRepository
from src.domain.models.breeding_event import BreedingEvent, BreedingEventType
from src.infrastructure.db.orm.animal_event import AnimalEventORM

_KPI_EVENT_TYPES = tuple(t.value for t in BreedingEventType)


class BreedingEventsSQLAlchemyRepository(BreedingEventsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalEventORM) -> BreedingEvent:
        occurred_at = orm.occurred_at
        # SQLite drops tzinfo; stored values are UTC
        if occurred_at.tzinfo is None:
            occurred_at = occurred_at.replace(tzinfo=timezone.utc)
        return BreedingEvent(
            animal_id=orm.animal_id,
            event_type=BreedingEventType(orm.type),
            occurred_at=occurred_at,
        )

    async def list_for_kpi(
        self, tenant_id: UUID, window_from: datetime, window_to: datetime
    ) -> list[BreedingEvent]:
        stmt = (
            select(AnimalEventORM)
            .where(AnimalEventORM.tenant_id == tenant_id)
            .where(AnimalEventORM.type.in_(_KPI_EVENT_TYPES))
            .where(AnimalEventORM.occurred_at >= window_from)
            .where(AnimalEventORM.occurred_at <= window_to)
            .order_by(AnimalEventORM.animal_id.asc(), AnimalEventORM.occurred_at.asc())
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to load breeding events") from exc
        return [self._to_domain(orm) for orm in result.scalars().all()]
