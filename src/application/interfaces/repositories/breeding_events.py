from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_event import BreedingEvent


class BreedingEventsRepository(Protocol):
    async def list_for_kpi(
        self, tenant_id: UUID, window_from: datetime, window_to: datetime
    ) -> list[BreedingEvent]:
        """INSEMINATION and CALVING events in ``[window_from, window_to]``."""
        ...
