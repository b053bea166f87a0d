from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Hashable


class BreedingEventType(str, Enum):
    INSEMINATION = "INSEMINATION"
    CALVING = "CALVING"


@dataclass(frozen=True, slots=True)
class BreedingEvent:
    animal_id: Hashable
    event_type: BreedingEventType
    occurred_at: datetime

    @classmethod
    def create(
        cls, animal_id: Hashable, event_type: str | BreedingEventType, occurred_at: datetime
    ) -> BreedingEvent:
        if occurred_at.tzinfo is None:
            occurred_at = occurred_at.replace(tzinfo=timezone.utc)
        return cls(
            animal_id=animal_id,
            event_type=BreedingEventType(event_type),
            occurred_at=occurred_at,
        )

    @property
    def is_insemination(self) -> bool:
        return self.event_type is BreedingEventType.INSEMINATION

    @property
    def is_calving(self) -> bool:
        return self.event_type is BreedingEventType.CALVING
