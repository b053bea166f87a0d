from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.services.breeding_delta import KeyChange
    from src.domain.services.breeding_insights import InsightCode
    from src.domain.services.breeding_trends import TrendAssessment


class KpiNarrator(ABC):
    @abstractmethod
    def insight(self, code: InsightCode) -> str: ...

    @abstractmethod
    def trend_insights(self, assessment: TrendAssessment) -> list[str]: ...

    @abstractmethod
    def trend_recommendations(self, assessment: TrendAssessment) -> list[str]: ...

    @abstractmethod
    def trend_summary(self, assessment: TrendAssessment, insights: Sequence[str]) -> str: ...

    @abstractmethod
    def key_change(self, change: KeyChange) -> str: ...
