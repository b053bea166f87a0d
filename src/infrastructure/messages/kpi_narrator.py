from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound

from src.domain.models.trend_analysis import OverallDirection
from src.domain.ports.kpi_narrator import KpiNarrator
from src.domain.services.breeding_delta import KeyChange
from src.domain.services.breeding_insights import InsightCode
from src.domain.services.breeding_trends import TrendAssessment
from src.infrastructure.messages.catalog import CATALOGS, DEFAULT_LOCALE, flatten

_ENV = Environment(
    loader=DictLoader(flatten()),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


@dataclass(slots=True)
class JinjaKpiNarrator(KpiNarrator):
    """Renders KPI classifications into text for one locale."""

    locale: str = DEFAULT_LOCALE
    env: Environment = _ENV

    @classmethod
    def for_locale(cls, locale: str | None) -> JinjaKpiNarrator:
        loc = (locale or DEFAULT_LOCALE).lower()
        if loc not in CATALOGS:
            loc = DEFAULT_LOCALE
        return cls(locale=loc)

    def render(self, key: str, **context: Any) -> str:
        try:
            template = self.env.get_template(f"{self.locale}/{key}")
        except TemplateNotFound:
            # Fallback to the default locale
            template = self.env.get_template(f"{DEFAULT_LOCALE}/{key}")
        return template.render(**context).strip()

    def _labels(self, metric_keys: Sequence[str]) -> str:
        separator = CATALOGS[self.locale].get("separator", ", ")
        return separator.join(self.render(f"metric/{key}") for key in metric_keys)

    def insight(self, code: InsightCode) -> str:
        return self.render(f"insight/{code.value}")

    def trend_insights(self, assessment: TrendAssessment) -> list[str]:
        if not assessment.has_data:
            return [self.render("trend/insufficient_data")]
        insights = []
        for kind in ("improving", "declining", "stable", "unknown"):
            metrics = getattr(assessment, kind)
            if metrics:
                insights.append(self.render(f"trend/{kind}", metrics=self._labels(metrics)))
        return insights or [self.render("trend/no_change")]

    def trend_recommendations(self, assessment: TrendAssessment) -> list[str]:
        if not assessment.has_data:
            return [self.render("recommendation/collect_more_data")]
        direction = assessment.direction
        if direction is OverallDirection.IMPROVING:
            recommendations = [self.render("recommendation/improving")]
            if assessment.improving:
                recommendations.append(
                    self.render(
                        "recommendation/improving_metrics",
                        metrics=self._labels(assessment.improving),
                    )
                )
            return recommendations
        if direction is OverallDirection.DECLINING:
            recommendations = [self.render("recommendation/declining")]
            if assessment.declining:
                recommendations.append(
                    self.render(
                        "recommendation/declining_metrics",
                        metrics=self._labels(assessment.declining),
                    )
                )
            return recommendations
        if direction is OverallDirection.STABLE:
            return [
                self.render("recommendation/stable"),
                self.render("recommendation/stable_next"),
            ]
        return [self.render("recommendation/mixed"), self.render("recommendation/mixed_next")]

    def trend_summary(self, assessment: TrendAssessment, insights: Sequence[str]) -> str:
        if not assessment.has_data:
            return self.render("summary/insufficient_data")
        return self.render(
            "summary/trend",
            months=assessment.months,
            direction=self.render(f"direction/{assessment.direction.value}"),
            confidence=assessment.confidence.value,
            first_insight=insights[0] if insights else "",
        )

    def key_change(self, change: KeyChange) -> str:
        return self.render(
            f"key_change/{change.metric}",
            difference=change.difference,
            magnitude=abs(change.difference),
        )
