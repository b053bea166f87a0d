"""Breeding KPI computation.

Turns an unordered list of INSEMINATION / CALVING events into conception
rate, average days open, average calving interval and AI per conception for
a date range. Everything here is synchronous and side-effect free: the same
events and range always give the same result.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Hashable

from src.domain.models.breeding_event import BreedingEvent
from src.domain.models.trend_analysis import EventCounts
from src.domain.value_objects.breeding_metrics import BreedingMetrics
from src.domain.value_objects.month_period import DateRange

logger = logging.getLogger(__name__)

# Plausible bovine gestation length, inclusive on both ends
GESTATION_MIN_DAYS = 260
GESTATION_MAX_DAYS = 300

_SECONDS_PER_DAY = 86400


def days_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / _SECONDS_PER_DAY


@dataclass(frozen=True, slots=True)
class AnimalEvents:
    animal_id: Hashable
    inseminations: tuple[datetime, ...]
    calvings: tuple[datetime, ...]


@dataclass(frozen=True, slots=True)
class HerdEvents:
    """Per-animal event slices, indexed by position in ``animal_ids``."""

    animal_ids: tuple[Hashable, ...]
    animals: tuple[AnimalEvents, ...]

    def __len__(self) -> int:
        return len(self.animals)

    def by_animal(self) -> dict[Hashable, AnimalEvents]:
        return dict(zip(self.animal_ids, self.animals))


def partition_events(events: Iterable[BreedingEvent]) -> HerdEvents:
    """Group events by animal and sort each animal's events chronologically.

    Animals keep the order in which they first appear in ``events``; the sort
    is stable so simultaneous events keep their input order.
    """
    index: dict[Hashable, int] = {}
    buckets: list[list[BreedingEvent]] = []
    for event in events:
        slot = index.get(event.animal_id)
        if slot is None:
            slot = index[event.animal_id] = len(buckets)
            buckets.append([])
        buckets[slot].append(event)

    animals = []
    for animal_id, bucket in zip(index, buckets):
        bucket.sort(key=lambda e: e.occurred_at)
        animals.append(
            AnimalEvents(
                animal_id=animal_id,
                inseminations=tuple(e.occurred_at for e in bucket if e.is_insemination),
                calvings=tuple(e.occurred_at for e in bucket if e.is_calving),
            )
        )
    return HerdEvents(animal_ids=tuple(index), animals=tuple(animals))


@dataclass(frozen=True, slots=True)
class CalvingOutcome:
    """What one calving contributes to the breeding indicators."""

    calved_at: datetime
    conceived_at: datetime | None = None
    ai_trials: int | None = None
    days_open: float | None = None
    calving_interval: float | None = None

    @property
    def conceived(self) -> bool:
        return self.conceived_at is not None


@dataclass(frozen=True, slots=True)
class AnimalBreedingRecord:
    animal_id: Hashable
    inseminations: tuple[datetime, ...]
    outcomes: tuple[CalvingOutcome, ...]


def find_conceiving_insemination(
    inseminations: Sequence[datetime], calved_at: datetime
) -> int | None:
    """Index of the most recent insemination within the gestation window."""
    upper = bisect_right(inseminations, calved_at)
    for idx in range(upper - 1, -1, -1):
        gap = days_between(inseminations[idx], calved_at)
        if GESTATION_MIN_DAYS <= gap <= GESTATION_MAX_DAYS:
            return idx
    return None


def count_ai_trials(
    inseminations: Sequence[datetime], chosen_idx: int, previous_calving: datetime | None
) -> int:
    # Attempts after the previous calving up to and including the chosen one;
    # later attempts before this calving are not counted.
    start = 0 if previous_calving is None else bisect_right(inseminations, previous_calving)
    return max(chosen_idx + 1 - start, 0)


def match_animal(animal: AnimalEvents) -> AnimalBreedingRecord:
    inseminations = animal.inseminations
    calvings = animal.calvings
    outcomes = []
    for i, calved_at in enumerate(calvings):
        previous = calvings[i - 1] if i > 0 else None
        interval = days_between(previous, calved_at) if previous is not None else None
        chosen_idx = find_conceiving_insemination(inseminations, calved_at)
        if chosen_idx is None:
            outcomes.append(CalvingOutcome(calved_at=calved_at, calving_interval=interval))
            continue
        conceived_at = inseminations[chosen_idx]
        days_open = None
        if previous is not None and conceived_at >= previous:
            days_open = days_between(previous, conceived_at)
        outcomes.append(
            CalvingOutcome(
                calved_at=calved_at,
                conceived_at=conceived_at,
                ai_trials=count_ai_trials(inseminations, chosen_idx, previous),
                days_open=days_open,
                calving_interval=interval,
            )
        )
    return AnimalBreedingRecord(
        animal_id=animal.animal_id, inseminations=inseminations, outcomes=tuple(outcomes)
    )


def match_herd(herd: HerdEvents) -> tuple[AnimalBreedingRecord, ...]:
    return tuple(match_animal(animal) for animal in herd.animals)


@dataclass(frozen=True, slots=True)
class PeriodKpi:
    metrics: BreedingMetrics
    counts: EventCounts


def _mean(samples: Sequence[float]) -> float | None:
    return sum(samples) / len(samples) if samples else None


def aggregate_period(records: Iterable[AnimalBreedingRecord], period: DateRange) -> PeriodKpi:
    """Fold matched records into the indicators of ``period``.

    Each sample is attributed by the event that completes it: inseminations by
    their own date, conceptions and AI counts by the calving, days open by the
    conceiving insemination, calving intervals by the later calving.
    """
    inseminations = 0
    conceptions = 0
    calvings = 0
    days_open: list[float] = []
    intervals: list[float] = []
    ai_counts: list[int] = []

    for record in records:
        inseminations += sum(1 for t in record.inseminations if period.contains(t))
        for outcome in record.outcomes:
            calved_in_period = period.contains(outcome.calved_at)
            if calved_in_period:
                calvings += 1
                if outcome.calving_interval is not None:
                    intervals.append(outcome.calving_interval)
            if not outcome.conceived:
                continue
            if calved_in_period:
                conceptions += 1
                if outcome.ai_trials:
                    ai_counts.append(outcome.ai_trials)
            if outcome.days_open is not None and period.contains(outcome.conceived_at):
                days_open.append(outcome.days_open)

    conception_rate = None
    if inseminations > 0:
        conception_rate = conceptions / inseminations * 100
        if conception_rate > 100:
            logger.warning(
                "Conceptions (%d) exceed inseminations (%d) between %s and %s; capping rate",
                conceptions,
                inseminations,
                period.start.isoformat(),
                period.end.isoformat(),
            )
            conception_rate = 100.0

    metrics = BreedingMetrics.create(
        conception_rate=conception_rate,
        average_days_open=_mean(days_open),
        average_calving_interval=_mean(intervals),
        ai_per_conception=_mean(ai_counts),
    )
    counts = EventCounts(
        inseminations=inseminations,
        conceptions=conceptions,
        calvings=calvings,
        pairs_for_days_open=len(days_open),
        total_events=inseminations + calvings,
    )
    return PeriodKpi(metrics=metrics, counts=counts)


def compute_period_kpi(events: Iterable[BreedingEvent], period: DateRange) -> PeriodKpi:
    return aggregate_period(match_herd(partition_events(events)), period)
