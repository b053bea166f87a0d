from __future__ import annotations

import re
from calendar import monthrange
from dataclasses import dataclass
from datetime import datetime, time, timezone

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive ``[start, end]`` window of aware datetimes."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("Range start must be before or equal to its end")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True, slots=True, order=True)
class MonthPeriod:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError("Month must be between 1 and 12")

    @classmethod
    def parse(cls, value: str) -> MonthPeriod:
        match = _MONTH_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def of(cls, moment: datetime) -> MonthPeriod:
        return cls(moment.year, moment.month)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def shift(self, months: int) -> MonthPeriod:
        index = self.year * 12 + (self.month - 1) + months
        return MonthPeriod(index // 12, index % 12 + 1)

    def first_moment(self) -> datetime:
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc)

    def last_moment(self) -> datetime:
        last_day = monthrange(self.year, self.month)[1]
        return datetime.combine(
            datetime(self.year, self.month, last_day).date(), time.max, tzinfo=timezone.utc
        )

    def date_range(self) -> DateRange:
        return DateRange(self.first_moment(), self.last_moment())


def month_span(start: MonthPeriod, end: MonthPeriod) -> list[MonthPeriod]:
    """Every calendar month from ``start`` to ``end`` inclusive."""
    months = []
    current = start
    while current <= end:
        months.append(current)
        current = current.shift(1)
    return months
