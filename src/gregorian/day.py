"""Day and year value types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator

from .exceptions import InvalidArgumentError


class Interval(Enum):
    """Boundary inclusion of a range."""

    CLOSED = "closed"
    LEFT_OPEN = "left_open"
    RIGHT_OPEN = "right_open"
    OPEN = "open"

    @property
    def includes_start(self) -> bool:
        return self in (Interval.CLOSED, Interval.RIGHT_OPEN)

    @property
    def includes_end(self) -> bool:
        return self in (Interval.CLOSED, Interval.LEFT_OPEN)


@dataclass(frozen=True, order=True, slots=True)
class Year:
    number: int

    def __post_init__(self) -> None:
        if not date.min.year <= self.number <= date.max.year:
            raise InvalidArgumentError(f"Year must be between 1 and 9999, got {self.number}")

    def first_day(self) -> "Day":
        return Day(date(self.number, 1, 1))

    def last_day(self) -> "Day":
        return Day(date(self.number, 12, 31))

    def next(self) -> "Year":
        return Year(self.number + 1)

    def until(self, other: "Year", interval: Interval = Interval.RIGHT_OPEN) -> Iterator["Year"]:
        """Lazily yield the years between ``self`` and ``other`` in ascending order."""

        if other.number < self.number:
            raise InvalidArgumentError(f"{other.number} is before {self.number}")
        start = self.number if interval.includes_start else self.number + 1
        stop = other.number + 1 if interval.includes_end else other.number
        for number in range(start, stop):
            yield Year(number)

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True, order=True, slots=True)
class Day:
    """A single calendar day."""

    value: date

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        elif not isinstance(self.value, date):
            raise InvalidArgumentError(f"Day expects a date, got {type(self.value).__name__}")

    @classmethod
    def create(cls, year: int, month: int, day: int) -> "Day":
        try:
            return cls(date(year, month, day))
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid day {year}-{month}-{day}") from exc

    @classmethod
    def from_date(cls, value: date | datetime) -> "Day":
        return cls(value)

    @classmethod
    def from_string(cls, raw: str) -> "Day":
        try:
            return cls(date.fromisoformat(raw.strip()))
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid date {raw!r}, expected YYYY-MM-DD") from exc

    def year(self) -> Year:
        return Year(self.value.year)

    def to_date(self) -> date:
        return self.value

    def next(self) -> "Day":
        return Day(self.value + timedelta(days=1))

    def previous(self) -> "Day":
        return Day(self.value - timedelta(days=1))

    def is_equal(self, other: "Day") -> bool:
        return self.value == other.value

    def is_after_or_equal(self, other: "Day") -> bool:
        return self.value >= other.value

    def is_before_or_equal(self, other: "Day") -> bool:
        return self.value <= other.value

    def until(self, other: "Day") -> Iterator["Day"]:
        """Yield every day from ``self`` up to and including ``other``."""

        current = self
        while current.is_before_or_equal(other):
            yield current
            current = current.next()

    def __str__(self) -> str:
        return self.value.isoformat()


__all__ = ["Day", "Interval", "Year"]
