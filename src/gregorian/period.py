"""Closed range of calendar days."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .day import Day, Interval, Year
from .exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class TimePeriod:
    """Days from ``start`` to ``end``, both included."""

    start: Day
    end: Day

    def __post_init__(self) -> None:
        if self.end.value < self.start.value:
            raise InvalidArgumentError(f"Period end {self.end} is before start {self.start}")

    @classmethod
    def of(cls, start: str, end: str) -> "TimePeriod":
        return cls(Day.from_string(start), Day.from_string(end))

    def contains(self, day: Day) -> bool:
        return day.is_after_or_equal(self.start) and day.is_before_or_equal(self.end)

    def years(self) -> Iterator[Year]:
        return self.start.year().until(self.end.year(), Interval.CLOSED)

    def days(self) -> Iterator[Day]:
        return self.start.until(self.end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


__all__ = ["TimePeriod"]
