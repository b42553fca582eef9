"""Holiday computation engine interface and its ``holidays`` adapter."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol

import holidays

from .exceptions import ProviderNotFoundError


@dataclass(frozen=True, slots=True)
class NativeHoliday:
    date: date
    name: str


class ProviderHandle(Protocol):
    def is_holiday(self, value: date) -> bool: ...
    def native_holidays(self) -> list[NativeHoliday]: ...


class HolidayEngine(Protocol):
    def create(self, identifier: str, year: int, language: str) -> ProviderHandle: ...


class PythonHolidaysProvider:
    """Holidays of one country for one year."""

    def __init__(self, calendar: holidays.HolidayBase, year: int) -> None:
        self._calendar = calendar
        self.year = year

    def is_holiday(self, value: date) -> bool:
        return value in self._calendar

    def native_holidays(self) -> list[NativeHoliday]:
        # Same-day names are joined by the library; emit one entry per name.
        return [
            NativeHoliday(day, name)
            for day in sorted(self._calendar)
            for name in self._calendar.get_list(day)
        ]


class PythonHolidaysEngine:
    """Builds providers through :func:`holidays.country_holidays`."""

    def create(self, identifier: str, year: int, language: str) -> PythonHolidaysProvider:
        try:
            calendar = holidays.country_holidays(
                identifier, years=year, language=language, expand=False
            )
        except NotImplementedError as exc:
            raise ProviderNotFoundError(f"No holidays provider for {identifier}") from exc
        return PythonHolidaysProvider(calendar, year)


__all__ = [
    "HolidayEngine",
    "NativeHoliday",
    "ProviderHandle",
    "PythonHolidaysEngine",
    "PythonHolidaysProvider",
]
