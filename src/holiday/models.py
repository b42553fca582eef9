"""Holiday occurrence model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping

from gregorian import Day

from .name import HolidayName


@dataclass(frozen=True, slots=True)
class Holiday:
    """One holiday falling on one day."""

    day: Day
    holiday_name: HolidayName

    def name(self, locale: str | None = None) -> str:
        return self.holiday_name.name(locale)

    def locales(self) -> list[str]:
        return self.holiday_name.locales()

    def as_dict(self, locale: str | None = None) -> MutableMapping[str, Any]:
        return {
            "date": str(self.day),
            "name": self.name(locale),
            "locales": self.locales(),
        }


__all__ = ["Holiday"]
