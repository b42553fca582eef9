"""Country holiday calendar backed by a per-year provider cache."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping

from gregorian import Day, Interval, TimePeriod

from .engine import HolidayEngine, NativeHoliday, ProviderHandle, PythonHolidaysEngine
from .exceptions import HolidayError
from .models import Holiday
from .name import HolidayLocaleName, HolidayName
from .providers import provider_identifier

MetricSink = Callable[[str, float, Mapping[str, Any] | None], None]

DEFAULT_LANGUAGE = "en_US"
DEFAULT_LOCALE = "us"


class HolidayCalendar:
    """Answers holiday queries for a single country.

    One provider is built per calendar year on first use and kept for the
    lifetime of the instance. The cache is not locked; share an instance
    between threads only behind external synchronization.
    """

    def __init__(
        self,
        country_code: str,
        *,
        engine: HolidayEngine | None = None,
        language: str = DEFAULT_LANGUAGE,
        locale: str = DEFAULT_LOCALE,
        metric_sink: MetricSink | None = None,
    ) -> None:
        self.country_code = country_code
        self.provider_class = provider_identifier(country_code)
        self.language = language
        self.locale = locale
        self._engine: HolidayEngine = engine or PythonHolidaysEngine()
        self._metric_sink = metric_sink
        self._providers: Dict[int, ProviderHandle] = {}
        self.logger = logging.getLogger(f"holidaycal.calendar.{self.provider_class.lower()}")

    def is_holiday(self, day: Day) -> bool:
        return self.provider_for(day.year().number).is_holiday(day.to_date())

    def holidays_at(self, day: Day) -> list[Holiday]:
        return [
            self._to_holiday(native)
            for native in self.provider_for(day.year().number).native_holidays()
            if Day(native.date).is_equal(day)
        ]

    def in_period(self, period: TimePeriod) -> list[Holiday]:
        holidays: list[Holiday] = []
        for year in period.start.year().until(period.end.year(), Interval.CLOSED):
            for native in self.provider_for(year.number).native_holidays():
                holiday = self._to_holiday(native)
                if holiday.day.is_after_or_equal(period.start) and holiday.day.is_before_or_equal(
                    period.end
                ):
                    holidays.append(holiday)
        return holidays

    def provider_for(self, year: int) -> ProviderHandle:
        provider = self._providers.get(year)
        if provider is not None:
            self._record_metric("provider_cache", 1, {"result": "hit"})
            return provider

        self._record_metric("provider_cache", 1, {"result": "miss"})
        try:
            provider = self._engine.create(self.provider_class, year, self.language)
        except Exception as exc:
            self.logger.warning(
                "failed to build %s provider for %s: %s", self.provider_class, year, exc
            )
            self._record_metric("provider_error", 1, {"year": year})
            raise HolidayError(f"Yasumi provider {self.provider_class} does not exists") from exc
        self.logger.debug("built %s provider for %s", self.provider_class, year)
        self._providers[year] = provider
        return provider

    def cached_years(self) -> list[int]:
        return sorted(self._providers)

    def _to_holiday(self, native: NativeHoliday) -> Holiday:
        return Holiday(Day(native.date), HolidayName(HolidayLocaleName(self.locale, native.name)))

    def _record_metric(self, name: str, value: float, tags: Mapping[str, Any]) -> None:
        if self._metric_sink:
            self._metric_sink(name, value, {"country": self.provider_class, **tags})


__all__ = ["DEFAULT_LANGUAGE", "DEFAULT_LOCALE", "HolidayCalendar", "MetricSink"]
