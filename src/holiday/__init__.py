"""Country holiday resolution with locale aware names."""

from .calendar import HolidayCalendar
from .config import HolidayConfig, HolidayConfigError, build_calendar
from .engine import HolidayEngine, NativeHoliday, ProviderHandle, PythonHolidaysEngine
from .exceptions import (
    HolidayError,
    InvalidArgumentError,
    ProviderNotFoundError,
    UnsupportedCountryError,
)
from .models import Holiday
from .name import HolidayLocaleName, HolidayName
from .providers import provider_identifier, supported_countries

__all__ = [
    "Holiday",
    "HolidayCalendar",
    "HolidayConfig",
    "HolidayConfigError",
    "HolidayEngine",
    "HolidayError",
    "HolidayLocaleName",
    "HolidayName",
    "InvalidArgumentError",
    "NativeHoliday",
    "ProviderHandle",
    "ProviderNotFoundError",
    "PythonHolidaysEngine",
    "UnsupportedCountryError",
    "build_calendar",
    "provider_identifier",
    "supported_countries",
]
