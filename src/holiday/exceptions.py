"""Holiday domain errors."""

from __future__ import annotations

from gregorian.exceptions import InvalidArgumentError


class HolidayError(Exception):
    """Generic holiday resolution failure."""


class UnsupportedCountryError(HolidayError):
    """Raised when a country code has no matching holiday provider."""


class ProviderNotFoundError(LookupError):
    """Raised by an engine that cannot build a provider for an identifier."""


__all__ = [
    "HolidayError",
    "InvalidArgumentError",
    "ProviderNotFoundError",
    "UnsupportedCountryError",
]
