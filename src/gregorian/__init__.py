"""Gregorian calendar value types used by the holiday calendar."""

from .day import Day, Interval, Year
from .exceptions import InvalidArgumentError
from .period import TimePeriod

__all__ = ["Day", "Interval", "InvalidArgumentError", "TimePeriod", "Year"]
