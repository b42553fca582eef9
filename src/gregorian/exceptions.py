"""Errors raised by the calendar value types."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a value object is built from invalid input."""


__all__ = ["InvalidArgumentError"]
