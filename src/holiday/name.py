"""Locale aware holiday names."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import HolidayError, InvalidArgumentError


@dataclass(frozen=True, slots=True)
class HolidayLocaleName:
    locale: str
    name: str

    def is_in(self, locale: str) -> bool:
        return self.locale == locale


class HolidayName:
    """Names of a single holiday in one or more locales.

    The first name passed in is the primary one and is returned whenever no
    locale is requested.
    """

    __slots__ = ("_locale_names",)

    def __init__(self, *locale_names: HolidayLocaleName) -> None:
        if not locale_names:
            raise InvalidArgumentError("Holiday should have name in at least one locale.")
        self._locale_names: tuple[HolidayLocaleName, ...] = tuple(locale_names)

    def name(self, locale: str | None = None) -> str:
        if locale is None:
            return self._locale_names[0].name
        for locale_name in self._locale_names:
            if locale_name.is_in(locale):
                return locale_name.name
        raise HolidayError(f'Holiday "{self.name()}" does not have name in {locale} locale')

    def locales(self) -> list[str]:
        return [locale_name.locale for locale_name in self._locale_names]

    def has_locale(self, locale: str) -> bool:
        return any(locale_name.is_in(locale) for locale_name in self._locale_names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidayName):
            return NotImplemented
        return self._locale_names == other._locale_names

    def __hash__(self) -> int:
        return hash(self._locale_names)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{item.locale}={item.name!r}" for item in self._locale_names)
        return f"HolidayName({pairs})"


__all__ = ["HolidayLocaleName", "HolidayName"]
