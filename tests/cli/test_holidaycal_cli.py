from __future__ import annotations

import json
from datetime import date

from typer.testing import CliRunner

from cli import holidaycal as holidaycal_cli
from holiday.calendar import HolidayCalendar
from holiday.config import HolidayConfig
from holiday.engine import NativeHoliday
from holiday.exceptions import ProviderNotFoundError


class _StubProvider:
    def __init__(self, holidays: list[NativeHoliday]) -> None:
        self._holidays = holidays

    def is_holiday(self, value: date) -> bool:
        return any(holiday.date == value for holiday in self._holidays)

    def native_holidays(self) -> list[NativeHoliday]:
        return list(self._holidays)


class _StubEngine:
    def create(self, identifier: str, year: int, language: str) -> _StubProvider:
        return _StubProvider(
            [
                NativeHoliday(date(year, 1, 1), "New Year's Day"),
                NativeHoliday(date(year, 12, 25), "Christmas Day"),
            ]
        )


class _FailingEngine:
    def create(self, identifier: str, year: int, language: str) -> _StubProvider:
        raise ProviderNotFoundError(identifier)


def _patch(monkeypatch, engine=None) -> list[str | None]:
    countries: list[str | None] = []

    def build(config: HolidayConfig, country: str | None) -> HolidayCalendar:
        countries.append(country)
        return HolidayCalendar(country or "US", engine=engine or _StubEngine())

    monkeypatch.setattr(holidaycal_cli, "_configure_environment", lambda: HolidayConfig())
    monkeypatch.setattr(holidaycal_cli, "_build_calendar", build)
    return countries


def test_check_reports_holiday(monkeypatch) -> None:
    countries = _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["check", "2024-12-25", "--country", "pl"])

    assert result.exit_code == 0, result.output
    assert "2024-12-25 is a holiday in PL" in result.output
    assert countries == ["pl"]


def test_check_reports_regular_day(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["check", "2024-12-24"])

    assert result.exit_code == 0, result.output
    assert "2024-12-24 is not a holiday in US" in result.output


def test_on_lists_holidays(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["on", "2024-12-25"])

    assert result.exit_code == 0, result.output
    assert "2024-12-25  Christmas Day" in result.output


def test_on_reports_empty_day(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["on", "2024-03-03"])

    assert result.exit_code == 0, result.output
    assert "No holidays on 2024-03-03" in result.output


def test_between_outputs_json(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(
        holidaycal_cli.app, ["between", "2024-12-20", "2025-01-10", "--json"]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"date": "2024-12-25", "name": "Christmas Day", "locales": ["us"]},
        {"date": "2025-01-01", "name": "New Year's Day", "locales": ["us"]},
    ]


def test_between_rejects_reversed_period(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["between", "2025-01-10", "2024-12-20"])

    assert result.exit_code != 0
    assert "before start" in result.output


def test_invalid_date_is_rejected(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["on", "not-a-date"])

    assert result.exit_code != 0
    assert "Invalid date" in result.output


def test_missing_locale_name_exits_with_error(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["on", "2024-12-25", "--locale", "pl"])

    assert result.exit_code == 1
    assert 'Holiday "Christmas Day" does not have name in pl locale' in result.output


def test_provider_failure_exits_with_error(monkeypatch) -> None:
    _patch(monkeypatch, engine=_FailingEngine())

    result = CliRunner().invoke(holidaycal_cli.app, ["check", "2024-12-25"])

    assert result.exit_code == 1
    assert "Yasumi provider US does not exists" in result.output


def test_unsupported_country_exits_with_error(monkeypatch) -> None:
    _patch(monkeypatch)

    result = CliRunner().invoke(holidaycal_cli.app, ["check", "2024-12-25", "--country", "xx"])

    assert result.exit_code == 1
    assert "not supported" in result.output
