"""CLI entrypoint for holiday lookups."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Optional

import typer
from dotenv import load_dotenv

from gregorian import Day, InvalidArgumentError, TimePeriod
from holiday import HolidayCalendar, HolidayConfig, HolidayError, build_calendar
from holiday.models import Holiday
from infra.logging import configure_logging

app = typer.Typer(help="Public holiday calendar")

CountryOption = typer.Option(
    None, "--country", "-c", help="ISO country code (defaults to HOLIDAY_COUNTRY)"
)
LocaleOption = typer.Option(None, "--locale", "-l", help="Locale of the printed names")
JsonOption = typer.Option(False, "--json", help="Print holidays as JSON")


def _configure_environment() -> HolidayConfig:
    load_dotenv()
    run_id = os.environ.get("RUN_ID")
    if not run_id:
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        os.environ["RUN_ID"] = run_id
    config = HolidayConfig.from_env()
    configure_logging(run_id=run_id, country=config.country_code, level=config.log_level)
    return config


def _build_calendar(config: HolidayConfig, country: str | None) -> HolidayCalendar:
    return build_calendar(config, country_code=country)


def _parse_day(raw: str) -> Day:
    try:
        return Day.from_string(raw)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _open_calendar(country: str | None) -> HolidayCalendar:
    config = _configure_environment()
    try:
        return _build_calendar(config, country)
    except HolidayError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _echo_holidays(holidays: list[Holiday], locale: str | None, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps([holiday.as_dict(locale) for holiday in holidays], indent=2))
        return
    for holiday in holidays:
        typer.echo(f"{holiday.day}  {holiday.name(locale)}")


@app.command()
def check(
    date: str = typer.Argument(..., help="Day as YYYY-MM-DD"),
    country: Optional[str] = CountryOption,
) -> None:
    """Tell whether a day is a holiday."""

    day = _parse_day(date)
    calendar = _open_calendar(country)
    try:
        holiday = calendar.is_holiday(day)
    except HolidayError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    verdict = "is a holiday" if holiday else "is not a holiday"
    typer.echo(f"{day} {verdict} in {calendar.provider_class}")


@app.command()
def on(
    date: str = typer.Argument(..., help="Day as YYYY-MM-DD"),
    country: Optional[str] = CountryOption,
    locale: Optional[str] = LocaleOption,
    as_json: bool = JsonOption,
) -> None:
    """List the holidays falling on a day."""

    day = _parse_day(date)
    calendar = _open_calendar(country)
    try:
        holidays = calendar.holidays_at(day)
        if not holidays and not as_json:
            typer.echo(f"No holidays on {day}")
            return
        _echo_holidays(holidays, locale, as_json)
    except HolidayError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def between(
    start: str = typer.Argument(..., help="First day as YYYY-MM-DD"),
    end: str = typer.Argument(..., help="Last day as YYYY-MM-DD"),
    country: Optional[str] = CountryOption,
    locale: Optional[str] = LocaleOption,
    as_json: bool = JsonOption,
) -> None:
    """List the holidays between two days, both included."""

    try:
        period = TimePeriod(_parse_day(start), _parse_day(end))
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    calendar = _open_calendar(country)
    try:
        holidays = calendar.in_period(period)
        if not holidays and not as_json:
            typer.echo(f"No holidays in {period}")
            return
        _echo_holidays(holidays, locale, as_json)
    except HolidayError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
