from __future__ import annotations

import pytest

from gregorian import Day
from holiday.exceptions import HolidayError, InvalidArgumentError
from holiday.models import Holiday
from holiday.name import HolidayLocaleName, HolidayName


def _name() -> HolidayName:
    return HolidayName(
        HolidayLocaleName("us", "Christmas Day"),
        HolidayLocaleName("pl", "Boże Narodzenie"),
        HolidayLocaleName("pl", "Pierwszy dzień Świąt"),
    )


def test_default_name_is_first_in_construction_order() -> None:
    name = _name()
    assert name.name() == "Christmas Day"
    assert name.name(None) == "Christmas Day"


def test_locale_name_returns_first_match() -> None:
    name = _name()
    assert name.name("us") == "Christmas Day"
    assert name.name("pl") == "Boże Narodzenie"


def test_missing_locale_embeds_default_name() -> None:
    with pytest.raises(HolidayError) as excinfo:
        _name().name("de")
    assert str(excinfo.value) == 'Holiday "Christmas Day" does not have name in de locale'


def test_locale_match_is_exact() -> None:
    name = HolidayName(HolidayLocaleName("en_US", "Independence Day"))
    assert not name.has_locale("en")
    with pytest.raises(HolidayError):
        name.name("EN_US")


def test_empty_name_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="at least one locale"):
        HolidayName()


def test_locales_keep_order_and_duplicates() -> None:
    assert _name().locales() == ["us", "pl", "pl"]


def test_holiday_delegates_to_name() -> None:
    holiday = Holiday(Day.create(2024, 12, 25), _name())
    assert holiday.name() == "Christmas Day"
    assert holiday.name("pl") == "Boże Narodzenie"
    assert holiday.as_dict("pl") == {
        "date": "2024-12-25",
        "name": "Boże Narodzenie",
        "locales": ["us", "pl", "pl"],
    }
