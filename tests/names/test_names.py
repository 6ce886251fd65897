"""
tests/names/test_names.py

Covers:
  - English month / weekday names, full and short
  - Reverse lookups (case, whitespace, short forms, unknown names)
  - Locale-backed names under the default C locale
  - Replacing the process-wide service and per-call injection
"""

import logging

import pytest

from daydate.calendar import InvalidEnumValueError, Month, Weekday
from daydate.date import DayDate
from daydate.names import (
    EnglishNames,
    LocaleNames,
    NameService,
    get_name_service,
    reset_name_service,
    set_name_service,
)


class UpperNames(EnglishNames):
    def month_name(self, month, short=False):
        return super().month_name(month, short).upper()


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _restore_names():
    yield
    reset_name_service()


@pytest.fixture
def english():
    return EnglishNames()


# ── English names ─────────────────────────────────────────────────────────────

class TestEnglishNames:

    def test_month_names(self, english):
        assert english.month_name(Month.JANUARY) == "January"
        assert english.month_name(Month.SEPTEMBER, short=True) == "Sep"

    def test_weekday_names(self, english):
        assert english.weekday_name(Weekday.MONDAY) == "Monday"
        assert english.weekday_name(Weekday.SUNDAY, short=True) == "Sun"

    def test_name_lists(self, english):
        assert len(english.month_names()) == 12
        assert english.month_names()[-1] == "December"
        assert english.weekday_names(short=True) == [
            "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun",
        ]

    def test_accepts_integer_index(self, english):
        assert english.month_name(5) == "May"

    def test_bad_index_raises(self, english):
        with pytest.raises(InvalidEnumValueError):
            english.month_name(13)

    def test_satisfies_protocol(self, english):
        assert isinstance(english, NameService)


# ── Reverse lookups ───────────────────────────────────────────────────────────

class TestReverseLookup:

    @pytest.mark.parametrize("text", ["May", "may", "  MAY ", "mAy"])
    def test_month_full(self, english, text):
        assert english.month_from_name(text) is Month.MAY

    def test_month_short(self, english):
        assert english.month_from_name("sep") is Month.SEPTEMBER

    def test_weekday(self, english):
        assert english.weekday_from_name("friday") is Weekday.FRIDAY
        assert english.weekday_from_name("Thu") is Weekday.THURSDAY

    @pytest.mark.parametrize("text", ["", "  ", "Septembre", "Mo"])
    def test_unknown_month_raises(self, english, text):
        with pytest.raises(InvalidEnumValueError):
            english.month_from_name(text)

    def test_unknown_weekday_raises(self, english):
        with pytest.raises(InvalidEnumValueError):
            english.weekday_from_name("Funday")

    def test_every_name_round_trips(self, english):
        for month in Month:
            assert english.month_from_name(english.month_name(month)) is month
            assert english.month_from_name(english.month_name(month, short=True)) is month
        for weekday in Weekday:
            assert english.weekday_from_name(english.weekday_name(weekday)) is weekday


# ── Locale names ──────────────────────────────────────────────────────────────

class TestLocaleNames:

    def test_c_locale_matches_english(self, english):
        names = LocaleNames()
        assert names.month_names() == english.month_names()
        assert names.weekday_names() == english.weekday_names()

    def test_falls_back_to_english_lookup(self, caplog):
        names = LocaleNames()
        with caplog.at_level(logging.DEBUG, logger="daydate.names.names"):
            assert names.month_from_name("March") is Month.MARCH
            with pytest.raises(InvalidEnumValueError):
                names.month_from_name("Brumaire")
        assert "trying English" in caplog.text


# ── Process-wide service ──────────────────────────────────────────────────────

class TestServiceSelection:

    def test_default_is_english(self):
        assert isinstance(get_name_service(), EnglishNames)

    def test_replacement_changes_str(self):
        d = DayDate.of(31, Month.MAY, 2021)
        set_name_service(UpperNames())
        assert str(d) == "31-MAY-2021"

    def test_reset(self):
        set_name_service(UpperNames())
        reset_name_service()
        assert str(DayDate.of(1, Month.JUNE, 2021)) == "1-June-2021"

    def test_per_call_injection(self):
        d = DayDate.of(4, Month.JULY, 2021)
        assert d.to_string(names=UpperNames()) == "4-JULY-2021"
        assert str(d) == "4-July-2021"

    def test_non_service_rejected(self):
        with pytest.raises(TypeError):
            set_name_service("English")
