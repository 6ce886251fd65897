from __future__ import annotations

import calendar as _stdlib_calendar
import logging
from typing import Protocol, Sequence, runtime_checkable

from daydate.calendar import InvalidEnumValueError, Month, Weekday

logger = logging.getLogger(__name__)


@runtime_checkable
class NameService(Protocol):
    """Maps Month and Weekday values to display names and back."""

    def month_name(self, month: Month, short: bool = False) -> str: ...

    def weekday_name(self, weekday: Weekday, short: bool = False) -> str: ...

    def month_from_name(self, text: str) -> Month: ...

    def weekday_from_name(self, text: str) -> Weekday: ...

    def month_names(self, short: bool = False) -> list[str]: ...

    def weekday_names(self, short: bool = False) -> list[str]: ...


class _TableNames:
    """
    Name service backed by four name tables.

    Subclasses provide the tables through ``_month_table`` and
    ``_weekday_table``; entry i of each table belongs to index i + 1.
    """

    def _month_table(self, short: bool) -> Sequence[str]:
        raise NotImplementedError

    def _weekday_table(self, short: bool) -> Sequence[str]:
        raise NotImplementedError

    def month_name(self, month: Month, short: bool = False) -> str:
        return self._month_table(short)[Month.from_index(month) - 1]

    def weekday_name(self, weekday: Weekday, short: bool = False) -> str:
        return self._weekday_table(short)[Weekday.from_index(weekday) - 1]

    def month_names(self, short: bool = False) -> list[str]:
        return list(self._month_table(short))

    def weekday_names(self, short: bool = False) -> list[str]:
        return list(self._weekday_table(short))

    def month_from_name(self, text: str) -> Month:
        index = self._lookup(text, self._month_table(False), self._month_table(True))
        if index is None:
            raise InvalidEnumValueError(f"Unknown month name: {text!r}.")
        return Month(index)

    def weekday_from_name(self, text: str) -> Weekday:
        index = self._lookup(
            text, self._weekday_table(False), self._weekday_table(True)
        )
        if index is None:
            raise InvalidEnumValueError(f"Unknown weekday name: {text!r}.")
        return Weekday(index)

    @staticmethod
    def _lookup(text: str, full: Sequence[str], short: Sequence[str]) -> int | None:
        key = text.strip().casefold()
        if not key:
            return None
        for table in (full, short):
            for i, name in enumerate(table):
                if name.casefold() == key:
                    return i + 1
        return None


class EnglishNames(_TableNames):
    """Fixed English names, independent of the process locale."""

    _MONTHS = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    _WEEKDAYS = (
        "Monday", "Tuesday", "Wednesday", "Thursday",
        "Friday", "Saturday", "Sunday",
    )

    def _month_table(self, short: bool) -> Sequence[str]:
        if short:
            return tuple(name[:3] for name in self._MONTHS)
        return self._MONTHS

    def _weekday_table(self, short: bool) -> Sequence[str]:
        if short:
            return tuple(name[:3] for name in self._WEEKDAYS)
        return self._WEEKDAYS

    def __repr__(self) -> str:
        return "EnglishNames()"


class LocaleNames(_TableNames):
    """
    Names from the process locale (``LC_TIME``), read at lookup time.

    Uses the standard library calendar tables, so a ``locale.setlocale``
    call takes effect on the next lookup.  Reverse lookups fall back to
    English when the locale tables do not know the text.
    """

    def __init__(self) -> None:
        self._fallback = EnglishNames()

    def _month_table(self, short: bool) -> Sequence[str]:
        source = _stdlib_calendar.month_abbr if short else _stdlib_calendar.month_name
        return [source[i] for i in range(1, 13)]

    def _weekday_table(self, short: bool) -> Sequence[str]:
        source = _stdlib_calendar.day_abbr if short else _stdlib_calendar.day_name
        return [source[i] for i in range(7)]

    def month_from_name(self, text: str) -> Month:
        try:
            return super().month_from_name(text)
        except InvalidEnumValueError:
            logger.debug("Locale has no month named %r; trying English.", text)
            return self._fallback.month_from_name(text)

    def weekday_from_name(self, text: str) -> Weekday:
        try:
            return super().weekday_from_name(text)
        except InvalidEnumValueError:
            logger.debug("Locale has no weekday named %r; trying English.", text)
            return self._fallback.weekday_from_name(text)

    def __repr__(self) -> str:
        return "LocaleNames()"


# ── process-wide default ─────────────────────────────────────────────────

_DEFAULT: NameService = EnglishNames()
_current: NameService = _DEFAULT


def get_name_service() -> NameService:
    return _current


def set_name_service(service: NameService) -> None:
    global _current
    if not isinstance(service, NameService):
        raise TypeError(f"Expected a NameService; got {type(service).__name__}.")
    logger.debug("Name service replaced: %r -> %r", _current, service)
    _current = service


def reset_name_service() -> None:
    global _current
    logger.debug("Name service reset to %r", _DEFAULT)
    _current = _DEFAULT
