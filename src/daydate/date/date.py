from __future__ import annotations

import datetime
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, TypeVar

from daydate.calendar import (
    MAXIMUM_YEAR,
    MINIMUM_YEAR,
    SERIAL_LOWER_BOUND,
    SERIAL_UPPER_BOUND,
    InvalidDateError,
    InvalidEnumValueError,
    Month,
    RangeOverflowError,
    Weekday,
    days_before_month,
    from_serial,
    last_day_of_month,
    to_serial,
    weekday_of,
)
from daydate.date.factory import get_factory
from daydate.names import NameService, get_name_service

# datetime.date ordinal of serial 0 (30-Dec-1899).
_DATE_ORDINAL_OFFSET: Final[int] = datetime.date(1899, 12, 30).toordinal()


class WeekInMonth(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    LAST = 0


class DateInterval(Enum):
    """Which ends of a range count as inside it."""

    CLOSED = 0
    CLOSED_LEFT = 1
    CLOSED_RIGHT = 2
    OPEN = 3


class WeekdayRange(Enum):
    LAST = -1
    NEAREST = 0
    NEXT = 1


_E = TypeVar("_E", bound=Enum)


def _member(kind: type[_E], value: _E | int) -> _E:
    if isinstance(value, kind):
        return value
    if not isinstance(value, bool):
        try:
            return kind(value)
        except (ValueError, TypeError):
            pass
    raise InvalidEnumValueError(f"{value!r} is not a {kind.__name__}.")


@dataclass(frozen=True, slots=True, eq=False)
class DayDate:
    """
    Immutable calendar day, identified by its serial number.

    The calendar form (year, month, day) is derived once at construction.
    Equality, ordering and hashing use the serial only.  Every method that
    returns a date builds it through the current DateFactory.
    """

    serial: int
    year: int = field(init=False, compare=False, repr=False)
    month: Month = field(init=False, compare=False, repr=False)
    day: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        try:
            serial = operator.index(self.serial)
        except TypeError:
            raise InvalidDateError(
                f"Serial must be an integer; got {type(self.serial).__name__}."
            ) from None
        year, month, day = from_serial(serial)
        object.__setattr__(self, "serial", serial)
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_serial(cls, serial: int) -> DayDate:
        return get_factory().make_date(serial)

    @classmethod
    def of(cls, day: int, month: Month | int, year: int) -> DayDate:
        return get_factory().make_date_from_parts(day, Month.from_index(month), year)

    @classmethod
    def from_date(cls, value: datetime.date) -> DayDate:
        """Convert a ``datetime.date`` (or the date part of a datetime)."""
        return get_factory().make_date(value.toordinal() - _DATE_ORDINAL_OFFSET)

    @classmethod
    def weekday_in_month(
        cls,
        week: WeekInMonth | int,
        weekday: Weekday | int,
        month: Month | int,
        year: int,
    ) -> DayDate:
        """The first to fourth, or the last, ``weekday`` of a month."""
        week = _member(WeekInMonth, week)
        weekday = Weekday.from_index(weekday)
        first = cls.of(1, month, year)
        if week is WeekInMonth.LAST:
            last = first.end_of_month()
            if last.weekday is weekday:
                return last
            return last.previous_weekday(weekday)
        if first.weekday is not weekday:
            first = first.following_weekday(weekday)
        return first.plus_days(7 * (week.value - 1))

    def to_date(self) -> datetime.date:
        return datetime.date.fromordinal(self.serial + _DATE_ORDINAL_OFFSET)

    # ── calendar views ───────────────────────────────────────────────────

    @property
    def weekday(self) -> Weekday:
        return weekday_of(self.serial)

    @property
    def day_of_year(self) -> int:
        return days_before_month(self.month, self.year) + self.day

    # ── comparison ───────────────────────────────────────────────────────

    def compare(self, other: DayDate) -> int:
        """-1, 0 or 1 as this date is before, on or after ``other``."""
        return (self.serial > other.serial) - (self.serial < other.serial)

    def is_on(self, other: DayDate) -> bool:
        return self.compare(other) == 0

    def is_before(self, other: DayDate) -> bool:
        return self.compare(other) < 0

    def is_on_or_before(self, other: DayDate) -> bool:
        return self.compare(other) <= 0

    def is_after(self, other: DayDate) -> bool:
        return self.compare(other) > 0

    def is_on_or_after(self, other: DayDate) -> bool:
        return self.compare(other) >= 0

    # Factories may return subclasses; they compare by serial like the base.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayDate):
            return NotImplemented
        return self.serial == other.serial

    def __hash__(self) -> int:
        return hash(self.serial)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DayDate):
            return NotImplemented
        return self.serial < other.serial

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DayDate):
            return NotImplemented
        return self.serial <= other.serial

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DayDate):
            return NotImplemented
        return self.serial > other.serial

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DayDate):
            return NotImplemented
        return self.serial >= other.serial

    def is_in_range(
        self,
        d1: DayDate,
        d2: DayDate,
        include: DateInterval | int = DateInterval.CLOSED,
    ) -> bool:
        """
        Whether this date lies between ``d1`` and ``d2``.

        The bounds may be given in either order.  ``include`` selects which
        ends are part of the range.
        """
        include = _member(DateInterval, include)
        lo = min(d1.serial, d2.serial)
        hi = max(d1.serial, d2.serial)
        s = self.serial
        if include is DateInterval.CLOSED:
            return lo <= s <= hi
        if include is DateInterval.CLOSED_LEFT:
            return lo <= s < hi
        if include is DateInterval.CLOSED_RIGHT:
            return lo < s <= hi
        return lo < s < hi

    def days_until(self, other: DayDate) -> int:
        return other.serial - self.serial

    # ── arithmetic ───────────────────────────────────────────────────────

    def plus_days(self, days: int) -> DayDate:
        serial = self.serial + days
        if not SERIAL_LOWER_BOUND <= serial <= SERIAL_UPPER_BOUND:
            raise RangeOverflowError(
                f"{self} plus {days} days is outside "
                f"{MINIMUM_YEAR}..{MAXIMUM_YEAR}."
            )
        return get_factory().make_date(serial)

    def plus_months(self, months: int) -> DayDate:
        """
        Same day-of-month ``months`` later (or earlier, when negative).

        The day is clamped to the target month's length, so 31 May plus one
        month is 30 June.
        """
        year, month_offset = divmod(12 * self.year + self.month.index - 1 + months, 12)
        month = Month(month_offset + 1)
        self._check_target_year(year, f"plus {months} months")
        day = min(self.day, last_day_of_month(month, year))
        return get_factory().make_date_from_parts(day, month, year)

    def plus_years(self, years: int) -> DayDate:
        year = self.year + years
        self._check_target_year(year, f"plus {years} years")
        day = min(self.day, last_day_of_month(self.month, year))
        return get_factory().make_date_from_parts(day, self.month, year)

    def _check_target_year(self, year: int, what: str) -> None:
        if not MINIMUM_YEAR <= year <= MAXIMUM_YEAR:
            raise RangeOverflowError(
                f"{self} {what} falls in year {year}, outside "
                f"{MINIMUM_YEAR}..{MAXIMUM_YEAR}."
            )

    def end_of_month(self) -> DayDate:
        last = last_day_of_month(self.month, self.year)
        return get_factory().make_date_from_parts(last, self.month, self.year)

    # ── relative weekdays ────────────────────────────────────────────────

    def previous_weekday(self, target: Weekday | int) -> DayDate:
        """Latest ``target`` strictly before this date (7 days back if today)."""
        offset = Weekday.from_index(target).index - self.weekday.index
        if offset >= 0:
            offset -= 7
        return self.plus_days(offset)

    def following_weekday(self, target: Weekday | int) -> DayDate:
        """Earliest ``target`` strictly after this date (7 days on if today)."""
        offset = Weekday.from_index(target).index - self.weekday.index
        if offset <= 0:
            offset += 7
        return self.plus_days(offset)

    def nearest_weekday(self, target: Weekday | int) -> DayDate:
        """
        Closest ``target``, this date included.

        Up to three days ahead wins; four or more days ahead means the
        previous one, at most three days back, is closer.
        """
        future = (Weekday.from_index(target).index - self.weekday.index) % 7
        if future > 3:
            return self.plus_days(future - 7)
        return self.plus_days(future)

    def relative_weekday(
        self, target: Weekday | int, relative: WeekdayRange | int
    ) -> DayDate:
        relative = _member(WeekdayRange, relative)
        if relative is WeekdayRange.LAST:
            return self.previous_weekday(target)
        if relative is WeekdayRange.NEXT:
            return self.following_weekday(target)
        return self.nearest_weekday(target)

    # ── display ──────────────────────────────────────────────────────────

    def to_string(self, names: NameService | None = None) -> str:
        names = names if names is not None else get_name_service()
        return f"{self.day}-{names.month_name(self.month)}-{self.year}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"DayDate(serial={self.serial}, "
            f"{self.year:04d}-{self.month.index:02d}-{self.day:02d})"
        )


class SerialDateFactory:
    """Default factory: plain DayDate values."""

    def make_date(self, serial: int) -> DayDate:
        return DayDate(serial)

    def make_date_from_parts(self, day: int, month: Month, year: int) -> DayDate:
        return DayDate(to_serial(year, month, day))

    def __repr__(self) -> str:
        return "SerialDateFactory()"
