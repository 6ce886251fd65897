from __future__ import annotations

import operator
from bisect import bisect_left
from enum import IntEnum
from typing import Final

from ._exceptions import InvalidDateError, InvalidEnumValueError

MINIMUM_YEAR: Final[int] = 1900
MAXIMUM_YEAR: Final[int] = 9999

# Spreadsheet numbering: serial 0 is 30-Dec-1899, so 1-Jan-1900 is serial 2.
EPOCH_OFFSET: Final[int] = 1

SERIAL_LOWER_BOUND: Final[int] = 2
SERIAL_UPPER_BOUND: Final[int] = 2958465

# Serial 2 (1-Jan-1900) fell on a Monday.
WEEKDAY_PHASE: Final[int] = 5


class Month(IntEnum):
    """Calendar month, numbered 1 (January) to 12 (December)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_index(cls, index: int) -> Month:
        if isinstance(index, bool):
            raise InvalidEnumValueError(f"Month index must be an integer; got {index!r}.")
        try:
            return cls(index)
        except ValueError:
            raise InvalidEnumValueError(
                f"Month index must be in 1..12; got {index!r}."
            ) from None

    @property
    def index(self) -> int:
        return int(self.value)

    @property
    def last_day(self) -> int:
        """Length of the month in a non-leap year."""
        return _MONTH_LENGTHS[self.value]

    @property
    def quarter(self) -> int:
        return (self.value - 1) // 3 + 1


class Weekday(IntEnum):
    """Day of the week, ISO numbered: Monday is 1, Sunday is 7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        if isinstance(index, bool):
            raise InvalidEnumValueError(f"Weekday index must be an integer; got {index!r}.")
        try:
            return cls(index)
        except ValueError:
            raise InvalidEnumValueError(
                f"Weekday index must be in 1..7; got {index!r}."
            ) from None

    @property
    def index(self) -> int:
        return int(self.value)


# ── tables ───────────────────────────────────────────────────────────────

# Indexed by month number; slot 0 is padding.
_MONTH_LENGTHS: Final[tuple[int, ...]] = (
    0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)

# Days from the start of the year to the end of month m (slot m).
AGGREGATE_DAYS_TO_END_OF_MONTH: Final[tuple[int, ...]] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365,
)
LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH: Final[tuple[int, ...]] = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366,
)


# ── leap years and month lengths ─────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    fourth = year % 4 == 0
    hundredth = year % 100 == 0
    four_hundredth = year % 400 == 0
    return fourth and (not hundredth or four_hundredth)


def leap_year_count(year: int) -> int:
    """Number of leap years from 1900 up to and including ``year``."""
    leap4 = (year - 1896) // 4
    leap100 = (year - 1800) // 100
    leap400 = (year - 1600) // 400
    return leap4 - leap100 + leap400


def _aggregate_table(year: int) -> tuple[int, ...]:
    if is_leap_year(year):
        return LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH
    return AGGREGATE_DAYS_TO_END_OF_MONTH


def last_day_of_month(month: Month, year: int) -> int:
    month = Month.from_index(month)
    if month is Month.FEBRUARY and is_leap_year(year):
        return month.last_day + 1
    return month.last_day


def days_to_end_of_month(month: Month, year: int) -> int:
    month = Month.from_index(month)
    return _aggregate_table(year)[month]


def days_before_month(month: Month, year: int) -> int:
    month = Month.from_index(month)
    return _aggregate_table(year)[month - 1]


# ── serial conversion ────────────────────────────────────────────────────

def _as_integer(value: int, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidDateError(f"{what} must be an integer; got {value!r}.")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidDateError(
            f"{what} must be an integer; got {type(value).__name__}."
        ) from None


def _year_start(year: int) -> int:
    return (
        (year - MINIMUM_YEAR) * 365
        + leap_year_count(year - 1)
        + 1
        + EPOCH_OFFSET
    )


def validate_year(year: int) -> None:
    if not MINIMUM_YEAR <= year <= MAXIMUM_YEAR:
        raise InvalidDateError(
            f"Year must be in {MINIMUM_YEAR}..{MAXIMUM_YEAR}; got {year}."
        )


def validate_serial(serial: int) -> None:
    if not SERIAL_LOWER_BOUND <= serial <= SERIAL_UPPER_BOUND:
        raise InvalidDateError(
            f"Serial must be in {SERIAL_LOWER_BOUND}..{SERIAL_UPPER_BOUND}; "
            f"got {serial}."
        )


def to_serial(year: int, month: Month | int, day: int) -> int:
    """
    Serial number of a calendar date.

    Whole years since 1900 (with their leap days), plus the days before
    ``month`` in ``year``, plus ``day``, plus ``EPOCH_OFFSET``.  Raises
    InvalidDateError when the date is not on the supported calendar.
    """
    month = Month.from_index(month)
    year = _as_integer(year, "Year")
    day = _as_integer(day, "Day")
    validate_year(year)
    last = last_day_of_month(month, year)
    if not 1 <= day <= last:
        raise InvalidDateError(
            f"Day {day} is not valid for {month.name} {year} "
            f"(last day is {last})."
        )
    return (
        (year - MINIMUM_YEAR) * 365
        + leap_year_count(year - 1)
        + days_before_month(month, year)
        + day
        + EPOCH_OFFSET
    )


def from_serial(serial: int) -> tuple[int, Month, int]:
    """Inverse of to_serial: returns ``(year, month, day)``."""
    validate_serial(serial)

    # Mean Gregorian year length gives an estimate at most one year off.
    year = MINIMUM_YEAR + (serial - SERIAL_LOWER_BOUND) * 400 // 146097
    while year > MINIMUM_YEAR and _year_start(year) > serial:
        year -= 1
    while year < MAXIMUM_YEAR and _year_start(year + 1) <= serial:
        year += 1

    day_of_year = serial - _year_start(year) + 1
    table = _aggregate_table(year)
    month = bisect_left(table, day_of_year)
    return year, Month(month), day_of_year - table[month - 1]


def weekday_of(serial: int) -> Weekday:
    return Weekday((serial + WEEKDAY_PHASE) % 7 + 1)
