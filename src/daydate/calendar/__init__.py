"""
daydate.calendar
~~~~~~~~~~~~~~~~

Proleptic Gregorian calendar arithmetic on serial day numbers.  A serial is
an integer day count using the spreadsheet convention: 1-Jan-1900 is serial 2
and 31-Dec-9999 is serial 2958465.

Basic usage::

    from daydate.calendar import Month, to_serial, from_serial, weekday_of

    s = to_serial(2021, Month.MAY, 31)     # → 44347
    from_serial(s)                         # → (2021, Month.MAY, 31)
    weekday_of(s)                          # → Weekday.MONDAY

NumPy arrays are accepted by the functions in ``daydate.calendar.arrays``::

    import numpy as np
    from daydate.calendar.arrays import to_serials, from_serials

    serials = to_serials(np.array([2020, 2021]), 2, 28)
    years, months, days = from_serials(serials + 1)

Public API
----------
Month, Weekday           Closed enumerations with 1-based indices.
is_leap_year             Gregorian leap-year rule.
last_day_of_month        Month length, leap aware.
to_serial, from_serial   Calendar form ⇄ serial.
weekday_of               Weekday of a serial.
CalendarError            Base exception for all daydate errors.
"""

from __future__ import annotations

from daydate.calendar._exceptions import (
    CalendarError,
    InvalidDateError,
    InvalidEnumValueError,
    RangeOverflowError,
)
from daydate.calendar.calendar import (
    EPOCH_OFFSET,
    MAXIMUM_YEAR,
    MINIMUM_YEAR,
    SERIAL_LOWER_BOUND,
    SERIAL_UPPER_BOUND,
    WEEKDAY_PHASE,
    Month,
    Weekday,
    days_before_month,
    days_to_end_of_month,
    from_serial,
    is_leap_year,
    last_day_of_month,
    leap_year_count,
    to_serial,
    validate_serial,
    validate_year,
    weekday_of,
)

__all__ = [
    "CalendarError",
    "InvalidDateError",
    "InvalidEnumValueError",
    "RangeOverflowError",
    "EPOCH_OFFSET",
    "MAXIMUM_YEAR",
    "MINIMUM_YEAR",
    "SERIAL_LOWER_BOUND",
    "SERIAL_UPPER_BOUND",
    "WEEKDAY_PHASE",
    "Month",
    "Weekday",
    "days_before_month",
    "days_to_end_of_month",
    "from_serial",
    "is_leap_year",
    "last_day_of_month",
    "leap_year_count",
    "to_serial",
    "validate_serial",
    "validate_year",
    "weekday_of",
]
