"""
daydate.date
~~~~~~~~~~~~

The DayDate value: an immutable calendar day with comparison, range tests
and date arithmetic.

Basic usage::

    from daydate.calendar import Month, Weekday
    from daydate.date import DayDate, WeekInMonth

    d = DayDate.of(31, Month.MAY, 2021)
    d.plus_months(1)                        # → 30-June-2021
    d.following_weekday(Weekday.FRIDAY)     # → 4-June-2021
    d.end_of_month().is_on(d)               # → True

    # Thanksgiving: fourth Thursday of November
    DayDate.weekday_in_month(WeekInMonth.FOURTH, Weekday.THURSDAY,
                             Month.NOVEMBER, 2021)

Dates are built through a replaceable DateFactory::

    from daydate.date import set_factory, reset_factory

Public API
----------
DayDate            The value type.
WeekInMonth        FIRST..FOURTH, LAST.
DateInterval       Range inclusion: CLOSED, CLOSED_LEFT, CLOSED_RIGHT, OPEN.
WeekdayRange       LAST, NEAREST, NEXT for relative_weekday().
DateFactory        Protocol for date construction.
SerialDateFactory  The default factory.
"""

from __future__ import annotations

from daydate.date.date import (
    DateInterval,
    DayDate,
    SerialDateFactory,
    WeekdayRange,
    WeekInMonth,
)
from daydate.date.factory import (
    DateFactory,
    get_factory,
    reset_factory,
    set_factory,
)

__all__ = [
    "DateFactory",
    "DateInterval",
    "DayDate",
    "SerialDateFactory",
    "WeekdayRange",
    "WeekInMonth",
    "get_factory",
    "reset_factory",
    "set_factory",
]
