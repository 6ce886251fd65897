"""
Vectorised serial conversions.

Every function here mirrors a scalar function in ``daydate.calendar.calendar``
and agrees with it element by element.  Inputs are broadcast against each
other; any out-of-range element raises InvalidDateError for the whole call.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ._exceptions import InvalidDateError
from .calendar import (
    AGGREGATE_DAYS_TO_END_OF_MONTH,
    EPOCH_OFFSET,
    LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH,
    MAXIMUM_YEAR,
    MINIMUM_YEAR,
    SERIAL_LOWER_BOUND,
    SERIAL_UPPER_BOUND,
    WEEKDAY_PHASE,
)

IntArray = npt.NDArray[np.int64]

_AGGREGATE: np.ndarray = np.asarray(AGGREGATE_DAYS_TO_END_OF_MONTH, dtype=np.int64)
_LEAP_AGGREGATE: np.ndarray = np.asarray(
    LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH, dtype=np.int64
)


def _as_int64(values: npt.ArrayLike, what: str) -> IntArray:
    arr = np.asarray(values)
    if arr.dtype.kind not in "iu":
        raise InvalidDateError(f"{what} must be integers; got dtype {arr.dtype}.")
    return arr.astype(np.int64)


# ── leap years ───────────────────────────────────────────────────────────

def leap_years(years: npt.ArrayLike) -> npt.NDArray[np.bool_]:
    y = _as_int64(years, "Years")
    return (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))


def _leap_year_count(years: IntArray) -> IntArray:
    return (years - 1896) // 4 - (years - 1800) // 100 + (years - 1600) // 400


def _year_start(years: IntArray) -> IntArray:
    return (
        (years - MINIMUM_YEAR) * 365
        + _leap_year_count(years - 1)
        + 1
        + EPOCH_OFFSET
    )


# ── conversions ──────────────────────────────────────────────────────────

def to_serials(
    years: npt.ArrayLike,
    months: npt.ArrayLike,
    days: npt.ArrayLike,
) -> IntArray:
    y, m, d = np.broadcast_arrays(
        _as_int64(years, "Years"),
        _as_int64(months, "Months"),
        _as_int64(days, "Days"),
    )

    if np.any((y < MINIMUM_YEAR) | (y > MAXIMUM_YEAR)):
        raise InvalidDateError(
            f"Years must be in {MINIMUM_YEAR}..{MAXIMUM_YEAR}."
        )
    if np.any((m < 1) | (m > 12)):
        raise InvalidDateError("Months must be in 1..12.")

    leap = leap_years(y)
    before = np.where(leap, _LEAP_AGGREGATE[m - 1], _AGGREGATE[m - 1])
    month_len = np.where(leap, _LEAP_AGGREGATE[m], _AGGREGATE[m]) - before
    if np.any((d < 1) | (d > month_len)):
        raise InvalidDateError("Days must lie within their month.")

    return (
        (y - MINIMUM_YEAR) * 365
        + _leap_year_count(y - 1)
        + before
        + d
        + EPOCH_OFFSET
    )


def from_serials(serials: npt.ArrayLike) -> tuple[IntArray, IntArray, IntArray]:
    s = _as_int64(serials, "Serials")
    if np.any((s < SERIAL_LOWER_BOUND) | (s > SERIAL_UPPER_BOUND)):
        raise InvalidDateError(
            f"Serials must be in {SERIAL_LOWER_BOUND}..{SERIAL_UPPER_BOUND}."
        )

    y = MINIMUM_YEAR + (s - SERIAL_LOWER_BOUND) * 400 // 146097
    while True:
        over = (y > MINIMUM_YEAR) & (_year_start(y) > s)
        if not over.any():
            break
        y = y - over
    while True:
        under = (y < MAXIMUM_YEAR) & (_year_start(y + 1) <= s)
        if not under.any():
            break
        y = y + under

    doy = s - _year_start(y) + 1
    leap = leap_years(y)
    m = np.where(
        leap,
        np.searchsorted(_LEAP_AGGREGATE, doy, side="left"),
        np.searchsorted(_AGGREGATE, doy, side="left"),
    ).astype(np.int64)
    d = doy - np.where(leap, _LEAP_AGGREGATE[m - 1], _AGGREGATE[m - 1])
    return y, m, d


def weekdays(serials: npt.ArrayLike) -> IntArray:
    s = _as_int64(serials, "Serials")
    return (s + WEEKDAY_PHASE) % 7 + 1
