"""
tests/calendar/test_arrays.py

Covers:
  - Vectorised serial conversion (1-D, 2-D, broadcasting)
  - Agreement with the scalar functions
  - Leap-year and weekday arrays
  - Range and dtype validation
"""

import numpy as np
import pytest

from daydate.calendar import (
    SERIAL_LOWER_BOUND,
    SERIAL_UPPER_BOUND,
    InvalidDateError,
    from_serial,
    is_leap_year,
    to_serial,
    weekday_of,
)
from daydate.calendar.arrays import from_serials, leap_years, to_serials, weekdays


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def random_serials():
    rng = np.random.default_rng(42)
    return rng.integers(SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND + 1, size=500)


# ── Conversions ───────────────────────────────────────────────────────────────

class TestConversions:

    def test_epoch_and_upper_bound(self):
        serials = to_serials([1900, 9999], [1, 12], [1, 31])
        np.testing.assert_array_equal(serials, [2, 2958465])

    def test_from_serials_known_values(self):
        years, months, days = from_serials([2, 44347, 36585])
        np.testing.assert_array_equal(years, [1900, 2021, 2000])
        np.testing.assert_array_equal(months, [1, 5, 2])
        np.testing.assert_array_equal(days, [1, 31, 29])

    def test_broadcast_scalar_month_and_day(self):
        serials = to_serials(np.array([2020, 2021, 2022]), 3, 1)
        expected = [to_serial(y, 3, 1) for y in (2020, 2021, 2022)]
        np.testing.assert_array_equal(serials, expected)

    def test_2d_shape_preserved(self):
        serials = np.array([[2, 3], [44347, 2958465]])
        years, months, days = from_serials(serials)
        assert years.shape == months.shape == days.shape == (2, 2)
        np.testing.assert_array_equal(to_serials(years, months, days), serials)

    def test_output_dtype_is_int64(self):
        years, months, days = from_serials([44347])
        assert years.dtype == months.dtype == days.dtype == np.int64
        assert to_serials([2021], [5], [31]).dtype == np.int64


# ── Agreement with scalar path ────────────────────────────────────────────────

class TestScalarConsistency:

    def test_from_serials_matches_scalar(self, random_serials):
        years, months, days = from_serials(random_serials)
        for s, y, m, d in zip(random_serials, years, months, days):
            assert from_serial(int(s)) == (int(y), int(m), int(d))

    def test_round_trip(self, random_serials):
        years, months, days = from_serials(random_serials)
        np.testing.assert_array_equal(to_serials(years, months, days), random_serials)

    def test_contiguous_block_round_trip(self):
        serials = np.arange(SERIAL_LOWER_BOUND, SERIAL_LOWER_BOUND + 366 * 201)
        years, months, days = from_serials(serials)
        np.testing.assert_array_equal(to_serials(years, months, days), serials)
        assert np.all(np.diff(years) >= 0)

    def test_weekdays_match_scalar(self, random_serials):
        result = weekdays(random_serials)
        expected = [weekday_of(int(s)).index for s in random_serials]
        np.testing.assert_array_equal(result, expected)

    def test_leap_years_match_scalar(self):
        years = np.arange(1900, 2501)
        expected = [is_leap_year(int(y)) for y in years]
        np.testing.assert_array_equal(leap_years(years), expected)


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    def test_day_past_month_end_raises(self):
        with pytest.raises(InvalidDateError):
            to_serials([2020, 2021], 2, 29)

    def test_month_out_of_range_raises(self):
        with pytest.raises(InvalidDateError):
            to_serials(2021, [0, 1], 1)

    def test_year_out_of_range_raises(self):
        with pytest.raises(InvalidDateError):
            to_serials([1899, 2000], 1, 1)

    def test_serial_out_of_range_raises(self):
        with pytest.raises(InvalidDateError):
            from_serials([2, 1])

    def test_float_input_rejected(self):
        with pytest.raises(InvalidDateError):
            from_serials(np.array([44347.0]))
