class CalendarError(Exception):
    """Base class for every error raised by daydate."""


class InvalidEnumValueError(CalendarError, ValueError):
    """An enumeration was looked up by an index or name it does not have."""


class InvalidDateError(CalendarError, ValueError):
    """A serial or (day, month, year) combination outside the calendar."""


class RangeOverflowError(InvalidDateError, OverflowError):
    """Date arithmetic produced a result outside the supported years."""
