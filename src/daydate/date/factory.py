from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from daydate.calendar import Month

if TYPE_CHECKING:
    from daydate.date.date import DayDate

logger = logging.getLogger(__name__)


@runtime_checkable
class DateFactory(Protocol):
    """
    Builds DayDate values.

    DayDate routes every date it returns through the current factory, so a
    replacement factory sees all construction, including arithmetic.
    """

    def make_date(self, serial: int) -> DayDate: ...

    def make_date_from_parts(self, day: int, month: Month, year: int) -> DayDate: ...


_current: DateFactory | None = None


def _default() -> DateFactory:
    from daydate.date.date import SerialDateFactory

    return SerialDateFactory()


def get_factory() -> DateFactory:
    global _current
    if _current is None:
        _current = _default()
    return _current


def set_factory(factory: DateFactory) -> None:
    global _current
    if not isinstance(factory, DateFactory):
        raise TypeError(f"Expected a DateFactory; got {type(factory).__name__}.")
    logger.debug("Date factory replaced: %r -> %r", _current, factory)
    _current = factory


def reset_factory() -> None:
    global _current
    logger.debug("Date factory reset (was %r)", _current)
    _current = None
