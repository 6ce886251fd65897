"""
daydate.names
~~~~~~~~~~~~~

Display names for months and weekdays.  The date arithmetic never formats
text itself; it asks a NameService, which can be replaced process-wide or
passed per call.

Basic usage::

    from daydate.calendar import Month
    from daydate.names import LocaleNames, get_name_service, set_name_service

    get_name_service().month_name(Month.MAY)         # → "May"
    get_name_service().month_from_name("sep")        # → Month.SEPTEMBER
    set_name_service(LocaleNames())                  # follow LC_TIME

Public API
----------
NameService          Protocol every name service implements.
EnglishNames         Fixed English names (the default).
LocaleNames          Names from the process locale.
get_name_service     Current process-wide service.
set_name_service     Replace it.
reset_name_service   Restore EnglishNames.
"""

from __future__ import annotations

from daydate.names.names import (
    EnglishNames,
    LocaleNames,
    NameService,
    get_name_service,
    reset_name_service,
    set_name_service,
)

__all__ = [
    "EnglishNames",
    "LocaleNames",
    "NameService",
    "get_name_service",
    "reset_name_service",
    "set_name_service",
]
