"""Name Days package - look up name days by name or by date for Czech Republic, Hungary and Poland."""

from .dates import normalize_date, day_of_year, day_label
from .loader import (
    COUNTRIES,
    LoadError,
    NameDayCalendar,
    load_calendar,
    load_calendar_from_dir,
)
from .resolver import get_calendar, resolve
from .triggers import strip_trigger, answer

__all__ = [
    "COUNTRIES",
    "LoadError",
    "NameDayCalendar",
    "load_calendar",
    "load_calendar_from_dir",
    "get_calendar",
    "resolve",
    "normalize_date",
    "day_of_year",
    "day_label",
    "strip_trigger",
    "answer",
]
