"""Dates: turn free-text date expressions into a (month, day) pair.

Each supported notation is a small parser returning ``(month, day)`` or None.
`normalize_date` runs them in order and keeps the first hit. Parsers never
raise on bad input; an invalid calendar date only fails that one parser.
"""
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Tuple
import logging
import re

from dateutil import parser as dateutil_parser

from .months import replace_month_words

# Any leap year works here, the datasets include February 29
REFERENCE_YEAR = 2000

MonthDay = Tuple[int, int]
DateForm = Callable[[str, date], Optional[MonthDay]]

RELATIVE_DAYS = {
    "today": 0, "tomorrow": 1, "yesterday": -1,
    "dziś": 0, "dzisiaj": 0, "jutro": 1, "wczoraj": -1,
    "dnes": 0, "zítra": 1, "včera": -1,
}

_BARE_NUMBER = re.compile(r"^\d+(?:[.,]\d+)?$")
_DAY_FIRST = re.compile(r"\d\s*\.\s*\d")
_US_DATE = re.compile(r"^([0-1]?[0-9])\s?/\s?([0-3]?[0-9])$")
_EU_DATE = re.compile(r"^([0-3]?[0-9])\s?\.\s?([0-1]?[0-9])\.?$")
# days that exist in every year, so replacing the year never fails
_GENERIC_DEFAULTS = (datetime(2000, 1, 1), datetime(2000, 2, 2))
_LEAP_DAY = re.compile(
    r"^29\s?(?:th)?\s*feb(?:ruary)?\b|\bfeb(?:ruary)?\s*29\s?(?:th)?$",
    re.IGNORECASE,
)


def reference_date(month: int, day: int) -> Optional[date]:
    """Return the date in the reference leap year, or None if it doesn't exist."""
    try:
        return date(REFERENCE_YEAR, month, day)
    except (ValueError, TypeError):
        return None


def _month_day(month: int, day: int) -> Optional[MonthDay]:
    d = reference_date(month, day)
    return (d.month, d.day) if d else None


def parse_generic(text: str, today: date) -> Optional[MonthDay]:
    """Parse ordinary date text ("1 June", "June 1", "today") in the current year.

    A missing year defaults to the year of `today`, so "29 Feb" only parses
    here when that year is a leap year.
    """
    value = text.strip()
    if not value:
        return None

    offset = RELATIVE_DAYS.get(value.lower())
    if offset is not None:
        d = today + timedelta(days=offset)
        return d.month, d.day

    # "15" or "1.6" would come back as a day of January; leave those to the numeric forms
    if _BARE_NUMBER.match(value):
        return None

    dayfirst = bool(_DAY_FIRST.search(value))
    results = set()
    # fields missing from the text are filled from the default, so parse against
    # two defaults and only accept a month and day that came from the text
    for default in _GENERIC_DEFAULTS:
        try:
            parsed = dateutil_parser.parse(value, default=default.replace(year=today.year), dayfirst=dayfirst)
        except (ValueError, OverflowError) as e:
            logging.debug("Generic date parse rejected %r: %s", value, e)
            return None
        results.add((parsed.month, parsed.day))
    if len(results) != 1:
        logging.debug("No complete date in %r", value)
        return None
    return _month_day(*results.pop())


def parse_us_numeric(text: str, today: date) -> Optional[MonthDay]:
    """US "month/day", e.g. "6/1" is June 1."""
    m = _US_DATE.match(text.strip())
    if not m:
        return None
    return _month_day(int(m.group(1)), int(m.group(2)))


def parse_eu_numeric(text: str, today: date) -> Optional[MonthDay]:
    """Central-European "day.month", e.g. "1.6" is June 1."""
    m = _EU_DATE.match(text.strip())
    if not m:
        return None
    return _month_day(int(m.group(2)), int(m.group(1)))


def parse_local_month_names(text: str, today: date) -> Optional[MonthDay]:
    """Rewrite Polish/Czech month words to English and retry the generic parser."""
    rewritten = replace_month_words(text)
    if rewritten == text:
        return None
    return parse_generic(rewritten, today)


def parse_leap_day(text: str, today: date) -> Optional[MonthDay]:
    """Leap day ("29 Feb", "Feb 29th") whether or not the current year has one."""
    if _LEAP_DAY.search(replace_month_words(text).strip()):
        return 2, 29
    return None


DATE_FORMS: Tuple[DateForm, ...] = (
    parse_generic,
    parse_us_numeric,
    parse_eu_numeric,
    parse_local_month_names,
    parse_leap_day,
)


def normalize_date(text: str, today: Optional[date] = None) -> Optional[MonthDay]:
    """Return (month, day) valid in the reference leap year, or None if no form matched."""
    if not text:
        return None
    today = today or date.today()
    for form in DATE_FORMS:
        result = form(text, today)
        if result:
            logging.debug("Date %r parsed by %s as %s", text, form.__name__, result)
            return result
    return None


def day_of_year(month: int, day: int) -> int:
    """Position of (month, day) in the 366-day reference year."""
    d = reference_date(month, day)
    if d is None:
        raise ValueError(f"Invalid month/day: {month}/{day}")
    return d.timetuple().tm_yday


def day_label(yday: int) -> str:
    """Format a day of the reference year as "D Mon", e.g. 153 -> "1 Jun"."""
    if not 1 <= yday <= 366:
        raise ValueError(f"Day of year out of range: {yday}")
    d = date(REFERENCE_YEAR, 1, 1) + timedelta(days=yday - 1)
    return f"{d.day} {d.strftime('%b')}"
