"""Resolver: answer a query by name first, then by date."""
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional
import logging

from .dates import normalize_date
from .loader import NameDayCalendar, load_calendar_from_dir
from .settings import load_settings


@lru_cache(maxsize=1)
def get_calendar() -> NameDayCalendar:
    """Load the configured datasets once per process. Raises LoadError on bad data."""
    data_dir = load_settings()["data_dir"]
    logging.info("Loading name days from %s", data_dir)
    return load_calendar_from_dir(data_dir)


def resolve(calendar: NameDayCalendar, query: str, today: Optional[date] = None) -> Optional[str]:
    """Return the answer line for `query`, or None when it is neither a known name nor a date.

    A name always wins over a date. For a date without any names the answer is
    the empty string, which is still an answer.
    """
    if not query:
        return None
    text = query.strip()
    if not text:
        return None

    answer = calendar.lookup_name(text)
    if answer is not None:
        return answer

    month_day = normalize_date(text, today=today)
    if month_day is None:
        logging.debug("No name or date recognised in %r", text)
        return None
    return calendar.lookup_day(*month_day)


if __name__ == "__main__":
    # quick local test
    import sys
    q = " ".join(sys.argv[1:])
    if q:
        print(resolve(get_calendar(), q))
    else:
        print("Provide a name or a date to look up")
