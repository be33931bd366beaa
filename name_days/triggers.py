"""Triggers: recognise "name day"-style phrases and extract the query around them."""
from __future__ import annotations

from datetime import date
from functools import lru_cache
import re
from typing import Iterable, Optional, Tuple

from .loader import NameDayCalendar
from .resolver import get_calendar, resolve
from .settings import load_settings


@lru_cache(maxsize=8)
def _trigger_pattern(triggers: Tuple[str, ...]) -> re.Pattern:
    # longest first so "name days" is not cut down to "name day" + "s"
    ordered = sorted(set(triggers), key=len, reverse=True)
    alternatives = "|".join(r"\s+".join(re.escape(word) for word in t.split()) for t in ordered)
    return re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)


def strip_trigger(text: str, triggers: Optional[Iterable[str]] = None) -> Optional[str]:
    """Return `text` without its trigger phrase, or None if no trigger is present.

    "name day Maria" -> "Maria", "1 June name day" -> "1 June".
    """
    if not text:
        return None
    if triggers is None:
        triggers = load_settings()["triggers"]
    triggers = tuple(t for t in triggers if t and t.strip())
    if not triggers:
        return None
    pattern = _trigger_pattern(triggers)
    if not pattern.search(text):
        return None
    remainder = pattern.sub(" ", text, count=1)
    return " ".join(remainder.split())


def answer(text: str, calendar: Optional[NameDayCalendar] = None, today: Optional[date] = None) -> Optional[str]:
    """Answer raw user input such as "imieniny 9 stycznia"; None when not handled."""
    remainder = strip_trigger(text)
    if remainder is None:
        return None
    return resolve(calendar or get_calendar(), remainder, today=today)
