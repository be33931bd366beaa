"""Loader: build the name and day indices from the per-country name-day files.

File format: 366 lines, one per day of a leap year. Each line holds names
separated by whitespace. Variant or inflected forms may follow a vertical bar
(``|``); they can be searched for but are not shown when listing a day.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple
import logging

from .dates import day_label, day_of_year, reference_date

COUNTRIES = ("Czech Republic", "Hungary", "Poland")
DAYS_IN_YEAR = 366

Celebration = Tuple[str, int]


class LoadError(Exception):
    """A dataset is missing or malformed, so no calendar can be built."""


@dataclass(frozen=True)
class DayEntry:
    display_names: Tuple[str, ...] = ()
    search_names: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class CelebrationRecord:
    country: str
    days: Tuple[DayEntry, ...]

    def entry(self, yday: int) -> DayEntry:
        return self.days[yday - 1]


@dataclass(frozen=True)
class NameDayCalendar:
    """Read-only lookup context built once by `load_calendar`."""

    records: Tuple[CelebrationRecord, ...]
    name_index: Mapping[str, Tuple[Celebration, ...]]
    day_index: Mapping[int, str]
    name_answers: Mapping[str, str]

    def lookup_name(self, name: str) -> Optional[str]:
        """Return "Country: D Mon, D Mon; ..." for a name, case-insensitively."""
        if not name:
            return None
        return self.name_answers.get(name.strip().lower())

    def lookup_day(self, month: int, day: int) -> Optional[str]:
        """Return "Country: Name1; Name2; ..." for a date, "" for a day without names."""
        if reference_date(month, day) is None:
            return None
        return self.day_index[day_of_year(month, day)]


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # a trailing newline ends the last line rather than starting a new one
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_line(line: str) -> DayEntry:
    line = line.strip()
    display, _, variants = line.partition("|")
    return DayEntry(
        display_names=tuple(display.split()),
        search_names=frozenset(name.lower() for name in (display + " " + variants).split()),
    )


def parse_dataset(country: str, text: str) -> CelebrationRecord:
    """Parse one country's file contents; raises LoadError unless it has 366 lines."""
    lines = _split_lines(text or "")
    if len(lines) != DAYS_IN_YEAR:
        raise LoadError(
            f"The name days file for {country} must include {DAYS_IN_YEAR} lines, found {len(lines)}"
        )
    return CelebrationRecord(country=country, days=tuple(parse_line(line) for line in lines))


def _build_name_index(records: Iterable[CelebrationRecord]) -> Dict[str, List[Celebration]]:
    index: Dict[str, List[Celebration]] = {}
    for record in records:
        for yday, entry in enumerate(record.days, start=1):
            for name in entry.search_names:
                index.setdefault(name, []).append((record.country, yday))
    return index


def _build_day_index(records: Tuple[CelebrationRecord, ...]) -> Dict[int, str]:
    index: Dict[int, str] = {}
    for yday in range(1, DAYS_IN_YEAR + 1):
        parts = []
        for record in records:
            names = record.entry(yday).display_names
            if names:
                parts.append(f"{record.country}: {'; '.join(names)}")
        index[yday] = "; ".join(parts)
    return index


def format_name_answer(celebrations: Iterable[Celebration]) -> str:
    """Group (country, day) pairs into "Country1: D Mon, D Mon; Country2: D Mon"."""
    by_country: Dict[str, List[str]] = {}
    for country, yday in celebrations:
        if country not in COUNTRIES or not 1 <= yday <= DAYS_IN_YEAR:
            raise LoadError(f"Internal error: invalid celebration {country!r}, day {yday}")
        by_country.setdefault(country, []).append(day_label(yday))
    return "; ".join(f"{country}: {', '.join(by_country[country])}" for country in sorted(by_country))


def build_calendar(records: Tuple[CelebrationRecord, ...]) -> NameDayCalendar:
    name_index = _build_name_index(records)
    day_index = _build_day_index(records)
    name_answers = {name: format_name_answer(pairs) for name, pairs in name_index.items()}
    logging.info(
        "Loaded name days for %s: %d searchable names",
        ", ".join(r.country for r in records),
        len(name_answers),
    )
    return NameDayCalendar(
        records=records,
        name_index=MappingProxyType({name: tuple(pairs) for name, pairs in name_index.items()}),
        day_index=MappingProxyType(day_index),
        name_answers=MappingProxyType(name_answers),
    )


def load_calendar(sources: Mapping[str, str]) -> NameDayCalendar:
    """Build a calendar from {country label: file contents} for all three countries."""
    unknown = sorted(set(sources) - set(COUNTRIES))
    if unknown:
        raise LoadError(f"Unknown name days dataset(s): {', '.join(unknown)}")
    missing = [country for country in COUNTRIES if country not in sources]
    if missing:
        raise LoadError(f"Missing name days dataset(s): {', '.join(missing)}")
    records = tuple(parse_dataset(country, sources[country]) for country in COUNTRIES)
    return build_calendar(records)


def load_calendar_from_dir(data_dir) -> NameDayCalendar:
    """Read "<country>.txt" for every country from `data_dir` and build the calendar."""
    data_dir = Path(data_dir).expanduser()
    sources = {}
    for country in COUNTRIES:
        path = data_dir / f"{country}.txt"
        try:
            sources[country] = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read name days file {path}: {e}") from e
    return load_calendar(sources)
