#!/usr/bin/env python3
"""
lookup.py
---------
Query the canonical record set by week.

Callers reduce "now" to a calendar date with their own clock, then ask
for the week containing it. A missing week is a normal outcome and is
returned as None.

Usage:
    calendar = ThemeCalendar.from_file(THEMES_JSON)
    record = calendar.current(local_today())
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Optional

from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.pipeline.export_json import load_records
from weekthemes.utils.weeks import monday_of, next_monday_from


class ThemeCalendar:
    """Read-only index of records by date."""

    def __init__(self, records: Iterable[ThemeRecord]) -> None:
        self._by_date: Dict[date, ThemeRecord] = {r.date: r for r in records}

    @classmethod
    def from_file(cls, path: Path) -> ThemeCalendar:
        return cls(load_records(path))

    def __len__(self) -> int:
        return len(self._by_date)

    def find_by_date(self, key: date) -> Optional[ThemeRecord]:
        """Exact-date match."""
        return self._by_date.get(key)

    def find_by_iso(self, key: str) -> Optional[ThemeRecord]:
        """Exact match on a YYYY-MM-DD key; malformed keys match nothing."""
        try:
            return self.find_by_date(date.fromisoformat(key))
        except ValueError:
            return None

    def for_week_of(self, day: date) -> Optional[ThemeRecord]:
        """Theme of the week containing `day`."""
        return self.find_by_date(monday_of(day))

    def current(self, today: date) -> Optional[ThemeRecord]:
        return self.for_week_of(today)

    def upcoming(self, today: date) -> Optional[ThemeRecord]:
        """Theme of the first Monday after `today`."""
        return self.find_by_date(next_monday_from(today))
