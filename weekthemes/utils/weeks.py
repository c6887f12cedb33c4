#!/usr/bin/env python3
"""
weeks.py
-------------------
Week alignment for theme lookups.

Themes are keyed by the Monday that starts their week. Both the viewer
commands and the notifier turn "now" into a calendar date first, each
with its own clock, and then share these functions:

    local_today() -> viewer's wall-clock date   (show)
    utc_today()   -> scheduler's UTC date       (notify)

The alignment functions only accept datetime.date; a datetime raises
TypeError and must be reduced with one of the clocks above first.

Functions:
    monday_of: Monday starting the week containing a date (idempotent)
    next_monday_from: First Monday strictly after a date
    week_key: ISO string of monday_of(), the record set lookup key
    local_today: Calendar date on the local wall clock
    utc_today: Calendar date in UTC
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def _require_calendar_date(value: date) -> None:
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(
            f"expected a calendar date, got {type(value).__name__}; "
            "reduce timestamps with local_today()/utc_today() or .date() first"
        )


def monday_of(value: date) -> date:
    """
    Return the Monday of the week containing `value`.

    Weeks run Monday to Sunday, so a Sunday maps 6 days back and a
    Monday maps to itself.

    Examples:
        >>> monday_of(date(2025, 9, 7))   # Sunday
        datetime.date(2025, 9, 1)
        >>> monday_of(date(2025, 9, 1))   # Monday
        datetime.date(2025, 9, 1)
    """
    _require_calendar_date(value)
    # Sunday=0 .. Saturday=6
    weekday = value.isoweekday() % 7
    back = 6 if weekday == 0 else weekday - 1
    return value - timedelta(days=back)


def next_monday_from(value: date) -> date:
    """
    Return the first Monday strictly after `value`.

    On a Monday this is the following Monday, 7 days later, unlike
    monday_of() which returns its input.

    Examples:
        >>> next_monday_from(date(2025, 9, 3))   # Wednesday
        datetime.date(2025, 9, 8)
        >>> next_monday_from(date(2025, 9, 1))   # Monday
        datetime.date(2025, 9, 8)
    """
    _require_calendar_date(value)
    return value + timedelta(days=7 - value.weekday())


def week_key(value: date) -> str:
    """ISO date string of the Monday starting `value`'s week."""
    return monday_of(value).isoformat()


def local_today(now: Optional[datetime] = None) -> date:
    """Calendar date of `now` (default: current time) on the local clock."""
    now = now if now is not None else datetime.now()
    if now.tzinfo is not None:
        now = now.astimezone()
    return now.date()


def utc_today(now: Optional[datetime] = None) -> date:
    """
    Calendar date of `now` (default: current time) in UTC.

    Naive datetimes are taken to be local time, as datetime does.
    """
    now = now if now is not None else datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).date()
