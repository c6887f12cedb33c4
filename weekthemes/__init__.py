"""
weekthemes
==========

Weekly theme calendar scraped from a hand-maintained article.

The theme list is published as loose lines grouped under month headers.
This package parses it into a date-keyed record set (themes.json) and
answers "what is the theme this week?" for viewers and the push notifier.

Main Components:
    - parsing: Line classifier and date parser over month headers
    - builders: Deduplicate and sort parsed entries into records
    - utils: Line normalizer and week alignment (Monday of a date)
    - pipeline: Fetch, JSON persistence, lookup, notification and CLI
    - core: Logging, exceptions, paths, settings

Example Usage:
    >>> from datetime import date
    >>> from weekthemes import ThemeCalendar, THEMES_JSON
    >>> calendar = ThemeCalendar.from_file(THEMES_JSON)
    >>> calendar.for_week_of(date(2025, 9, 3))
"""

__version__ = "1.0.0"

# Expose primary interfaces for convenience
from weekthemes.core.paths import LOG_DIR, THEMES_JSON
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.pipeline.lookup import ThemeCalendar
from weekthemes.utils.weeks import monday_of, next_monday_from

__all__ = [
    "LOG_DIR",
    "THEMES_JSON",
    "ThemeCalendar",
    "ThemeRecord",
    "monday_of",
    "next_monday_from",
]
