"""
test_lookup.py
--------------
Tests for ThemeCalendar week lookups.
"""
from datetime import date, datetime

import pytest

from weekthemes.pipeline.lookup import ThemeCalendar


@pytest.fixture
def calendar(sample_records):
    return ThemeCalendar(sample_records)


class TestThemeCalendar:
    """Tests for ThemeCalendar."""

    def test_exact_match(self, calendar):
        assert calendar.find_by_date(date(2025, 9, 1)).theme == "Cover art"

    def test_no_record_is_none(self, calendar):
        assert calendar.find_by_date(date(2025, 9, 2)) is None

    def test_iso_lookup(self, calendar):
        assert calendar.find_by_iso("2025-09-08").theme == "Love"
        assert calendar.find_by_iso("not-a-date") is None

    def test_week_of_sunday(self, calendar):
        assert calendar.for_week_of(date(2025, 9, 14)).theme == "Love"

    def test_week_of_monday(self, calendar):
        assert calendar.for_week_of(date(2025, 9, 15)).theme == "Poison"

    def test_current_and_upcoming(self, calendar):
        today = date(2025, 9, 3)
        assert calendar.current(today).theme == "Cover art"
        assert calendar.upcoming(today).theme == "Love"

    def test_upcoming_on_monday_is_next_week(self, calendar):
        monday = date(2025, 9, 8)
        assert calendar.current(monday).theme == "Love"
        assert calendar.upcoming(monday).theme == "Poison"

    def test_outside_range(self, calendar):
        assert calendar.current(date(2026, 1, 7)) is None
        assert calendar.upcoming(date(2025, 9, 17)) is None

    def test_rejects_timestamp(self, calendar):
        with pytest.raises(TypeError):
            calendar.for_week_of(datetime(2025, 9, 3, 9, 0))

    def test_from_file(self, themes_file):
        assert len(ThemeCalendar.from_file(themes_file)) == 3

    def test_from_missing_file(self, tmp_dir):
        calendar = ThemeCalendar.from_file(tmp_dir / "themes.json")
        assert len(calendar) == 0
        assert calendar.current(date(2025, 9, 3)) is None
