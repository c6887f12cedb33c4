"""
test_record_builder.py
----------------------
Unit tests for weekthemes.builders.record_builder.

Tests deduplication, ordering and the ThemeSetBuilder statistics.
"""
import random
from datetime import date, timedelta
from unittest.mock import MagicMock

from weekthemes.builders.record_builder import (
    IngestStats,
    ThemeSetBuilder,
    build_records,
)
from weekthemes.core.logging_manager import ThemesLogger
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.parsing.line_parser import Candidate


class TestBuildRecords:
    """Test build_records() deduplication and ordering."""

    def test_later_duplicate_wins(self):
        records = build_records(
            [Candidate(date(2025, 9, 1), "A"), Candidate(date(2025, 9, 1), "B")]
        )
        assert records == (ThemeRecord(date(2025, 9, 1), "B"),)

    def test_sorted_ascending(self):
        records = build_records(
            [
                Candidate(date(2025, 10, 6), "Trains"),
                Candidate(date(2025, 6, 5), "Cover"),
                Candidate(date(2025, 9, 1), "Cover art"),
            ]
        )
        assert [r.iso_date for r in records] == ["2025-06-05", "2025-09-01", "2025-10-06"]

    def test_any_input_order_is_sorted_and_unique(self):
        candidates = [
            Candidate(date(2025, 1, 6) + timedelta(weeks=i % 10), f"T{i}")
            for i in range(40)
        ]
        rng = random.Random(7)
        for _ in range(5):
            rng.shuffle(candidates)
            records = build_records(candidates)
            dates = [r.date for r in records]
            assert dates == sorted(dates)
            assert len(dates) == len(set(dates)) == 10

    def test_deterministic(self):
        candidates = [Candidate(date(2025, 9, 1), "A"), Candidate(date(2025, 9, 8), "B")]
        assert build_records(candidates) == build_records(list(candidates))

    def test_empty(self):
        assert build_records([]) == ()


class TestThemeSetBuilder:
    """Test the ThemeSetBuilder end to end over article lines."""

    def test_records(self, article_lines):
        builder = ThemeSetBuilder(article_lines)
        builder.build()
        assert builder.to_dicts() == [
            {"date": "2025-06-15", "theme": "Cover"},
            {"date": "2025-09-01", "theme": "Cover art"},
            {"date": "2025-09-08", "theme": "Love"},
            {"date": "2025-09-22", "theme": "Poison"},
            {"date": "2025-10-06", "theme": "Trains"},
            {"date": "2025-10-13", "theme": "Islands"},
            {"date": "2025-10-20", "theme": "Still October"},
        ]

    def test_stats(self, article_lines):
        stats = ThemeSetBuilder(article_lines + ["October 2025", "6th: Boats"]).build()
        assert isinstance(stats, IngestStats)
        assert stats.headers == 3
        assert stats.candidates == 8
        assert stats.records == 7
        assert stats.duplicates == 1
        assert stats.skipped == 2
        assert "7 records" in stats.summary()

    def test_correction_later_in_document(self, article_lines):
        builder = ThemeSetBuilder(article_lines + ["October 2025", "6th: Boats"])
        builder.build()
        by_date = {r.date: r.theme for r in builder.records}
        assert by_date[date(2025, 10, 6)] == "Boats"

    def test_keeps_parse_result(self, article_lines):
        builder = ThemeSetBuilder(article_lines)
        builder.build()
        assert builder.parse_result is not None
        assert len(builder.parse_result.skipped) == 2

    def test_verbose_logs_skipped_lines(self, article_lines):
        logger = MagicMock(spec=ThemesLogger)
        ThemeSetBuilder(article_lines, verbose=True, logger=logger).build()
        skipped_calls = [
            c for c in logger.log_debug.call_args_list if c.args[0] == "Skipped line"
        ]
        assert len(skipped_calls) == 2
        logger.log_operation.assert_called_once()

    def test_warns_when_empty(self):
        logger = MagicMock(spec=ThemesLogger)
        ThemeSetBuilder(["nothing here"], logger=logger).build()
        logger.log_warning.assert_called_once()

    def test_works_without_logger(self):
        stats = ThemeSetBuilder(["13th – Love"]).build()
        assert stats.records == 0
