#!/usr/bin/env python3
"""
record_builder.py
-------------------
Build the canonical record set from article lines.

Handles:
- Normalizing and parsing lines (see weekthemes.parsing)
- Deduplicating candidates by date, later entries winning
- Sorting records by date

The source article sometimes repeats a date further down to correct an
earlier entry, so the last occurrence in document order is kept.

Usage:
    builder = ThemeSetBuilder(lines, logger=logger)
    stats = builder.build()
    records = builder.records
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from weekthemes.builders.base import BaseBuilder, BuilderStats
from weekthemes.core.logging_manager import ThemesLogger
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.parsing.line_parser import (
    Candidate,
    ParseResult,
    ParseState,
    parse_lines,
)


def build_records(candidates: Iterable[Candidate]) -> Tuple[ThemeRecord, ...]:
    """
    Deduplicate candidates by date and sort them.

    Args:
        candidates: (date, theme) pairs in document order

    Returns:
        Records sorted ascending by date, one per date; for repeated dates
        the theme of the last candidate is kept
    """
    by_date: Dict = {}
    for entry_date, theme in candidates:
        by_date[entry_date] = theme

    return tuple(
        ThemeRecord(date=entry_date, theme=theme)
        for entry_date, theme in sorted(by_date.items())
    )


class IngestStats(BuilderStats):
    """Track one ingestion run."""

    def __init__(self) -> None:
        super().__init__()
        self.lines_seen: int = 0
        self.headers: int = 0
        self.candidates: int = 0
        self.skipped: int = 0
        self.duplicates: int = 0
        self.records: int = 0

    def summary(self) -> str:
        return (
            f"{self.lines_seen} lines, "
            f"{self.headers} month headers, "
            f"{self.candidates} dated entries, "
            f"{self.skipped} skipped, "
            f"{self.duplicates} duplicates replaced, "
            f"{self.records} records in {self.duration():.2f}s"
        )


class ThemeSetBuilder(BaseBuilder):
    """
    Parse article lines into the canonical record set.

    Attributes:
        lines: Source lines in document order
        verbose: Log every dropped line at DEBUG
        records: Built records (empty until build() runs)
        parse_result: Raw parse output, kept for trace output
    """

    def __init__(
        self,
        lines: Sequence[str],
        verbose: bool = False,
        logger: Optional[ThemesLogger] = None,
    ):
        super().__init__(logger)
        self.lines = list(lines)
        self.verbose = verbose
        self.records: Tuple[ThemeRecord, ...] = ()
        self.parse_result: Optional[ParseResult] = None

    def build(self) -> IngestStats:
        stats = IngestStats()

        result = parse_lines(self.lines, ParseState(), verbose=self.verbose)
        self.parse_result = result

        stats.lines_seen = result.lines_seen
        stats.headers = result.headers
        stats.candidates = len(result.candidates)
        stats.skipped = len(result.skipped)

        if self.verbose:
            for skipped in result.skipped:
                self._log_debug(
                    "Skipped line",
                    {
                        "line_number": skipped.line_number,
                        "reason": skipped.reason.value,
                        "line": skipped.line,
                    },
                )

        self.records = build_records(result.candidates)
        stats.records = len(self.records)
        stats.duplicates = stats.candidates - stats.records

        if not self.records:
            self._log_warning("No theme records found in source lines")

        self._log_operation("build_records", {"summary": stats.summary()})
        return stats

    def to_dicts(self) -> List[Dict[str, str]]:
        return [record.to_dict() for record in self.records]
