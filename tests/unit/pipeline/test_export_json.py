#!/usr/bin/env python3
"""
test_export_json.py
-------------------
Tests for reading and writing the themes.json record set.

Tests cover:
    - JSON shape and ordering
    - Atomic replacement of an existing file
    - Loading, including missing and malformed files

Usage:
    python -m pytest tests/unit/pipeline/test_export_json.py -v
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from datetime import date
from unittest.mock import MagicMock, patch

# --- Third-party imports ---
import pytest

# --- Local imports ---
from weekthemes.core.exceptions import ExportError
from weekthemes.core.logging_manager import ThemesLogger
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.pipeline.export_json import load_records, write_records


class TestWriteRecords:
    """Tests for write_records()."""

    def test_json_shape(self, tmp_dir, sample_records):
        path = tmp_dir / "public" / "themes.json"
        count = write_records(sample_records, path)

        assert count == 3
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0] == {"date": "2025-09-01", "theme": "Cover art"}
        assert [item["date"] for item in data] == sorted(item["date"] for item in data)

    def test_non_ascii_written_verbatim(self, tmp_dir):
        path = tmp_dir / "themes.json"
        write_records([ThemeRecord(date(2025, 9, 1), "Café “noir”")], path)
        assert "Café “noir”" in path.read_text(encoding="utf-8")

    def test_replaces_existing_file(self, themes_file):
        write_records([ThemeRecord(date(2026, 1, 5), "New")], themes_file)
        assert json.loads(themes_file.read_text(encoding="utf-8")) == [
            {"date": "2026-01-05", "theme": "New"}
        ]

    def test_no_temp_files_left(self, tmp_dir, sample_records):
        write_records(sample_records, tmp_dir / "themes.json")
        assert [p.name for p in tmp_dir.iterdir()] == ["themes.json"]

    def test_failed_write_keeps_old_file(self, themes_file):
        before = themes_file.read_text(encoding="utf-8")
        with patch("weekthemes.pipeline.export_json.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(ExportError, match="disk full"):
                write_records([ThemeRecord(date(2026, 1, 5), "New")], themes_file)

        assert themes_file.read_text(encoding="utf-8") == before
        assert [p.name for p in themes_file.parent.iterdir()] == ["themes.json"]

    def test_logs_operation(self, tmp_dir, sample_records):
        logger = MagicMock(spec=ThemesLogger)
        write_records(sample_records, tmp_dir / "themes.json", logger=logger)
        logger.log_operation.assert_called_once()


class TestLoadRecords:
    """Tests for load_records()."""

    def test_round_trip(self, themes_file, sample_records):
        assert load_records(themes_file) == sample_records

    def test_missing_file_is_empty(self, tmp_dir):
        assert load_records(tmp_dir / "nope.json") == ()

    def test_invalid_json(self, tmp_dir):
        path = tmp_dir / "themes.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ExportError):
            load_records(path)

    def test_not_an_array(self, tmp_dir):
        path = tmp_dir / "themes.json"
        path.write_text('{"date": "2025-09-01"}', encoding="utf-8")
        with pytest.raises(ExportError, match="array"):
            load_records(path)

    def test_invalid_record(self, tmp_dir):
        path = tmp_dir / "themes.json"
        path.write_text('[{"date": "someday", "theme": "x"}]', encoding="utf-8")
        with pytest.raises(ExportError, match="Invalid record"):
            load_records(path)
