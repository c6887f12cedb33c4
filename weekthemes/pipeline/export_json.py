#!/usr/bin/env python3
"""
export_json.py
--------------
Read and write the canonical record set as JSON.

The file is a JSON array sorted by date:

    [
      {"date": "2025-09-01", "theme": "Cover art"},
      ...
    ]

Writes go to a temporary file in the target directory which is then
moved over the target, so a reader sees either the previous complete
set or the new one.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Tuple

# --- Local imports ---
from weekthemes.core.exceptions import ExportError, ValidationError
from weekthemes.core.logging_manager import ThemesLogger, safe_logger
from weekthemes.dataclasses.theme_record import ThemeRecord


def write_records(
    records: Iterable[ThemeRecord],
    path: Path,
    logger: Optional[ThemesLogger] = None,
) -> int:
    """
    Atomically replace `path` with the given records.

    Args:
        records: Records, already deduplicated and sorted
        path: Target JSON file; parent directories are created
        logger: Optional logger

    Returns:
        Number of records written

    Raises:
        ExportError: If the file cannot be written
    """
    payload = [record.to_dict() for record in records]
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
                handle.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise ExportError(f"Cannot write {path}: {e}") from e

    safe_logger(logger).log_operation(
        "write_records", {"path": str(path), "records": len(payload)}
    )
    return len(payload)


def load_records(path: Path) -> Tuple[ThemeRecord, ...]:
    """
    Load a record set written by write_records().

    A missing file is an empty record set.

    Raises:
        ExportError: If the file is unreadable, not JSON or not a list of
            valid records
    """
    path = Path(path)
    if not path.exists():
        return ()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ExportError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, list):
        raise ExportError(f"{path} is not a JSON array")

    try:
        return tuple(ThemeRecord.from_dict(item) for item in data)
    except (ValidationError, TypeError) as e:
        raise ExportError(f"Invalid record in {path}: {e}") from e
