#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for weekthemes commands.

Functions:
    setup_logger: Initialize ThemesLogger for CLI operations
    parse_iso_date: Click callback turning YYYY-MM-DD into a date
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from weekthemes.core.logging_manager import ThemesLogger


def setup_logger(log_dir: Path, component_name: str) -> ThemesLogger:
    """
    Setup logging for CLI operations.

    Creates log_dir/operations if needed and returns a ThemesLogger for
    the component.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'build')

    Returns:
        Configured ThemesLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ThemesLogger(operations_log_dir, component_name=component_name)


def parse_iso_date(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[date]:
    """Click callback for YYYY-MM-DD options."""
    del ctx
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param=param)
