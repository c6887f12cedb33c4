#!/usr/bin/env python3
"""
ingest.py
---------
Scrape the theme list page into the published record set.

Pipeline:
    fetch page → extract lines → parse → dedupe/sort → themes.json

Programmatic API:
    from weekthemes.pipeline.ingest import ingest
    builder, stats = ingest(settings, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Sequence, Tuple

# --- Local imports ---
from weekthemes.builders.record_builder import IngestStats, ThemeSetBuilder
from weekthemes.core.config import Settings
from weekthemes.core.logging_manager import ThemesLogger, safe_logger
from weekthemes.pipeline.export_json import write_records
from weekthemes.pipeline.fetch import extract_lines, fetch_html


def build_from_lines(
    lines: Sequence[str],
    verbose: bool = False,
    logger: Optional[ThemesLogger] = None,
) -> Tuple[ThemeSetBuilder, IngestStats]:
    """Parse already extracted lines."""
    builder = ThemeSetBuilder(lines, verbose=verbose, logger=logger)
    stats = builder.build()
    return builder, stats


def ingest(
    settings: Settings,
    output_path: Optional[Path] = None,
    verbose: bool = False,
    dry_run: bool = False,
    logger: Optional[ThemesLogger] = None,
) -> Tuple[ThemeSetBuilder, IngestStats]:
    """
    Fetch, parse and (unless dry_run) publish the record set.

    Args:
        settings: Resolved settings (source URL, user agent, timeout)
        output_path: Target file (defaults to settings.output_path)
        verbose: Log dropped lines and the first raw lines
        dry_run: Skip writing the JSON file
        logger: Optional logger

    Returns:
        The builder (holding records and parse diagnostics) and its stats

    Raises:
        FetchError: If the page cannot be fetched or has no article body
        ExportError: If the record set cannot be written
    """
    log = safe_logger(logger)
    output_path = output_path or settings.output_path

    log.log_info(f"Fetching {settings.source_url}")
    html = fetch_html(settings.source_url, settings.user_agent, settings.timeout)
    lines = extract_lines(html)

    if verbose:
        log.log_debug(
            "First raw lines", {"lines": lines[: settings.debug_lines]}
        )

    builder, stats = build_from_lines(lines, verbose=verbose, logger=logger)

    if not dry_run:
        write_records(builder.records, output_path, logger=logger)

    return builder, stats
