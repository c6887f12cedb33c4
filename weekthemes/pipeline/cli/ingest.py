"""
Ingestion Commands
------------------

Commands:
    - build: Fetch the theme list page and write themes.json
    - parse: Parse a local plain-text copy of the article

With --debug both commands print the first raw lines and every
dropped line with the reason it was dropped.
"""
from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import click

from weekthemes.builders.record_builder import ThemeSetBuilder
from weekthemes.core.config import load_settings
from weekthemes.core.logging_manager import ThemesLogger, handle_cli_error
from weekthemes.pipeline.ingest import build_from_lines, ingest
from weekthemes.utils.text import split_lines


def _echo_trace(
    lines: Sequence[str], builder: ThemeSetBuilder, first: int, err: bool = False
) -> None:
    if first > 0:
        click.echo(f"First {min(first, len(lines))} lines:", err=err)
        for line in lines[:first]:
            click.echo(f"  {line}", err=err)

    result = builder.parse_result
    if result is None or not result.skipped:
        return
    click.echo("Skipped lines:", err=err)
    for skipped in result.skipped:
        click.echo(
            f"  [{skipped.reason.value}] line {skipped.line_number}: {skipped.line}",
            err=err,
        )


@click.command()
@click.option("--source", help="Theme list URL (overrides configuration)")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Output JSON file (default: public/themes.json)",
)
@click.option("--debug", is_flag=True, help="Print raw lines and dropped lines")
@click.option("--debug-lines", type=int, default=None, help="Raw lines shown by --debug")
@click.option("--dry-run", is_flag=True, help="Parse without writing the JSON file")
@click.pass_context
def build(
    ctx: click.Context,
    source: Optional[str],
    output: Optional[str],
    debug: bool,
    debug_lines: Optional[int],
    dry_run: bool,
) -> None:
    """
    Scrape the theme list into the published record set.
    """
    logger: ThemesLogger = ctx.obj["logger"]

    try:
        settings = load_settings(ctx.obj.get("config_path"))
        if source:
            settings = replace(settings, source_url=source)
        output_path = Path(output) if output else settings.output_path

        click.echo(f"🔎 Fetching {settings.source_url}...")
        builder, stats = ingest(
            settings,
            output_path=output_path,
            verbose=debug or ctx.obj.get("verbose", False),
            dry_run=dry_run,
            logger=logger,
        )

        if debug:
            _echo_trace(
                builder.lines,
                builder,
                debug_lines if debug_lines is not None else settings.debug_lines,
            )

        if dry_run:
            click.echo(f"\n📝 DRY RUN - {stats.records} records not written")
        else:
            click.echo(f"\n✅ Wrote {stats.records} records to {output_path}")
        click.echo(f"  {stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "build", additional_context={"source": source, "output": output})


@click.command()
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--debug", is_flag=True, help="Print dropped lines with reasons")
@click.pass_context
def parse(ctx: click.Context, text_file: str, debug: bool) -> None:
    """
    Parse a plain-text copy of the article and print records as JSON.
    """
    logger: ThemesLogger = ctx.obj["logger"]

    try:
        lines = split_lines(Path(text_file).read_text(encoding="utf-8"))
        builder, stats = build_from_lines(lines, verbose=debug, logger=logger)

        click.echo(json.dumps(builder.to_dicts(), indent=2, ensure_ascii=False))
        if debug:
            _echo_trace(lines, builder, 0, err=True)
            click.echo(stats.summary(), err=True)

    except Exception as e:
        handle_cli_error(ctx, e, "parse", additional_context={"file": text_file})


__all__ = ["build", "parse"]
