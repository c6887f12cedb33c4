#!/usr/bin/env python3
"""
weekthemes CLI
--------------

Command-line interface for the weekly theme calendar.

Commands:
    - build: Scrape the theme list page into themes.json
    - parse: Parse a local text file and print its records
    - show: Current/next week themes, or the theme for a date
    - notify: Schedule this week's push notification

Usage:
    weekthemes build --debug
    weekthemes parse article.txt
    weekthemes show --date 2025-09-03
    weekthemes notify --dry-run
"""
from __future__ import annotations

import click
from pathlib import Path

from weekthemes.core.cli import setup_logger
from weekthemes.core.paths import LOG_DIR


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML settings file (default: weekthemes.yaml in the project root)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, config_path: str, verbose: bool) -> None:
    """Weekly theme calendar tools"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["logger"] = setup_logger(Path(log_dir), ctx.invoked_subcommand or "cli")


# Import and register commands from submodules
from .ingest import build, parse
from .lookup import show
from .notify import notify

cli.add_command(build)
cli.add_command(parse)
cli.add_command(show)
cli.add_command(notify)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
