"""
Lookup Commands
---------------

Commands:
    - show: Current and next Monday themes, or the theme for any date

Dates come from the local wall clock; the week of a --date is the
Monday-to-Sunday week containing it.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import click

from weekthemes.core.cli import parse_iso_date
from weekthemes.core.config import load_settings
from weekthemes.core.logging_manager import ThemesLogger, handle_cli_error
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.pipeline.lookup import ThemeCalendar
from weekthemes.utils.text import format_long_date
from weekthemes.utils.weeks import local_today


def _render(label: str, record: Optional[ThemeRecord]) -> None:
    if record is None:
        click.echo(f"{label}\n  No theme found.")
        return
    click.echo(f"{label}: {format_long_date(record.date)}\n  {record.theme}")


@click.command()
@click.option(
    "--themes",
    type=click.Path(dir_okay=False),
    help="Record set to read (default: public/themes.json)",
)
@click.option(
    "--date",
    "on_date",
    callback=parse_iso_date,
    help="Show the theme of the week containing this date (YYYY-MM-DD)",
)
@click.pass_context
def show(ctx: click.Context, themes: Optional[str], on_date: Optional[date]) -> None:
    """
    Show the current and next Monday themes.
    """
    logger: ThemesLogger = ctx.obj["logger"]

    try:
        path = Path(themes) if themes else load_settings(ctx.obj.get("config_path")).output_path
        calendar = ThemeCalendar.from_file(path)
        logger.log_debug("Loaded record set", {"path": str(path), "records": len(calendar)})

        if on_date is not None:
            _render("Selected date (its Monday)", calendar.for_week_of(on_date))
            return

        today = local_today()
        _render("Current Monday", calendar.current(today))
        _render("Next Monday", calendar.upcoming(today))

    except Exception as e:
        handle_cli_error(ctx, e, "show", additional_context={"themes": themes})


__all__ = ["show"]
