"""
Notification Commands
---------------------

Commands:
    - notify: Schedule this week's push notification

Run it on (or just before) Monday. The week is picked with the UTC date
of the machine running it.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from weekthemes.core.config import load_settings
from weekthemes.core.logging_manager import ThemesLogger, handle_cli_error
from weekthemes.pipeline.lookup import ThemeCalendar
from weekthemes.pipeline.notify import notify_this_week
from weekthemes.utils.weeks import utc_today


@click.command()
@click.option(
    "--themes",
    type=click.Path(dir_okay=False),
    help="Record set to read (default: public/themes.json)",
)
@click.option("--dry-run", is_flag=True, help="Print the payload without sending it")
@click.pass_context
def notify(ctx: click.Context, themes: Optional[str], dry_run: bool) -> None:
    """
    Schedule a Monday push with this week's theme.
    """
    logger: ThemesLogger = ctx.obj["logger"]

    try:
        settings = load_settings(ctx.obj.get("config_path"))
        path = Path(themes) if themes else settings.output_path
        calendar = ThemeCalendar.from_file(path)

        outcome = notify_this_week(
            calendar, settings, utc_today(), dry_run=dry_run, logger=logger
        )

        if dry_run:
            click.echo(f"📝 DRY RUN - week of {outcome['week']}")
            click.echo(json.dumps(outcome["payload"], indent=2, ensure_ascii=False))
            return

        click.echo(f"✅ OneSignal scheduled: {outcome['id']}")

    except Exception as e:
        handle_cli_error(ctx, e, "notify", additional_context={"themes": themes})


__all__ = ["notify"]
