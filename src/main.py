"""Main entry point for the terminal reminder board.

Nothing is saved: every run starts with empty lists and default titles.
"""
import logging
import sys
from typing import Optional

import click

from board import ReminderBoard
from cli import CLI
from config import LOG_LEVELS, Settings
from models import BackgroundColor
from view import BoardView


def _color_choice(ctx, param, value: Optional[str]) -> Optional[BackgroundColor]:
    if value is None:
        return None
    parsed = BackgroundColor.from_str(value)
    if parsed is None:
        raise click.BadParameter(
            f"choose one of: {', '.join(c.value for c in BackgroundColor)}")
    return parsed


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-b", "--background", callback=_color_choice, metavar="COLOR",
              help="Initial background color (default from REMINDERS_BACKGROUND or White).")
@click.option("--alt-screen/--no-alt-screen", default=None,
              help="Draw in the terminal's alternate screen buffer.")
@click.option("--log-level", default=None,
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level (logs go to stderr).")
def main(background: Optional[BackgroundColor], alt_screen: Optional[bool], log_level: Optional[str]) -> None:
    """Keep short reminders in School, Work, Home and Miscellaneous lists."""
    settings = Settings.load()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    board = ReminderBoard(background=background or settings.background)
    view = BoardView(board)
    CLI(board, view, alt_screen=settings.alt_screen if alt_screen is None else alt_screen).run()


if __name__ == "__main__":
    main()
