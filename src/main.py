"""Main entry point for the to-do list.

Builds the one controller for the session and hands it to the chosen
front-end. Nothing is loaded or saved.
"""
import logging
from typing import Optional

import click

from logging_setup import setup_logging
from settings import UI_CHOICES, get_settings
from tasklist import TaskListController

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--ui", type=click.Choice(UI_CHOICES), default=None,
              help="Front-end to start (default: TODO_UI or tui).")
@click.option("--alt-screen/--no-alt-screen", default=None,
              help="Use the terminal's alternate screen buffer (tui only).")
@click.option("--log-level", default=None, help="Console log level (default: TODO_LOG_LEVEL or WARNING).")
def main(ui: Optional[str], alt_screen: Optional[bool], log_level: Optional[str]) -> None:
    """Manage a personal to-do list for this session."""
    settings = get_settings()
    setup_logging(console_level=log_level or settings.log_level, log_dir=settings.log_dir)
    ui = ui or settings.ui
    controller = TaskListController()
    logger.info("starting %s front-end", ui)
    if ui == "gui":
        import gui  # tkinter is only needed for the window
        gui.run(controller, settings.window_size)
    else:
        from cli import CLI
        CLI(controller, alt_screen=settings.alt_screen if alt_screen is None else alt_screen).run()


if __name__ == "__main__":
    main()
