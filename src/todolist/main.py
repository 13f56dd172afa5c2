"""Main entry point for the terminal to-do list.

Initializes settings and logging, loads the task file, then hands the
task list to the interactive menu.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from . import theme
from .cli import CLI
from .config import get_settings
from .errors import StorageError
from .logging_setup import setup_logging
from .store import TaskList

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.command()
@click.option(
    "--file", "tasks_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task file to load and save (default: $TODO_FILE or tasks.txt).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Console log level (default: $TODO_LOG_LEVEL or WARNING).",
)
@click.option("--no-color", is_flag=True, help="Disable colored output.")
def main(tasks_file: Optional[Path], log_level: Optional[str], no_color: bool) -> None:
    """Add, list, complete and delete tasks stored in a flat text file."""
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    setup_logging(
        console_level=getattr(logging, level_name, logging.WARNING),
        log_file=settings.log_file,
    )
    theme.configure(enabled=False if no_color else None)

    path = tasks_file or settings.tasks_file
    logger.info("Starting with task file %s", path)

    click.echo("Welcome to your To-Do List Manager!")
    task_list = TaskList()
    try:
        task_list.load(path)
    except StorageError as e:
        # Starting empty here would overwrite the unreadable file on save.
        raise click.ClickException(str(e)) from e
    if task_list.found_file:
        click.echo(f"Tasks loaded from {path}.")
    else:
        click.echo("No existing task file found. Starting fresh.")

    CLI(task_list, path).run()


if __name__ == "__main__":  # pragma: no cover
    main()
