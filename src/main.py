"""Main entry point for the terminal to-do list."""
import logging
import sys

import click

from cli import CLI
from config import Settings, parse_log_level
from errors import StorageError
from logging_setup import setup_logging
from storage import Storage

logger = logging.getLogger(__name__)


def _validate_level(ctx: click.Context, param: click.Parameter, value):
    if value is None:
        return None
    try:
        parse_log_level(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return value


@click.command()
@click.option('-f', '--file', 'tasks_file', type=click.Path(dir_okay=False),
              help='Tasks file (default: tasks.txt, env TODO_FILE).')
@click.option('--autosave/--no-autosave', default=None,
              help='Save after every change instead of only on quit (env TODO_AUTOSAVE).')
@click.option('--atomic-save/--no-atomic-save', default=None,
              help='Write via a temp file and rename (env TODO_ATOMIC_SAVE).')
@click.option('--log-level', callback=_validate_level,
              help='Diagnostic log level on stderr (default: WARNING, env TODO_LOG_LEVEL).')
@click.option('--log-file', type=click.Path(dir_okay=False),
              help='Also write DEBUG logs to this file (env TODO_LOG_FILE).')
def main(tasks_file, autosave, atomic_save, log_level, log_file):
    """Interactive to-do list stored in a plain text file."""
    try:
        settings = Settings.from_env(
            tasks_file=tasks_file, autosave=autosave, atomic_save=atomic_save,
            log_level=log_level, log_file=log_file,
        )
        level = settings.level
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(console_level=level, log_file=settings.log_file)
    logger.debug('settings: %s', settings)

    storage = Storage(settings.tasks_file, atomic=settings.atomic_save)
    fresh = not storage.path.exists()
    try:
        task_list = storage.load()
    except StorageError as exc:
        raise click.ClickException(str(exc)) from exc
    if fresh:
        click.echo('No existing task file found. Starting fresh.')
    else:
        click.echo(f'Tasks loaded from {storage.path}.')
    cli = CLI(task_list, storage, autosave=settings.autosave)
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
