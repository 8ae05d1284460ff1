"""Command-line interface loop for the to-do list.

Each line read from the user maps to exactly one TaskList operation. The
list lives in memory; it is written back on quit (or after every change
when autosave is enabled).
"""
import logging
from typing import Callable, Dict, Optional

import click

from errors import StorageError, TaskNotFoundError
from storage import Storage
from task_list import TaskList
from theme import color, ERROR_COLOR, HEADER_COLOR, BOLD

logger = logging.getLogger(__name__)

PROMPT = 'todo>'

# the numeric choices of the classic menu are kept as aliases
COMMAND_ALIASES = {
    '1': 'add',
    'add': 'add',
    '2': 'list',
    'list': 'list',
    'ls': 'list',
    '3': 'complete',
    'complete': 'complete',
    'done': 'complete',
    '4': 'delete',
    'delete': 'delete',
    'rm': 'delete',
    '5': 'quit',
    'quit': 'quit',
    'exit': 'quit',
    'help': 'help',
    '?': 'help',
}


class QuitLoop(Exception):
    """Raised by the quit command to leave the loop."""


class CLI:
    def __init__(self, task_list: TaskList, storage: Storage, autosave: bool = False):
        self.task_list: TaskList = task_list
        self.storage: Storage = storage
        self.autosave: bool = autosave
        self._handlers: Dict[str, Callable[[str], None]] = {
            'add': self._cmd_add,
            'list': self._cmd_list,
            'complete': self._cmd_complete,
            'delete': self._cmd_delete,
            'quit': self._cmd_quit,
            'help': self._cmd_help,
        }

    def run(self) -> int:
        """Main REPL loop; only the quit command (or end of input) leaves it.

        End of input and Ctrl-C save like quit so typed work is not lost.
        """
        click.echo(color('Welcome to your To-Do List Manager!', HEADER_COLOR, BOLD))
        self._help()
        while True:
            try:
                line = click.prompt(PROMPT, default='', show_default=False, prompt_suffix=' ')
            except (click.Abort, EOFError, KeyboardInterrupt):
                click.echo()
                logger.info('input closed, saving before exit')
                self._save_and_quit()
                return 0
            try:
                self.handle_line(line)
            except QuitLoop:
                return 0

    # -------------------- command dispatch --------------------
    def handle_line(self, line: str) -> None:
        parts = line.strip().split(None, 1)
        if not parts:
            return
        command = COMMAND_ALIASES.get(parts[0].lower())
        if command is None:
            logger.debug('unknown command %r', parts[0])
            click.echo("Invalid choice. Type 'help' for commands.")
            return
        # rest of the line after the command word, spacing kept as typed
        self._handlers[command](parts[1] if len(parts) > 1 else '')

    # ---- individual command helpers ----
    def _cmd_add(self, rest: str) -> None:
        if rest:  # inline shorthand
            description = rest
        else:
            description = self._ask('Enter task description:')
            if description is None:
                return
        if not description.strip():
            click.echo('Description required.')
            return
        self.task_list.add(description)
        click.echo('Task added.')
        self._autosave()

    def _cmd_list(self, rest: str) -> None:
        for line in self.task_list.render():
            click.echo(line)
        if self.task_list:
            click.echo(str(self.task_list))

    def _cmd_complete(self, rest: str) -> None:
        position = self._position(rest, 'Enter task number to mark complete:')
        if position is None:
            return
        try:
            self.task_list.mark_complete(position)
        except TaskNotFoundError as exc:
            self._error(str(exc))
            return
        click.echo(f'Task {position} marked as complete.')
        self._autosave()

    def _cmd_delete(self, rest: str) -> None:
        position = self._position(rest, 'Enter task number to delete:')
        if position is None:
            return
        try:
            self.task_list.delete(position)
        except TaskNotFoundError as exc:
            self._error(str(exc))
            return
        click.echo(f'Task {position} deleted.')
        self._autosave()

    def _cmd_quit(self, rest: str) -> None:
        self._save_and_quit()
        raise QuitLoop()

    def _cmd_help(self, rest: str) -> None:
        self._help()

    # -------------------- helpers --------------------
    def _help(self) -> None:
        click.echo("Commands:")
        click.echo("  add [text...]     (1) Add a new task (prompts when no text given)")
        click.echo("  list              (2) List all tasks")
        click.echo("  complete [n]      (3) Mark task n as complete")
        click.echo("  delete [n]        (4) Delete task n")
        click.echo("  quit              (5) Save and quit")
        click.echo("  help                  Show this help")

    def _ask(self, text: str) -> Optional[str]:
        try:
            return click.prompt(text, default='', show_default=False, prompt_suffix=' ')
        except (click.Abort, EOFError):
            click.echo()
            return None

    def _position(self, rest: str, question: str) -> Optional[int]:
        raw = rest if rest else self._ask(question)
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            click.echo('Invalid number.')
            return None

    def _error(self, message: str) -> None:
        click.echo(color(f'Error: {message}', ERROR_COLOR))

    def _autosave(self) -> None:
        if not self.autosave:
            return
        try:
            self.storage.save(self.task_list)
        except StorageError as exc:
            self._error(str(exc))

    def _save_and_quit(self) -> None:
        click.echo('Saving tasks and quitting...')
        try:
            self.storage.save(self.task_list)
        except StorageError as exc:
            self._error(str(exc))
