"""Exceptions raised by the task list and its storage layer."""
from pathlib import Path
from typing import Union


class TodoError(Exception):
    """Base class for every error the to-do core raises."""


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f'Task {position} not found.')


class StorageError(TodoError):
    """The tasks file could not be opened, read or written."""

    def __init__(self, path: Union[str, Path], reason: str = '', action: str = 'writing'):
        self.path = Path(path)
        self.reason = reason
        self.action = action
        message = f'Could not open file {self.path} for {action}.'
        if reason:
            message = f'{message} ({reason})'
        super().__init__(message)
