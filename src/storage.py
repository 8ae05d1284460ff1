"""Persistence helpers (load/save) for the task list.

File format: one task per line, "<completed>,<description>\\n", no header.
Only the first comma separates the fields, so descriptions may contain
commas but never newlines. Malformed lines are skipped on load.
"""
import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union

from errors import StorageError
from models import Task
from task_list import TaskList

logger = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.txt')

# integer flag (whitespace and sign allowed), first comma, non-empty remainder
LINE_RE = re.compile(r'^\s*([+-]?\d+),([^\n]+)$')


def format_line(task: Task) -> str:
    return f'{1 if task.completed else 0},{task.description}\n'


def parse_line(line: str) -> Optional[Task]:
    """Parse one stored line; None means the line is malformed."""
    match = LINE_RE.match(line.rstrip('\n'))
    if match is None:
        return None
    flag, description = match.groups()
    return Task(description, completed=int(flag) != 0)


def parse_lines(lines: Iterable[str]) -> TaskList:
    task_list = TaskList()
    for lineno, line in enumerate(lines, start=1):
        task = parse_line(line)
        if task is None:
            logger.debug('skipping malformed line %d: %r', lineno, line)
            continue
        task_list.append(task)
    return task_list


def _target_mode(path: Path) -> int:
    """Permission bits the saved file should keep (mkstemp creates 0600)."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class Storage:
    def __init__(self, path: Union[str, Path] = TASKS_FILE, atomic: bool = False):
        self.path = Path(path)
        self.atomic = atomic

    def load(self) -> TaskList:
        """Load tasks from disk.

        Missing file -> empty list (first run, not an error).
        Unreadable file -> StorageError.
        """
        if not self.path.exists():
            logger.info('No existing task file found at %s. Starting fresh.', self.path)
            return TaskList()
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                task_list = parse_lines(f)
        except OSError as exc:
            logger.error('Loading %s failed: %s', self.path, exc)
            raise StorageError(self.path, exc.strerror or str(exc), action='reading') from exc
        logger.info('Loaded %d tasks from %s.', len(task_list), self.path)
        return task_list

    def save(self, task_list: TaskList) -> None:
        """Overwrite the file with every task in order."""
        content = ''.join(format_line(t) for t in task_list.tasks())
        try:
            if self.atomic:
                self._write_atomic(content)
            else:
                with open(self.path, 'w', encoding='utf-8', newline='\n') as f:
                    f.write(content)
        except OSError as exc:
            logger.error('Saving %s failed: %s', self.path, exc)
            raise StorageError(self.path, exc.strerror or str(exc)) from exc
        logger.info('Saved %d tasks to %s.', len(task_list), self.path)

    def _write_atomic(self, content: str) -> None:
        # temp file must live in the target directory for os.replace to be atomic
        fd, tmp_name = tempfile.mkstemp(prefix=f'.{self.path.name}.', suffix='.tmp', dir=self.path.parent)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
                f.write(content)
            os.chmod(tmp_name, _target_mode(self.path))
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
