"""Task list logic: ordered tasks, position-addressed mutation, and rendering.

Positions are 1-based and always derived from the current order; nothing
stores an index on the task itself. Deleting a task shifts every later
task down by one position.
"""
import logging
from typing import Iterable, Iterator, List, Optional
from models import Task, TaskEntry
from errors import TaskNotFoundError
from theme import color, HEADER_COLOR, INDEX_COLOR, DONE_COLOR, PENDING_COLOR, EMPTY_COLOR, BOLD

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = 'Your to-do list is empty.'
HEADER_TITLE = '--- Your Tasks ---'


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = [Task(t.description, t.completed) for t in tasks or ()]

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def __iter__(self) -> Iterator[TaskEntry]:
        for position, task in enumerate(self._tasks, start=1):
            yield TaskEntry(position, task.completed, task.description)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def list_tasks(self) -> Optional[List[TaskEntry]]:
        """Return the tasks in order, or None when the list is empty."""
        if not self._tasks:
            return None
        return list(self)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    @property
    def pending_count(self) -> int:
        return len(self._tasks) - self.completed_count

    def tasks(self) -> List[Task]:
        """Copies of the stored tasks, in order (used by storage)."""
        return [Task(t.description, t.completed) for t in self._tasks]

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self._tasks):
            raise TaskNotFoundError(position)
        return position - 1

    # -------------------- task operations --------------------
    def add(self, description: str) -> TaskEntry:
        task = Task(description)
        self._tasks.append(task)
        logger.debug('added task %d (%d chars)', len(self._tasks), len(task.description))
        return TaskEntry(len(self._tasks), task.completed, task.description)

    def append(self, task: Task) -> None:
        """Append an already built task, keeping its completed flag (load path)."""
        self._tasks.append(Task(task.description, task.completed))

    def mark_complete(self, position: int) -> TaskEntry:
        """Mark the task at `position` complete; marking twice is a no-op."""
        task = self._tasks[self._index(position)]
        if task.completed:
            logger.debug('task %d already complete', position)
        task.completed = True
        return TaskEntry(position, task.completed, task.description)

    def delete(self, position: int) -> TaskEntry:
        task = self._tasks.pop(self._index(position))
        logger.debug('deleted task %d, %d remaining', position, len(self._tasks))
        return TaskEntry(position, task.completed, task.description)

    # -------------------- display --------------------
    def render(self) -> List[str]:
        entries = self.list_tasks()
        if entries is None:
            return [color(EMPTY_MESSAGE, EMPTY_COLOR)]
        lines = [color(HEADER_TITLE, HEADER_COLOR, BOLD)]
        for entry in entries:
            status_col = DONE_COLOR if entry.completed else PENDING_COLOR
            lines.append(
                color(f'{entry.position}.', INDEX_COLOR) + ' '
                + color(f'[{entry.marker}]', status_col) + f' {entry.description}'
            )
        return lines

    def __str__(self) -> str:
        return f'{len(self)} tasks, {self.pending_count} pending, {self.completed_count} done'

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f'TaskList({self._tasks!r})'
