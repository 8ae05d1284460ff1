"""Data models for the terminal to-do list.

Exposes the Task dataclass and the TaskEntry view handed out by TaskList.
Descriptions are bounded to MAX_DESCRIPTION_LEN characters; longer text is
truncated rather than rejected, and anything after the first line break is
dropped.
"""
from __future__ import annotations
from dataclasses import dataclass
import re
from typing import NamedTuple

MAX_DESCRIPTION_LEN = 255
LINE_BREAK_RE = re.compile(r"[\r\n]")


def truncate_description(text: str) -> str:
    """Keep the first line only, then cut to MAX_DESCRIPTION_LEN characters."""
    return LINE_BREAK_RE.split(text, maxsplit=1)[0][:MAX_DESCRIPTION_LEN]


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Single-line text, at most MAX_DESCRIPTION_LEN characters.
        completed: False until the task is marked complete; never reset.
    """
    description: str
    completed: bool = False

    def __post_init__(self) -> None:
        self.description = truncate_description(str(self.description))
        self.completed = bool(self.completed)


class TaskEntry(NamedTuple):
    """Read-only (position, completed, description) view of a task."""
    position: int
    completed: bool
    description: str

    @property
    def marker(self) -> str:
        return 'X' if self.completed else ' '
