# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

import theme
from storage import Storage
from task_list import TaskList


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rendered text free of ANSI codes regardless of FORCE_COLOR."""
    monkeypatch.setattr(theme, "_ENABLE", False)


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def storage(tasks_path: Path) -> Storage:
    return Storage(tasks_path)


@pytest.fixture()
def abc_list() -> TaskList:
    task_list = TaskList()
    for description in ("A", "B", "C"):
        task_list.add(description)
    return task_list
