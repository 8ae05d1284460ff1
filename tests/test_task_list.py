# tests/test_task_list.py

from __future__ import annotations

import pytest

from errors import TaskNotFoundError
from models import MAX_DESCRIPTION_LEN, TaskEntry
from task_list import EMPTY_MESSAGE, TaskList


def test_list_preserves_add_order() -> None:
    task_list = TaskList()
    for description in ("one", "two", "three", "four"):
        task_list.add(description)

    assert task_list.list_tasks() == [
        TaskEntry(1, False, "one"),
        TaskEntry(2, False, "two"),
        TaskEntry(3, False, "three"),
        TaskEntry(4, False, "four"),
    ]


def test_empty_list_signals_empty() -> None:
    task_list = TaskList()
    assert task_list.list_tasks() is None
    assert not task_list
    assert len(task_list) == 0


def test_add_then_delete_only_task_empties_list() -> None:
    task_list = TaskList()
    task_list.add("only")
    removed = task_list.delete(1)

    assert removed == TaskEntry(1, False, "only")
    assert task_list.list_tasks() is None


def test_add_truncates_long_description() -> None:
    task_list = TaskList()
    entry = task_list.add("z" * 300)
    assert len(entry.description) == MAX_DESCRIPTION_LEN


def test_mark_complete_sets_flag() -> None:
    task_list = TaskList()
    task_list.add("a")
    task_list.add("b")

    entry = task_list.mark_complete(2)

    assert entry == TaskEntry(2, True, "b")
    assert [e.completed for e in task_list] == [False, True]


def test_mark_complete_is_idempotent() -> None:
    task_list = TaskList()
    task_list.add("a")
    task_list.mark_complete(1)
    assert task_list.mark_complete(1).completed is True
    assert task_list.completed_count == 1


@pytest.mark.parametrize("position", [0, -1, -50, 4, 100])
def test_mark_complete_out_of_range(abc_list: TaskList, position: int) -> None:
    before = abc_list.list_tasks()

    with pytest.raises(TaskNotFoundError) as excinfo:
        abc_list.mark_complete(position)

    assert excinfo.value.position == position
    assert abc_list.list_tasks() == before


@pytest.mark.parametrize("position", [0, -1, 1])
def test_operations_on_empty_list_report_not_found(position: int) -> None:
    task_list = TaskList()
    with pytest.raises(TaskNotFoundError):
        task_list.mark_complete(position)
    with pytest.raises(TaskNotFoundError):
        task_list.delete(position)
    assert task_list.list_tasks() is None


@pytest.mark.parametrize("position", [0, -2, 4])
def test_delete_out_of_range(abc_list: TaskList, position: int) -> None:
    before = abc_list.list_tasks()

    with pytest.raises(TaskNotFoundError, match=f"Task {position} not found"):
        abc_list.delete(position)

    assert abc_list.list_tasks() == before


def test_delete_middle_shifts_positions(abc_list: TaskList) -> None:
    abc_list.delete(2)

    assert abc_list.list_tasks() == [TaskEntry(1, False, "A"), TaskEntry(2, False, "C")]
    assert abc_list.mark_complete(2) == TaskEntry(2, True, "C")


def test_counts_and_str(abc_list: TaskList) -> None:
    abc_list.mark_complete(1)
    assert abc_list.pending_count == 2
    assert abc_list.completed_count == 1
    assert str(abc_list) == "3 tasks, 2 pending, 1 done"


def test_tasks_returns_copies(abc_list: TaskList) -> None:
    copies = abc_list.tasks()
    copies[0].completed = True
    assert abc_list.list_tasks()[0].completed is False


def test_render_empty() -> None:
    assert TaskList().render() == [EMPTY_MESSAGE]


def test_render_numbers_and_markers(abc_list: TaskList) -> None:
    abc_list.mark_complete(3)
    assert abc_list.render()[1:] == ["1. [ ] A", "2. [ ] B", "3. [X] C"]
