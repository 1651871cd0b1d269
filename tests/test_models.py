# tests/test_models.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from todo_cli.models import Task, TodoList

NOON = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _task(task_id: int, **overrides) -> Task:
    fields = {"id": task_id, "name": f"task {task_id}", "priority": 3, "created_at": NOON}
    fields.update(overrides)
    return Task(**fields)


@pytest.mark.parametrize("priority", [0, 6])
def test_task_rejects_out_of_range_priority(priority: int) -> None:
    with pytest.raises(ValidationError):
        _task(1, priority=priority)


def test_task_is_frozen() -> None:
    task = _task(1)
    with pytest.raises(ValidationError):
        task.name = "renamed"


def test_naive_created_at_is_treated_as_utc() -> None:
    task = _task(1, created_at=datetime(2026, 3, 1, 12, 0))
    assert task.created_at == NOON
    assert task.created_at.tzinfo is not None


def test_todo_list_defaults() -> None:
    data = TodoList()
    assert data.next_id == 1
    assert data.tasks == []


def test_todo_list_rejects_duplicate_ids() -> None:
    with pytest.raises(ValidationError, match="unique and increasing"):
        TodoList(next_id=3, tasks=[_task(2), _task(2)])


def test_todo_list_rejects_out_of_order_ids() -> None:
    with pytest.raises(ValidationError, match="unique and increasing"):
        TodoList(next_id=4, tasks=[_task(3), _task(1)])


def test_todo_list_rejects_counter_behind_tasks() -> None:
    with pytest.raises(ValidationError, match="next_id"):
        TodoList(next_id=2, tasks=[_task(1), _task(2)])


def test_todo_list_allows_gaps_in_ids() -> None:
    data = TodoList(next_id=9, tasks=[_task(1), _task(5)])
    assert [t.id for t in data.tasks] == [1, 5]
