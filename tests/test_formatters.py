# tests/test_formatters.py

from __future__ import annotations

import json
from io import StringIO

from rich.console import Console

from todo_cli.formatters import EMPTY_MESSAGE, format_as_json, format_as_plain, format_as_table
from todo_cli.store import TaskStore


def _render(renderable) -> str:
    console = Console(file=StringIO(), width=120, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_plain_lists_one_line_per_task(store: TaskStore) -> None:
    store.add("buy milk", 3)
    store.add("call mom", 5)

    lines = format_as_plain(store.list_tasks()).splitlines()

    assert lines == [
        "1: buy milk (priority 3), created: 2026-01-01 09:00:00",
        "2: call mom (priority 5), created: 2026-01-01 09:01:00",
    ]


def test_plain_empty_message() -> None:
    assert format_as_plain([]) == EMPTY_MESSAGE


def test_json_is_an_array_of_tasks(store: TaskStore) -> None:
    store.add("buy milk", 3)

    data = json.loads(format_as_json(store.list_tasks()))

    assert data == [{
        "id": 1,
        "name": "buy milk",
        "priority": 3,
        "created_at": "2026-01-01T09:00:00Z",
    }]


def test_json_empty_list() -> None:
    assert json.loads(format_as_json([])) == []


def test_table_shows_every_task(store: TaskStore) -> None:
    store.add("buy milk", 3)
    store.add("call mom", 5)

    output = _render(format_as_table(store.prioritize(), title="By Priority"))

    assert "By Priority" in output
    assert output.index("call mom") < output.index("buy milk")
    assert "2026-01-01 09:00:00" in output


def test_table_escapes_markup_in_names(store: TaskStore) -> None:
    store.add("[red]fix bug", 2)

    output = _render(format_as_table(store.list_tasks()))

    assert "[red]fix bug" in output
