"""
Output formatting for task lists.

LEARNING NOTES:
- The models know what the data IS; formatters know how to DISPLAY it
- Adding a new output format never touches store or model code

Supports three output formats:
- Table: a Rich table for interactive terminals
- Plain: one line per task, easy to grep
- JSON: machine-readable, good for piping to other tools

Each formatter takes a sequence of Task objects.
"""

from collections.abc import Sequence

from pydantic import TypeAdapter
from rich.markup import escape
from rich.table import Table

from .models import Task

EMPTY_MESSAGE = "No tasks left!"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_task_list_adapter = TypeAdapter(list[Task])


def format_as_json(tasks: Sequence[Task], indent: int = 2) -> str:
    """
    Format tasks as a pretty-printed JSON array.

    LEARNING NOTE:
    TypeAdapter gives plain types like list[Task] the same
    validation/serialization powers a BaseModel has, so datetimes
    come out as ISO 8601 strings without any extra code.
    """
    return _task_list_adapter.dump_json(list(tasks), indent=indent).decode("utf-8")


def format_as_plain(tasks: Sequence[Task]) -> str:
    """
    One line per task: '3: buy milk (priority 2), created: 2026-10-18 09:15:00'
    """
    if not tasks:
        return EMPTY_MESSAGE

    return "\n".join(
        f"{task.id}: {task.name} (priority {task.priority}), "
        f"created: {task.created_at.strftime(TIMESTAMP_FORMAT)}"
        for task in tasks
    )


def format_as_table(tasks: Sequence[Task], title: str | None = None) -> Table:
    """
    Build a Rich table of tasks.

    Task names are user input, so they are escaped; otherwise a name
    like "[red]fix bug" would be rendered as markup.
    """
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Task", style="white")
    table.add_column("Priority")
    table.add_column("Created (UTC)", style="dim")

    for task in tasks:
        table.add_row(
            str(task.id),
            escape(task.name),
            _get_priority_badge(task.priority),
            task.created_at.strftime(TIMESTAMP_FORMAT),
        )

    return table


def _get_priority_badge(priority: int) -> str:
    """
    Get a Rich-markup badge for a priority level, e.g. "[bold red]5[/bold red]".
    """
    badge_map = {
        1: "[dim]1[/dim]",
        2: "[green]2[/green]",
        3: "[yellow]3[/yellow]",
        4: "[bold yellow]4[/bold yellow]",
        5: "[bold red]5[/bold red]",
    }

    return badge_map.get(priority, str(priority))
