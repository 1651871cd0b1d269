"""
Main CLI entry point using Typer.

LEARNING NOTES:
- Typer turns type-hinted functions into CLI commands
- The Annotated[] syntax adds metadata (help text, option names)
- Rich provides tables, panels and colors for terminal output
- typer.Context.obj carries per-invocation state from the callback
  to every command, so there is no module-level todo list

This module defines the command-line interface:
- `todo add/remove/edit/clear` - change the list
- `todo list/prioritize/schedule` - show the list in different orders
- `todo help/config/version` - information commands

Each command:
1. Gets the TaskStore from the context (loaded on first use)
2. Calls one TaskStore operation
3. Saves (if it changed anything) and prints the result
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm

from . import __version__
from .config import get_settings
from .formatters import EMPTY_MESSAGE, format_as_json, format_as_plain, format_as_table
from .logging_setup import setup_logging
from .models import Task
from .storage import StorageError, load_store, save_store
from .store import InvalidPriority, NotFound, TaskStore, TodoError

logger = logging.getLogger(__name__)


USAGE = """\
simple command-line todo list

USAGE:
    todo [--file PATH] <command>

COMMANDS:
    add <task-name> <priority>      Add a task to the list, with a priority from 1 to 5 inclusive
    remove <task-id>                Remove the task with the given id
    list                            List the todos in the order they were added
    clear                           Clear all the todos
    prioritize                      List the todos by priority (highest to lowest)
    schedule                        List the todos by the date they were created (in UTC)
    edit <task-id> <new-name>       Change the name of the task with the given id
    help                            Print this help information
"""


# ============================================================================
# Error Handling Helper
# ============================================================================

def handle_todo_error(error: Exception, console: Console) -> None:
    """
    Turn store and storage errors into user-friendly messages.

    Args:
        error: The exception that was raised
        console: Rich console for formatted output
    """
    if isinstance(error, InvalidPriority):
        console.print(Panel(
            f"[red bold]Invalid Priority[/red bold]\n\n"
            f"{escape(str(error))}\n\n"
            "[dim]Use 1 for the least urgent tasks and 5 for the most urgent.[/dim]",
            border_style="red"
        ))

    elif isinstance(error, NotFound):
        console.print(Panel(
            f"[red bold]Task Not Found[/red bold]\n\n"
            f"{escape(str(error))}\n\n"
            "[dim]Run 'todo list' to see the ids of existing tasks.[/dim]",
            border_style="red"
        ))

    elif isinstance(error, StorageError):
        console.print(Panel(
            f"[red bold]Storage Error[/red bold]\n\n"
            f"{escape(str(error))}\n\n"
            "[dim]To fix:[/dim]\n"
            "1. Check that the file is readable and writable\n"
            "2. If it was edited by hand, make sure it is still valid JSON\n"
            "3. Point at another file with --file or TODO_CLI_DATA_FILE",
            border_style="red"
        ))

    else:
        console.print(f"[red bold]Unexpected Error:[/red bold] {escape(str(error))}")


# ============================================================================
# Per-invocation State
# ============================================================================

class AppContext:
    """
    State shared by the commands of a single invocation.

    The store is loaded on first access, so commands that never touch
    it (help, config, version) work even when the data file is broken.
    """

    def __init__(self, data_file: Path) -> None:
        self.data_file = data_file
        self._store: TaskStore | None = None

    @property
    def store(self) -> TaskStore:
        if self._store is None:
            self._store = load_store(self.data_file)
        return self._store

    def save(self) -> None:
        save_store(self.store, self.data_file)


# ============================================================================
# Create the Typer App
# ============================================================================

app = typer.Typer(
    name="todo",
    help="Simple command-line todo list with priorities.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


class OutputFormat(str, Enum):
    """Supported output formats for task listings."""
    TABLE = "table"
    PLAIN = "plain"
    JSON = "json"


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Annotated[
        Optional[Path],
        typer.Option(
            "--file", "-F",
            help="Todo list file to use (default: TODO_CLI_DATA_FILE or ./todos.json)."
        )
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr.")
    ] = False,
) -> None:
    """Simple command-line todo list with priorities."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(
            f"[red bold]Configuration Error:[/red bold] {escape(str(e))}\n\n"
            "Check the TODO_CLI_* variables in your environment or .env file."
        )
        raise typer.Exit(1)

    try:
        setup_logging(
            level=logging.DEBUG if verbose else settings.log_level,
            log_file=settings.log_file,
        )
    except OSError as e:
        console.print(
            f"[red bold]Configuration Error:[/red bold] cannot open log file "
            f"{escape(str(settings.log_file))} ({escape(e.strerror or str(e))})\n\n"
            "Check TODO_CLI_LOG_FILE in your environment or .env file."
        )
        raise typer.Exit(1)

    if data_file is not None:
        data_file = data_file.expanduser()
    ctx.obj = AppContext(data_file or settings.data_file)
    logger.debug("Using data file %s", ctx.obj.data_file)


def _fail(error: Exception) -> typer.Exit:
    handle_todo_error(error, console)
    return typer.Exit(1)


def _require_name(name: str) -> None:
    if not name.strip():
        console.print("[red]Error:[/red] Task name cannot be empty.")
        raise typer.Exit(1)


def _render(tasks: list[Task], output_format: OutputFormat, title: str) -> None:
    if output_format == OutputFormat.JSON:
        # JSON is printed verbatim so it stays pipeable.
        console.print(format_as_json(tasks), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    if not tasks:
        console.print(f"[yellow]{EMPTY_MESSAGE}[/yellow]")
        return

    if output_format == OutputFormat.PLAIN:
        console.print(format_as_plain(tasks), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        console.print(format_as_table(tasks, title=title))


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.")
]


# ============================================================================
# Commands that change the list
# ============================================================================

@app.command(context_settings={"ignore_unknown_options": True})
def add(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="What needs to be done.")],
    priority: Annotated[int, typer.Argument(help="Priority from 1 (low) to 5 (urgent).")],
) -> None:
    """Add a task to the list."""
    state: AppContext = ctx.obj
    _require_name(name)

    try:
        task_id = state.store.add(name, priority)
        state.save()
    except (TodoError, StorageError) as e:
        raise _fail(e)

    console.print(f"[green]Added task {task_id}:[/green] {escape(name)} (priority {priority})")


@app.command()
def remove(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(help="Id of the task to remove.")],
) -> None:
    """Remove a task by its id."""
    state: AppContext = ctx.obj

    try:
        task = state.store.get(task_id)
        state.store.remove(task_id)
        state.save()
    except (TodoError, StorageError) as e:
        raise _fail(e)

    console.print(f"[green]Removed task {task_id}:[/green] {escape(task.name)}")


@app.command()
def edit(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(help="Id of the task to rename.")],
    new_name: Annotated[str, typer.Argument(help="The new task name.")],
) -> None:
    """Change the name of a task."""
    state: AppContext = ctx.obj
    _require_name(new_name)

    try:
        state.store.edit(task_id, new_name)
        state.save()
    except (TodoError, StorageError) as e:
        raise _fail(e)

    console.print(f"[green]Renamed task {task_id}:[/green] {escape(new_name)}")


@app.command()
def clear(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Don't ask for confirmation.")
    ] = False,
) -> None:
    """Remove every task from the list."""
    state: AppContext = ctx.obj

    try:
        count = len(state.store)
    except StorageError as e:
        raise _fail(e)

    if count and not yes:
        if not Confirm.ask(f"[bold]Remove all {count} task(s)?[/bold]", console=console):
            console.print("[yellow]Nothing cleared.[/yellow]")
            return

    try:
        state.store.clear()
        state.save()
    except StorageError as e:
        raise _fail(e)

    console.print(f"[green]Cleared {count} task(s).[/green]")


# ============================================================================
# Commands that show the list
# ============================================================================

@app.command(name="list")
def list_tasks(
    ctx: typer.Context,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List tasks in the order they were added."""
    state: AppContext = ctx.obj
    try:
        tasks = state.store.list_tasks()
    except StorageError as e:
        raise _fail(e)
    _render(tasks, output_format, title="Todo List")


@app.command()
def prioritize(
    ctx: typer.Context,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List tasks by priority, most urgent first."""
    state: AppContext = ctx.obj
    try:
        tasks = state.store.prioritize()
    except StorageError as e:
        raise _fail(e)
    _render(tasks, output_format, title="By Priority")


@app.command()
def schedule(
    ctx: typer.Context,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List tasks by creation time, earliest first."""
    state: AppContext = ctx.obj
    try:
        tasks = state.store.schedule()
    except StorageError as e:
        raise _fail(e)
    _render(tasks, output_format, title="By Creation Time")


# ============================================================================
# Utility Commands
# ============================================================================

@app.command(name="help")
def show_help() -> None:
    """Print usage information."""
    console.print(USAGE, markup=False, highlight=False, emoji=False)


@app.command()
def config(ctx: typer.Context) -> None:
    """Show current configuration."""
    state: AppContext = ctx.obj
    settings = get_settings()
    log_file = settings.log_file or "(none)"
    console.print(Panel(
        f"[bold]Data File:[/bold] {escape(str(state.data_file))}\n"
        f"[bold]Log Level:[/bold] {settings.log_level}\n"
        f"[bold]Log File:[/bold] {escape(str(log_file))}",
        title="Current Configuration",
        border_style="green"
    ))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todo[/bold] version {__version__}")


if __name__ == "__main__":
    app()
