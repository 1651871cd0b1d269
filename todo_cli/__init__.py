"""
todo-cli - a simple command-line todo list with priorities.

Tasks have a stable id, a name, a priority from 1 to 5 and a creation
time. They can be listed in the order they were added, by priority,
or by creation time.

CLI Usage:
    $ todo add "buy milk" 3
    $ todo prioritize
    $ todo edit 1 "buy oat milk"

Programmatic Usage:
    from todo_cli import TaskStore

    store = TaskStore()
    task_id = store.add("buy milk", 3)
    store.prioritize()
"""

__version__ = "0.1.0"

# Re-export key classes for programmatic use
from .models import Task, TodoList
from .storage import StorageError, load_store, save_store
from .store import InvalidPriority, NotFound, TaskStore, TodoError

__all__ = [
    "__version__",
    # Models
    "Task",
    "TodoList",
    # Core functionality
    "TaskStore",
    "TodoError",
    "InvalidPriority",
    "NotFound",
    # Persistence
    "load_store",
    "save_store",
    "StorageError",
]
