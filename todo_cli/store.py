"""
In-memory task store with stable ids and derived orderings.

ARCHITECTURE NOTES:
- TaskStore knows nothing about files or the terminal
- storage.py turns it into JSON and back (via snapshot/from_snapshot)
- main.py owns one instance per command invocation

Ids come from an explicit counter, so removing or clearing tasks never
causes an id to be handed out twice.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from .models import MAX_PRIORITY, MIN_PRIORITY, Task, TodoList

logger = logging.getLogger(__name__)


class TodoError(Exception):
    """Base class for errors raised by TaskStore operations."""


class InvalidPriority(TodoError):
    """Raised when a priority falls outside MIN_PRIORITY..MAX_PRIORITY."""

    def __init__(self, priority: int) -> None:
        self.priority = priority
        super().__init__(
            f"Invalid priority: {priority} (must be between {MIN_PRIORITY} and {MAX_PRIORITY})"
        )


class NotFound(TodoError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"No task with id {task_id}")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    Owns an ordered list of tasks.

    Insertion order and id order are the same thing, because ids are
    assigned from a counter that only moves forward.

    Example:
        store = TaskStore()
        milk = store.add("buy milk", 3)
        store.add("call mom", 5)
        [t.name for t in store.prioritize()]  # ["call mom", "buy milk"]
        store.remove(milk)
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._clock = clock or utc_now

    @classmethod
    def from_snapshot(
        cls,
        data: TodoList,
        clock: Callable[[], datetime] | None = None,
    ) -> "TaskStore":
        """Rebuild a store from a validated TodoList document."""
        store = cls(clock=clock)
        store._tasks = list(data.tasks)
        store._next_id = data.next_id
        return store

    def snapshot(self) -> TodoList:
        return TodoList(next_id=self._next_id, tasks=list(self._tasks))

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, name: str, priority: int) -> int:
        """
        Append a new task and return its id.

        Raises:
            InvalidPriority: priority is not in 1..5. The store is left unchanged.
        """
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise InvalidPriority(priority)

        task = Task(
            id=self._next_id,
            name=name,
            priority=priority,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        self._next_id += 1

        logger.debug("Added task id=%s priority=%s", task.id, priority)
        return task.id

    def remove(self, task_id: int) -> None:
        index = self._index_of(task_id)
        del self._tasks[index]
        logger.debug("Removed task id=%s", task_id)

    def edit(self, task_id: int, new_name: str) -> None:
        """Rename a task. Its id, priority and creation time are kept."""
        index = self._index_of(task_id)
        self._tasks[index] = self._tasks[index].model_copy(update={"name": new_name})
        logger.debug("Renamed task id=%s", task_id)

    def clear(self) -> None:
        # The counter survives a clear so ids are never reused.
        count = len(self._tasks)
        self._tasks.clear()
        logger.debug("Cleared %s task(s); next id stays %s", count, self._next_id)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def list_tasks(self) -> list[Task]:
        """Tasks in the order they were added."""
        return list(self._tasks)

    def prioritize(self) -> list[Task]:
        """Most urgent first; equal priorities keep insertion order."""
        return sorted(self._tasks, key=lambda task: (-task.priority, task.id))

    def schedule(self) -> list[Task]:
        """Earliest created first; equal timestamps keep insertion order."""
        return sorted(self._tasks, key=lambda task: (task.created_at, task.id))

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFound(task_id)
