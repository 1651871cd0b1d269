"""
Storage module for saving and loading the todo list.

ARCHITECTURE NOTES:
- This module handles ALL file system operations for tasks
- main.py calls these functions but doesn't know HOW they work
- Uses models.TodoList as the on-disk schema
- Uses store.TaskStore snapshots to get data in and out

Single Responsibility: This file ONLY deals with persistence (saving/loading).
"""

import contextlib
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import TodoList
from .store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path("todos.json")


class StorageError(Exception):
    """Raised when the data file cannot be read, parsed or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def load_store(path: Path = DEFAULT_DATA_FILE) -> TaskStore:
    """
    Load a TaskStore from a JSON data file.

    A missing file is not an error: it simply means no tasks have been
    added yet, so an empty store is returned.

    Raises:
        StorageError: The file exists but can't be read or isn't a valid todo list.
    """
    if not path.exists():
        logger.debug("No data file at %s, starting with an empty list", path)
        return TaskStore()

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StorageError(path, f"could not read file ({e.strerror or e})") from e

    try:
        data = TodoList.model_validate_json(raw)
    except ValidationError as e:
        raise StorageError(path, f"not a valid todo list ({e.error_count()} error(s))") from e

    logger.debug("Loaded %s task(s) from %s", len(data.tasks), path)
    return TaskStore.from_snapshot(data)


def save_store(store: TaskStore, path: Path = DEFAULT_DATA_FILE) -> None:
    """Write the store to `path` as pretty-printed JSON."""
    document = store.snapshot().model_dump_json(indent=2)

    # Write next to the target, then swap it in, so a failed write never
    # leaves a truncated data file behind.
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(document + "\n", encoding="utf-8")
        tmp_path.replace(path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise StorageError(path, f"could not write file ({e.strerror or e})") from e

    logger.info("Saved %s task(s) to %s", len(store), path)
