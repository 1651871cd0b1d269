# tests/conftest.py

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from todo_cli.config import reset_settings
from todo_cli.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Run every test in its own directory with no TODO_CLI_* variables set.

    The default data file (./todos.json) and any .env file are looked up
    relative to the working directory, so this keeps tests from touching
    a real todo list.
    """
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("TODO_CLI_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    """A clock that advances one minute per call, starting at a fixed instant."""
    start = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    calls = {"n": 0}

    def _now() -> datetime:
        value = start + timedelta(minutes=calls["n"])
        calls["n"] += 1
        return value

    return _now


@pytest.fixture()
def store(clock: Callable[[], datetime]) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "todos.json"
