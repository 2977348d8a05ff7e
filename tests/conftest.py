# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from lumina.core.state import AppState
from lumina.tasks.task_list import TaskList
from lumina.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Lumina",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "data.txt",
        log_dir=data_dir,
        indent_width=2,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> Iterator[TaskStore]:
    with TaskStore(settings.tasks_path) as s:
        yield s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState over a real (tmp) task file; persistence is part of what we test."""
    return AppState(settings=settings, task_store=store, task_list=TaskList())
