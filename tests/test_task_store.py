# tests/test_task_store.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lumina.core.errors import StorageError
from lumina.tasks.task_models import DeadlineTask, EventTask, TodoTask
from lumina.tasks.task_store import TaskStore


def test_open_bootstraps_missing_directory_and_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "data" / "data.txt"
    with TaskStore(path) as store:
        assert path.exists()
        assert store.load() == []
    assert not store.is_open


def test_load_skips_corrupt_lines_and_keeps_going(tmp_path: Path, caplog) -> None:
    path = tmp_path / "data.txt"
    path.write_text(
        "T | 0 | read book\n"
        "D | 0 | missing date\n"
        "Q | 1 | unknown kind\n"
        "\n"
        "E | 1 | team sync | Mon 2pm | Mon 3pm\n",
        "utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="lumina"):
        with TaskStore(path) as store:
            tasks = store.load()

    assert tasks == [
        TodoTask("read book"),
        EventTask("team sync", "Mon 2pm", "Mon 3pm", is_done=True),
    ]
    corrupt = [r for r in caplog.records if "Corrupt data entry" in r.getMessage()]
    assert len(corrupt) == 2


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("T | 0 | old\nT | 0 | older\n", "utf-8")

    with TaskStore(path) as store:
        assert store.save([DeadlineTask("submit report", "Sunday", is_done=True)])
        assert store.load() == [DeadlineTask("submit report", "Sunday", is_done=True)]

    assert path.read_text("utf-8") == "D | 1 | submit report | Sunday\n"


def test_store_must_be_open(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "data.txt")
    with pytest.raises(StorageError):
        store.load()
    with pytest.raises(StorageError):
        store.save([])


def test_store_cannot_be_opened_twice(tmp_path: Path) -> None:
    with TaskStore(tmp_path / "data.txt") as store:
        with pytest.raises(StorageError):
            store.open()
    # released on exit, so it can be acquired again
    with store:
        assert store.is_open


def test_read_failure_yields_empty_list(tmp_path: Path, caplog) -> None:
    # a directory where the file should be: bootstrap and read both fail
    path = tmp_path / "data.txt"
    path.mkdir()
    with caplog.at_level(logging.ERROR, logger="lumina"):
        with TaskStore(path) as store:
            assert store.load() == []
            assert store.save([TodoTask("x")]) is False
    assert any("Failed to read tasks" in r.getMessage() for r in caplog.records)


def test_undecodable_line_is_skipped(tmp_path: Path, caplog) -> None:
    path = tmp_path / "data.txt"
    path.write_bytes(b"T | 0 | read book\nT | 0 | caf\xe9\nT | 1 | ok\n")

    with caplog.at_level(logging.WARNING, logger="lumina"):
        with TaskStore(path) as store:
            tasks = store.load()

    assert tasks == [TodoTask("read book"), TodoTask("ok", is_done=True)]
    assert any("Corrupt data entry: T | 0 | caf" in r.getMessage() for r in caplog.records)


def test_bootstrap_failure_is_logged_not_raised(tmp_path: Path, caplog) -> None:
    # parent "directory" is a regular file, so mkdir fails
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    path = blocker / "data.txt"

    with caplog.at_level(logging.ERROR, logger="lumina"):
        with TaskStore(path) as store:
            assert store.is_open
            assert store.load() == []
            assert store.save([TodoTask("x")]) is False

    messages = [r.getMessage() for r in caplog.records]
    assert any("Failed to create task file" in m for m in messages)
    assert any("Failed to save tasks" in m for m in messages)
