# tests/test_task_models.py

from __future__ import annotations

import pytest

from lumina.core.errors import InvalidTaskError
from lumina.tasks.task_models import DeadlineTask, EventTask, Task, TaskKind, TodoTask


def test_display_strings() -> None:
    assert str(TodoTask("read book")) == "[T][ ] read book"
    assert str(DeadlineTask("submit report", "Sunday")) == "[D][ ] submit report (by: Sunday)"
    assert (
        str(EventTask("team sync", "Mon 2pm", "Mon 3pm", is_done=True))
        == "[E][X] team sync (from: Mon 2pm to: Mon 3pm)"
    )


def test_records() -> None:
    assert TodoTask("read book").to_record() == "T | 0 | read book"
    assert DeadlineTask("submit report", "Sunday", is_done=True).to_record() == (
        "D | 1 | submit report | Sunday"
    )
    assert EventTask("team sync", "Mon 2pm", "Mon 3pm").to_record() == (
        "E | 0 | team sync | Mon 2pm | Mon 3pm"
    )


def test_mark_is_idempotent() -> None:
    task = TodoTask("read book")
    task.mark_as_done()
    task.mark_as_done()
    assert task.is_done
    task.mark_as_not_done()
    task.mark_as_not_done()
    assert not task.is_done


def test_fields_are_trimmed_and_required() -> None:
    task = DeadlineTask("  submit report ", " Sunday  ")
    assert task.description == "submit report"
    assert task.by == "Sunday"

    with pytest.raises(InvalidTaskError):
        TodoTask("   ")
    with pytest.raises(InvalidTaskError):
        EventTask("team sync", "Mon 2pm", "")
    with pytest.raises(InvalidTaskError):
        TodoTask("a | b")


def test_kinds_and_base_is_abstract() -> None:
    assert TodoTask("x").kind is TaskKind.TODO
    assert DeadlineTask("x", "y").kind is TaskKind.DEADLINE
    assert EventTask("x", "y", "z").kind is TaskKind.EVENT
    assert TaskKind.from_tag("Q") is None
    with pytest.raises(TypeError):
        Task("x")


@pytest.mark.parametrize("description", ["a | b", "| leading", "trailing |"])
def test_fields_that_would_break_a_record_are_rejected(description: str) -> None:
    with pytest.raises(InvalidTaskError):
        TodoTask(description)


def test_bare_pipes_are_allowed() -> None:
    assert TodoTask("a|b").to_record() == "T | 0 | a|b"
    assert DeadlineTask("pipe |x", "x| now").by == "x| now"
