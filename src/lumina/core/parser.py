# src/lumina/core/parser.py

"""
Command-line grammar.

A line is split on whitespace; the first token is the command keyword, the
rest are its arguments. Helpers below turn argument lists into indices or
tasks and raise MalformedCommandError when the shape is wrong.
"""

from __future__ import annotations

import re

from ..tasks.task_models import DeadlineTask, EventTask, Task, TodoTask
from .errors import InvalidTaskError, MalformedCommandError

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"
_TASK_NUMBER_RE = re.compile(r"-?[0-9]+")

WRONG_ARITY_MESSAGE = (
    "Oh no! Lumina detected unexpected number of parameters in your command! Please try again"
)


def _invalid_format(kind_label: str) -> MalformedCommandError:
    return MalformedCommandError(
        f"Oh no! Lumina detected invalid format for your {kind_label} Task! Please try again"
    )


def split_command(line: str) -> tuple[str, list[str]]:
    """Return (lower-cased keyword, argument tokens). Empty line -> ("", [])."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


def expect_no_args(args: list[str]) -> None:
    if args:
        raise MalformedCommandError(WRONG_ARITY_MESSAGE)


def parse_index(args: list[str]) -> int:
    """
    Parse a 1-based task number into a 0-based index.

    Range is not checked here; TaskList does that against its current size.
    """
    if len(args) != 1:
        raise MalformedCommandError(WRONG_ARITY_MESSAGE)
    raw = args[0]
    # plain ASCII digits only: int() alone would also take "+1" and "1_0"
    if not _TASK_NUMBER_RE.fullmatch(raw):
        raise MalformedCommandError(
            f"Oh no! Lumina expected a task number but got '{raw}'! Please try again"
        )
    return int(raw) - 1


def _build(kind_label: str, factory, *fields: str) -> Task:
    if any(not f.strip() for f in fields):
        raise _invalid_format(kind_label)
    try:
        return factory(*fields)
    except InvalidTaskError as e:
        raise MalformedCommandError(f"Oh no! {e} Please try again") from e


def parse_todo(args: list[str]) -> TodoTask:
    if not args:
        raise _invalid_format("ToDo")
    return _build("ToDo", TodoTask, " ".join(args))


def parse_deadline(args: list[str]) -> DeadlineTask:
    """deadline <description...> /by <datetime...>"""
    description: list[str] = []
    by: list[str] = []
    current = description
    seen_by = False

    for token in args:
        if token == BY_MARKER:
            if seen_by:
                raise _invalid_format("Deadline")
            seen_by = True
            current = by
            continue
        current.append(token)

    if not seen_by:
        raise _invalid_format("Deadline")
    return _build("Deadline", DeadlineTask, " ".join(description), " ".join(by))


def parse_event(args: list[str]) -> EventTask:
    """
    event <description...> /from <start...> /to <end...>

    /from and /to may come in either order; each token goes to the segment of
    the marker seen most recently.
    """
    segments: dict[str, list[str]] = {"": [], FROM_MARKER: [], TO_MARKER: []}
    seen: set[str] = set()
    current = ""

    for token in args:
        if token in (FROM_MARKER, TO_MARKER):
            if token in seen:
                raise _invalid_format("Event")
            seen.add(token)
            current = token
            continue
        segments[current].append(token)

    if seen != {FROM_MARKER, TO_MARKER}:
        raise _invalid_format("Event")
    return _build(
        "Event",
        EventTask,
        " ".join(segments[""]),
        " ".join(segments[FROM_MARKER]),
        " ".join(segments[TO_MARKER]),
    )
