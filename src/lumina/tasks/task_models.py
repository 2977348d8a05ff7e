# src/lumina/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar

from ..core.errors import InvalidTaskError

RECORD_DELIMITER = " | "


class TaskKind(StrEnum):
    """
    Closed set of task kinds.

    The value is the tag used both in the display string ([T]) and as the
    first field of a persisted record.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str) -> TaskKind | None:
        try:
            return cls(raw.strip())
        except ValueError:
            return None


def _clean_field(name: str, value: str) -> str:
    text = str(value).strip()
    if not text:
        raise InvalidTaskError(f"Task {name} must not be empty.")
    # these would split the field apart when the record is read back
    if RECORD_DELIMITER in text or text.startswith("| ") or text.endswith(" |"):
        raise InvalidTaskError(f"Task {name} must not contain ' | ' separators.")
    return text


@dataclass(slots=True)
class Task:
    """
    Common part of every task: a description and a done flag.

    Not instantiated directly; use TodoTask, DeadlineTask or EventTask.
    """

    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract; use TodoTask, DeadlineTask or EventTask.")
        self.description = _clean_field("description", self.description)
        self.is_done = bool(self.is_done)

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    def date_fields(self) -> tuple[str, ...]:
        """Kind-specific fields, in record order."""
        return ()

    def detail(self) -> str:
        return ""

    def to_record(self) -> str:
        done_flag = "1" if self.is_done else "0"
        return RECORD_DELIMITER.join(
            (self.kind.value, done_flag, self.description, *self.date_fields())
        )

    def __str__(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}{self.detail()}"


@dataclass(slots=True)
class TodoTask(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class DeadlineTask(Task):
    by: str

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        # zero-arg super() is unavailable in slotted dataclasses
        Task.__post_init__(self)
        self.by = _clean_field("deadline", self.by)

    def date_fields(self) -> tuple[str, ...]:
        return (self.by,)

    def detail(self) -> str:
        return f" (by: {self.by})"


@dataclass(slots=True)
class EventTask(Task):
    start: str
    end: str

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.start = _clean_field("start", self.start)
        self.end = _clean_field("end", self.end)

    def date_fields(self) -> tuple[str, ...]:
        return (self.start, self.end)

    def detail(self) -> str:
        return f" (from: {self.start} to: {self.end})"
