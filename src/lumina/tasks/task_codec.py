# src/lumina/tasks/task_codec.py

"""
Line format of the backing store.

One task per line, fields joined by " | ":
    T | <0/1> | <description>
    D | <0/1> | <description> | <by>
    E | <0/1> | <description> | <start> | <end>
"""

from __future__ import annotations

import logging

from ..core.errors import CorruptRecordError, InvalidTaskError
from .task_models import RECORD_DELIMITER, DeadlineTask, EventTask, Task, TaskKind, TodoTask

logger = logging.getLogger(__name__)

RECORD_ARITY: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode_task(task: Task) -> str:
    return task.to_record()


def decode_task(line: str) -> Task:
    """
    Parse one persisted line.

    Raises CorruptRecordError on an unknown kind tag, a field count that does
    not match the kind, or an empty field. Only a done flag of "1" means
    done; any flag other than 0/1 is read as not done.
    """
    parts = [p.strip() for p in line.rstrip("\r\n").split(RECORD_DELIMITER)]

    kind = TaskKind.from_tag(parts[0])
    if kind is None or len(parts) != RECORD_ARITY[kind]:
        raise CorruptRecordError(line)

    is_done = parts[1] == "1"
    if parts[1] not in ("0", "1"):
        logger.warning("Unknown done flag %r, reading task as not done: %s", parts[1], line)

    description = parts[2]
    try:
        if kind is TaskKind.TODO:
            return TodoTask(description, is_done=is_done)
        if kind is TaskKind.DEADLINE:
            return DeadlineTask(description, parts[3], is_done=is_done)
        return EventTask(description, parts[3], parts[4], is_done=is_done)
    except InvalidTaskError as e:
        raise CorruptRecordError(line) from e
