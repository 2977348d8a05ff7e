# src/lumina/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered, index-addressed collection of tasks.

    Indices passed in are 0-based; list_tasks() numbers entries from 1 for
    display. Every out-of-range index raises TaskIndexError and leaves the
    list untouched.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def _get(self, index: int) -> Task:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError()
        return self._tasks[index]

    def add_task(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def mark_done(self, index: int) -> Task:
        task = self._get(index)
        task.mark_as_done()
        return task

    def mark_not_done(self, index: int) -> Task:
        task = self._get(index)
        task.mark_as_not_done()
        return task

    def delete_task(self, index: int) -> Task:
        self._get(index)
        return self._tasks.pop(index)

    def list_tasks(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))
