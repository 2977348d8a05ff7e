# src/lumina/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a command handler may touch during one session.

    The task store is owned by whoever opened it (cli.main); AppState only
    borrows it for the session and never closes it.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore
    task_list: TaskList
