# src/lumina/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes an already opened task store,
loads the persisted tasks and wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(task_store: TaskStore, *, settings=None) -> AppState:
    """
    Create AppState around an open task store.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_list = TaskList(task_store.load())
    logger.debug("Initial state ready with %d tasks.", len(task_list))

    return AppState(settings=settings, task_store=task_store, task_list=task_list)
