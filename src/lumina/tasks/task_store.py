# src/lumina/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType

from ..core.errors import CorruptRecordError, StorageError
from .task_codec import decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store.

    The store is an explicitly owned handle: it must be opened before use and
    closed afterwards, normally through `with TaskStore(path) as store:`.
    Only one owner can hold it open at a time.

    I/O failures never escape: bootstrap and read failures are logged (load
    then yields an empty list), write failures are logged and reported as False.
    """

    def __init__(self, path: str | Path = "data/data.txt") -> None:
        self._path = Path(path)
        self._is_open = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._is_open

    # ---- scope ----

    def open(self) -> TaskStore:
        if self._is_open:
            raise StorageError(f"Task store {self._path} is already open.")
        self._bootstrap()
        self._is_open = True
        logger.debug("TaskStore opened path=%s", self._path)
        return self

    def close(self) -> None:
        if self._is_open:
            logger.debug("TaskStore closed path=%s", self._path)
        self._is_open = False

    def __enter__(self) -> TaskStore:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> None:
        if not self._is_open:
            raise StorageError(f"Task store {self._path} is not open.")

    def _bootstrap(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created task file %s", self._path)
        except OSError:
            logger.exception("Failed to create task file %s", self._path)

    # ---- data ----

    def load(self) -> list[Task]:
        """Read all valid tasks; corrupt lines are logged and skipped."""
        self._require_open()
        try:
            raw = self._path.read_bytes()
        except OSError:
            logger.exception("Failed to read tasks from %s", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        # decoded per line, so one bad byte costs one record, not the file
        for lineno, raw_line in enumerate(raw.splitlines(), start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError:
                line = None
            if line is not None and not line.strip():
                continue
            try:
                if line is None:
                    raise CorruptRecordError(raw_line.decode("utf-8", errors="replace"))
                tasks.append(decode_task(line))
            except CorruptRecordError as e:
                skipped += 1
                logger.warning("%s", e)
                logger.debug("Skipped %s:%d", self._path, lineno)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the file with one record per task."""
        self._require_open()
        lines = [encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            return False
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
        return True
