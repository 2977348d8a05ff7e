# src/lumina/core/errors.py

"""
Error taxonomy.

Every LuminaError carries a user-facing message: the command registry turns it
into a reply and the session goes on. Nothing in here is fatal.
"""

from __future__ import annotations


class LuminaError(Exception):
    """Base class for recoverable errors."""


class InvalidTaskError(LuminaError):
    """A task was constructed with an empty or unstorable field."""


class MalformedCommandError(LuminaError):
    """Missing/duplicate markers, empty fields or wrong argument count."""


class TaskIndexError(LuminaError):
    """mark/unmark/delete referenced a task that does not exist."""

    def __init__(self, message: str = "Oh no! Lumina detected index out of bounds! Please try again") -> None:
        super().__init__(message)


class CorruptRecordError(LuminaError):
    """A persisted line failed kind/arity validation."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Corrupt data entry: {line}")
        self.line = line


class StorageError(LuminaError):
    """The backing store handle was used outside of its open scope."""
