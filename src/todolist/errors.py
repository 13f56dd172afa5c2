"""Exceptions raised by the task store and its persistence layer."""
from __future__ import annotations
from pathlib import Path
from typing import Union


class TodoError(Exception):
    """Base class for recoverable to-do list errors."""


class TaskNotFoundError(TodoError, IndexError):
    """No task at the requested 1-based position."""

    def __init__(self, index: int, length: int, action: str = "update"):
        self.index = index
        self.length = length
        if length == 0:
            message = f"List is empty, nothing to {action}."
        else:
            message = f"Task {index} not found."
        super().__init__(message)


class StorageError(TodoError, OSError):
    """The task file could not be opened for reading or writing."""

    def __init__(self, path: Union[str, Path], mode: str, reason: str = ""):
        self.path = Path(path)
        self.mode = mode
        message = f"Could not open file {self.path} for {mode}."
        if reason:
            message = f"{message[:-1]}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]
