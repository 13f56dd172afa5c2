"""Terminal to-do list: an ordered task list persisted to a flat text file."""
from .errors import StorageError, TaskNotFoundError, TodoError
from .models import MAX_DESCRIPTION_BYTES, Task, TaskRow
from .store import TaskList

__all__ = [
    "MAX_DESCRIPTION_BYTES",
    "StorageError",
    "Task",
    "TaskList",
    "TaskNotFoundError",
    "TaskRow",
    "TodoError",
]
