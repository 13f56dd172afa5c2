"""Task list logic: ordered task sequence, positional mutation, persistence.

Positions are 1-based and purely positional: deleting task 2 renumbers
every task after it. The store never touches the terminal; rendering
lives in cli.py.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .errors import TaskNotFoundError
from .models import Task, TaskRow
from .storage import Storage

logger = logging.getLogger(__name__)


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self.found_file: bool = False

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def rows(self) -> List[TaskRow]:
        """Return (position, completed, description) for every task, in order."""
        return [
            TaskRow(position, task.completed, task.description)
            for position, task in enumerate(self.tasks, start=1)
        ]

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task(description=description)
        self.tasks.append(task)
        logger.debug("Task added at position %d", len(self.tasks))
        return task

    def mark_complete(self, index: int) -> Task:
        task = self.tasks[self._offset(index, "mark")]
        task.completed = True
        logger.debug("Task %d marked complete", index)
        return task

    def delete(self, index: int) -> Task:
        task = self.tasks.pop(self._offset(index, "delete"))
        logger.debug("Task %d deleted (%d remaining)", index, len(self.tasks))
        return task

    def _offset(self, index: int, action: str) -> int:
        """Map a 1-based position to a list offset or raise TaskNotFoundError."""
        if index < 1 or index > len(self.tasks):
            raise TaskNotFoundError(index, len(self.tasks), action)
        return index - 1

    # -------------------- persistence --------------------
    def load(self, path: Union[str, Path]) -> int:
        """Replace the current tasks with those stored at path.

        A missing file leaves the list empty and found_file False.
        Returns the number loaded.
        """
        loaded = Storage.load_tasks(path)
        self.found_file = loaded is not None
        self.tasks = loaded or []
        return len(self.tasks)

    def save(self, path: Union[str, Path]) -> None:
        Storage.save_tasks(self.tasks, path)

    def __str__(self) -> str:
        done = sum(1 for t in self.tasks if t.completed)
        return f'Tasks: {len(self.tasks)} total, {done} completed'
