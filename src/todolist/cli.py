"""Interactive menu loop for the task list.

The loop owns one TaskList and one task file path. Every store error is
recoverable here: it is printed and the menu comes back.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from . import theme
from .errors import StorageError, TaskNotFoundError
from .models import TaskRow
from .store import TaskList

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    "Add a new task",
    "List all tasks",
    "Mark a task as complete",
    "Delete a task",
    "Save and Quit",
)


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _read_line(prompt: str) -> Optional[str]:
    """input() that reports undecodable bytes instead of raising."""
    try:
        return input(prompt)
    except UnicodeDecodeError:
        print("Invalid input. Could not decode text.")
        return None


def format_rows(rows: List[TaskRow]) -> List[str]:
    """Render task rows as 'N. [X] description' lines."""
    lines: List[str] = []
    for row in rows:
        mark = 'X' if row.completed else ' '
        status_col = theme.STATUS_COLOR[row.completed]
        lines.append(
            color_id(row.position) + ' ' + theme.color(f"[{mark}] {row.description}", status_col)
        )
    return lines


def color_id(position: int) -> str:
    return theme.color(f"{position}.", theme.ID_COLOR)


class CLI:
    def __init__(self, task_list: TaskList, path: Union[str, Path]):
        self.task_list: TaskList = task_list
        self.path: Path = Path(path)

    def run(self) -> None:
        """Main menu loop; returns after a successful save-and-quit or EOF."""
        logger.info("Menu loop started (file=%s, tasks=%d)", self.path, len(self.task_list))
        try:
            while True:
                self._print_menu()
                raw = _read_line("Enter your choice: ")
                if raw is None:
                    continue
                choice = _parse_int(raw)
                if choice is None:
                    print("Invalid input. Please enter a number.")
                    continue
                if choice == 5:
                    print("Saving tasks and quitting...")
                    if self._save():
                        break
                    continue
                self._handle_choice(choice)
        except (KeyboardInterrupt, EOFError):
            print()
            if self._save():
                print("Interrupted. Goodbye.")
        logger.info("Menu loop finished.")

    # -------------------- command dispatch --------------------
    def _handle_choice(self, choice: int) -> None:
        if choice == 1:
            self._add()
        elif choice == 2:
            self._list()
        elif choice == 3:
            self._mark()
        elif choice == 4:
            self._delete()
        else:
            print("Invalid choice. Please select from 1-5.")

    def _print_menu(self) -> None:
        print()
        print(theme.color("--- To-Do List ---", theme.HEADER_COLOR, theme.BOLD))
        for number, label in enumerate(MENU_ITEMS, start=1):
            print(f"{number}. {label}")

    # -------------------- individual actions --------------------
    def _add(self) -> None:
        description = _read_line("Enter task description: ")
        if description is None:
            return
        if not description.strip():
            print("Description required.")
            return
        self.task_list.add(description)
        print("Task added.")

    def _list(self) -> None:
        if self.task_list.is_empty():
            print()
            print(theme.color("Your to-do list is empty.", theme.EMPTY_COLOR))
            return
        print()
        print(theme.color("--- Your Tasks ---", theme.HEADER_COLOR, theme.BOLD))
        for line in format_rows(self.task_list.rows()):
            print(line)

    def _read_index(self, prompt: str) -> Optional[int]:
        raw = _read_line(prompt)
        if raw is None:
            return None
        index = _parse_int(raw)
        if index is None:
            print("Invalid number.")
        return index

    def _mark(self) -> None:
        index = self._read_index("Enter task number to mark complete: ")
        if index is None:
            return
        try:
            self.task_list.mark_complete(index)
        except TaskNotFoundError as e:
            self._error(str(e))
            return
        print(f"Task {index} marked as complete.")

    def _delete(self) -> None:
        index = self._read_index("Enter task number to delete: ")
        if index is None:
            return
        try:
            self.task_list.delete(index)
        except TaskNotFoundError as e:
            self._error(str(e))
            return
        print(f"Task {index} deleted.")

    def _save(self) -> bool:
        try:
            self.task_list.save(self.path)
        except StorageError as e:
            self._error(str(e))
            return False
        return True

    @staticmethod
    def _error(message: str) -> None:
        print(theme.color(f"Error: {message}", theme.ERROR_COLOR))
