"""Persistence helpers (load/save) for the task list.

File format is plain UTF-8 text, one task per line:

    <completed>,<description>

e.g. "1,Buy milk" or "0,Study for exam". Load is tolerant: lines that do
not parse are skipped so a partly corrupted file still yields every good
task. Save writes to a temporary sibling and renames it over the target,
so a failed save never leaves a truncated file behind.
"""
from __future__ import annotations
import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import StorageError
from .models import Task

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# optional whitespace, signed integer flag, comma, description (may be empty)
LINE_RE = re.compile(r"^\s*([+-]?\d+),(.*)$")


def parse_line(line: str) -> Optional[Task]:
    """Parse one stored line; return None when it is malformed."""
    match = LINE_RE.match(line.rstrip("\r\n"))
    if not match:
        return None
    flag, description = match.groups()
    return Task(description=description, completed=int(flag) != 0)


def format_line(task: Task) -> str:
    return f"{1 if task.completed else 0},{task.description}\n"


class Storage:
    @staticmethod
    def load_tasks(path: PathLike) -> Optional[List[Task]]:
        """Read tasks from disk in file order.

        Missing file -> None (not an error; the caller starts fresh).
        Raises StorageError if the file exists but cannot be read.
        """
        path = Path(path)
        tasks: List[Task] = []
        skipped = 0
        try:
            with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
                for lineno, line in enumerate(f, start=1):
                    task = parse_line(line)
                    if task is None:
                        skipped += 1
                        logger.debug("Skipping malformed line %d in %s", lineno, path)
                        continue
                    tasks.append(task)
        except FileNotFoundError:
            logger.info("No task file at %s", path)
            return None
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            raise StorageError(path, "reading", e.strerror or str(e)) from e
        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), path, skipped)
        return tasks

    @staticmethod
    def save_tasks(tasks: Iterable[Task], path: PathLike) -> None:
        """Atomically overwrite path with the given tasks.

        Raises StorageError if the file cannot be written; the previous
        contents (if any) are left untouched in that case. A symlinked
        path keeps its link (the link target is replaced) and an existing
        file keeps its permission bits.
        """
        path = Path(path)
        target = Path(os.path.realpath(path)) if path.is_symlink() else path
        tmp_name: Optional[str] = None
        try:
            directory = target.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=directory)
            count = 0
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                for task in tasks:
                    f.write(format_line(task))
                    count += 1
            if target.is_file():
                os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            logger.warning("Failed to write %s: %s", path, e)
            raise StorageError(path, "writing", e.strerror or str(e)) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name)
        logger.info("Saved %d tasks to %s", count, path)
