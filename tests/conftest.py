# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist import config, theme
from todolist.store import TaskList


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Keep tests independent of the developer's shell and any .env file:
    - run from an empty tmp dir
    - clear TODO_* and color variables
    - drop cached settings and force colors off
    """
    monkeypatch.chdir(tmp_path)
    for name in ("TODO_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FILE", "TODO_PRIMARY",
                 "TODO_PENDING", "TODO_DONE", "FORCE_COLOR", "NO_COLOR", "COLORTERM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_SETTINGS", None)
    theme.configure(enabled=False)
    yield
    theme.configure(enabled=False)


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def task_list() -> TaskList:
    tl = TaskList()
    tl.add("Buy milk")
    tl.add("Pay rent")
    tl.add("Call mom")
    return tl
