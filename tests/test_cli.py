# tests/test_cli.py

from __future__ import annotations

import builtins
from pathlib import Path

import pytest

from todolist import theme
from todolist.cli import CLI, format_rows
from todolist.models import Task, TaskRow
from todolist.store import TaskList


def feed(monkeypatch: pytest.MonkeyPatch, *answers: str) -> None:
    """Replace input() with scripted answers; EOF once they run out."""
    it = iter(answers)

    def fake_input(prompt: str = "") -> str:
        print(prompt, end="")
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def run(monkeypatch, capsys, task_list: TaskList, path: Path, *answers: str) -> str:
    feed(monkeypatch, *answers)
    CLI(task_list, path).run()
    return capsys.readouterr().out


def test_format_rows_plain() -> None:
    rows = [TaskRow(1, True, "Buy milk"), TaskRow(2, False, "Pay rent")]
    assert format_rows(rows) == ["1. [X] Buy milk", "2. [ ] Pay rent"]


def test_format_rows_colored_strips_to_plain(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    theme.configure()
    lines = format_rows([TaskRow(1, False, "Pay rent")])
    assert "\033[" in lines[0]
    assert theme.strip_ansi(lines[0]) == "1. [ ] Pay rent"


def test_add_list_and_save_quit(monkeypatch, capsys, tasks_path: Path) -> None:
    tl = TaskList()
    out = run(monkeypatch, capsys, tl, tasks_path, "1", "Buy milk", "1", "Pay rent", "2", "5")
    assert "Task added." in out
    assert "1. [ ] Buy milk" in out
    assert "2. [ ] Pay rent" in out
    assert "Saving tasks and quitting..." in out
    assert tasks_path.read_text(encoding="utf-8") == "0,Buy milk\n0,Pay rent\n"


def test_blank_description_is_rejected(monkeypatch, capsys, tasks_path: Path) -> None:
    tl = TaskList()
    out = run(monkeypatch, capsys, tl, tasks_path, "1", "   ", "5")
    assert "Description required." in out
    assert tl.is_empty()


def test_mark_and_delete(monkeypatch, capsys, tasks_path: Path) -> None:
    tl = TaskList([Task("Buy milk"), Task("Pay rent")])
    out = run(monkeypatch, capsys, tl, tasks_path, "3", "2", "4", "1", "5")
    assert "Task 2 marked as complete." in out
    assert "Task 1 deleted." in out
    assert tl.tasks == [Task("Pay rent", completed=True)]
    assert tasks_path.read_text(encoding="utf-8") == "1,Pay rent\n"


def test_not_found_is_reported_and_loop_continues(monkeypatch, capsys, tasks_path: Path) -> None:
    tl = TaskList([Task("only")])
    out = run(monkeypatch, capsys, tl, tasks_path, "3", "9", "4", "0", "2", "5")
    assert "Error: Task 9 not found." in out
    assert "Error: Task 0 not found." in out
    assert "1. [ ] only" in out


def test_empty_list_messages(monkeypatch, capsys, tasks_path: Path) -> None:
    out = run(monkeypatch, capsys, TaskList(), tasks_path, "2", "4", "1", "5")
    assert "Your to-do list is empty." in out
    assert "Error: List is empty, nothing to delete." in out


def test_invalid_input_messages(monkeypatch, capsys, tasks_path: Path) -> None:
    out = run(monkeypatch, capsys, TaskList(), tasks_path, "abc", "9", "3", "two", "5")
    assert "Invalid input. Please enter a number." in out
    assert "Invalid choice. Please select from 1-5." in out
    assert "Invalid number." in out


def test_eof_saves_before_exit(monkeypatch, capsys, tasks_path: Path) -> None:
    tl = TaskList()
    out = run(monkeypatch, capsys, tl, tasks_path, "1", "Buy milk")
    assert "Interrupted. Goodbye." in out
    assert tasks_path.read_text(encoding="utf-8") == "0,Buy milk\n"


def test_failed_save_keeps_loop_running(monkeypatch, capsys, tmp_path: Path) -> None:
    blocked = tmp_path / "blocked"
    blocked.mkdir()
    tl = TaskList([Task("keep me")])
    out = run(monkeypatch, capsys, tl, blocked, "5", "2")
    assert "Error: Could not open file" in out
    # the menu came back and listed the task after the failed save
    assert "1. [ ] keep me" in out
    assert not list(tmp_path.glob("*.tmp")) and not list(tmp_path.glob(".*.tmp"))


def test_undecodable_input_is_reported_and_loop_continues(
    monkeypatch: pytest.MonkeyPatch, capsys, tasks_path: Path
) -> None:
    answers = iter([b"\xff", "1", b"\xe9", "1", "Buy milk", "5"])

    def fake_input(prompt: str = "") -> str:
        print(prompt, end="")
        answer = next(answers)
        if isinstance(answer, bytes):
            raise UnicodeDecodeError("utf-8", answer, 0, 1, "invalid start byte")
        return answer

    monkeypatch.setattr(builtins, "input", fake_input)
    tl = TaskList([Task("unsaved")])
    CLI(tl, tasks_path).run()
    out = capsys.readouterr().out
    assert out.count("Invalid input. Could not decode text.") == 2
    assert "Task added." in out
    assert tasks_path.read_text(encoding="utf-8") == "0,unsaved\n0,Buy milk\n"
