"""Data models for the terminal to-do list.

Exposes the Task dataclass and the description normalization shared by
every path that builds one (interactive add and file load). A description
is a single line capped at MAX_DESCRIPTION_BYTES of UTF-8 so that the
one-task-per-line file format stays unambiguous.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

MAX_DESCRIPTION_BYTES = 255


def normalize_description(text: str) -> str:
    """Cut text at the first line break and cap it at MAX_DESCRIPTION_BYTES.

    Truncation never splits a multi-byte character. Characters that cannot
    be stored as UTF-8 (lone surrogates from undecodable terminal bytes)
    become '?'.
    """
    for i, ch in enumerate(text):
        if ch in "\r\n":
            text = text[:i]
            break
    raw = text.encode("utf-8", errors="replace")
    return raw[:MAX_DESCRIPTION_BYTES].decode("utf-8", errors="ignore")


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Single-line text, at most MAX_DESCRIPTION_BYTES bytes.
        completed: False until marked complete.
    """
    description: str
    completed: bool = False

    def __post_init__(self) -> None:
        self.description = normalize_description(self.description)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(description={self.description!r}, completed={self.completed})"


class TaskRow(NamedTuple):
    """One display row: 1-based position plus the task's fields."""
    position: int
    completed: bool
    description: str
