"""Data models for the task list.

Task values are immutable; the controller swaps in a new Task when one is
marked complete, so snapshots handed to a renderer never change under it.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Fields:
        text: Trimmed, non-empty display text.
        completed: One-way flag; there is no way back to pending.
    """
    text: str
    completed: bool = False

    def __iter__(self):
        # allows `text, completed = task`
        yield self.text
        yield self.completed


class Status(NamedTuple):
    total: int
    completed: int
    pending: int


class CompletionOutcome(StrEnum):
    MARKED_COMPLETE = "marked-complete"
    ALREADY_COMPLETE = "already-complete"


class ClearOutcome(StrEnum):
    CLEARED = "cleared"
    ALREADY_EMPTY = "already-empty"


class TaskListError(Exception):
    """Base class for recoverable task list errors."""


class ValidationError(TaskListError):
    def __init__(self, message: str = "task text required"):
        super().__init__(message)


class NoSelectionError(TaskListError):
    def __init__(self, index: Optional[int] = None):
        self.index = index
        if index is None:
            message = "no task selected"
        else:
            message = f"no task at index {index}"
        super().__init__(message)
