"""Task list controller: owns the ordered tasks, the selection and the status.

Indices are 0-based and never wrap: -1 is out of range, not "last".
Every failed call raises before touching state, so a call either fully
applies or leaves the list exactly as it was.
"""
import logging
from dataclasses import replace
from typing import Callable, Iterator, List, Optional, Tuple

from models import (
    ClearOutcome,
    CompletionOutcome,
    NoSelectionError,
    Status,
    Task,
    ValidationError,
)

logger = logging.getLogger(__name__)

StatusListener = Callable[[Status], None]


class TaskListController:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._selected: Optional[int] = None
        self._listeners: List[StatusListener] = []

    # -------------------- queries --------------------
    def snapshot(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def compute_status(self) -> Status:
        completed = sum(1 for t in self._tasks if t.completed)
        total = len(self._tasks)
        return Status(total, completed, total - completed)

    def __len__(self) -> int:
        return len(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._require_index(index)]

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    # -------------------- selection --------------------
    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def select(self, index: Optional[int]) -> Optional[int]:
        """Record the presentation layer's selection.

        An absent or out-of-range index clears the selection. Returns the
        selection actually stored.
        """
        self._selected = index if self._in_range(index) else None
        return self._selected

    # -------------------- listeners --------------------
    def subscribe(self, listener: StatusListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        status = self.compute_status()
        logger.debug("status total=%d completed=%d pending=%d", *status)
        for listener in list(self._listeners):
            listener(status)

    # -------------------- task operations --------------------
    def add_task(self, raw_text: str) -> Task:
        text = (raw_text or '').strip()
        if not text:
            logger.info("rejected empty task text")
            raise ValidationError()
        task = Task(text=text)
        self._tasks.append(task)
        logger.debug("added task #%d %r", len(self._tasks) - 1, text)
        self._changed()
        return task

    def delete_task(self, index: Optional[int] = None) -> Task:
        """Remove a task immediately. Callers confirm with the user first."""
        idx = self._require_index(index)
        task = self._tasks.pop(idx)
        if self._selected is not None:
            if self._selected == idx:
                self._selected = None
            elif self._selected > idx:
                self._selected -= 1
        logger.debug("deleted task #%d %r", idx, task.text)
        self._changed()
        return task

    def mark_complete(self, index: Optional[int] = None) -> CompletionOutcome:
        idx = self._require_index(index)
        task = self._tasks[idx]
        if task.completed:
            logger.debug("task #%d already complete", idx)
            return CompletionOutcome.ALREADY_COMPLETE
        self._tasks[idx] = replace(task, completed=True)
        logger.debug("completed task #%d %r", idx, task.text)
        self._changed()
        return CompletionOutcome.MARKED_COMPLETE

    def clear_all(self) -> ClearOutcome:
        """Remove every task. Callers confirm with the user first."""
        if not self._tasks:
            return ClearOutcome.ALREADY_EMPTY
        count = len(self._tasks)
        self._tasks.clear()
        self._selected = None
        logger.debug("cleared %d tasks", count)
        self._changed()
        return ClearOutcome.CLEARED

    # -------------------- index checks --------------------
    def _in_range(self, index: Optional[int]) -> bool:
        if index is None or isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._tasks)

    def _require_index(self, index: Optional[int]) -> int:
        if index is None:
            index = self._selected
        if not self._in_range(index):
            logger.info("no task at index %r", index)
            raise NoSelectionError(index)
        return index  # type: ignore[return-value]

    def __str__(self) -> str:
        total, completed, pending = self.compute_status()
        return f'Total: {total} tasks, Completed: {completed}, Pending: {pending}'
