"""Rendering, user-facing messages and feedback actions shared by the front-ends.

The render helpers only see snapshots and Status values. The actions at the
bottom are the only place a front-end mutates the task list.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
import re, shutil, unicodedata

from models import CompletionOutcome, NoSelectionError, Status, Task, ValidationError
from tasklist import TaskListController
from theme import color, task_color, HEADER_COLOR, INDEX_COLOR, EMPTY_COLOR, BOLD

PENDING_MARKER = "•"
DONE_MARKER = "✅"
PLACEHOLDER = "Enter your task here..."
TITLE = "\U0001F4DD My To-Do List"
READY_STATUS = "Ready to add tasks! Total: 0"
MIN_WIDTH = 24
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
ZERO_WIDTH = frozenset("\u200b\u200c\u200d\ufe0f")

# feedback kinds, matching messagebox flavours
INFO = "info"
SUCCESS = "success"
WARNING = "warning"

MSG_ADDED = "Task added successfully!"
MSG_EMPTY_TEXT = "Please enter a task!"
MSG_DELETED = "Task deleted successfully!"
MSG_SELECT_DELETE = "Please select a task to delete!"
MSG_COMPLETED = "Task marked as complete! Great job! \U0001F389"
MSG_ALREADY_COMPLETE = "This task is already completed!"
MSG_SELECT_COMPLETE = "Please select a task to mark as complete!"
MSG_CLEARED = "All tasks cleared!"
MSG_ALREADY_EMPTY = "The task list is already empty!"
CONFIRM_DELETE = "Are you sure you want to delete this task?"
CONFIRM_CLEAR = "Are you sure you want to clear ALL tasks?"
CONFIRM_DELETE_TITLE = "Confirm Delete"
CONFIRM_CLEAR_TITLE = "Confirm Clear All"


@dataclass(frozen=True)
class Feedback:
    kind: str
    message: str

    @property
    def title(self) -> str:
        return self.kind.capitalize()


def task_label(task: Task) -> str:
    marker = DONE_MARKER if task.completed else PENDING_MARKER
    return f"{marker} {task.text}"


def status_text(status: Optional[Status]) -> str:
    """Status bar text; None means nothing has happened yet."""
    if status is None:
        return READY_STATUS
    return f"Total: {status.total} | Completed: {status.completed} | Pending: {status.pending}"


def initial_status(controller: TaskListController) -> Optional[Status]:
    """Status to show before any change; None (the ready text) for an empty list."""
    return controller.compute_status() if len(controller) else None


def confirm_delete_text(task: Task) -> str:
    return f"{CONFIRM_DELETE}\n{task_label(task)}"


def is_placeholder(raw_text: str) -> bool:
    return raw_text.strip() == PLACEHOLDER


# -------------------- terminal board --------------------
def render_board(tasks: Sequence[Task], status: Optional[Status],
                 selected: Optional[int] = None, width: Optional[int] = None) -> List[str]:
    """Lines of the terminal board: title, rule, numbered tasks, status."""
    if width is None:
        width = shutil.get_terminal_size((80, 24)).columns
    width = max(MIN_WIDTH, width)
    lines = [color(TITLE, HEADER_COLOR, BOLD), color('-' * width, HEADER_COLOR)]
    if not tasks:
        lines.append(color('(no tasks)', EMPTY_COLOR))
    for idx, task in enumerate(tasks):
        lines.extend(_wrap_task(idx, task, width, idx == selected))
    lines.append(color('-' * width, HEADER_COLOR))
    lines.append(status_text(status))
    return lines


def _wrap_task(idx: int, task: Task, width: int, is_selected: bool) -> List[str]:
    prefix_visible = f"{'>' if is_selected else ' '}{idx + 1}. "
    prefix_colored = color(prefix_visible, INDEX_COLOR)
    label = task_label(task)
    # at least 2 so a wide glyph always fits
    limit = max(2, width - len(prefix_visible))
    lines_raw: List[str] = []
    current = ''
    # split on single spaces so runs of spaces inside the text survive
    for w in label.split(' '):
        candidate = w if not current else current + ' ' + w
        if display_width(candidate) <= limit:
            current = candidate
            continue
        if current:
            lines_raw.append(current)
        # hard-split words wider than the column
        while display_width(w) > limit:
            head = _take_columns(w, limit)
            lines_raw.append(head)
            w = w[len(head):]
        current = w
    if current:
        lines_raw.append(current)
    col = task_color(task.completed)
    indent = ' ' * len(prefix_visible)
    out: List[str] = []
    for i, raw_line in enumerate(lines_raw):
        lead = prefix_colored if i == 0 else indent
        out.append(lead + color(raw_line, col))
    return out


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or ch in ZERO_WIDTH:
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1


def display_width(s: str) -> int:
    """Terminal columns taken by `s`, ignoring ANSI codes; emoji count as 2."""
    return sum(_char_width(ch) for ch in ANSI_RE.sub('', s))


def _take_columns(s: str, limit: int) -> str:
    used = 0
    for i, ch in enumerate(s):
        used += _char_width(ch)
        if used > limit:
            return s[:max(1, i)]
    return s


# -------------------- actions --------------------
# Each action calls the controller once and turns the result (or the
# recoverable error) into user feedback. Destructive actions ask `confirm`
# first and return None when the user declines. `confirm` gets (title, message).
Confirm = Callable[[str, str], bool]


def add_action(controller: TaskListController, raw_text: str) -> Feedback:
    if is_placeholder(raw_text):
        raw_text = ''
    try:
        controller.add_task(raw_text)
    except ValidationError:
        return Feedback(WARNING, MSG_EMPTY_TEXT)
    return Feedback(SUCCESS, MSG_ADDED)


def delete_action(controller: TaskListController, index: Optional[int],
                  confirm: Confirm) -> Optional[Feedback]:
    try:
        task = controller[index]
    except NoSelectionError:
        return Feedback(WARNING, MSG_SELECT_DELETE)
    if not confirm(CONFIRM_DELETE_TITLE, confirm_delete_text(task)):
        return None
    controller.delete_task(index)
    return Feedback(SUCCESS, MSG_DELETED)


def complete_action(controller: TaskListController, index: Optional[int]) -> Feedback:
    try:
        outcome = controller.mark_complete(index)
    except NoSelectionError:
        return Feedback(WARNING, MSG_SELECT_COMPLETE)
    if outcome is CompletionOutcome.ALREADY_COMPLETE:
        return Feedback(INFO, MSG_ALREADY_COMPLETE)
    return Feedback(SUCCESS, MSG_COMPLETED)


def clear_action(controller: TaskListController, confirm: Confirm) -> Optional[Feedback]:
    if len(controller) == 0:
        return Feedback(INFO, MSG_ALREADY_EMPTY)
    if not confirm(CONFIRM_CLEAR_TITLE, CONFIRM_CLEAR):
        return None
    controller.clear_all()
    return Feedback(SUCCESS, MSG_CLEARED)
