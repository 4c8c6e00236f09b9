from __future__ import annotations

import logging
from typing import Iterator

import pytest

import settings
from tasklist import TaskListController


@pytest.fixture()
def controller() -> TaskListController:
    return TaskListController()


@pytest.fixture()
def filled(controller: TaskListController) -> TaskListController:
    """Buy milk (done), Walk dog, Call mom."""
    controller.add_task("Buy milk")
    controller.add_task("Walk dog")
    controller.add_task("Call mom")
    controller.mark_complete(0)
    return controller


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop TODO_* variables and the cached Settings for the test."""
    for name in ("TODO_UI", "TODO_ALT_SCREEN", "TODO_LOG_LEVEL", "TODO_LOG_DIR", "TODO_WINDOW_SIZE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "_settings", None)
    yield


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
