from __future__ import annotations

import logging
from pathlib import Path

import pytest

import settings
from logging_setup import setup_logging
from settings import Settings, get_settings


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s == Settings(ui="tui", alt_screen=True, log_level="WARNING", log_dir=None,
                         window_size="500x600")


def test_values_from_env(clean_env, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("TODO_UI", " GUI ")
    monkeypatch.setenv("TODO_ALT_SCREEN", "off")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_WINDOW_SIZE", "640X480")
    s = Settings.from_env()
    assert s.ui == "gui"
    assert s.alt_screen is False
    assert s.log_level == "DEBUG"
    assert s.log_dir == Path(tmp_path)
    assert s.window_size == "640x480"


@pytest.mark.parametrize("name, raw, attr, expected", [
    ("TODO_UI", "web", "ui", "tui"),
    ("TODO_WINDOW_SIZE", "big", "window_size", "500x600"),
    ("TODO_WINDOW_SIZE", "0x100", "window_size", "500x600"),
    ("TODO_LOG_DIR", "  ", "log_dir", None),
    ("TODO_LOG_LEVEL", "", "log_level", "WARNING"),
])
def test_invalid_values_fall_back(clean_env, monkeypatch, name, raw, attr, expected) -> None:
    monkeypatch.setenv(name, raw)
    assert getattr(Settings.from_env(), attr) == expected


@pytest.mark.parametrize("raw, expected", [
    (None, True), ("1", True), ("yes", True), ("0", False), ("false", False), ("OFF", False), ("", False),
])
def test_truthy_env(raw, expected) -> None:
    assert settings.truthy_env(raw, True) is expected


def test_get_settings_is_cached(clean_env, monkeypatch) -> None:
    first = get_settings()
    monkeypatch.setenv("TODO_UI", "gui")
    assert get_settings() is first


def test_settings_are_frozen() -> None:
    with pytest.raises(AttributeError):
        Settings().ui = "gui"  # type: ignore[misc]


# -------------------- logging --------------------
def test_setup_logging_writes_file(restore_root_logging, tmp_path) -> None:
    setup_logging(console_level="warning", log_dir=tmp_path / "logs")
    logging.getLogger("tasklist").debug("added task #0 'x'")
    for h in logging.getLogger().handlers:
        h.flush()
    text = (tmp_path / "logs" / "todo.log").read_text(encoding="utf-8")
    assert "DEBUG tasklist: added task #0 'x'" in text


def test_setup_logging_console_only(restore_root_logging) -> None:
    setup_logging(console_level=logging.INFO)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.INFO


def test_console_filter_drops_third_party_noise(restore_root_logging) -> None:
    setup_logging(console_level="bogus")
    handler = logging.getLogger().handlers[0]
    assert handler.level == logging.WARNING

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert handler.filter(record("cli", logging.WARNING))
    assert handler.filter(record("tasklist.sub", logging.INFO))
    assert not handler.filter(record("urllib3", logging.WARNING))
    assert handler.filter(record("urllib3", logging.ERROR))
    assert not handler.filter(record("py.warnings", logging.WARNING))
