"""Settings loaded from environment variables (+ optional .env).

Real environment variables win over values from .env.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"
UI_CHOICES = ("tui", "gui")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_geometry(name: str, default: str) -> str:
    raw = _env(name, default).strip().lower()
    w, sep, h = raw.partition("x")
    if sep and w.isdigit() and h.isdigit() and int(w) > 0 and int(h) > 0:
        return f"{int(w)}x{int(h)}"
    return default


@dataclass(frozen=True, slots=True)
class Settings:
    ui: str = "tui"
    alt_screen: bool = True
    log_level: str = "WARNING"
    log_dir: Optional[Path] = None
    window_size: str = "500x600"

    @staticmethod
    def from_env() -> "Settings":
        ui = _env(_k("UI"), "tui").strip().lower()
        if ui not in UI_CHOICES:
            ui = "tui"
        return Settings(
            ui=ui,
            alt_screen=truthy_env(os.getenv(_k("ALT_SCREEN")), True),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR")),
            window_size=_env_geometry(_k("WINDOW_SIZE"), "500x600"),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
