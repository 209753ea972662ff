# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Logs/config live under XDG dirs
- The task file defaults to ./task.txt in the working directory
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "todoZ"

DEFAULT_TASKS_FILE = Path("task.txt")


def _xdg(var: str, fallback: Path) -> Path:
    return Path(os.environ.get(var) or fallback).expanduser()


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", Path.home() / ".local" / "state") / APP_NAME


def logs_dir() -> Path:
    return state_dir() / "logs"


def config_dir() -> Path:
    return _xdg("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME
