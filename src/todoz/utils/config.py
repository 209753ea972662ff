# src/todoz/utils/config.py
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from .paths import config_dir, DEFAULT_TASKS_FILE

log = logging.getLogger(__name__)

TASKS_FILE_ENV = "TODOZ_TASKS_FILE"

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 600,
        "height": 400,
    },
    "ui": {
        "hide_done": False
    },
    "storage": {
        "tasks_file": str(DEFAULT_TASKS_FILE)
    }
}

def settings_file() -> Path:
    return config_dir() / "settings.json"

def _merged(data: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(_DEFAULTS)
    for key, value in data.items():
        if isinstance(out.get(key), dict):
            if isinstance(value, dict):
                out[key].update(value)
            else:
                log.warning("Ignoring settings section %r: not a JSON object", key)
        else:
            out[key] = value
    return out

def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return _merged(data)
            log.warning("Ignoring settings file %s: not a JSON object", path)
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", path, e)
    return copy.deepcopy(_DEFAULTS)

def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")

def tasks_file_path(settings: Dict[str, Any]) -> Path:
    # env var wins over settings.json
    env = os.environ.get(TASKS_FILE_ENV)
    if env:
        return Path(env).expanduser()
    storage = settings.get("storage")
    configured = storage.get("tasks_file") if isinstance(storage, dict) else None
    if not isinstance(configured, str) or not configured.strip():
        return DEFAULT_TASKS_FILE
    return Path(configured).expanduser()
