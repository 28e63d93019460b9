from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".prefs_editor_config.yaml"
DEFAULT_SETTINGS_FILE = "appsettings.json"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        return yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "")).strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", value)


def get_settings_path() -> Path:
    """Settings document: env override, then user config, then ./appsettings.json."""
    env_path = os.getenv("PREFS_EDITOR_SETTINGS")
    if env_path:
        return Path(env_path).expanduser()
    stored = str(_load_config().get("settings_path", "")).strip()
    if stored:
        return Path(stored).expanduser()
    return Path.cwd() / DEFAULT_SETTINGS_FILE


def set_settings_path(value: str) -> None:
    _set_value("settings_path", value)
