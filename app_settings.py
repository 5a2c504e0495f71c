import json
import os
from typing import Any

import ui_config


CURRENT_SETTINGS_VERSION = 1

FADE_TRIGGERS = ("frame", "timeout")

DEFAULT_SETTINGS = {
    "settings_version": CURRENT_SETTINGS_VERSION,
    "fade_trigger": "frame",
    "fade_delay_ms": 16,
    "window_width": ui_config.WINDOW_WIDTH,
    "window_height": ui_config.WINDOW_HEIGHT,
    "heading": "Rainbow",
}


def default_settings_path() -> str:
    base = os.getenv("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(base, "rainbow-arc", "settings.json")


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _as_choice(value: Any, default: str, choices: tuple[str, ...]) -> str:
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()
    return default


def _as_int(value: Any, default: int, minimum: int | None = None, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if minimum is not None and value < minimum:
        return default
    if maximum is not None and value > maximum:
        return default
    return value


def normalize_settings(raw: dict[str, Any] | None) -> dict[str, Any]:
    raw = raw or {}
    normalized = dict(DEFAULT_SETTINGS)
    normalized["fade_trigger"] = _as_choice(raw.get("fade_trigger"), DEFAULT_SETTINGS["fade_trigger"], FADE_TRIGGERS)
    normalized["fade_delay_ms"] = _as_int(raw.get("fade_delay_ms"), DEFAULT_SETTINGS["fade_delay_ms"], minimum=0, maximum=1000)
    # Window must hold the 308x154 rainbow plus page padding.
    normalized["window_width"] = _as_int(raw.get("window_width"), DEFAULT_SETTINGS["window_width"], minimum=400, maximum=7680)
    normalized["window_height"] = _as_int(raw.get("window_height"), DEFAULT_SETTINGS["window_height"], minimum=300, maximum=4320)
    normalized["heading"] = _as_str(raw.get("heading"), DEFAULT_SETTINGS["heading"])
    normalized["settings_version"] = CURRENT_SETTINGS_VERSION
    return normalized


def load_settings(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        return dict(DEFAULT_SETTINGS)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return dict(DEFAULT_SETTINGS)

    if not isinstance(data, dict):
        return dict(DEFAULT_SETTINGS)
    return normalize_settings(data)


def save_settings(path: str, settings: dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    data = normalize_settings(settings)
    temp_file = f"{path}.tmp"
    with open(temp_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.replace(temp_file, path)
