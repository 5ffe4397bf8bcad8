import configparser
import logging
from pathlib import Path

from ball_ui.ui_config import (
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
    THEME_ORDER,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "theme_name": "Daylight",
    "window_width": str(WINDOW_WIDTH),
    "window_height": str(WINDOW_HEIGHT),
    "show_guides": "False",
}


def _as_size(value, default: str, minimum: int, maximum: int) -> str:
    try:
        size = int(value)
    except Exception:
        return default
    return str(min(maximum, max(minimum, size)))


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: str(v) for k, v in settings.items() if k in DEFAULT_SETTINGS})

    if data["theme_name"] not in THEME_ORDER:
        data["theme_name"] = DEFAULT_SETTINGS["theme_name"]
    data["window_width"] = _as_size(data["window_width"], DEFAULT_SETTINGS["window_width"], MIN_WINDOW_WIDTH, MAX_WINDOW_WIDTH)
    data["window_height"] = _as_size(data["window_height"], DEFAULT_SETTINGS["window_height"], MIN_WINDOW_HEIGHT, MAX_WINDOW_HEIGHT)
    data["show_guides"] = str(data["show_guides"].strip().lower() in ("1", "true", "yes", "on"))
    return data


def load_settings():
    parser = configparser.ConfigParser()
    if not SETTINGS_PATH.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
    except Exception:
        logger.warning("Unreadable settings file %s, using defaults", SETTINGS_PATH)
        return dict(DEFAULT_SETTINGS)
    if "ui" not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser["ui"]))


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser()
    parser["ui"] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)
