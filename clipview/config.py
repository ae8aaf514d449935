"""Settings stored as JSON in the user's home directory"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional

CONFIG_FILE = os.path.expanduser("~/.clipview_config.json")

logger = logging.getLogger("clipview.config")


@dataclass
class Settings:
    poll_interval_ms: int = 300
    auto_paste: bool = True
    hide_on_restore: bool = True
    show_hotkey: str = "<ctrl>+<alt>+v"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    window_width: int = 450
    window_height: int = 550


def config_path(path=None):
    return path or os.environ.get("CLIPVIEW_CONFIG") or CONFIG_FILE


def _matches_default(value, default):
    # Optional settings default to None and take a string
    if default is None:
        return value is None or isinstance(value, str)
    # exact type: bool must not pass for int, nor int for bool
    return type(value) is type(default)


def load_config(path=None):
    path = config_path(path)
    settings = Settings()
    if not os.path.exists(path):
        return settings

    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"⚠️ Config load error: {e}")
        return settings

    if not isinstance(config, dict):
        logger.warning(f"⚠️ Config load error: expected an object in {path}")
        return settings

    defaults = {f.name: getattr(settings, f.name) for f in fields(Settings)}
    for key, value in config.items():
        if key not in defaults:
            continue
        if not _matches_default(value, defaults[key]):
            logger.warning(f"⚠️ Config value {key}={value!r} has the wrong type, using {defaults[key]!r}")
            continue
        setattr(settings, key, value)
    return settings


def save_config(settings, path=None):
    path = config_path(path)
    try:
        with open(path, 'w') as f:
            json.dump(asdict(settings), f, indent=2)
    except OSError as e:
        logger.warning(f"⚠️ Config save error: {e}")
