"""Logging setup for clipview"""

import logging
from logging.config import dictConfig
from pathlib import Path


def configure_logging(level="INFO", log_file=None):
    level = level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_path),
            "formatter": "json",
            "level": level,
        }

    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": handlers,
        "loggers": {
            "clipview": {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
        },
    })

    logger = logging.getLogger("clipview")
    logger.debug("Logging initialized.")
    return logger
