import logging
import logging.config
import os
from app.core.config import settings

LOG_DIR = "logs"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout"
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "INFO",
            "formatter": "default",
            "filename": f"{LOG_DIR}/app.log",
            "maxBytes": 10485760,
            "backupCount": 5
        },
        "error_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "default",
            "filename": f"{LOG_DIR}/error.log",
            "maxBytes": 10485760,
            "backupCount": 5
        }
    },
    "root": {
        "level": "INFO",
        "handlers": ["console", "file", "error_file"]
    },
    "loggers": {
        "app": {
            "level": "INFO",
            "handlers": ["console", "file", "error_file"],
            "propagate": False
        },
        "app.middleware.logging": {
            "level": "INFO",
            "handlers": ["console", "file"],
            "propagate": False
        },
        "apscheduler": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False
        },
        "uvicorn.access": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False
        }
    }
}

def build_logging_config(level: str = None, to_file: bool = None) -> dict:
    level = (level or settings.LOG_LEVEL).upper()
    to_file = settings.LOG_TO_FILE if to_file is None else to_file

    config = {
        **LOGGING_CONFIG,
        "handlers": dict(LOGGING_CONFIG["handlers"]),
        "root": dict(LOGGING_CONFIG["root"]),
        "loggers": {name: dict(cfg) for name, cfg in LOGGING_CONFIG["loggers"].items()}
    }
    config["root"]["level"] = level
    config["loggers"]["app"]["level"] = level

    if not to_file:
        for name in ("file", "error_file"):
            config["handlers"].pop(name)
        config["root"]["handlers"] = ["console"]
        for logger_cfg in config["loggers"].values():
            logger_cfg["handlers"] = [h for h in logger_cfg["handlers"] if h == "console"]

    return config

def configure_logging(level: str = None, to_file: bool = None):
    config = build_logging_config(level, to_file)
    if "file" in config["handlers"]:
        os.makedirs(LOG_DIR, exist_ok=True)
    logging.config.dictConfig(config)
