# app/utils/logger.py
"""
Logging setup for the service: one console handler and one rotating file
handler on the root logger, installed once. Modules only call get_logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty at INFO; only their warnings matter here.
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx")

_HANDLER_TAG = "_fleet_handler"


def _installed(root: logging.Logger) -> list:
    return [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]


def configure_logging(level: str = None, log_dir: str = None) -> logging.Logger:
    """Install the service handlers on the root logger. Repeat calls are no-ops."""
    root = logging.getLogger()
    if _installed(root):
        return root

    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir or settings.LOG_DIR or DEFAULT_LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            filename=os.path.join(log_dir, settings.LOG_FILE),
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        ),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)

    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
