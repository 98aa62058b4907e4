"""
Logging setup for Placement Hub.

Console output for the process manager plus a rotating file under LOG_DIR.
Anything that may carry credentials goes through sanitize_log_data first.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from app.core import config

LOG_FILE_NAME = "placement_hub.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

# Libraries that are too chatty at INFO
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "sqlalchemy.engine", "alembic.runtime.migration")

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = ("password", "token", "secret")


def _configure(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_level: str = "INFO", log_dir: str = None):
    """
    Configure the root logger. Safe to call again; previous handlers are replaced.

    Args:
        log_level: Level name; unknown names fall back to INFO
        log_dir: Directory for the rotating log file (defaults to LOG_DIR)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    log_path = Path(log_dir or config.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        # Release the previous log file
        if isinstance(handler, logging.FileHandler):
            handler.close()

    root.addHandler(_configure(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))
    root.addHandler(_configure(
        RotatingFileHandler(
            log_path / LOG_FILE_NAME,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        ),
        level,
        FILE_FORMAT,
    ))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def _mask_database_url(value):
    try:
        return make_url(value).render_as_string(hide_password=True)
    except (ArgumentError, TypeError):
        return REDACTED


def sanitize_log_data(data: dict) -> dict:
    """
    Return a copy of ``data`` that is safe to log.

    Password/token/secret keys are replaced outright, database URLs keep
    everything but the password, and nested dicts are cleaned the same way.
    """
    sanitized = {}
    for key, value in data.items():
        name = str(key).lower()
        if any(sensitive in name for sensitive in SENSITIVE_KEYS):
            sanitized[key] = REDACTED
        elif name.endswith("database_url") and value:
            sanitized[key] = _mask_database_url(value)
        elif isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        else:
            sanitized[key] = value
    return sanitized
