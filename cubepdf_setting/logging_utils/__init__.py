"""Shared logger for the settings package."""

import logging
import threading
from pathlib import Path


LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"
LOG_DIR = Path.home() / ".cubepdf" / "logs"

_logger: logging.Logger | None = None
_console: logging.Handler | None = None
_logger_lock = threading.Lock()


def get_logger(name: str = "cubepdf_setting") -> logging.Logger:
    """Return the shared logger, creating it on first use."""
    global _logger, _console
    if _logger is not None:
        return _logger
    with _logger_lock:
        if _logger is not None:
            return _logger
        _logger = logging.getLogger(name)
        _logger.setLevel(logging.DEBUG)

        _console = logging.StreamHandler()
        _console.setLevel(logging.INFO)
        _console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        _logger.addHandler(_console)
    return _logger


def set_console_level(level: int) -> None:
    get_logger()
    if _console is not None:
        _console.setLevel(level)


def setup_file_logging(log_dir: str | Path | None = None, task_id: str = "") -> Path:
    """Also log to ``<log_dir>/<task_id>.log`` and return that path."""
    logger = get_logger()

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / (f"{task_id}.log" if task_id else "settings.log")

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path.absolute():
            return log_path

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    return log_path
