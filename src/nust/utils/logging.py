"""Logging setup for the Nust desktop app.

Everything at the configured level goes to ``~/.nust/logs/nust.log``. The
terminal that launched the editor only sees warnings and errors.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

__all__ = ["DEFAULT_LOG_DIR", "LOG_FILE_NAME", "setup_logging"]

DEFAULT_LOG_DIR = Path.home() / ".nust" / "logs"
LOG_FILE_NAME = "nust.log"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_QT_LOGGERS = ("PySide6", "shiboken6")


def setup_logging(level: int = logging.INFO, *, log_dir: Path | str | None = None) -> Path | None:
    """Install the file and console handlers on the root logger.

    Returns the log file path, or ``None`` when the log directory cannot be
    used; the console handler is installed either way. Calling this again
    replaces the handlers from the previous call.
    """

    formatter = logging.Formatter(_FORMAT)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    directory = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    log_path: Path | None = directory / LOG_FILE_NAME
    file_error: OSError | None = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=512_000, backupCount=2, encoding="utf-8")
    except OSError as exc:
        log_path = None
        file_error = exc
    else:
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    for name in _QT_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if file_error is not None:
        logging.getLogger(__name__).warning("File logging disabled (%s): %s", directory, file_error)
    return log_path
