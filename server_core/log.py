from __future__ import annotations

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import IO, Optional

from .config import APP_VERSION, LOG_DATEFMT, LOG_FORMAT, LOGGER_NAME

_LOGGER: Optional[logging.Logger] = None
_LISTENER: Optional[QueueListener] = None

# ANSI colours per level, terminal only
_LEVEL_COLOURS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class _VersionFilter(logging.Filter):
    """Stamps every record with the running version (rendered as v=...)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.v = APP_VERSION
        return True


class _ColourFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        colour = _LEVEL_COLOURS.get(record.levelno)
        if colour is None:
            return line
        return f"{colour}{line}{_RESET}"


def _is_tty(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def configure_logger(stream: Optional[IO[str]] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Terminal logger with an asynchronous drain:
      logger -> QueueHandler -> queue -> QueueListener thread -> StreamHandler

    Lines are coloured by level only when the stream is a terminal.
    Calling again replaces the previous drain.
    """
    global _LOGGER, _LISTENER

    shutdown_logger()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for f in list(logger.filters):
        logger.removeFilter(f)

    out = stream if stream is not None else sys.stdout
    formatter_cls = _ColourFormatter if _is_tty(out) else logging.Formatter

    console = logging.StreamHandler(out)
    console.setFormatter(formatter_cls(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    records: "queue.Queue[logging.LogRecord]" = queue.Queue(-1)
    listener = QueueListener(records, console, respect_handler_level=True)

    logger.addFilter(_VersionFilter())
    logger.addHandler(QueueHandler(records))
    logger.propagate = False

    listener.start()

    _LOGGER = logger
    _LISTENER = listener
    return logger


def get_logger() -> logging.Logger:
    if _LOGGER is not None:
        return _LOGGER
    return configure_logger()


def shutdown_logger() -> None:
    """
    Detach the queue handler, then stop the drain thread.
    Every queued record is written before this returns.
    """
    global _LOGGER, _LISTENER

    if _LOGGER is not None:
        for h in list(_LOGGER.handlers):
            if isinstance(h, QueueHandler):
                _LOGGER.removeHandler(h)
    if _LISTENER is not None:
        _LISTENER.stop()
    _LISTENER = None
    _LOGGER = None


atexit.register(shutdown_logger)
