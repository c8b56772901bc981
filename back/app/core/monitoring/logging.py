# Standard library imports
from collections.abc import MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Local application imports
from app.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ColourFormatter(logging.Formatter):
    """
    Console formatter that colours records by level, used in development.
    """

    # ANSI color codes
    GREY = "\x1b[38;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LEVEL_COLOURS = {
        logging.DEBUG: GREY,
        logging.INFO: GREY,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT)
        self._formatters = {
            level: logging.Formatter(colour + LOG_FORMAT + self.RESET) for level, colour in self.LEVEL_COLOURS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)


def _default_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    return logging.DEBUG if settings.DEBUG_MODE else logging.INFO


@lru_cache
def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a logger writing to stdout.

    Loggers are cached per name so handlers are attached only once. Output is
    coloured when ``LOG_COLOURS`` is on and plain otherwise, so production log
    shippers get clean lines. Warnings and errors additionally reach Sentry in
    production through the logging integration in ``app.core.monitoring.sentry``.

    Args:
        name: The name of the logger
        level: Optional logging level override, defaults to ``LOG_LEVEL`` or to
            DEBUG/INFO depending on ``DEBUG_MODE``

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = level if level is not None else _default_level()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColourFormatter() if settings.LOG_COLOURS else logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


class ContextLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Appends ``key=value`` context to every message, e.g. ``[issue_id=... user_id=...]``.
    """

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None):
        super().__init__(logger, context or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        if self.extra:
            context_str = " ".join(f"{key}={value}" for key, value in self.extra.items() if value is not None)
            if context_str:
                msg = f"{msg} [{context_str}]"
        return msg, kwargs


def get_contextual_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """Logger whose messages always carry the given identifiers (issue, user, reporter...)."""
    return ContextLoggerAdapter(get_logger(name), context)
