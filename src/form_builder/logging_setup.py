"""
Logging configuration for the form builder engine.

All modules log through loggers under the ``form_builder`` namespace.
Records can go to the console and, optionally, to a JSON Lines file.
"""

import json
import logging
import sys

from form_builder.config import get_config

ROOT_LOGGER = "form_builder"

_HANDLER_MARK = "_form_builder_handler"


class JsonLinesFormatter(logging.Formatter):
    """
    Formats each record as one JSON object per line.

    Useful for persistent logging and later analysis.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> logging.Logger:
    """
    Configure logging for the form builder engine.

    Args:
        enabled: Whether logging is enabled.
        console: Whether to print records to stderr.
        verbose: Whether to include DEBUG records.
        file_path: Optional file path to write JSON Lines records to.

    Returns:
        The package root logger.

    Example:
        >>> from form_builder.logging_setup import setup_logging
        >>> setup_logging(verbose=True, file_path="form_builder.jsonl")
    """
    config = get_config()
    logger = logging.getLogger(ROOT_LOGGER)
    _remove_handlers(logger)

    if not enabled:
        logger.disabled = True
        return logger

    logger.disabled = False
    logger.setLevel(logging.DEBUG if verbose else config.log_level.upper())

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        handlers.append(console_handler)

    file_path = file_path or config.log_file
    if file_path:
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(JsonLinesFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)

    return logger


def disable_logging() -> None:
    """Silence all form builder logging."""
    logging.getLogger(ROOT_LOGGER).disabled = True


def enable_logging() -> None:
    """Re-enable form builder logging with the existing handlers."""
    logging.getLogger(ROOT_LOGGER).disabled = False
