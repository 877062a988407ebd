# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-21
# Updated: 2026-10-16
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os

import colorlog

BASE_LOGGER_NAME = "jina_corr"
LEVEL_ENV_VAR = "JINA_CORR_LOG_LEVEL"

_CONSOLE_FORMAT = "%(log_color)s%(asctime)s [%(levelname)s] %(name)s:%(reset)s %(message)s"
_LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _level_from_env() -> int:
    name = os.getenv(LEVEL_ENV_VAR, "INFO").strip().upper()
    return getattr(logging, name, logging.INFO)


def _configure(logger: logging.Logger) -> logging.Logger:
    # Both CLIs log to stderr so read-url can keep stdout for its JSON output
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=_CONSOLE_FORMAT,
            datefmt="%H:%M:%S",
            log_colors=_LEVEL_COLORS,
        )
    )
    logger.addHandler(handler)
    logger.setLevel(_level_from_env())
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the project base name, e.g. jina_corr.cli."""
    full_name = f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME
    return _configure(logging.getLogger(full_name))


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after module + class, e.g.
    jina_corr.ingestion.EmbeddingFileLoader.EmbeddingFileLoader
    """
    return get_logger(f"{cls.__module__}.{cls.__name__}")
