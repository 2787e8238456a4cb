"""Centralized logging configuration for the ``budgetbook`` package.

- ``configure_logging(...)`` attaches a single append-mode ``FileHandler`` to
  the package root logger. Called once by the entry point at startup.
- ``get_logger(name)`` returns a logger by name; until configuration runs the
  package logger only carries a ``NullHandler``.

Modules never attach their own handlers.
"""

from __future__ import annotations

import logging

from budgetbook.config import LOG_FILE, LOG_LEVEL

_PKG_LOGGER_NAME = "budgetbook"
_FORMAT = "%(levelname)s: %(asctime)s %(filename)s:%(lineno)d: %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(log_file: str | None = None, level: int | str | None = None) -> logging.Handler | None:
    """Configure the package root logger exactly once.

    Returns the installed handler, or ``None`` when logging was already set up.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return None

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level if level is not None else LOG_LEVEL)
    handler = logging.FileHandler(log_file or LOG_FILE, mode="a", encoding="utf-8")
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True
    return handler


def reset_logging() -> None:
    """Detach and close handlers installed by ``configure_logging``."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until ``configure_logging`` runs."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
