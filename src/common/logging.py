"""Structured logging configuration for the blog build orchestrator."""

from __future__ import annotations

import logging
import sys


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = "blog_build",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        level: Logging level or level name (default INFO).
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def set_level(level: int | str, prefix: str = "build_orchestrator") -> None:
    """Apply a level to every configured logger under a name prefix."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger) or not name.startswith(prefix):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def resolve_level(name: str, default: int = logging.INFO) -> tuple[int, bool]:
    """Map a level name to its number.

    Returns:
        (level, known); unknown names map to ``default`` with known=False.
    """
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level, True
    return default, False
