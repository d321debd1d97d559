"""
Logging configuration for the Interview Simulator.

Module loggers are children of a single "interview_sim" logger, which owns the
handlers. Handlers are attached once, the first time any logger is set up.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_FILE, LOG_LEVEL

ROOT_LOGGER_NAME = "interview_sim"

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def _level(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.INFO)


def _configure_root(log_level: str, log_file: Optional[Path], format_string: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_level(log_level))
    if root.handlers:
        return root

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a'))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Get a module logger writing to the shared console (and optional file) handlers.

    Args:
        name: Logger name, nested under "interview_sim"
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            If None, uses LOG_LEVEL from config.
        log_file: Optional path to log file. If None, uses LOG_FILE from config
            (console only when that is unset too).
        format_string: Custom format string for the shared handlers

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("question_generator")
        >>> logger.info("Generated 10 questions")
    """
    log_level = log_level or LOG_LEVEL
    if log_file is None and LOG_FILE:
        log_file = LOG_FILE

    _configure_root(log_level, Path(log_file) if log_file else None, format_string or DEFAULT_FORMAT)

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    logger.setLevel(_level(log_level))
    return logger
