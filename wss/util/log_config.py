"""
Logging configuration for the wss tool.

Provides centralized logging setup with clean, concise terminal output.
Console logs go to stderr so stdout only carries the measurement table.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LEVEL = logging.WARNING


def setup_logger(
    name: str,
    level: int = DEFAULT_LEVEL,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: WARNING)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Clean format: [LEVEL] message
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        logger.setLevel(min(level, logging.DEBUG))

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as 'info' or a numeric level into a logging level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_package_loggers(level: Union[int, str], log_file: Optional[Path] = None) -> None:
    """
    Re-apply level and file handler to every logger already created under the
    ``wss`` package. Modules call setup_logger at import time with defaults;
    the CLI calls this once settings and verbosity are known.
    """
    numeric_level = resolve_level(level)
    for name in list(logging.root.manager.loggerDict):
        if name == "wss" or name.startswith("wss."):
            setup_logger(name, level=numeric_level, log_file=log_file)
