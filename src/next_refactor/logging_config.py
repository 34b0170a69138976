"""
Logging configuration for next-refactor.

Diagnostics go to stderr through a rich handler so that the ranked table on
stdout stays clean for piping.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

ROOT_LOGGER = "next_refactor"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging (every git invocation is logged)
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to append logs to

    Returns:
        Configured logger instance for next_refactor

    Raises:
        InvalidConfigError: If the log file cannot be opened for appending
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a")
        except OSError as e:
            raise InvalidConfigError("log_file", log_file, e.strerror or str(e)) from e
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'next_refactor.walker')
              If None, returns the root next_refactor logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
