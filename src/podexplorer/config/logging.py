"""Logging setup for the CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "podexplorer"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file that receives plain-text log records
        level: Level name used when not verbose (default WARNING)

    Returns:
        The configured ``podexplorer`` logger
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(log_level)
    logger.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        file_handler.setLevel(logging.DEBUG if verbose else log_level)
        logger.addHandler(file_handler)

    return logger
