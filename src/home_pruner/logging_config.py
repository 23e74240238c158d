"""Logging configuration for home-pruner."""

import logging
from pathlib import Path
from typing import Optional

import typer

APP_NAME = "home-pruner"
LOG_FILENAME = "home-pruner.log"


def default_log_path() -> Path:
    return Path(typer.get_app_dir(APP_NAME)) / LOG_FILENAME


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    The session owns the terminal, so nothing is ever logged to the console.
    With ``debug`` every record goes to a log file, overwritten each run.

    Args:
        debug: If True, write DEBUG level messages to the log file
        log_file: Where to write the log, defaults to the app directory
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if not debug:
        root_logger.setLevel(logging.WARNING)
        root_logger.addHandler(logging.NullHandler())
        return

    root_logger.setLevel(logging.DEBUG)
    log_file = log_file or default_log_path()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = logging.FileHandler(log_file, mode="w")
    except OSError:
        file_handler = logging.NullHandler()
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
