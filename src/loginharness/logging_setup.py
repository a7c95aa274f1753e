"""Logging setup: a persistent log file plus rich console output."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "loginharness"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FILE_HANDLER_NAME = "loginharness.file"
CONSOLE_HANDLER_NAME = "loginharness.console"


def configure_logging(
    log_file: str | Path | None,
    verbose: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """Attach the file and console handlers to the package logger.

    Calling this again replaces the handlers from the previous call. The
    log file is opened in append mode; if it cannot be opened the run
    continues with console logging only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    for handler in list(logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            logger.removeHandler(handler)
            handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to set up log file %s: %s", path, exc)
        else:
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    return logger
