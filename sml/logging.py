"""
Logging for the sml package and its command line tool.

Console messages go to stderr so that stdout carries only document
output. An optional log file receives everything down to DEBUG.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from .const import LOG_FILE_BACKUPS, LOG_FILE_MAX_BYTES


CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"

RESET = "\033[0m"

# Log level colors
LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;91m",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def console_level(verbose: bool = False, debug: bool = False, quiet: bool = False) -> int:
    """Map the -v/-d/-q flags to a console level; warnings by default."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    return logging.WARNING


def setup_logging_from_args(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    no_color: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """
    Configure the "sml" logger from command-line flags.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging
        quiet: Only log errors
        no_color: Disable ANSI colors on the console
        log_file: Optional rotating log file path

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger("sml")
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level(verbose, debug, quiet))
    use_colors = not no_color and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, namespaced under "sml"."""
    if name == "sml" or name.startswith("sml."):
        return logging.getLogger(name)
    return logging.getLogger(f"sml.{name}")
