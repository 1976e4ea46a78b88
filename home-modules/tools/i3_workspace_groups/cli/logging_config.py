"""Logging setup for the workspace groups CLI.

Everything logs under the ``i3_workspace_groups`` logger. The command line
flags pick one verbosity:

- default: warnings only, e.g. conflicting group numbers in live names
- ``--verbose``: the i3 commands sent and guarded no-ops
- ``--debug``: IPC queries, group number allocation and index building
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import IO, Tuple


LOGGER_NAME = "i3_workspace_groups"

QUIET_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def select_level(verbose: bool = False, debug: bool = False) -> Tuple[int, str]:
    """Map the CLI flags to a log level and format; ``--debug`` wins."""
    if debug:
        return logging.DEBUG, DEBUG_FORMAT
    if verbose:
        return logging.INFO, VERBOSE_FORMAT
    return logging.WARNING, QUIET_FORMAT


def wants_color(stream: IO) -> bool:
    """Color only interactive streams, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ColoredFormatter(logging.Formatter):
    """Formatter that tints the level name with ANSI colors."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Records are shared between handlers, so restore the plain name
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI runs in
    one process do not duplicate output.

    Returns:
        The configured ``i3_workspace_groups`` logger
    """
    level, log_format = select_level(verbose, debug)
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    formatter_class = ColoredFormatter if wants_color(sys.stderr) else logging.Formatter
    handler.setFormatter(formatter_class(log_format))
    logger.addHandler(handler)
    return logger


@contextmanager
def log_timing(operation: str, logger: logging.Logger):
    """Log how long ``operation`` took, at INFO level.

    Examples:
        >>> with log_timing("focus-group", logger):
        ...     run()
        INFO: focus-group completed in 15.32ms
    """
    start = time.perf_counter()
    logger.debug(f"Starting: {operation}")

    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{operation} completed in {elapsed_ms:.2f}ms")
