"""Logging configuration for author.

Each invocation runs a single command, so the log is a short trace of that
command: what was asked, which repository root was used, and what changed.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "author"

STDERR_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def level_for(verbose: int) -> int:
    """Map the -v count to a level for stderr output."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: int = 0,
    log_file: Path | None = None,
    command: str = "list",
) -> logging.Logger:
    """Configure the author logger for one command.

    Warnings always reach stderr; -v adds INFO and -vv adds DEBUG. A log file,
    when given, is appended to and always records at DEBUG, independent of -v.

    Args:
        verbose: Verbosity level (0=warnings, 1=INFO, 2+=DEBUG)
        log_file: Optional path to append the invocation trace to
        command: Name of the command being run, recorded in the first line
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stderr_level = level_for(verbose)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(logging.Formatter(STDERR_FORMAT))
    logger.addHandler(stderr_handler)

    levels = [stderr_level]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)
        levels.append(logging.DEBUG)

    logger.setLevel(min(levels))
    logger.debug("author %s | cwd=%s", command, Path.cwd())
    return logger
