"""
Logging configuration for buoy-drift.

Reports are written to stdout by the formatters; log records go through a
rich handler on stderr so scan progress and per-file failures never end up
inside JSON or GitHub annotation output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "buoy_drift"

# DriftConfig.verbosity -> level
VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    verbosity: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the buoy_drift logger with a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Only log errors (wins over ``verbose``)
        log_file: Optional file path to append plain-text logs to
        verbosity: A DriftConfig verbosity name; when given it replaces
            the ``verbose``/``quiet`` flags

    Returns:
        Configured logger instance for buoy_drift
    """
    if verbosity is None:
        verbosity = "quiet" if quiet else "verbose" if verbose else "normal"
    level = VERBOSITY_LEVELS[verbosity]
    debug = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            markup=False,
            show_time=debug,
            show_path=debug,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # force: every CLI invocation reconfigures, including repeated ones in one process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the buoy_drift namespace.

    Args:
        name: Module name (e.g., 'buoy_drift.scanning.scanner'); names outside
              the package are nested under it. None returns the root logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
