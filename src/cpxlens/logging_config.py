"""
Logging configuration for cpxlens.

Log records go to stderr through rich, so that reports written to stdout
stay machine readable. The level follows the ``verbosity`` of the
analysis configuration.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the cpxlens loggers for one analysis run.

    Calling it again replaces the handlers of the previous call.

    Args:
        verbosity: quiet (errors only), normal (warnings) or verbose (debug)
        log_file: Optional file path; records are appended with timestamps

    Returns:
        The root cpxlens logger
    """
    level = _LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # file paths in messages may contain brackets
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("cpxlens")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``cpxlens`` namespace.

    Args:
        name: Module name (e.g., 'cpxlens.complexity.tree_method')
              If None, returns the root cpxlens logger
    """
    if name is None:
        return logging.getLogger("cpxlens")

    if not name.startswith("cpxlens"):
        name = f"cpxlens.{name}"

    return logging.getLogger(name)
