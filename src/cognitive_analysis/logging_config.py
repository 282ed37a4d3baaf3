"""
Package logging.

Everything under the ``cognitive_analysis`` logger is rendered by rich on
stderr, leaving stdout to the metric tables and summaries.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "cognitive_analysis"


def _level_for(verbose: bool, quiet: bool) -> int:
    # quiet wins so scripted runs stay silent even with --verbose
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Route package log records to a rich handler on stderr.

    Calling it again replaces the previous handler, so each CLI command can
    pick its own level. Time and source location are only shown when
    ``verbose`` is set.
    """
    level = _level_for(verbose, quiet)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` (usually ``__name__``), kept under the package logger."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
