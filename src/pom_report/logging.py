"""Logging configuration for pom-report."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from pom_report.console import err_console

LOGGER_NAME = "pom_report"


def resolve_level(verbose: bool = False, quiet: bool = False, log_level: str | None = None) -> int:
    """Pick a log level: explicit level > verbose > quiet > INFO."""
    if log_level:
        return getattr(logging, log_level.upper())
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_level: str | None = None,
    console: Console = err_console,
) -> None:
    """Configure the package logger.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Show only WARNING and above
        log_level: Explicit log level (overrides verbose/quiet)
        console: Console the handler renders to (stderr by default)
    """
    level = resolve_level(verbose=verbose, quiet=quiet, log_level=log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``pom_report`` namespace."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
