"""CLI logging configuration.

Log records go to stderr only so that stdout carries nothing but the
inventory table. Nothing is written to disk.

Usage from the CLI::

    from ioc_inventory.cli.logging import configure_cli_logging

    configure_cli_logging(verbose=verbose, quiet=quiet)
"""

from __future__ import annotations

import logging
import sys


def get_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the ``-v``/``-q`` flags to a log level (quiet wins)."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Configure logging for the ``ioc-inventory`` command.

    Args:
        verbose: Show INFO messages (scan counts, resolved paths).
        quiet: Only show errors.

    Returns:
        The level applied to the ``ioc_inventory`` logger.
    """
    level = get_log_level(verbose=verbose, quiet=quiet)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("ioc_inventory").setLevel(level)
    return level
