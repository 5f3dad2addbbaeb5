"""Diagnostic logging setup for the lettercalc CLI.

Records go to stderr through rich, so they never mix with the result printed
on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from lettercalc.config import log_level_from_env


def configure_logging(verbose: bool = False) -> str:
    """Install a RichHandler on the root logger.

    Args:
        verbose: Force DEBUG regardless of LETTERCALC_LOG.

    Returns:
        The level name in effect.
    """
    level = "DEBUG" if verbose else log_level_from_env()
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logging.basicConfig(level=level, format="%(name)s: %(message)s", handlers=[handler], force=True)
    return level
