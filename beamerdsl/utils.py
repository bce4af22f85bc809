"""Logging setup for applications using beamerdsl"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``beamerdsl`` logger.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose: INFO level - shows config loading
    - Debug (BEAMERDSL_DEBUG=1): DEBUG level - shows every render pass
    """
    debug = bool(os.environ.get("BEAMERDSL_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("beamerdsl")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
