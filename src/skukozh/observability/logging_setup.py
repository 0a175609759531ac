"""Logging configuration for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "skukozh-rich"


def configure_logging(verbose: bool = False) -> None:
    """Route ``skukozh`` loggers to stderr through rich.

    Decision narration is logged at INFO, so it only shows up when verbose.
    """
    logger = logging.getLogger("skukozh")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
