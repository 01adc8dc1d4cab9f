"""Logging setup for the lensqv entry points."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr so stdout carries only the JSON report.

    ``force=True`` replaces handlers installed by an earlier call, which tests rely on.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
