"""Logging setup for the whenly command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger for CLI use.

    The library itself only emits records; this is called by entry points.
    ``force=True`` replaces handlers installed earlier, e.g. by a test runner.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
