"""Shared logging helpers for profilesync."""

from __future__ import annotations

import logging

DEBUG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_FORMAT = "%(levelname)s %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger for CLI use.

    Progress lines are written to their own stream, so the default setup only
    surfaces INFO records tersely. ``verbose`` switches to DEBUG with logger
    names and timestamps, which is where the executed nix commands show up.
    Pass ``force=True`` to reconfigure an already initialised root logger.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=DEBUG_FORMAT if verbose else DEFAULT_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
