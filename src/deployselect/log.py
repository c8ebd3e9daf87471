"""Logging setup for commands embedding deployselect."""

from __future__ import annotations

import logging
import sys


def configure_logging(verbose: bool) -> None:
    """Send deployselect's log records to stderr.

    Verbose mode adds DEBUG tracing of every collaborator call; otherwise only
    the informational "defaulting to" notices are shown.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(name)s %(message)s" if verbose else "%(message)s",
        stream=sys.stderr,
    )


__all__ = ["configure_logging"]
