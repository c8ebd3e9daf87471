"""Helpers shared by the resolution engine."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from deployselect.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


@contextmanager
def collaborator_stage(stage: str) -> Iterator[None]:
    """Wrap collaborator failures raised inside the block as :class:`CollaboratorError`.

    A :class:`CollaboratorError` from a nested stage passes through so a failure
    is never wrapped twice. Any other error, including malformed records that
    raise :class:`InvalidARNError`, is wrapped with this stage.
    """
    logger.debug("%s", stage)
    try:
        yield
    except CollaboratorError:
        raise
    except Exception as exc:
        raise CollaboratorError(stage, exc) from exc


def ordinal(n: int) -> str:
    """Render ``1`` as ``"1st"``, ``2`` as ``"2nd"`` and so on."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


__all__ = ["collaborator_stage", "ordinal"]
