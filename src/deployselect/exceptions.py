"""Exception hierarchy for deployselect.

All deployselect exceptions inherit from :class:`DeploySelectError`, so a
command can catch every resolution failure with a single ``except`` clause
while still handling specific failure modes (an empty candidate set, a failed
collaborator, an aborted prompt) separately.
"""

from __future__ import annotations


class DeploySelectError(Exception):
    """Base exception for all deployselect errors."""


class NotFoundError(DeploySelectError):
    """Raised when no candidate of the requested kind exists.

    Attributes:
        kind: Plural resource kind, e.g. ``"services"``.
        scope: Optional scope the search ran in, e.g. ``"app phonetool"``.
    """

    def __init__(self, kind: str, scope: str | None = None, *, message: str | None = None) -> None:
        self.kind = kind
        self.scope = scope
        if message is None:
            message = f"no {kind} found" if not scope else f"no {kind} found in {scope}"
        super().__init__(message)


class CollaboratorError(DeploySelectError):
    """Raised when a store, workspace or filesystem call fails.

    Attributes:
        stage: Short description of the call, e.g. ``"list environments"``.
        cause: The underlying exception.
    """

    def __init__(self, stage: str, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")


class PromptError(DeploySelectError):
    """Raised when the prompt backend fails or the user aborts.

    Attributes:
        action: What was being asked, e.g. ``"select service"``.
        cause: The underlying exception.
    """

    def __init__(self, action: str, cause: BaseException) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"{action}: {cause}")


class VerificationError(DeploySelectError):
    """Raised when a targeted existence check for explicit flags fails."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")


class FilterError(DeploySelectError):
    """Raised by filter predicates that cannot evaluate a candidate."""


class ConfigError(DeploySelectError):
    """Raised when selector configuration is invalid."""


class InputError(DeploySelectError):
    """Raised by a prompt backend when it cannot read an answer."""


class InputAbortedError(InputError):
    """Raised by a prompt backend when the user cancels a prompt."""


class InvalidARNError(DeploySelectError):
    """Raised when a resource ARN cannot be parsed."""


class DuplicateLabelError(DeploySelectError):
    """Raised when two candidates render to the same label."""


class UnknownLabelError(DeploySelectError, KeyError):
    """Raised when a label does not belong to the labelled candidate set."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


__all__ = [
    "CollaboratorError",
    "ConfigError",
    "DeploySelectError",
    "DuplicateLabelError",
    "FilterError",
    "InputAbortedError",
    "InputError",
    "InvalidARNError",
    "NotFoundError",
    "PromptError",
    "UnknownLabelError",
    "VerificationError",
]
