"""Contracts for the interactive prompt backend."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from pydantic import BaseModel

Validator = Callable[[Any], None]
"""Input validator. Raises any exception to reject the answer."""


class PromptConfig(BaseModel):
    """Presentation-only settings for a single prompt.

    None of these settings affect which candidate is resolved.

    Attributes:
        default_input: Pre-filled answer for free-text prompts.
        final_message: Text echoed once the user has answered.
        hint: Short hint rendered next to the prompt.
    """

    default_input: str | None = None
    final_message: str | None = None
    hint: str | None = None

    model_config = {"frozen": True}


class Option(BaseModel):
    """A choice with an optional hint, e.g. ``frontend (uninitialized)``."""

    value: str
    hint: str = ""

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.value if not self.hint else f"{self.value} ({self.hint})"


class Prompter(Protocol):
    """Narrow interface over the interactive terminal.

    Implementations raise :class:`~deployselect.exceptions.InputError`
    (or :class:`~deployselect.exceptions.InputAbortedError` on
    cancel) when no answer can be obtained.
    """

    def select_one(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> str: ...

    def select_option(
        self,
        message: str,
        help: str,
        options: Sequence[Option],
        config: PromptConfig | None = None,
    ) -> str: ...

    def multi_select(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        validator: Validator | None = None,
        config: PromptConfig | None = None,
    ) -> list[str]: ...

    def get(
        self,
        message: str,
        help: str,
        validator: Validator | None = None,
        config: PromptConfig | None = None,
    ) -> str: ...

    def confirm(self, message: str, help: str, config: PromptConfig | None = None) -> bool: ...


__all__ = ["Option", "PromptConfig", "Prompter", "Validator"]
