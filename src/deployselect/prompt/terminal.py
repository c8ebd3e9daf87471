"""Interactive terminal prompter built on questionary.

questionary reports Ctrl-C and EOF by returning ``None`` from ``ask()``;
:class:`TerminalPrompter` turns that into :class:`InputAbortedError` so the
resolver can wrap it like any other prompt failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import questionary
from rich.console import Console
from rich.markup import escape

from deployselect.contracts.prompt import Option, PromptConfig, Validator
from deployselect.exceptions import InputAbortedError


class TerminalPrompter:
    """:class:`~deployselect.contracts.prompt.Prompter` for an interactive terminal.

    Args:
        console: Console that final messages and help text are written to.
            Defaults to stderr so stdout stays clean for command output.
        show_help: Print each prompt's help text before asking.
    """

    def __init__(self, *, console: Console | None = None, show_help: bool = False) -> None:
        self._console = console or Console(stderr=True)
        self._show_help = show_help

    def select_one(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> str:
        config = config or PromptConfig()
        self._help(help)
        answer = questionary.select(
            message,
            choices=list(options),
            default=config.default_input if config.default_input in options else None,
            instruction=config.hint,
        ).ask()
        return self._finish(str(self._answered(answer)), config)

    def select_option(
        self,
        message: str,
        help: str,
        options: Sequence[Option],
        config: PromptConfig | None = None,
    ) -> str:
        config = config or PromptConfig()
        self._help(help)
        choices = [questionary.Choice(str(option), value=option.value) for option in options]
        answer = questionary.select(message, choices=choices, instruction=config.hint).ask()
        return self._finish(str(self._answered(answer)), config)

    def multi_select(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        validator: Validator | None = None,
        config: PromptConfig | None = None,
    ) -> list[str]:
        config = config or PromptConfig()
        self._help(help)
        kwargs: dict[str, Any] = {"choices": list(options), "instruction": config.hint}
        if validator is not None:
            kwargs["validate"] = _adapt(validator)
        answer = questionary.checkbox(message, **kwargs).ask()
        selected = [str(item) for item in self._answered(answer)]
        self._finish(", ".join(selected), config)
        return selected

    def get(
        self,
        message: str,
        help: str,
        validator: Validator | None = None,
        config: PromptConfig | None = None,
    ) -> str:
        config = config or PromptConfig()
        self._help(help)
        kwargs: dict[str, Any] = {"default": config.default_input or "", "instruction": config.hint}
        if validator is not None:
            kwargs["validate"] = _adapt(validator)
        answer = questionary.text(message, **kwargs).ask()
        return self._finish(str(self._answered(answer)), config)

    def confirm(self, message: str, help: str, config: PromptConfig | None = None) -> bool:
        config = config or PromptConfig()
        self._help(help)
        answer = questionary.confirm(message, default=False, instruction=config.hint).ask()
        confirmed = bool(self._answered(answer))
        self._finish("Yes" if confirmed else "No", config)
        return confirmed

    def _help(self, help: str) -> None:
        if self._show_help and help:
            self._console.print(f"[dim]{escape(help)}[/dim]")

    def _finish(self, answer: str, config: PromptConfig) -> str:
        if config.final_message:
            self._console.print(f"{escape(config.final_message)} [bold]{escape(answer)}[/bold]", highlight=False)
        return answer

    @staticmethod
    def _answered(answer: Any) -> Any:
        if answer is None:
            raise InputAbortedError("prompt aborted")
        return answer


def _adapt(validator: Validator) -> Any:
    """Convert a raise-on-invalid validator into questionary's ``True``/message form."""

    def _validate(value: Any) -> bool | str:
        try:
            validator(value)
        except Exception as exc:
            return str(exc)
        return True

    return _validate


__all__ = ["TerminalPrompter"]
