"""Single-choice and cascading multi-choice resolution.

The resolver decides whether a prompt is needed at all: an empty candidate
set is an error, a single candidate is chosen without asking, and only a real
choice reaches the prompter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from deployselect.contracts.prompt import Option, PromptConfig, Prompter
from deployselect.core.labels import LabelBuilder
from deployselect.exceptions import NotFoundError, PromptError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Resolver:
    """Turns a candidate set into a decision, prompting only when necessary."""

    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    @property
    def prompter(self) -> Prompter:
        return self._prompter

    def select_one(
        self,
        message: str,
        help: str,
        candidates: Sequence[T],
        *,
        kind: str,
        scope: str | None = None,
        plural: str | None = None,
        labels: LabelBuilder[T] | None = None,
        extra_options: Sequence[str] = (),
        config: PromptConfig | None = None,
        action: str | None = None,
    ) -> T | str:
        """Resolve exactly one candidate.

        Args:
            message: Prompt text.
            help: Help text shown on request.
            candidates: Ordered, duplicate-free candidates.
            kind: Singular resource kind used in logs and errors, e.g. ``"service"``.
            scope: Optional scope for the not-found message, e.g. ``"app phonetool"``.
            plural: Plural kind if not simply ``kind + "s"``.
            labels: Label builder; defaults to ``str`` of each candidate.
            extra_options: Fixed choices appended after the candidates. Any extra
                option forces a prompt and is returned as-is when chosen.
            config: Presentation settings forwarded to the prompter.
            action: Prompt error context; defaults to ``"select <kind>"``.

        Returns:
            The chosen candidate, or the chosen extra option string.

        Raises:
            NotFoundError: No candidates and no extra options.
            PromptError: The prompter failed.
        """
        if not candidates and not extra_options:
            raise NotFoundError(plural or f"{kind}s", scope)

        builder: LabelBuilder[T] = labels or LabelBuilder()
        labelled = builder.labels(candidates)
        if len(candidates) == 1 and not extra_options:
            only = next(iter(labelled))
            logger.info("Only found one %s, defaulting to: %s", kind, only)
            return candidates[0]

        choice = self._ask(
            action or f"select {kind}",
            lambda: self._prompter.select_one(message, help, [*labelled, *extra_options], config),
        )
        if choice in extra_options and choice not in labelled:
            return choice
        return builder.unlabel(choice, labelled)

    def select_option(
        self,
        message: str,
        help: str,
        options: Sequence[Option],
        *,
        kind: str,
        scope: str | None = None,
        plural: str | None = None,
        config: PromptConfig | None = None,
        action: str | None = None,
    ) -> str:
        """Like :meth:`select_one` for hinted options; returns the option value."""
        if not options:
            raise NotFoundError(plural or f"{kind}s", scope)
        if len(options) == 1:
            logger.info("Only found one %s, defaulting to: %s", kind, options[0].value)
            return options[0].value
        return self._ask(
            action or f"select {kind}",
            lambda: self._prompter.select_option(message, help, options, config),
        )

    def select_many(
        self,
        message: str,
        help: str,
        candidates: Sequence[T],
        *,
        stop_label: str,
        kind: str,
        scope: str | None = None,
        plural: str | None = None,
        labels: LabelBuilder[T] | None = None,
        config_for_round: Callable[[int], PromptConfig] | None = None,
    ) -> list[T]:
        """Cascading selection over a shrinking pool.

        Every round offers the remaining candidates followed by ``stop_label``,
        even when a single candidate remains. Picking ``stop_label`` or running
        out of candidates ends the loop.

        Returns:
            Chosen candidates in selection order.

        Raises:
            NotFoundError: ``candidates`` is empty.
            PromptError: Any round's prompt failed; no partial result is returned.
        """
        plural = plural or f"{kind}s"
        if not candidates:
            raise NotFoundError(plural, scope)

        builder: LabelBuilder[T] = labels or LabelBuilder()
        remaining = builder.labels(candidates)
        selected: list[T] = []
        round_number = 0
        while remaining:
            round_number += 1
            config = config_for_round(round_number) if config_for_round else None
            choices = [*remaining, stop_label]
            choice = self._ask(
                f"select {plural}",
                lambda: self._prompter.select_one(message, help, choices, config),
            )
            if choice == stop_label:
                break
            selected.append(builder.unlabel(choice, remaining))
            del remaining[choice]
        return selected

    @staticmethod
    def _ask(action: str, ask: Callable[[], T]) -> T:
        try:
            return ask()
        except Exception as exc:
            raise PromptError(action, exc) from exc


__all__ = ["Resolver"]
