"""Rendering candidates as unique prompt labels and mapping answers back."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from typing import Generic, TypeVar

from deployselect.exceptions import DuplicateLabelError, UnknownLabelError

T = TypeVar("T")


class LabelBuilder(Generic[T]):
    """Builds ``name`` or ``name (attribute)`` labels for a candidate set.

    A candidate whose bare name is shared with another candidate in the same
    set is qualified with its attribute. With ``always_qualify`` every label is
    qualified.
    """

    def __init__(
        self,
        *,
        name: Callable[[T], str] = str,
        attribute: Callable[[T], str] | None = None,
        always_qualify: bool = False,
    ) -> None:
        if always_qualify and attribute is None:
            raise ValueError("always_qualify requires an attribute")
        self._name = name
        self._attribute = attribute
        self._always_qualify = always_qualify

    def labels(self, candidates: Sequence[T]) -> dict[str, T]:
        """Label every candidate, preserving order."""
        counts = Counter(self._name(c) for c in candidates)
        labelled: dict[str, T] = {}
        for candidate in candidates:
            text = self._render(candidate, shared=counts[self._name(candidate)] > 1)
            if text in labelled:
                raise DuplicateLabelError(f"duplicate label {text!r}")
            labelled[text] = candidate
        return labelled

    def label(self, candidate: T, candidates: Sequence[T]) -> str:
        shared = sum(1 for c in candidates if self._name(c) == self._name(candidate)) > 1
        return self._render(candidate, shared=shared)

    @staticmethod
    def unlabel(label: str, labelled: Mapping[str, T]) -> T:
        try:
            return labelled[label]
        except KeyError:
            raise UnknownLabelError(f"unknown choice {label!r}") from None

    def _render(self, candidate: T, *, shared: bool) -> str:
        bare = self._name(candidate)
        if self._attribute is None or not (shared or self._always_qualify):
            return bare
        return f"{bare} ({self._attribute(candidate)})"


__all__ = ["LabelBuilder"]
