"""Composable filter predicates over deployed workloads."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from deployselect.models.deploy import DeployedWorkload

DeployedFilter = Callable[[DeployedWorkload], bool]
"""Returns whether a candidate survives. Raising aborts the whole resolution."""


def apply_filters(candidates: Sequence[DeployedWorkload], filters: Iterable[DeployedFilter]) -> list[DeployedWorkload]:
    """Apply ``filters`` in order, keeping only candidates that pass every one.

    Exceptions raised by a predicate propagate unchanged.
    """
    survivors = list(candidates)
    for predicate in filters:
        survivors = [candidate for candidate in survivors if predicate(candidate)]
    return survivors


def types_filter(types: Iterable[str]) -> DeployedFilter:
    allowed = frozenset(types)

    def _has_type(candidate: DeployedWorkload) -> bool:
        return candidate.type in allowed

    return _has_type


def env_filter(env: str) -> DeployedFilter:
    def _in_env(candidate: DeployedWorkload) -> bool:
        return candidate.env == env

    return _in_env


__all__ = ["DeployedFilter", "apply_filters", "env_filter", "types_filter"]
