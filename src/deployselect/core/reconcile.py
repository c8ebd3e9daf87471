"""Reconciliation of candidate lists coming from two sources."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Protocol, TypeVar

from deployselect.models.config import Workload

T = TypeVar("T")


class _Named(Protocol):
    @property
    def name(self) -> str: ...


def intersect(baseline: Mapping[str, T], candidates: Sequence[T], *, key: Callable[[T], str] = str) -> dict[str, T]:
    """Keep the candidates whose key is also present in ``baseline``.

    The value for a shared key is taken from ``candidates``. Neither input is
    modified and the result follows ``candidates`` order.
    """
    out: dict[str, T] = {}
    for candidate in candidates:
        candidate_key = key(candidate)
        if candidate_key in baseline:
            out[candidate_key] = candidate
    return out


def filter_by_names(records: Iterable[_Named], wanted_names: Iterable[str]) -> list[str]:
    """Names of store ``records`` that are also declared locally, in store order."""
    wanted = set(wanted_names)
    return [record.name for record in records if record.name in wanted]


def annotate_types(records: Iterable[Workload]) -> dict[str, str]:
    """Map workload name to its store-declared type."""
    return {record.name: record.type for record in records}


__all__ = ["annotate_types", "filter_by_names", "intersect"]
