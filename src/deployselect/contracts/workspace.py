"""Contracts for the local workspace and filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from deployselect.models.workspace import DirEntry, PipelineManifest, WorkspaceSummary


class WorkspaceRetriever(Protocol):
    """Names declared in the local workspace."""

    def list_services(self) -> list[str]: ...

    def list_jobs(self) -> list[str]: ...

    def list_workloads(self) -> list[str]: ...

    def list_environments(self) -> list[str]: ...

    def summary(self) -> WorkspaceSummary: ...


class WsPipelinesLister(Protocol):
    def list_pipelines(self) -> list[PipelineManifest]: ...


class Filesystem(Protocol):
    def read_dir(self, path: Path) -> list[DirEntry]:
        """List ``path``. Raises :class:`OSError` when it cannot be read."""
        ...


__all__ = ["Filesystem", "WorkspaceRetriever", "WsPipelinesLister"]
