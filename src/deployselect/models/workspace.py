"""Records read from the local workspace and filesystem."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class WorkspaceSummary(BaseModel):
    """Identity of the workspace: the application it belongs to."""

    application: str

    model_config = {"frozen": True}


class PipelineManifest(BaseModel):
    """A pipeline manifest found in the workspace."""

    name: str
    path: Path

    model_config = {"frozen": True}


class DirEntry(BaseModel):
    """One entry of a directory listing."""

    name: str
    is_dir: bool = False

    model_config = {"frozen": True}


__all__ = ["DirEntry", "PipelineManifest", "WorkspaceSummary"]
