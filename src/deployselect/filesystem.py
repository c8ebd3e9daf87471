"""Local filesystem adapter for path discovery."""

from __future__ import annotations

from pathlib import Path

from deployselect.models.workspace import DirEntry


class LocalFilesystem:
    """Lists real directories with :mod:`pathlib`."""

    def read_dir(self, path: Path) -> list[DirEntry]:
        return [DirEntry(name=child.name, is_dir=child.is_dir()) for child in Path(path).iterdir()]


__all__ = ["LocalFilesystem"]
