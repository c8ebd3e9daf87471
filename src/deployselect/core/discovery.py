"""Bounded-depth discovery of Dockerfiles and static source paths."""

from __future__ import annotations

import logging
from pathlib import Path

from deployselect.config import SelectorConfig
from deployselect.contracts.workspace import Filesystem
from deployselect.core.utils import collaborator_stage

logger = logging.getLogger(__name__)


def is_dockerfile(name: str, *, config: SelectorConfig | None = None) -> bool:
    cfg = config or SelectorConfig()
    lowered = name.lower()
    return cfg.dockerfile_token in lowered and not lowered.endswith(cfg.dockerignore_suffix)


def list_dockerfiles(fs: Filesystem, working_dir: Path, *, config: SelectorConfig | None = None) -> list[str]:
    """Find Dockerfiles in ``working_dir`` and one directory level below it.

    Files in the working directory are reported as ``./<name>`` and files in a
    sub-directory as ``<dir>/<name>``. Directories nested deeper are ignored
    and a sub-directory that cannot be read is treated as empty.

    Returns:
        Sorted, duplicate-free relative paths.

    Raises:
        CollaboratorError: The working directory itself cannot be read.
    """
    with collaborator_stage("read directory"):
        entries = fs.read_dir(working_dir)

    found: set[str] = set()
    for entry in entries:
        if not entry.is_dir:
            if is_dockerfile(entry.name, config=config):
                found.add(f"./{entry.name}")
            continue

        try:
            sub_entries = fs.read_dir(working_dir / entry.name)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", entry.name, exc)
            continue
        for sub_entry in sub_entries:
            if sub_entry.is_dir:
                continue
            if is_dockerfile(sub_entry.name, config=config):
                found.add(f"{entry.name}/{sub_entry.name}")

    return sorted(found)


def list_dirs_and_files(
    fs: Filesystem,
    root: Path,
    *,
    reserved_dir: Path | None = None,
    depth: int = 3,
) -> list[str]:
    """Walk ``root`` and return every visible directory and file below it.

    Hidden entries (leading ``.``) are pruned together with their subtree, and
    so is ``reserved_dir``. The reserved directory is matched by absolute
    path, so a user directory that merely shares its name is still listed.
    Directories are descended into while ``depth`` is positive.

    Returns:
        Sorted paths relative to ``root`` using ``/`` separators.
    """
    root = Path(root)
    reserved = reserved_dir.resolve() if reserved_dir is not None else None
    names: set[str] = set()
    _walk(fs, root, root, depth, reserved, names)
    return sorted(names)


def _walk(fs: Filesystem, root: Path, directory: Path, depth: int, reserved: Path | None, names: set[str]) -> None:
    with collaborator_stage("read directory"):
        entries = fs.read_dir(directory)
    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = directory / entry.name
        if reserved is not None and path.resolve() == reserved:
            continue
        with collaborator_stage(f"get path relative to workspace for {str(path)!r}"):
            rel = path.relative_to(root)
        names.add(rel.as_posix())
        if depth > 0 and entry.is_dir:
            _walk(fs, root, path, depth - 1, reserved, names)


__all__ = ["is_dockerfile", "list_dirs_and_files", "list_dockerfiles"]
