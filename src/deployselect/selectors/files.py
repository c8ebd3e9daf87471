"""Selection of local Dockerfiles and static source paths."""

from __future__ import annotations

import logging
from pathlib import Path

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig, Prompter, Validator
from deployselect.contracts.workspace import Filesystem
from deployselect.core.discovery import list_dirs_and_files, list_dockerfiles
from deployselect.core.resolve import Resolver
from deployselect.exceptions import PromptError

logger = logging.getLogger(__name__)

DOCKERFILE_USE_CUSTOM = "Enter custom path for your Dockerfile"
DOCKERFILE_USE_IMAGE = "Use an existing image instead"
DOCKERFILE_FINAL_MESSAGE = "Dockerfile:"

STATIC_SOURCE_USE_CUSTOM = "Enter custom path"
STATIC_SOURCE_FINAL_MESSAGE = "Source(s):"
STATIC_SOURCE_ANOTHER_PROMPT = "Would you like to enter another path?"
STATIC_SOURCE_ANOTHER_HELP = "You may add multiple custom paths. Enter 'y' to type another."
CUSTOM_PATH_FINAL_MESSAGE = "Path:"
ANOTHER_FINAL_MESSAGE = "Another path:"


class DockerfileSelector:
    """Selects a Dockerfile from the working directory or one level below it."""

    def __init__(
        self,
        prompter: Prompter,
        fs: Filesystem,
        *,
        working_dir: Path | None = None,
        config: SelectorConfig | None = None,
    ) -> None:
        self._resolver = Resolver(prompter)
        self._fs = fs
        self._working_dir = working_dir or Path.cwd()
        self._config = config or SelectorConfig()

    def dockerfile(
        self,
        sel_prompt: str,
        not_found_prompt: str,
        sel_help: str,
        not_found_help: str,
        validator: Validator | None = None,
    ) -> str:
        """Return a discovered Dockerfile path, a custom path, or :data:`DOCKERFILE_USE_IMAGE`.

        The custom-path and use-image choices are always offered, so even an
        empty discovery result leads to a prompt rather than an error.
        """
        dockerfiles = list_dockerfiles(self._fs, self._working_dir, config=self._config)
        final = PromptConfig(final_message=DOCKERFILE_FINAL_MESSAGE)
        selected = self._resolver.select_one(
            sel_prompt,
            sel_help,
            dockerfiles,
            kind="Dockerfile",
            extra_options=[DOCKERFILE_USE_CUSTOM, DOCKERFILE_USE_IMAGE],
            config=final,
        )
        if selected != DOCKERFILE_USE_CUSTOM:
            return selected
        try:
            return self._resolver.prompter.get(not_found_prompt, not_found_help, validator, final)
        except Exception as exc:
            raise PromptError("get custom Dockerfile path", exc) from exc


class LocalFileSelector:
    """Selects directories and files under the workspace root."""

    def __init__(
        self,
        prompter: Prompter,
        fs: Filesystem,
        root: Path,
        *,
        config: SelectorConfig | None = None,
    ) -> None:
        self._prompter = prompter
        self._fs = fs
        self._root = Path(root)
        self._config = config or SelectorConfig()

    def static_sources(
        self,
        sel_prompt: str,
        sel_help: str,
        custom_path_prompt: str,
        custom_path_help: str,
        validator: Validator | None = None,
    ) -> list[str]:
        paths = list_dirs_and_files(
            self._fs,
            self._root,
            reserved_dir=self._root / self._config.reserved_dir_name,
            depth=self._config.static_source_depth,
        )
        if not paths:
            logger.warning(
                "No directories or files were found in your workspace. "
                "Enter a relative path with the 'custom path' option if you'd like to use a hidden file."
            )

        try:
            selections = self._prompter.multi_select(
                sel_prompt,
                sel_help,
                [*paths, STATIC_SOURCE_USE_CUSTOM],
                None,
                PromptConfig(final_message=STATIC_SOURCE_FINAL_MESSAGE),
            )
        except Exception as exc:
            raise PromptError("select directories and/or files", exc) from exc

        results = [selection for selection in selections if selection != STATIC_SOURCE_USE_CUSTOM]
        if STATIC_SOURCE_USE_CUSTOM in selections:
            results.extend(ask_custom_paths(self._prompter, custom_path_prompt, custom_path_help, validator))
        return results


def ask_custom_paths(
    prompter: Prompter,
    custom_path_prompt: str,
    custom_path_help: str,
    validator: Validator | None = None,
) -> list[str]:
    """Ask for custom paths until the user declines to add another."""
    paths: list[str] = []
    while True:
        try:
            paths.append(
                prompter.get(
                    custom_path_prompt,
                    custom_path_help,
                    validator,
                    PromptConfig(final_message=CUSTOM_PATH_FINAL_MESSAGE),
                )
            )
        except Exception as exc:
            raise PromptError("get custom directory or file path", exc) from exc
        try:
            another = prompter.confirm(
                STATIC_SOURCE_ANOTHER_PROMPT,
                STATIC_SOURCE_ANOTHER_HELP,
                PromptConfig(final_message=ANOTHER_FINAL_MESSAGE),
            )
        except Exception as exc:
            raise PromptError("confirm another custom path", exc) from exc
        if not another:
            return paths


__all__ = [
    "DOCKERFILE_USE_CUSTOM",
    "DOCKERFILE_USE_IMAGE",
    "STATIC_SOURCE_USE_CUSTOM",
    "DockerfileSelector",
    "LocalFileSelector",
    "ask_custom_paths",
]
