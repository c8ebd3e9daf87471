"""Selector configuration and its JSON loader.

:class:`SelectorConfig` carries the naming conventions the selectors rely on.
The defaults match the deployment tool's own layout; a JSON file can override
them for tests or forks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from deployselect.exceptions import ConfigError


class SelectorConfig(BaseModel):
    """Naming conventions shared by selectors.

    Attributes:
        reserved_dir_name: The tool's own directory under the workspace root,
            excluded from static source discovery.
        dockerfile_token: Case-insensitive substring that marks a Dockerfile.
        dockerignore_suffix: Files ending with this are never Dockerfiles.
        static_source_depth: How many levels below the root are recursed into.
        environments_stop_label: Sentinel that ends cascading environment selection.
        env_none_label: Sentinel returned when no environment is chosen.
        task_group_prefix: Prefix of task groups started by the tool.
    """

    reserved_dir_name: str = "copilot"
    dockerfile_token: str = "dockerfile"
    dockerignore_suffix: str = ".dockerignore"
    static_source_depth: int = Field(default=3, ge=0, le=10)
    environments_stop_label: str = "[No additional environments]"
    env_none_label: str = "None"
    task_group_prefix: str = "copilot-"

    model_config = {"frozen": True, "extra": "forbid"}


def load_config(path: str | Path) -> SelectorConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return SelectorConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


__all__ = ["SelectorConfig", "load_config"]
