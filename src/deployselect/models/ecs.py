"""Running ECS task records and the filter used to list them."""

from __future__ import annotations

from pydantic import BaseModel

SHORT_TASK_ID_LENGTH = 8


class Task(BaseModel):
    """A running ECS task."""

    task_arn: str
    task_definition_arn: str

    model_config = {"frozen": True}

    @property
    def task_id(self) -> str:
        return _last_path_segment(self.task_arn)

    @property
    def task_definition(self) -> str:
        """Task definition ``family:revision``."""
        return _last_path_segment(self.task_definition_arn)

    def __str__(self) -> str:
        return f"{self.task_id[:SHORT_TASK_ID_LENGTH]} ({self.task_definition})"


class TaskFilter(BaseModel):
    """Narrows an active-task listing.

    Attributes:
        task_group: Only tasks started in this group, e.g. ``"copilot-db-migrate"``.
        task_id: Only tasks whose ID starts with this value.
        copilot_only: Only tasks started by the deployment tool.
    """

    task_group: str | None = None
    task_id: str | None = None
    copilot_only: bool = False

    model_config = {"frozen": True}


def _last_path_segment(arn: str) -> str:
    resource = arn.split(":", 5)[-1]
    return resource.rsplit("/", 1)[-1]


__all__ = ["SHORT_TASK_ID_LENGTH", "Task", "TaskFilter"]
