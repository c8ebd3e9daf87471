"""Records describing what is deployed in an environment."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from deployselect.exceptions import InvalidARNError

_TASK_STACK_PREFIXES = ("copilot-", "task-")


class DeployedWorkload(BaseModel):
    """A service or job deployed in one environment.

    Two deployed workloads with the same name in different environments are
    distinct candidates; ``env`` is what disambiguates them in prompts.
    """

    name: str
    env: str
    type: str = ""

    model_config = {"frozen": True}


class Topic(BaseModel):
    """An SNS topic published by a deployed workload.

    The ARN resource must have the form ``<app>-<env>-<workload>-<name>``;
    construction raises :class:`InvalidARNError` otherwise.
    """

    arn: str
    app: str
    env: str
    workload: str

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _validate_arn(self) -> Topic:
        if not _arn_resource(self.arn).startswith(_topic_prefix(self)):
            raise InvalidARNError(f"invalid topic ARN {self.arn!r} for workload {self.workload}")
        return self

    @classmethod
    def from_arn(cls, arn: str, *, app: str, env: str, workload: str) -> Topic:
        return cls(arn=arn, app=app, env=env, workload=workload)

    @property
    def name(self) -> str:
        return _arn_resource(self.arn).removeprefix(_topic_prefix(self))

    def __str__(self) -> str:
        return f"{self.name} ({self.workload})"


class TaskStackInfo(BaseModel):
    """A one-off task stack."""

    stack_name: str
    app: str = ""
    env: str = ""

    model_config = {"frozen": True}

    @property
    def task_name(self) -> str:
        for prefix in _TASK_STACK_PREFIXES:
            if self.stack_name.startswith(prefix):
                return self.stack_name[len(prefix) :]
        return self.stack_name


class Pipeline(BaseModel):
    """A pipeline deployed for an application.

    Attributes:
        app_name: Owning application name.
        resource_name: Physical pipeline name in the deploy store.
        name: User-facing pipeline name.
        is_legacy: Whether the pipeline predates name-scoped pipelines.
    """

    app_name: str
    resource_name: str
    name: str
    is_legacy: bool = False

    model_config = {"frozen": True}


def _topic_prefix(topic: Topic) -> str:
    return f"{topic.app}-{topic.env}-{topic.workload}-"


def _arn_resource(arn: str) -> str:
    parts = arn.split(":", 5)
    if len(parts) != 6 or parts[0] != "arn" or not parts[5]:
        raise InvalidARNError(f"invalid ARN {arn!r}")
    return parts[5]


__all__ = ["DeployedWorkload", "Pipeline", "TaskStackInfo", "Topic"]
