"""Contracts for the remote config store and deploy store.

Every method may raise any exception on failure; selectors wrap it in a
:class:`~deployselect.exceptions.CollaboratorError` naming the call.
"""

from __future__ import annotations

from typing import Protocol

from deployselect.models.config import Application, Environment, Workload
from deployselect.models.deploy import Pipeline, TaskStackInfo, Topic
from deployselect.models.ecs import Task, TaskFilter


class AppEnvLister(Protocol):
    def list_applications(self) -> list[Application]: ...

    def list_environments(self, app: str) -> list[Environment]: ...


class ConfigWorkloadLister(AppEnvLister, Protocol):
    def list_services(self, app: str) -> list[Workload]: ...

    def list_jobs(self, app: str) -> list[Workload]: ...

    def list_workloads(self, app: str) -> list[Workload]: ...


class DeployStoreClient(Protocol):
    """Read-only view over what is deployed per environment."""

    def list_deployed_services(self, app: str, env: str) -> list[str]: ...

    def list_deployed_jobs(self, app: str, env: str) -> list[str]: ...

    def is_service_deployed(self, app: str, env: str, name: str) -> bool: ...

    def is_job_deployed(self, app: str, env: str, name: str) -> bool: ...

    def list_sns_topics(self, app: str, env: str) -> list[Topic]: ...


class TaskStackDescriber(Protocol):
    def list_default_task_stacks(self) -> list[TaskStackInfo]: ...

    def list_task_stacks(self, app: str, env: str) -> list[TaskStackInfo]: ...


class TaskLister(Protocol):
    def list_active_app_env_tasks(self, app: str, env: str, filter: TaskFilter) -> list[Task]: ...

    def list_active_default_cluster_tasks(self, filter: TaskFilter) -> list[Task]: ...


class CodePipelineLister(Protocol):
    def list_deployed_pipelines(self, app: str) -> list[Pipeline]: ...


__all__ = [
    "AppEnvLister",
    "CodePipelineLister",
    "ConfigWorkloadLister",
    "DeployStoreClient",
    "TaskLister",
    "TaskStackDescriber",
]
