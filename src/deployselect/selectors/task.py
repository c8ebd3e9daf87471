"""Selection of running tasks and one-off task stacks."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig, Prompter
from deployselect.contracts.store import TaskLister, TaskStackDescriber
from deployselect.core.labels import LabelBuilder
from deployselect.core.resolve import Resolver
from deployselect.core.utils import collaborator_stage
from deployselect.models.ecs import Task, TaskFilter

TASK_FINAL_MESSAGE = "Task:"


class TaskOptions(BaseModel):
    """Where to look for running tasks and how to narrow them.

    Attributes:
        app: Application name; used together with ``env``.
        env: Environment name; used together with ``app``.
        default_cluster: Also list tasks in the account's default cluster.
        task_group: Bare task group name, without the tool's prefix.
        task_id: Task ID prefix to match.
    """

    app: str | None = None
    env: str | None = None
    default_cluster: bool = False
    task_group: str | None = None
    task_id: str | None = None

    model_config = {"frozen": True}


class CFTaskOptions(BaseModel):
    """Which cluster to list one-off task stacks from."""

    app: str | None = None
    env: str | None = None
    default_cluster: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _validate_cluster(self) -> CFTaskOptions:
        if self.default_cluster and (self.app or self.env):
            raise ValueError("cannot specify both default cluster and env")
        if not self.default_cluster and not (self.app and self.env):
            raise ValueError("must specify either app and env or default cluster")
        return self


class TaskSelector:
    """Selects a running task started by the tool."""

    def __init__(self, prompter: Prompter, lister: TaskLister, *, config: SelectorConfig | None = None) -> None:
        self._resolver = Resolver(prompter)
        self._lister = lister
        self._config = config or SelectorConfig()

    def running_task(self, message: str, help: str, options: TaskOptions | None = None) -> Task:
        """Select a running task.

        Tasks from the default cluster come first when both the default cluster
        and an app/env pair are requested.
        """
        options = options or TaskOptions()
        task_filter = TaskFilter(
            task_group=f"{self._config.task_group_prefix}{options.task_group}" if options.task_group else None,
            task_id=options.task_id,
            copilot_only=True,
        )

        tasks: list[Task] = []
        if options.default_cluster:
            with collaborator_stage("list active tasks for default cluster"):
                tasks.extend(self._lister.list_active_default_cluster_tasks(task_filter))
        if options.app and options.env:
            with collaborator_stage(f"list active tasks in environment {options.env}"):
                tasks.extend(self._lister.list_active_app_env_tasks(options.app, options.env, task_filter))

        unique = list({task.task_arn: task for task in tasks}.values())
        # Short IDs can collide; qualify those with the full task ID.
        labels: LabelBuilder[Task] = LabelBuilder(attribute=lambda task: task.task_id)
        return self._resolver.select_one(
            message,
            help,
            unique,
            kind="running task",
            labels=labels,
            config=PromptConfig(final_message=TASK_FINAL_MESSAGE),
        )


class CFTaskSelector:
    """Selects a one-off task stack by name."""

    def __init__(self, prompter: Prompter, describer: TaskStackDescriber) -> None:
        self._resolver = Resolver(prompter)
        self._describer = describer

    def task(self, message: str, help: str, options: CFTaskOptions) -> str:
        if options.default_cluster:
            with collaborator_stage("get tasks in default cluster"):
                stacks = self._describer.list_default_task_stacks()
        else:
            with collaborator_stage(f"get tasks in environment {options.env}"):
                stacks = self._describer.list_task_stacks(str(options.app), str(options.env))

        names = list(dict.fromkeys(stack.task_name for stack in stacks))
        return str(
            self._resolver.select_one(
                message,
                help,
                names,
                kind="deployed task",
                scope="selected cluster",
                config=PromptConfig(final_message=TASK_FINAL_MESSAGE),
                action="select task for deletion",
            )
        )


__all__ = ["CFTaskOptions", "CFTaskSelector", "TaskOptions", "TaskSelector"]
