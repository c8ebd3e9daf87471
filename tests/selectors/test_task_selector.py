from __future__ import annotations

import pytest
from pydantic import ValidationError

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig
from deployselect.exceptions import CollaboratorError, NotFoundError, PromptError
from deployselect.models.deploy import TaskStackInfo
from deployselect.models.ecs import Task, TaskFilter
from deployselect.selectors.task import CFTaskOptions, CFTaskSelector, TaskOptions, TaskSelector
from tests.fakes.prompter import FakePrompter
from tests.fakes.store import FakeTaskLister, FakeTaskStackDescriber

TASK_DEF = "arn:aws:ecs:us-west-2:123456789012:task-definition/sample-fargate:2"


def _task(task_id: str) -> Task:
    return Task(
        task_arn=f"arn:aws:ecs:us-west-2:123456789012:task/default/{task_id}",
        task_definition_arn=TASK_DEF,
    )


class TestRunningTask:
    def test_prompts_with_short_id_and_definition(self, prompter: FakePrompter) -> None:
        first = _task("4082490ee6c245e09d2145010aa1ba8d")
        second = _task("0aa1ba8d4082490ee6c245e09d214501")
        lister = FakeTaskLister(app_env_tasks=[first, second])
        prompter.answers.append("0aa1ba8d (sample-fargate:2)")

        selected = TaskSelector(prompter, lister).running_task(
            "Which task?", "", TaskOptions(app="phonetool", env="test")
        )

        assert selected == second
        assert prompter.calls[0].options == ["4082490e (sample-fargate:2)", "0aa1ba8d (sample-fargate:2)"]
        assert prompter.calls[0].config == PromptConfig(final_message="Task:")

    def test_colliding_short_ids_are_qualified_with_full_id(self, prompter: FakePrompter) -> None:
        first = _task("abcdef0111111111")
        second = _task("abcdef0122222222")
        lister = FakeTaskLister(app_env_tasks=[first, second])
        prompter.answers.append("abcdef01 (sample-fargate:2) (abcdef0122222222)")

        selected = TaskSelector(prompter, lister).running_task(
            "Which task?", "", TaskOptions(app="phonetool", env="test")
        )

        assert selected == second
        assert prompter.calls[0].options == [
            "abcdef01 (sample-fargate:2) (abcdef0111111111)",
            "abcdef01 (sample-fargate:2) (abcdef0122222222)",
        ]

    def test_task_group_gets_prefixed(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(default_tasks=[_task("4082490ee6c245e09d2145010aa1ba8d")])

        TaskSelector(prompter, lister).running_task(
            "Which task?", "", TaskOptions(default_cluster=True, task_group="db-migrate", task_id="4082")
        )

        assert lister.filters == [TaskFilter(task_group="copilot-db-migrate", task_id="4082", copilot_only=True)]

    def test_custom_task_group_prefix(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(default_tasks=[_task("4082490ee6c245e09d2145010aa1ba8d")])
        config = SelectorConfig(task_group_prefix="acme-")

        TaskSelector(prompter, lister, config=config).running_task(
            "Which task?", "", TaskOptions(default_cluster=True, task_group="db-migrate")
        )

        assert lister.filters[0].task_group == "acme-db-migrate"

    def test_no_task_group(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(default_tasks=[_task("4082490ee6c245e09d2145010aa1ba8d")])

        TaskSelector(prompter, lister).running_task("Which task?", "", TaskOptions(default_cluster=True))

        assert lister.filters[0].task_group is None

    def test_default_cluster_and_environment_are_combined(self, prompter: FakePrompter) -> None:
        shared = _task("4082490ee6c245e09d2145010aa1ba8d")
        env_only = _task("0aa1ba8d4082490ee6c245e09d214501")
        lister = FakeTaskLister(default_tasks=[shared], app_env_tasks=[env_only, shared])
        prompter.answers.append("4082490e (sample-fargate:2)")

        TaskSelector(prompter, lister).running_task(
            "Which task?", "", TaskOptions(app="phonetool", env="test", default_cluster=True)
        )

        assert prompter.calls[0].options == ["4082490e (sample-fargate:2)", "0aa1ba8d (sample-fargate:2)"]

    def test_single_task_skips_prompt(self, prompter: FakePrompter) -> None:
        only = _task("4082490ee6c245e09d2145010aa1ba8d")
        lister = FakeTaskLister(default_tasks=[only])

        assert TaskSelector(prompter, lister).running_task("Which task?", "", TaskOptions(default_cluster=True)) == only
        assert prompter.calls == []

    def test_no_running_tasks(self, prompter: FakePrompter) -> None:
        with pytest.raises(NotFoundError, match="^no running tasks found$"):
            TaskSelector(prompter, FakeTaskLister()).running_task("Which task?", "", TaskOptions(default_cluster=True))

    def test_default_cluster_failure(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(error=RuntimeError("some error"))

        with pytest.raises(CollaboratorError, match="^list active tasks for default cluster: some error$"):
            TaskSelector(prompter, lister).running_task("Which task?", "", TaskOptions(default_cluster=True))

    def test_environment_failure(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(error=RuntimeError("some error"))

        with pytest.raises(CollaboratorError, match="^list active tasks in environment test: some error$"):
            TaskSelector(prompter, lister).running_task("Which task?", "", TaskOptions(app="phonetool", env="test"))

    def test_prompt_failure(self, prompter: FakePrompter) -> None:
        lister = FakeTaskLister(
            default_tasks=[_task("4082490ee6c245e09d2145010aa1ba8d"), _task("0aa1ba8d4082490ee6c245e09d214501")]
        )
        prompter.answers.append(RuntimeError("some error"))

        with pytest.raises(PromptError, match="^select running task: some error$"):
            TaskSelector(prompter, lister).running_task("Which task?", "", TaskOptions(default_cluster=True))


class TestCFTaskOptions:
    def test_default_cluster_and_env_conflict(self) -> None:
        with pytest.raises(ValidationError, match="cannot specify both default cluster and env"):
            CFTaskOptions(app="phonetool", env="test", default_cluster=True)

    def test_requires_a_cluster(self) -> None:
        with pytest.raises(ValidationError, match="must specify either app and env or default cluster"):
            CFTaskOptions(app="phonetool")

    def test_valid_combinations(self) -> None:
        assert CFTaskOptions(default_cluster=True).default_cluster
        assert CFTaskOptions(app="phonetool", env="test").env == "test"


class TestCFTask:
    def test_prompts_with_stripped_task_names(self, prompter: FakePrompter) -> None:
        describer = FakeTaskStackDescriber(
            env_stacks=[
                TaskStackInfo(stack_name="task-db-migrate", app="phonetool", env="test"),
                TaskStackInfo(stack_name="task-warm-cache", app="phonetool", env="test"),
            ]
        )
        prompter.answers.append("warm-cache")

        selected = CFTaskSelector(prompter, describer).task(
            "Which task?", "", CFTaskOptions(app="phonetool", env="test")
        )

        assert selected == "warm-cache"
        assert prompter.calls[0].options == ["db-migrate", "warm-cache"]

    def test_default_cluster_single_task(self, prompter: FakePrompter) -> None:
        describer = FakeTaskStackDescriber(default_stacks=[TaskStackInfo(stack_name="copilot-db-migrate")])

        assert CFTaskSelector(prompter, describer).task("Which task?", "", CFTaskOptions(default_cluster=True)) == (
            "db-migrate"
        )
        assert prompter.calls == []

    def test_no_deployed_tasks(self, prompter: FakePrompter) -> None:
        with pytest.raises(NotFoundError, match="^no deployed tasks found in selected cluster$"):
            CFTaskSelector(prompter, FakeTaskStackDescriber()).task(
                "Which task?", "", CFTaskOptions(default_cluster=True)
            )

    def test_environment_failure(self, prompter: FakePrompter) -> None:
        describer = FakeTaskStackDescriber(error=RuntimeError("some error"))

        with pytest.raises(CollaboratorError, match="^get tasks in environment test: some error$"):
            CFTaskSelector(prompter, describer).task("Which task?", "", CFTaskOptions(app="phonetool", env="test"))

    def test_prompt_failure(self, prompter: FakePrompter) -> None:
        describer = FakeTaskStackDescriber(
            default_stacks=[TaskStackInfo(stack_name="task-a"), TaskStackInfo(stack_name="task-b")]
        )
        prompter.answers.append(RuntimeError("some error"))

        with pytest.raises(PromptError, match="^select task for deletion: some error$"):
            CFTaskSelector(prompter, describer).task("Which task?", "", CFTaskOptions(default_cluster=True))
