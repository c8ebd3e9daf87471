"""Tests for deployselect record models."""

from __future__ import annotations

import pytest

from deployselect.contracts.prompt import Option
from deployselect.exceptions import InvalidARNError
from deployselect.models import DeployedWorkload, Task, TaskStackInfo, Topic

TOPIC_ARN = "arn:aws:sns:us-west-2:123456789012:phonetool-test-api-orders"


class TestTopic:
    def test_from_arn(self) -> None:
        topic = Topic.from_arn(TOPIC_ARN, app="phonetool", env="test", workload="api")

        assert topic.arn == TOPIC_ARN
        assert topic.name == "orders"
        assert str(topic) == "orders (api)"

    def test_name_may_contain_dashes(self) -> None:
        topic = Topic.from_arn(f"{TOPIC_ARN}-events", app="phonetool", env="test", workload="api")

        assert topic.name == "orders-events"

    def test_rejects_foreign_resource(self) -> None:
        with pytest.raises(InvalidARNError, match="invalid topic ARN"):
            Topic.from_arn(TOPIC_ARN, app="phonetool", env="prod", workload="api")

    def test_constructor_validates_arn(self) -> None:
        with pytest.raises(InvalidARNError, match="invalid topic ARN"):
            Topic(arn=TOPIC_ARN, app="phonetool", env="prod", workload="api")
        with pytest.raises(InvalidARNError, match="^invalid ARN 'not-an-arn'$"):
            Topic(arn="not-an-arn", app="phonetool", env="test", workload="api")

    @pytest.mark.parametrize("arn", ["", "not-an-arn", "arn:aws:sns:us-west-2:123456789012:"])
    def test_rejects_malformed_arn(self, arn: str) -> None:
        with pytest.raises(InvalidARNError):
            Topic.from_arn(arn, app="phonetool", env="test", workload="api")


class TestTask:
    def test_str_uses_short_id_and_definition(self) -> None:
        task = Task(
            task_arn="arn:aws:ecs:us-west-2:123456789012:task/4082490ee6c245e09d2145010aa1ba8d",
            task_definition_arn="arn:aws:ecs:us-west-2:123456789012:task-definition/sample-fargate:2",
        )

        assert task.task_id == "4082490ee6c245e09d2145010aa1ba8d"
        assert task.task_definition == "sample-fargate:2"
        assert str(task) == "4082490e (sample-fargate:2)"

    def test_cluster_qualified_arn(self) -> None:
        task = Task(
            task_arn="arn:aws:ecs:us-west-2:123456789012:task/my-cluster/abc123",
            task_definition_arn="arn:aws:ecs:us-west-2:123456789012:task-definition/db-migrate:7",
        )

        assert str(task) == "abc123 (db-migrate:7)"


@pytest.mark.parametrize(
    ("stack_name", "task_name"),
    [
        ("task-db-migrate", "db-migrate"),
        ("copilot-db-migrate", "db-migrate"),
        ("db-migrate", "db-migrate"),
    ],
)
def test_task_stack_name_strips_prefix(stack_name: str, task_name: str) -> None:
    assert TaskStackInfo(stack_name=stack_name).task_name == task_name


def test_option_str() -> None:
    assert str(Option(value="frontend")) == "frontend"
    assert str(Option(value="worker", hint="uninitialized")) == "worker (uninitialized)"


def test_deployed_workloads_compare_by_value() -> None:
    assert DeployedWorkload(name="api", env="test") == DeployedWorkload(name="api", env="test")
    assert DeployedWorkload(name="api", env="test") != DeployedWorkload(name="api", env="prod")
