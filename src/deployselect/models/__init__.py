"""Domain records shared by selectors and collaborators."""

from deployselect.models.config import Application, Environment, Workload
from deployselect.models.deploy import DeployedWorkload, Pipeline, TaskStackInfo, Topic
from deployselect.models.ecs import Task, TaskFilter
from deployselect.models.workspace import DirEntry, PipelineManifest, WorkspaceSummary

__all__ = [
    "Application",
    "DeployedWorkload",
    "DirEntry",
    "Environment",
    "Pipeline",
    "PipelineManifest",
    "Task",
    "TaskFilter",
    "TaskStackInfo",
    "Topic",
    "Workload",
    "WorkspaceSummary",
]
