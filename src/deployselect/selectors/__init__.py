"""Resource-specific selectors composed from the resolution engine."""

from deployselect.selectors.app_env import AppEnvSelector
from deployselect.selectors.config import ConfigSelector
from deployselect.selectors.deploy import DeployedWorkloadOptions, DeploySelector
from deployselect.selectors.files import DockerfileSelector, LocalFileSelector, ask_custom_paths
from deployselect.selectors.pipeline import CodePipelineSelector, WsPipelineSelector
from deployselect.selectors.schedule import ScheduleSelector
from deployselect.selectors.task import CFTaskOptions, CFTaskSelector, TaskOptions, TaskSelector
from deployselect.selectors.workspace import LocalEnvironmentSelector, LocalWorkloadSelector

__all__ = [
    "AppEnvSelector",
    "CFTaskOptions",
    "CFTaskSelector",
    "CodePipelineSelector",
    "ConfigSelector",
    "DeploySelector",
    "DeployedWorkloadOptions",
    "DockerfileSelector",
    "LocalEnvironmentSelector",
    "LocalFileSelector",
    "LocalWorkloadSelector",
    "ScheduleSelector",
    "TaskOptions",
    "TaskSelector",
    "WsPipelineSelector",
    "ask_custom_paths",
]
