"""Public API surface for deployselect."""

__version__ = "0.1.0"

from deployselect.config import SelectorConfig, load_config
from deployselect.contracts import (
    AppEnvLister,
    CodePipelineLister,
    ConfigWorkloadLister,
    DeployStoreClient,
    Filesystem,
    Option,
    PromptConfig,
    Prompter,
    TaskLister,
    TaskStackDescriber,
    Validator,
    WorkspaceRetriever,
    WsPipelinesLister,
)
from deployselect.core import LabelBuilder, Resolver, apply_filters, intersect, list_dirs_and_files, list_dockerfiles
from deployselect.exceptions import (
    CollaboratorError,
    ConfigError,
    DeploySelectError,
    DuplicateLabelError,
    FilterError,
    InputAbortedError,
    InputError,
    InvalidARNError,
    NotFoundError,
    PromptError,
    UnknownLabelError,
    VerificationError,
)
from deployselect.filesystem import LocalFilesystem
from deployselect.log import configure_logging
from deployselect.models import (
    Application,
    DeployedWorkload,
    DirEntry,
    Environment,
    Pipeline,
    PipelineManifest,
    Task,
    TaskFilter,
    TaskStackInfo,
    Topic,
    Workload,
    WorkspaceSummary,
)
from deployselect.prompt import TerminalPrompter
from deployselect.selectors import (
    AppEnvSelector,
    CFTaskOptions,
    CFTaskSelector,
    CodePipelineSelector,
    ConfigSelector,
    DeployedWorkloadOptions,
    DeploySelector,
    DockerfileSelector,
    LocalEnvironmentSelector,
    LocalFileSelector,
    LocalWorkloadSelector,
    ScheduleSelector,
    TaskOptions,
    TaskSelector,
    WsPipelineSelector,
    ask_custom_paths,
)

__all__ = [
    "AppEnvLister",
    "AppEnvSelector",
    "Application",
    "CFTaskOptions",
    "CFTaskSelector",
    "CodePipelineLister",
    "CodePipelineSelector",
    "CollaboratorError",
    "ConfigError",
    "ConfigSelector",
    "ConfigWorkloadLister",
    "DeploySelectError",
    "DeploySelector",
    "DeployStoreClient",
    "DeployedWorkload",
    "DeployedWorkloadOptions",
    "DirEntry",
    "DockerfileSelector",
    "DuplicateLabelError",
    "Environment",
    "Filesystem",
    "FilterError",
    "InputAbortedError",
    "InputError",
    "InvalidARNError",
    "LabelBuilder",
    "LocalEnvironmentSelector",
    "LocalFileSelector",
    "LocalFilesystem",
    "LocalWorkloadSelector",
    "NotFoundError",
    "Option",
    "Pipeline",
    "PipelineManifest",
    "PromptConfig",
    "PromptError",
    "Prompter",
    "Resolver",
    "ScheduleSelector",
    "SelectorConfig",
    "Task",
    "TaskFilter",
    "TaskLister",
    "TaskOptions",
    "TaskSelector",
    "TaskStackDescriber",
    "TaskStackInfo",
    "Topic",
    "UnknownLabelError",
    "Validator",
    "VerificationError",
    "Workload",
    "WorkspaceRetriever",
    "WorkspaceSummary",
    "WsPipelineSelector",
    "WsPipelinesLister",
    "__version__",
    "apply_filters",
    "ask_custom_paths",
    "configure_logging",
    "intersect",
    "list_dirs_and_files",
    "list_dockerfiles",
    "load_config",
]
