"""Collaborator contracts and the exception hierarchy."""

from deployselect.contracts.prompt import Option, PromptConfig, Prompter, Validator
from deployselect.contracts.store import (
    AppEnvLister,
    CodePipelineLister,
    ConfigWorkloadLister,
    DeployStoreClient,
    TaskLister,
    TaskStackDescriber,
)
from deployselect.contracts.workspace import Filesystem, WorkspaceRetriever, WsPipelinesLister
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


__all__ = [
    "AppEnvLister",
    "CodePipelineLister",
    "CollaboratorError",
    "ConfigError",
    "ConfigWorkloadLister",
    "DeploySelectError",
    "DeployStoreClient",
    "DuplicateLabelError",
    "Filesystem",
    "FilterError",
    "InputAbortedError",
    "InputError",
    "InvalidARNError",
    "NotFoundError",
    "Option",
    "PromptConfig",
    "PromptError",
    "Prompter",
    "TaskLister",
    "TaskStackDescriber",
    "UnknownLabelError",
    "Validator",
    "VerificationError",
    "WorkspaceRetriever",
    "WsPipelinesLister",
]
