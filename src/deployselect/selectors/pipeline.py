"""Pipeline selection from the workspace or from what is deployed."""

from __future__ import annotations

from deployselect.contracts.prompt import PromptConfig, Prompter
from deployselect.contracts.store import CodePipelineLister
from deployselect.contracts.workspace import WsPipelinesLister
from deployselect.core.labels import LabelBuilder
from deployselect.core.resolve import Resolver
from deployselect.core.utils import collaborator_stage
from deployselect.models.deploy import Pipeline
from deployselect.models.workspace import PipelineManifest

PIPELINE_FINAL_MESSAGE = "Pipeline:"


class WsPipelineSelector:
    """Selects a pipeline manifest declared in the workspace."""

    def __init__(self, prompter: Prompter, ws: WsPipelinesLister) -> None:
        self._resolver = Resolver(prompter)
        self._ws = ws

    def ws_pipeline(self, message: str, help: str) -> PipelineManifest:
        with collaborator_stage("list pipelines"):
            pipelines = self._ws.list_pipelines()
        labels: LabelBuilder[PipelineManifest] = LabelBuilder(name=lambda p: p.name, attribute=lambda p: str(p.path))
        return self._resolver.select_one(
            message,
            help,
            pipelines,
            kind="pipeline",
            labels=labels,
            config=PromptConfig(final_message=PIPELINE_FINAL_MESSAGE),
        )


class CodePipelineSelector:
    """Selects a pipeline deployed for an application."""

    def __init__(self, prompter: Prompter, lister: CodePipelineLister) -> None:
        self._resolver = Resolver(prompter)
        self._lister = lister

    def deployed_pipeline(self, message: str, help: str, app: str) -> Pipeline:
        with collaborator_stage("list deployed pipelines"):
            pipelines = self._lister.list_deployed_pipelines(app)
        labels: LabelBuilder[Pipeline] = LabelBuilder(name=lambda p: p.name, attribute=lambda p: p.resource_name)
        return self._resolver.select_one(
            message,
            help,
            pipelines,
            kind="deployed pipeline",
            labels=labels,
            config=PromptConfig(final_message=PIPELINE_FINAL_MESSAGE),
            action="select pipeline",
        )


__all__ = ["CodePipelineSelector", "WsPipelineSelector"]
