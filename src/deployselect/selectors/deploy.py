"""Selection of deployed services, jobs and SNS topics."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig, Prompter
from deployselect.contracts.store import ConfigWorkloadLister, DeployStoreClient
from deployselect.core.filters import DeployedFilter, apply_filters, types_filter
from deployselect.core.labels import LabelBuilder
from deployselect.core.reconcile import annotate_types, intersect
from deployselect.core.utils import collaborator_stage
from deployselect.exceptions import NotFoundError, PromptError, VerificationError
from deployselect.models.config import Workload
from deployselect.models.deploy import DeployedWorkload, Topic
from deployselect.selectors.config import ConfigSelector

logger = logging.getLogger(__name__)

DEPLOYED_SVC_FINAL_MESSAGE = "Service:"
DEPLOYED_JOB_FINAL_MESSAGE = "Job:"
TOPIC_FINAL_MESSAGE = "Topic subscriptions:"


class DeployedWorkloadOptions(BaseModel):
    """Narrows a deployed service or job lookup.

    Attributes:
        env: Only look in this environment instead of listing environments.
        name: Only check this workload instead of listing deployed workloads.
        types: Allow-list of workload types; empty allows every type.
        filters: Extra predicates, applied in order after the type allow-list.
    """

    env: str | None = None
    name: str | None = None
    types: tuple[str, ...] = ()
    filters: tuple[Callable[[DeployedWorkload], bool], ...] = ()

    model_config = {"frozen": True}

    def all_filters(self) -> list[DeployedFilter]:
        filters: list[DeployedFilter] = []
        if self.types:
            filters.append(types_filter(self.types))
        filters.extend(self.filters)
        return filters


@dataclass(frozen=True)
class _DeployedKind:
    singular: str
    title: str
    final_message: str
    list_deployed: Callable[[str, str], list[str]]
    is_deployed: Callable[[str, str, str], bool]
    list_records: Callable[[str], list[Workload]]


class DeploySelector:
    """Selects what is deployed across an application's environments."""

    def __init__(
        self,
        prompter: Prompter,
        store: ConfigWorkloadLister,
        deploy_store: DeployStoreClient,
        *,
        config: SelectorConfig | None = None,
    ) -> None:
        self._config_selector = ConfigSelector(prompter, store, config=config)
        self._deploy_store = deploy_store

    @property
    def config_selector(self) -> ConfigSelector:
        return self._config_selector

    def deployed_service(
        self,
        message: str,
        help: str,
        app: str,
        options: DeployedWorkloadOptions | None = None,
    ) -> DeployedWorkload:
        """Select a service deployed in one of ``app``'s environments.

        When both ``options.env`` and ``options.name`` are given the
        deployment is verified with a single targeted check and nothing is
        listed or prompted.

        Raises:
            VerificationError: The targeted deployment check failed or, for an
                explicit environment and name, reported the service as absent.
            NotFoundError: Nothing deployed, or nothing left after filtering.
            CollaboratorError: A listing call failed.
            PromptError: The prompt failed.
        """
        kind = _DeployedKind(
            singular="service",
            title="Service",
            final_message=DEPLOYED_SVC_FINAL_MESSAGE,
            list_deployed=self._deploy_store.list_deployed_services,
            is_deployed=self._deploy_store.is_service_deployed,
            list_records=self._config_selector.list_services,
        )
        return self._deployed(kind, message, help, app, options or DeployedWorkloadOptions())

    def deployed_job(
        self,
        message: str,
        help: str,
        app: str,
        options: DeployedWorkloadOptions | None = None,
    ) -> DeployedWorkload:
        """Select a job deployed in one of ``app``'s environments; see :meth:`deployed_service`."""
        kind = _DeployedKind(
            singular="job",
            title="Job",
            final_message=DEPLOYED_JOB_FINAL_MESSAGE,
            list_deployed=self._deploy_store.list_deployed_jobs,
            is_deployed=self._deploy_store.is_job_deployed,
            list_records=self._config_selector.list_jobs,
        )
        return self._deployed(kind, message, help, app, options or DeployedWorkloadOptions())

    def topics(self, message: str, help: str, app: str) -> list[Topic]:
        """Select SNS topics that are deployed in every environment of ``app``.

        Returns an empty list, without prompting, when there are no
        environments or no topic is common to all of them.
        """
        envs = self._config_selector.app_env.environment_names(app)
        if not envs:
            logger.info("No environments are currently deployed. Skipping subscription selection.")
            return []

        env_topics: dict[str, dict[str, Topic]] = {}
        for env in envs:
            with collaborator_stage("list SNS topics"):
                env_topics[env] = {str(topic): topic for topic in self._deploy_store.list_sns_topics(app, env)}

        overall = env_topics[envs[0]]
        for env in envs[1:]:
            overall = intersect(overall, list(env_topics[env].values()))
        if not overall:
            logger.info(
                "No SNS topics are currently deployed in all environments. "
                "You can customize subscriptions in your manifest."
            )
            return []

        descriptions = sorted(overall, key=lambda description: overall[description].arn)
        try:
            chosen = self._config_selector.app_env.resolver.prompter.multi_select(
                message, help, descriptions, None, PromptConfig(final_message=TOPIC_FINAL_MESSAGE)
            )
        except Exception as exc:
            raise PromptError("select SNS topics", exc) from exc
        return [LabelBuilder.unlabel(description, overall) for description in chosen]

    def _deployed(
        self,
        kind: _DeployedKind,
        message: str,
        help: str,
        app: str,
        options: DeployedWorkloadOptions,
    ) -> DeployedWorkload:
        filters = options.all_filters()
        types: dict[str, str] = {}
        if filters:
            types = annotate_types(kind.list_records(app))

        if options.env:
            env_names = [options.env]
        else:
            env_names = self._config_selector.app_env.environment_names(app)

        deployed: list[DeployedWorkload] = []
        for env in env_names:
            if options.name:
                if not self._verify(kind, app, env, options.name, explicit_env=bool(options.env)):
                    continue
                names = [options.name]
            else:
                with collaborator_stage(f"list deployed {kind.singular}s for environment {env}"):
                    names = kind.list_deployed(app, env)
            deployed.extend(DeployedWorkload(name=name, env=env, type=types.get(name, "")) for name in names)

        plural = f"deployed {kind.singular}s"
        if not deployed:
            raise NotFoundError(plural, f"application {app}")

        deployed = apply_filters(deployed, filters)
        if not deployed:
            raise NotFoundError(plural, f"application {app}", message=f"no matching {plural} found in application {app}")

        if len(deployed) == 1:
            only = deployed[0]
            if not options.name and not options.env:
                logger.info("Found only one deployed %s %s in environment %s", kind.singular, only.name, only.env)
            elif bool(options.name) != bool(options.env):
                logger.info("%s %s found in environment %s", kind.title, only.name, only.env)
            return only

        labels: LabelBuilder[DeployedWorkload] = LabelBuilder(
            name=lambda wl: wl.name,
            attribute=lambda wl: wl.env,
            always_qualify=True,
        )
        return self._config_selector.app_env.resolver.select_one(
            message,
            help,
            deployed,
            kind=f"deployed {kind.singular}",
            labels=labels,
            config=PromptConfig(final_message=kind.final_message),
            action=f"select {plural} for application {app}",
        )

    @staticmethod
    def _verify(kind: _DeployedKind, app: str, env: str, name: str, *, explicit_env: bool) -> bool:
        check = f"check if {kind.singular} {name} is deployed in environment {env}"
        logger.debug("%s", check)
        try:
            is_deployed = kind.is_deployed(app, env, name)
        except Exception as exc:
            raise VerificationError(check, exc) from exc
        if not is_deployed and explicit_env:
            raise VerificationError(f"{kind.singular} {name} is not deployed in environment {env}")
        return is_deployed


__all__ = ["DeploySelector", "DeployedWorkloadOptions"]
