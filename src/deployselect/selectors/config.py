"""Workload selection from the config store alone."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig, Prompter
from deployselect.contracts.store import ConfigWorkloadLister
from deployselect.core.utils import collaborator_stage
from deployselect.models.config import Workload
from deployselect.selectors.app_env import AppEnvSelector

logger = logging.getLogger(__name__)

SVC_FINAL_MESSAGE = "Service name:"
JOB_FINAL_MESSAGE = "Job name:"
WORKLOAD_FINAL_MESSAGE = "Name:"


class ConfigSelector:
    """Selects services and jobs registered for an application."""

    def __init__(
        self,
        prompter: Prompter,
        store: ConfigWorkloadLister,
        *,
        config: SelectorConfig | None = None,
        app_env: AppEnvSelector | None = None,
    ) -> None:
        self._app_env = app_env or AppEnvSelector(prompter, store, config=config)
        self._store = store

    @property
    def app_env(self) -> AppEnvSelector:
        return self._app_env

    def application(self, message: str, help: str, additional_opts: Sequence[str] = ()) -> str:
        return self._app_env.application(message, help, additional_opts)

    def environment(self, message: str, help: str, app: str, additional_opts: Sequence[str] = ()) -> str:
        return self._app_env.environment(message, help, app, additional_opts)

    def list_services(self, app: str) -> list[Workload]:
        with collaborator_stage("list services"):
            return self._store.list_services(app)

    def list_jobs(self, app: str) -> list[Workload]:
        with collaborator_stage("list jobs"):
            return self._store.list_jobs(app)

    def list_workloads(self, app: str) -> list[Workload]:
        with collaborator_stage("list workloads"):
            return self._store.list_workloads(app)

    def service(self, message: str, help: str, app: str) -> str:
        names = [svc.name for svc in self.list_services(app)]
        if not names:
            logger.info("Couldn't find any services associated with app %s, try initializing one.", app)
        return self._select(message, help, names, kind="service", app=app, final_message=SVC_FINAL_MESSAGE)

    def job(self, message: str, help: str, app: str) -> str:
        names = [job.name for job in self.list_jobs(app)]
        if not names:
            logger.info("Couldn't find any jobs associated with app %s, try initializing one.", app)
        return self._select(message, help, names, kind="job", app=app, final_message=JOB_FINAL_MESSAGE)

    def workload(self, message: str, help: str, app: str) -> str:
        names = [wl.name for wl in self.list_workloads(app)]
        return self._select(message, help, names, kind="workload", app=app, final_message=WORKLOAD_FINAL_MESSAGE)

    def _select(self, message: str, help: str, names: list[str], *, kind: str, app: str, final_message: str) -> str:
        return str(
            self._app_env.resolver.select_one(
                message,
                help,
                names,
                kind=kind,
                scope=f"app {app}",
                config=PromptConfig(final_message=final_message),
            )
        )


__all__ = ["ConfigSelector"]
