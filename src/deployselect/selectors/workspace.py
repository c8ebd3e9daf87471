"""Selection of names declared in the local workspace.

The workspace decides which names are eligible; the config store decides
which of them are initialized, along with their order and type.
"""

from __future__ import annotations

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import Option, PromptConfig, Prompter
from deployselect.contracts.store import ConfigWorkloadLister
from deployselect.contracts.workspace import WorkspaceRetriever
from deployselect.core.reconcile import filter_by_names
from deployselect.core.utils import collaborator_stage
from deployselect.selectors.app_env import ENV_FINAL_MESSAGE, AppEnvSelector
from deployselect.selectors.config import JOB_FINAL_MESSAGE, SVC_FINAL_MESSAGE, WORKLOAD_FINAL_MESSAGE, ConfigSelector

UNINITIALIZED_HINT = "uninitialized"


def _workspace_application(ws: WorkspaceRetriever) -> str:
    with collaborator_stage("read workspace summary"):
        return ws.summary().application


class LocalWorkloadSelector:
    """Selects services, jobs and workloads present in the workspace."""

    def __init__(
        self,
        prompter: Prompter,
        store: ConfigWorkloadLister,
        ws: WorkspaceRetriever,
        *,
        config: SelectorConfig | None = None,
    ) -> None:
        self._config_selector = ConfigSelector(prompter, store, config=config)
        self._resolver = self._config_selector.app_env.resolver
        self._store = store
        self._ws = ws

    @property
    def config_selector(self) -> ConfigSelector:
        return self._config_selector

    def service(self, message: str, help: str) -> str:
        app = _workspace_application(self._ws)
        with collaborator_stage("retrieve services from workspace"):
            ws_names = self._ws.list_services()
        with collaborator_stage("retrieve services from store"):
            store_services = self._store.list_services(app)
        return self._select(message, help, filter_by_names(store_services, ws_names), "service", SVC_FINAL_MESSAGE)

    def job(self, message: str, help: str) -> str:
        app = _workspace_application(self._ws)
        with collaborator_stage("retrieve jobs from workspace"):
            ws_names = self._ws.list_jobs()
        with collaborator_stage("retrieve jobs from store"):
            store_jobs = self._store.list_jobs(app)
        return self._select(message, help, filter_by_names(store_jobs, ws_names), "job", JOB_FINAL_MESSAGE)

    def workload(self, message: str, help: str, *, only_initialized: bool = False) -> str:
        """Select a workload from the workspace.

        Workloads that exist locally but not in the store are offered with an
        "uninitialized" hint after the initialized ones, unless
        ``only_initialized`` is set.
        """
        app = _workspace_application(self._ws)
        with collaborator_stage("retrieve workloads from workspace"):
            ws_names = self._ws.list_workloads()
        with collaborator_stage("retrieve workloads from store"):
            store_workloads = self._store.list_workloads(app)

        initialized = filter_by_names(store_workloads, ws_names)
        options = [Option(value=name) for name in initialized]
        if not only_initialized:
            known = set(initialized)
            options += [Option(value=name, hint=UNINITIALIZED_HINT) for name in ws_names if name not in known]

        return self._resolver.select_option(
            message,
            help,
            options,
            kind="workload",
            scope="workspace",
            config=PromptConfig(final_message=WORKLOAD_FINAL_MESSAGE),
        )

    def _select(self, message: str, help: str, names: list[str], kind: str, final_message: str) -> str:
        return str(
            self._resolver.select_one(message, help, names, kind=kind, config=PromptConfig(final_message=final_message))
        )


class LocalEnvironmentSelector:
    """Selects an environment declared in the workspace and present in the store."""

    def __init__(
        self,
        prompter: Prompter,
        store: ConfigWorkloadLister,
        ws: WorkspaceRetriever,
        *,
        config: SelectorConfig | None = None,
    ) -> None:
        self._resolver = AppEnvSelector(prompter, store, config=config).resolver
        self._store = store
        self._ws = ws

    def local_environment(self, message: str, help: str) -> str:
        app = _workspace_application(self._ws)
        with collaborator_stage("retrieve environments from workspace"):
            ws_names = self._ws.list_environments()
        with collaborator_stage("retrieve environments from store"):
            store_envs = self._store.list_environments(app)

        return str(
            self._resolver.select_one(
                message,
                help,
                filter_by_names(store_envs, ws_names),
                kind="environment",
                config=PromptConfig(final_message=ENV_FINAL_MESSAGE),
            )
        )


__all__ = ["LocalEnvironmentSelector", "LocalWorkloadSelector", "UNINITIALIZED_HINT"]
