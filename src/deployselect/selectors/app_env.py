"""Application and environment selection backed by the config store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from deployselect.config import SelectorConfig
from deployselect.contracts.prompt import PromptConfig, Prompter
from deployselect.contracts.store import AppEnvLister
from deployselect.core.resolve import Resolver
from deployselect.core.utils import collaborator_stage, ordinal

logger = logging.getLogger(__name__)

APP_FINAL_MESSAGE = "Application:"
ENV_FINAL_MESSAGE = "Environment:"


class AppEnvSelector:
    """Selects applications and environments.

    Other selectors hold an instance of this class and delegate to it rather
    than re-listing applications and environments themselves.
    """

    def __init__(self, prompter: Prompter, store: AppEnvLister, *, config: SelectorConfig | None = None) -> None:
        self._resolver = Resolver(prompter)
        self._store = store
        self._config = config or SelectorConfig()

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def config(self) -> SelectorConfig:
        return self._config

    def application_names(self) -> list[str]:
        with collaborator_stage("list applications"):
            apps = self._store.list_applications()
        return [app.name for app in apps]

    def environment_names(self, app: str) -> list[str]:
        with collaborator_stage("list environments"):
            envs = self._store.list_environments(app)
        return [env.name for env in envs]

    def application(self, message: str, help: str, additional_opts: Sequence[str] = ()) -> str:
        """Select an application; ``additional_opts`` count as candidates."""
        candidates = [*self.application_names(), *additional_opts]
        if not candidates:
            logger.info("Couldn't find any applications in this region and account. Try initializing one.")
        return str(
            self._resolver.select_one(
                message,
                help,
                candidates,
                kind="application",
                plural="apps",
                config=PromptConfig(final_message=APP_FINAL_MESSAGE),
            )
        )

    def environment(self, message: str, help: str, app: str, additional_opts: Sequence[str] = ()) -> str:
        """Select an environment of ``app``; ``additional_opts`` count as candidates."""
        candidates = [*self.environment_names(app), *additional_opts]
        if not candidates:
            logger.info("Couldn't find any environments associated with app %s, try initializing one.", app)
        return str(
            self._resolver.select_one(
                message,
                help,
                candidates,
                kind="environment",
                scope=f"app {app}",
                config=PromptConfig(final_message=ENV_FINAL_MESSAGE),
            )
        )

    def environment_with_none(self, message: str, help: str, app: str) -> str:
        """Select an environment, offering the "None" sentinel as an extra choice.

        With no environments the sentinel is returned without prompting.
        """
        none_label = self._config.env_none_label
        envs = self.environment_names(app)
        if not envs:
            logger.info("Couldn't find any environments associated with app %s, defaulting to: %s", app, none_label)
            return none_label
        return str(
            self._resolver.select_one(
                message,
                help,
                envs,
                kind="environment",
                scope=f"app {app}",
                extra_options=[none_label],
                config=PromptConfig(final_message=ENV_FINAL_MESSAGE),
            )
        )

    def environments(
        self,
        message: str,
        help: str,
        app: str,
        final_msg_for_round: Callable[[int], PromptConfig] | None = None,
    ) -> list[str]:
        """Select one or more environments in order, e.g. pipeline stages.

        The offered list shrinks as environments are picked; the stop label
        ends selection early.
        """
        envs = self.environment_names(app)
        if not envs:
            logger.info("Couldn't find any environments associated with app %s, try initializing one.", app)
        return self._resolver.select_many(
            message,
            help,
            envs,
            stop_label=self._config.environments_stop_label,
            kind="environment",
            scope=f"app {app}",
            config_for_round=final_msg_for_round or _stage_final_message,
        )


def _stage_final_message(round_number: int) -> PromptConfig:
    return PromptConfig(final_message=f"{ordinal(round_number)} stage:")


__all__ = ["AppEnvSelector"]
