"""Schedule selection for scheduled jobs: a rate, a preset or a custom cron."""

from __future__ import annotations

import logging

from cron_descriptor import get_description

from deployselect.contracts.prompt import Option, PromptConfig, Prompter, Validator
from deployselect.core.utils import collaborator_stage
from deployselect.exceptions import InputError, PromptError

logger = logging.getLogger(__name__)

SCHEDULE_TYPE_RATE = "Rate"
SCHEDULE_TYPE_FIXED = "Fixed Schedule"
SCHEDULE_TYPES = [SCHEDULE_TYPE_RATE, SCHEDULE_TYPE_FIXED]

CUSTOM_SCHEDULE = "Custom"
PRESET_SCHEDULES = [
    Option(value=CUSTOM_SCHEDULE),
    Option(value="Hourly", hint="At minute 0"),
    Option(value="Daily", hint="At midnight UTC"),
    Option(value="Weekly", hint="At midnight on Sunday UTC"),
    Option(value="Monthly", hint="At midnight, first day of month UTC"),
    Option(value="Yearly", hint="At midnight, Jan 1st UTC"),
]

RATE_PROMPT = "How long would you like to wait between executions?"
RATE_HELP = "You can specify the time as a duration string. (For example, 2m, 1h30m, 24h)"
RATE_DEFAULT = "1h30m"

PRESET_PROMPT = "What schedule would you like to use?"
PRESET_HELP = """Predefined schedules run at midnight or the top of the hour.
For example, "Daily" runs at midnight. "Weekly" runs at midnight on Mondays."""

CUSTOM_PROMPT = "What custom cron schedule would you like to use?"
CUSTOM_HELP = """Custom schedules can be defined using the following cron:
Minute | Hour | Day of Month | Month | Day of Week
For example: 0 17 ? * MON-FRI (5 pm on weekdays)
             0 0 1 */3 * (on the first of the month, quarterly)"""
CUSTOM_DEFAULT = "0 * * * *"

CONFIRM_CRON_PROMPT = "Would you like to use this schedule?"
CONFIRM_CRON_HELP = """Confirm whether the schedule looks right to you.
(Y)es will continue execution. (N)o will allow you to input a different schedule."""


class ScheduleSelector:
    """Asks for a job schedule.

    Returns one of:

    * ``"@every <duration>"`` for a rate,
    * ``"@hourly"``, ``"@daily"`` and so on for a preset,
    * the cron expression as typed for a custom schedule.
    """

    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    def schedule(
        self,
        schedule_type_prompt: str,
        schedule_type_help: str,
        schedule_validator: Validator | None = None,
        rate_validator: Validator | None = None,
    ) -> str:
        try:
            schedule_type = self._prompter.select_one(
                schedule_type_prompt,
                schedule_type_help,
                SCHEDULE_TYPES,
                PromptConfig(final_message="Schedule type:"),
            )
        except Exception as exc:
            raise PromptError("get schedule type", exc) from exc

        if schedule_type == SCHEDULE_TYPE_RATE:
            return self._ask_rate(rate_validator)
        if schedule_type == SCHEDULE_TYPE_FIXED:
            return self._ask_cron(schedule_validator)
        raise InputError(f"unrecognized schedule type {schedule_type}")

    def _ask_rate(self, validator: Validator | None) -> str:
        try:
            rate = self._prompter.get(
                RATE_PROMPT,
                RATE_HELP,
                validator,
                PromptConfig(default_input=RATE_DEFAULT, final_message="Rate:"),
            )
        except Exception as exc:
            raise PromptError("get schedule rate", exc) from exc
        return f"@every {rate}"

    def _ask_cron(self, validator: Validator | None) -> str:
        try:
            preset = self._prompter.select_option(
                PRESET_PROMPT,
                PRESET_HELP,
                PRESET_SCHEDULES,
                PromptConfig(final_message="Fixed schedule:"),
            )
        except Exception as exc:
            raise PromptError("get preset schedule", exc) from exc
        if preset != CUSTOM_SCHEDULE:
            return f"@{preset.lower()}"

        while True:
            try:
                expression = self._prompter.get(
                    CUSTOM_PROMPT,
                    CUSTOM_HELP,
                    validator,
                    PromptConfig(default_input=CUSTOM_DEFAULT, final_message="Custom schedule:"),
                )
            except Exception as exc:
                raise PromptError("get custom schedule", exc) from exc

            # "@daily" and friends are already readable.
            if expression.startswith("@"):
                return expression

            with collaborator_stage("convert cron to human string"):
                description = get_description(expression)
            logger.info("Your job will run at the following times: %s", description)

            try:
                confirmed = self._prompter.confirm(CONFIRM_CRON_PROMPT, CONFIRM_CRON_HELP)
            except Exception as exc:
                raise PromptError("confirm cron schedule", exc) from exc
            if confirmed:
                return expression


__all__ = ["CUSTOM_SCHEDULE", "SCHEDULE_TYPE_FIXED", "SCHEDULE_TYPE_RATE", "ScheduleSelector"]
