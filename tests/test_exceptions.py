"""Tests for the deployselect exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            CollaboratorError,
            ConfigError,
            DuplicateLabelError,
            FilterError,
            InputError,
            InvalidARNError,
            NotFoundError,
            PromptError,
            UnknownLabelError,
            VerificationError,
        ],
    )
    def test_all_exceptions_inherit_from_deploy_select_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, DeploySelectError)

    def test_input_aborted_is_an_input_error(self) -> None:
        assert issubclass(InputAbortedError, InputError)

    def test_unknown_label_is_a_key_error(self) -> None:
        """Callers doing dict-style lookups can still catch KeyError."""
        with pytest.raises(KeyError):
            raise UnknownLabelError("unknown choice 'x'")


class TestMessages:
    def test_not_found_without_scope(self) -> None:
        exc = NotFoundError("services")
        assert str(exc) == "no services found"
        assert exc.kind == "services"
        assert exc.scope is None

    def test_not_found_with_scope(self) -> None:
        assert str(NotFoundError("environments", "app phonetool")) == "no environments found in app phonetool"

    def test_not_found_custom_message(self) -> None:
        exc = NotFoundError("deployed jobs", "application phonetool", message="nothing matched")
        assert str(exc) == "nothing matched"
        assert exc.scope == "application phonetool"

    def test_collaborator_error_keeps_cause(self) -> None:
        cause = RuntimeError("boom")
        exc = CollaboratorError("list environments", cause)
        assert str(exc) == "list environments: boom"
        assert exc.stage == "list environments"
        assert exc.cause is cause

    def test_prompt_error_keeps_cause(self) -> None:
        cause = InputAbortedError("prompt aborted")
        exc = PromptError("select service", cause)
        assert str(exc) == "select service: prompt aborted"
        assert exc.action == "select service"

    def test_verification_error_with_and_without_cause(self) -> None:
        assert str(VerificationError("svc is not deployed")) == "svc is not deployed"
        assert str(VerificationError("check svc", RuntimeError("denied"))) == "check svc: denied"

    def test_unknown_label_message_is_not_quoted(self) -> None:
        """KeyError normally repr()s its argument; the message is shown as-is."""
        assert str(UnknownLabelError("unknown choice 'x'")) == "unknown choice 'x'"
