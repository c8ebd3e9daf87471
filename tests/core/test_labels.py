from __future__ import annotations

import pytest

from deployselect.core.labels import LabelBuilder
from deployselect.exceptions import DuplicateLabelError, UnknownLabelError
from deployselect.models.deploy import DeployedWorkload


def _env_labels(*, always_qualify: bool = False) -> LabelBuilder[DeployedWorkload]:
    return LabelBuilder(name=lambda w: w.name, attribute=lambda w: w.env, always_qualify=always_qualify)


def test_unique_names_use_bare_name() -> None:
    candidates = [DeployedWorkload(name="api", env="test"), DeployedWorkload(name="web", env="test")]

    assert list(_env_labels().labels(candidates)) == ["api", "web"]


def test_shared_names_are_qualified_with_attribute() -> None:
    candidates = [
        DeployedWorkload(name="api", env="test"),
        DeployedWorkload(name="api", env="prod"),
        DeployedWorkload(name="web", env="prod"),
    ]

    assert list(_env_labels().labels(candidates)) == ["api (test)", "api (prod)", "web"]


def test_always_qualify() -> None:
    candidates = [DeployedWorkload(name="mockSvc1", env="test"), DeployedWorkload(name="mockSvc2", env="test")]

    assert list(_env_labels(always_qualify=True).labels(candidates)) == ["mockSvc1 (test)", "mockSvc2 (test)"]


def test_always_qualify_requires_attribute() -> None:
    with pytest.raises(ValueError, match="requires an attribute"):
        LabelBuilder(always_qualify=True)


def test_label_unlabel_round_trip() -> None:
    candidates = [
        DeployedWorkload(name="api", env="test"),
        DeployedWorkload(name="api", env="prod"),
        DeployedWorkload(name="web", env="prod"),
    ]
    builder = _env_labels()
    labelled = builder.labels(candidates)

    for candidate in candidates:
        assert builder.unlabel(builder.label(candidate, candidates), labelled) == candidate


def test_unlabel_unknown_label_fails_fast() -> None:
    labelled = _env_labels().labels([DeployedWorkload(name="api", env="test")])

    with pytest.raises(UnknownLabelError, match="unknown choice 'web'"):
        LabelBuilder.unlabel("web", labelled)


def test_unknown_label_error_is_a_key_error() -> None:
    assert issubclass(UnknownLabelError, KeyError)


def test_duplicate_labels_are_rejected() -> None:
    with pytest.raises(DuplicateLabelError, match="duplicate label 'api'"):
        LabelBuilder().labels(["api", "api"])
