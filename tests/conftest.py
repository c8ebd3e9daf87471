"""Shared test fixtures for deployselect tests."""

from __future__ import annotations

import pytest

from tests.fakes.prompter import FakePrompter
from tests.fakes.store import FakeConfigStore, FakeDeployStore
from tests.fakes.workspace import FakeWorkspace


@pytest.fixture
def prompter() -> FakePrompter:
    """A prompter with no scripted answers; tests append to ``answers``."""
    return FakePrompter()


@pytest.fixture
def store() -> FakeConfigStore:
    """Config store with one application and two services."""
    return FakeConfigStore(
        apps=["phonetool"],
        envs={"phonetool": ["test", "prod"]},
        services={"phonetool": [("frontend", "Load Balanced Web Service"), ("backend", "Backend Service")]},
        jobs={"phonetool": [("report", "Scheduled Job")]},
    )


@pytest.fixture
def deploy_store() -> FakeDeployStore:
    """An empty deploy store."""
    return FakeDeployStore()


@pytest.fixture
def workspace() -> FakeWorkspace:
    """Workspace for the ``phonetool`` application."""
    return FakeWorkspace(app="phonetool")
