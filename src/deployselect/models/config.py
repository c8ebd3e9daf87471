"""Records returned by the remote config store."""

from __future__ import annotations

from pydantic import BaseModel


class Application(BaseModel):
    """An application registered in the config store."""

    name: str

    model_config = {"frozen": True}


class Environment(BaseModel):
    """An environment belonging to an application."""

    app: str
    name: str

    model_config = {"frozen": True}


class Workload(BaseModel):
    """A service or job registered in the config store.

    Attributes:
        app: Owning application name.
        name: Workload name.
        type: Workload type, e.g. ``"Load Balanced Web Service"``.
    """

    app: str
    name: str
    type: str

    model_config = {"frozen": True}


__all__ = ["Application", "Environment", "Workload"]
