"""
Domain Entities - Catalog

Applications, environments and the instances that place an application in
an environment. An instance is the deployment target versions are
registered against; its name is the deployment name used to correlate
orchestrator events (``namespace.job.group.task`` for Nomad).
"""

from dataclasses import dataclass


@dataclass
class Application:
    """An application whose versions are tracked."""

    id: int = 0
    name: str = ""
    sort_order: int = 0


@dataclass
class Environment:
    """An environment (e.g. staging, production) applications run in."""

    id: int = 0
    name: str = ""
    sort_order: int = 0


@dataclass
class Instance:
    """A deployment target: one application running in one environment."""

    id: int = 0
    environment_id: int = 0
    application_id: int = 0
    name: str = ""
