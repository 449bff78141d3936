"""
Domain Entities - Deployment

This module defines the deployment facts flowing through the system: the
normalized event produced from the orchestrator stream and the registration
persisted against a deployment target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

UNVERSIONED_TAG = "latest"


@dataclass(slots=True, frozen=True)
class DeploymentEvent:
    """A deployment observed on the orchestrator: target now runs version."""

    event_id: str
    deployment_name: str
    version: str
    deployed_at: Optional[datetime] = None


@dataclass
class Deployment:
    """A version registration for a deployment target (instance)."""

    id: UUID = field(default_factory=uuid4)
    instance_id: int = 0
    version: str = ""
    deployed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def is_trackable_version(version: str) -> bool:
    """Return whether a version identifies a concrete build."""
    return bool(version) and version != UNVERSIONED_TAG
