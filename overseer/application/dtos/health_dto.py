"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from overseer.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)

_MONGO_EXAMPLE = {
    "name": "mongo",
    "status": "up",
    "message": "MongoDB ping successful",
    "checked_at": "2025-01-10T12:00:00Z",
    "latency_ms": 3.2,
    "details": {"database": "overseer"},
}

_NOMAD_EXAMPLE = {
    "name": "nomad",
    "status": "up",
    "message": "HTTP 200",
    "checked_at": "2025-01-10T12:00:00Z",
    "latency_ms": 11.7,
    "details": {"url": "http://nomad:4646/v1/agent/health", "status_code": 200},
}


class DependencyStatusDTO(BaseModel):
    """Result of probing one dependency."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(default=None, description="Check outcome")
    checked_at: datetime = Field(description="When the check ran")
    latency_ms: Optional[float] = Field(default=None, description="Check latency")
    details: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        from_attributes=True, json_schema_extra={"example": _MONGO_EXAMPLE}
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> DependencyStatusDTO:
        return cls.model_validate(status)


class SystemHealthDTO(BaseModel):
    """Body of GET /health."""

    status: ServiceStatus = Field(description="Worst status among dependencies")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "status": "up",
                "dependencies": [_MONGO_EXAMPLE, _NOMAD_EXAMPLE],
            }
        },
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> SystemHealthDTO:
        return cls.model_validate(health)


class ApplicationInfoDTO(BaseModel):
    """Body of GET /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "name": "Overseer",
                "description": "Tracks deployed versions across environments",
                "version": "1.0.0",
                "environment": "production",
                "git_commit": "abcdef1",
                "build_time": "2025-01-10T11:30:00Z",
                "started_at": "2025-01-10T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "dependencies": [_MONGO_EXAMPLE, _NOMAD_EXAMPLE],
                "extras": {
                    "nomad": {
                        "enabled": True,
                        "address": "http://nomad:4646",
                        "topic": "Job",
                    },
                    "database": "overseer",
                },
            }
        },
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> ApplicationInfoDTO:
        return cls.model_validate(info)
