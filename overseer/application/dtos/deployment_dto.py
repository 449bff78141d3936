"""DTOs for version registrations."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from overseer.domain.entities.deployment import Deployment


class DeploymentDTO(BaseModel):
    """A version registered for an instance."""

    id: UUID
    instance_id: int
    version: str
    deployed_at: datetime

    @classmethod
    def from_domain(cls, deployment: Deployment) -> "DeploymentDTO":
        return cls(
            id=deployment.id,
            instance_id=deployment.instance_id,
            version=deployment.version,
            deployed_at=deployment.deployed_at,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "instance_id": 7,
                "version": "2.3.1",
                "deployed_at": "2023-11-14T22:13:20Z",
            }
        }
    }


class DeploymentCreateDTO(BaseModel):
    """Request body to register a version manually."""

    instance_id: int = Field(..., gt=0, description="Target instance ID")
    version: str = Field(..., max_length=255, description="Deployed version")
    deployed_at: Optional[datetime] = Field(
        default=None, description="Deployment time; defaults to now"
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Version cannot be empty")
        return v
