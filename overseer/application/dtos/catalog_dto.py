"""
Catalog DTOs - Application Layer

Data Transfer Objects for applications, environments and instances.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from overseer.domain.entities.catalog import Application, Environment, Instance


def _strip_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name cannot be empty")
    return value


class CatalogEntryDTO(BaseModel):
    """An application or environment."""

    id: int
    name: str
    sort_order: int = 0

    @classmethod
    def from_domain(
        cls, entry: Union[Application, Environment]
    ) -> "CatalogEntryDTO":
        return cls(id=entry.id, name=entry.name, sort_order=entry.sort_order)

    model_config = {
        "json_schema_extra": {
            "example": {"id": 1, "name": "checkout", "sort_order": 0}
        }
    }


class CatalogEntryCreateDTO(BaseModel):
    """Request body to create an application or environment."""

    name: str = Field(..., description="Display name", max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)


class CatalogEntryUpdateDTO(BaseModel):
    """Request body to rename an application or environment."""

    name: str = Field(..., description="New display name", max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)


class ReorderDTO(BaseModel):
    """Request body to reorder entries; list position becomes the sort order."""

    ids: List[int] = Field(..., description="Entry IDs in the desired order")

    @field_validator("ids")
    @classmethod
    def validate_ids(cls, v: List[int]) -> List[int]:
        if len(set(v)) != len(v):
            raise ValueError("IDs must be unique")
        return v

    model_config = {"json_schema_extra": {"example": {"ids": [3, 1, 2]}}}


class InstanceDTO(BaseModel):
    """A deployment target."""

    id: int
    environment_id: int
    application_id: int
    name: str = Field(description="Deployment name used to correlate events")

    @classmethod
    def from_domain(cls, instance: Instance) -> "InstanceDTO":
        return cls(
            id=instance.id,
            environment_id=instance.environment_id,
            application_id=instance.application_id,
            name=instance.name,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 7,
                "environment_id": 2,
                "application_id": 1,
                "name": "prod.checkout.web.api",
            }
        }
    }


class InstanceCreateDTO(BaseModel):
    """Request body to create a deployment target."""

    environment_id: int = Field(..., gt=0)
    application_id: int = Field(..., gt=0)
    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)


class InstanceUpdateDTO(BaseModel):
    """Request body to change a deployment target."""

    name: Optional[str] = Field(default=None, max_length=255)
    environment_id: Optional[int] = Field(default=None, gt=0)
    application_id: Optional[int] = Field(default=None, gt=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _strip_name(v)
