"""
Nomad Wire Models - Infrastructure Layer

Pydantic models for the subset of the Nomad event stream the ingestion
pipeline reads. Nomad encodes fields in PascalCase and frequently sends
``null`` for empty lists; both are normalized here.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal


class NomadModel(BaseModel):
    """Base model for PascalCase Nomad documents."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


class NomadEvent(NomadModel):
    """One event of a stream frame. The payload is decoded on demand."""

    topic: str = ""
    type: str = ""
    key: str = ""
    namespace: str = ""
    filter_keys: List[str] = Field(default_factory=list)
    index: int = 0
    payload: Optional[Dict[str, Any]] = None

    @field_validator("filter_keys", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return value if value is not None else []


class NomadStreamFrame(NomadModel):
    """A decoded stream object. Heartbeat frames are ``{}``."""

    index: int = 0
    events: List[NomadEvent] = Field(default_factory=list)

    @field_validator("events", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return value if value is not None else []


class NomadTask(NomadModel):
    name: str
    driver: str = ""
    config: Optional[Dict[str, Any]] = None


class NomadTaskGroup(NomadModel):
    name: str
    tasks: List[NomadTask] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return value if value is not None else []


class NomadJob(NomadModel):
    namespace: str
    id: str = Field(alias="ID")
    name: str
    submit_time: int = 0  # nanoseconds since the epoch
    task_groups: List[NomadTaskGroup] = Field(default_factory=list)

    @field_validator("task_groups", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return value if value is not None else []


class JobRegisteredPayload(NomadModel):
    """Payload of a ``JobRegistered`` event."""

    job: NomadJob


class DockerDriverConfig(BaseModel):
    """Configuration of a task using the ``docker`` driver."""

    model_config = ConfigDict(extra="ignore")

    image: str = Field(validation_alias=AliasChoices("image", "Image"))
