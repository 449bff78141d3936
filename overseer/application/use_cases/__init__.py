"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .catalog_use_cases import (
    CreateCatalogEntryUseCase,
    DeleteCatalogEntryUseCase,
    ListCatalogEntriesUseCase,
    ReorderCatalogEntriesUseCase,
    UpdateCatalogEntryUseCase,
)
from .deployment_use_cases import GetDeploymentsUseCase, RegisterDeploymentUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .instance_use_cases import (
    CreateInstanceUseCase,
    GetInstancesUseCase,
    UpdateInstanceUseCase,
)
from .version_stream_use_cases import (
    CorrelateDeploymentUseCase,
    RunVersionStreamUseCase,
)

__all__ = [
    "ListCatalogEntriesUseCase",
    "CreateCatalogEntryUseCase",
    "UpdateCatalogEntryUseCase",
    "DeleteCatalogEntryUseCase",
    "ReorderCatalogEntriesUseCase",
    "GetDeploymentsUseCase",
    "RegisterDeploymentUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
    "GetInstancesUseCase",
    "CreateInstanceUseCase",
    "UpdateInstanceUseCase",
    "CorrelateDeploymentUseCase",
    "RunVersionStreamUseCase",
]
