"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .catalog_dto import (
    CatalogEntryCreateDTO,
    CatalogEntryDTO,
    CatalogEntryUpdateDTO,
    InstanceCreateDTO,
    InstanceDTO,
    InstanceUpdateDTO,
    ReorderDTO,
)
from .deployment_dto import DeploymentCreateDTO, DeploymentDTO
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "CatalogEntryDTO",
    "CatalogEntryCreateDTO",
    "CatalogEntryUpdateDTO",
    "ReorderDTO",
    "InstanceDTO",
    "InstanceCreateDTO",
    "InstanceUpdateDTO",
    "DeploymentDTO",
    "DeploymentCreateDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
