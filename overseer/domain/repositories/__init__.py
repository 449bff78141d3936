"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .catalog_repository import (
    IApplicationRepository,
    IEnvironmentRepository,
    IInstanceRepository,
    IOrderedCatalogRepository,
)
from .deployment_repository import IDeploymentRepository
from .stream_cursor_repository import IStreamCursorRepository

__all__ = [
    "IOrderedCatalogRepository",
    "IApplicationRepository",
    "IEnvironmentRepository",
    "IInstanceRepository",
    "IDeploymentRepository",
    "IStreamCursorRepository",
]
