"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .catalog_repository import ApplicationRepository, EnvironmentRepository
from .deployment_repository import DeploymentRepository
from .instance_repository import InstanceRepository
from .stream_cursor_repository import StreamCursorRepository

__all__ = [
    "ApplicationRepository",
    "EnvironmentRepository",
    "InstanceRepository",
    "DeploymentRepository",
    "StreamCursorRepository",
]
