"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .catalog import Application, Environment, Instance
from .deployment import Deployment, DeploymentEvent, is_trackable_version
from .errors import (
    AmbiguousDeploymentTargetError,
    CatalogEntryNotFoundError,
    CatalogValidationError,
    DeploymentRegistrationError,
    DeploymentValidationError,
    DomainError,
    TargetLookupError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth

__all__ = [
    "Application",
    "Environment",
    "Instance",
    "Deployment",
    "DeploymentEvent",
    "is_trackable_version",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "CatalogEntryNotFoundError",
    "CatalogValidationError",
    "DeploymentValidationError",
    "DeploymentRegistrationError",
    "AmbiguousDeploymentTargetError",
    "TargetLookupError",
]
