"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CatalogEntryNotFoundError(DomainError):
    """Raised when an application, environment or instance cannot be found."""

    def __init__(
        self, entry_type: str, entry_id: int, details: Optional[Dict[str, Any]] = None
    ):
        self.entry_type = entry_type
        self.entry_id = entry_id
        message = f"{entry_type.capitalize()} with ID {entry_id} not found"
        super().__init__(message, details)


class CatalogValidationError(DomainError):
    """Raised when a catalog entry fails validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DeploymentValidationError(DomainError):
    """Raised when a deployment registration is incomplete."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DeploymentRegistrationError(DomainError):
    """Raised when the registry fails to persist a deployment."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class TargetLookupError(DomainError):
    """Raised when the registry cannot be queried for deployment targets."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class AmbiguousDeploymentTargetError(DomainError):
    """
    Raised when more than one target matches a deployment name.

    Deployment names map 1:1 to targets; several matches mean the catalog is
    inconsistent and a version could be attributed to the wrong target.
    """

    def __init__(self, deployment_name: str, target_ids: List[int]):
        self.deployment_name = deployment_name
        self.target_ids = target_ids
        message = (
            f"Deployment {deployment_name} matches {len(target_ids)} targets, "
            "expected at most one"
        )
        super().__init__(
            message,
            {"deployment_name": deployment_name, "target_ids": target_ids},
        )
