"""
Gateways Package - Infrastructure Layer

This package contains implementations of gateway interfaces for
external services (the Nomad event stream).
"""

from .nomad import (
    IdleDeploymentEventSource,
    NomadDeploymentEventSource,
    NomadEventStreamClient,
    NomadJobEventTranslator,
)

__all__ = [
    "IdleDeploymentEventSource",
    "NomadDeploymentEventSource",
    "NomadEventStreamClient",
    "NomadJobEventTranslator",
]
