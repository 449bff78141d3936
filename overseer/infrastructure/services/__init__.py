"""
Services Package - Infrastructure Layer

Concrete implementations of the domain ports.
"""

from .health_check_service import HealthCheckService
from .target_registry import MongoTargetRegistry

__all__ = ["HealthCheckService", "MongoTargetRegistry"]
