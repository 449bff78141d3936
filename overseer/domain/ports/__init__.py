"""Domain ports package."""

from .health_check import IHealthCheckService
from .target_registry import ITargetRegistry

__all__ = ["IHealthCheckService", "ITargetRegistry"]
