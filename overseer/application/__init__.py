"""
Application Layer Package

Use cases, DTOs and configuration snapshots. The application layer
orchestrates the domain: catalog management, version registration and
the correlation of orchestrator events with deployment targets.
"""

from overseer.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
