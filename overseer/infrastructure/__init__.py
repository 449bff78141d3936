"""
Infrastructure Layer Package

Implementations of the domain interfaces: MongoDB persistence, the Nomad
event stream and dependency health checks.
"""

from overseer.infrastructure import repositories

__all__ = ["repositories"]
