"""
Domain Layer Package

This package contains the core business rules of the application:
catalog and deployment entities, repository contracts, and the ports the
ingestion pipeline depends on, without dependencies on external
frameworks or infrastructure concerns.
"""

# Re-export submodules
from overseer.domain import entities, gateways, ports, repositories

__all__ = ["entities", "gateways", "repositories", "ports"]
