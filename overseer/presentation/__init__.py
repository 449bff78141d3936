"""
Presentation Layer Package

HTTP surface of the target registry: catalog management, version
registrations and system endpoints.
"""

from overseer.presentation import controllers

__all__ = ["controllers"]
