"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers validate input, delegate to use cases and
map domain errors to HTTP status codes.
"""

from .applications_controller import router as applications_router
from .deployments_controller import router as deployments_router
from .environments_controller import router as environments_router
from .instances_controller import router as instances_router
from .system_controller import router as system_router

__all__ = [
    "applications_router",
    "environments_router",
    "instances_router",
    "deployments_router",
    "system_router",
]
