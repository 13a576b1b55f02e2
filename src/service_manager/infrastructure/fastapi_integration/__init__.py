"""
FastAPI integration module.

Provides helpers for exposing service_manager services to FastAPI endpoints.
"""

from .integration import (
    ServiceContainerMiddleware,
    create_fastapi_dependency,
    create_request_dependency,
    inject_services,
)

__all__ = [
    "create_fastapi_dependency",
    "create_request_dependency",
    "inject_services",
    "ServiceContainerMiddleware",
]
