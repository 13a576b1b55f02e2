"""
Infrastructure layer - Default implementations and external integrations.

This layer contains the import-system backed type registry, the constructor
injector, and integrations with external frameworks and tools. The
``fastapi_integration`` and ``testing`` subpackages are imported explicitly.
"""

from .injector import DependencyInjector
from .type_registry import TypeRegistry

__all__ = [
    "DependencyInjector",
    "TypeRegistry",
]
