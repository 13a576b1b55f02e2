"""
Application layer - Registries and the resolution algorithm.

This layer orchestrates the domain contracts into the service manager.
It depends on the Domain layer and on the default Infrastructure implementations.
"""

from .alias_registry import AliasRegistry
from .circular_detector import CircularDependencyDetector
from .container import ServiceContainer
from .namespace_registry import NamespaceRegistry
from .provider_registry import ProviderRegistry
from .service_manager import ServiceManager

__all__ = [
    "ServiceManager",
    "ServiceContainer",
    "AliasRegistry",
    "NamespaceRegistry",
    "ProviderRegistry",
    "CircularDependencyDetector",
]
