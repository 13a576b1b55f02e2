"""
service-manager: Lazy service locator with providers, aliases and namespace auto-registration.

Public API exports for the service_manager package.
"""

# Application exports
from service_manager.application.container import ServiceContainer
from service_manager.application.service_manager import ServiceManager

# Domain exports
from service_manager.domain.exceptions import (
    AliasAlreadyRegisteredError,
    AliasNotDerivedError,
    AliasNotRegisteredError,
    AliasTypeUndefinedError,
    CircularDependencyError,
    InjectionError,
    NamespaceAlreadyRegisteredError,
    NamespaceInvalidError,
    NoProviderForServiceError,
    ProviderAlreadyRegisteredError,
    ProviderMissingContractError,
    ProviderNotRegisteredError,
    ProviderRegistrationError,
    ProviderTypeUndefinedError,
    ServiceAlreadyRegisteredError,
    ServiceAlreadySetError,
    ServiceManagementError,
    ServiceNotFoundError,
    ServiceNotInstanceOfError,
    ServiceParamsInvalidError,
    ServiceResolutionError,
    TypeIdentifierConflictError,
    TypeUndefinedError,
)
from service_manager.domain.interfaces import IBootstrapper, IServiceManager, IServiceProvider
from service_manager.domain.models import ManagerOptions

# Infrastructure exports
from service_manager.infrastructure.injector import DependencyInjector
from service_manager.infrastructure.type_registry import TypeRegistry

__version__ = "0.1.0"

__all__ = [
    # Manager
    "ServiceManager",
    "ServiceContainer",
    "ManagerOptions",
    # Contracts
    "IServiceManager",
    "IServiceProvider",
    "IBootstrapper",
    # Collaborators
    "TypeRegistry",
    "DependencyInjector",
    # Exceptions
    "ServiceManagementError",
    "TypeUndefinedError",
    "TypeIdentifierConflictError",
    "InjectionError",
    "CircularDependencyError",
    "ServiceAlreadyRegisteredError",
    "ServiceAlreadySetError",
    "ServiceNotFoundError",
    "ServiceNotInstanceOfError",
    "ServiceParamsInvalidError",
    "ServiceResolutionError",
    "AliasAlreadyRegisteredError",
    "AliasNotDerivedError",
    "AliasNotRegisteredError",
    "AliasTypeUndefinedError",
    "NamespaceAlreadyRegisteredError",
    "NamespaceInvalidError",
    "NoProviderForServiceError",
    "ProviderAlreadyRegisteredError",
    "ProviderMissingContractError",
    "ProviderNotRegisteredError",
    "ProviderRegistrationError",
    "ProviderTypeUndefinedError",
]
