"""
Domain layer - Core models, contracts and errors.

This layer contains the value objects, interfaces and exception taxonomy of the
service manager. It has no dependencies on other layers.
"""

from .enums import ServiceState
from .exceptions import (
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
from .interfaces import (
    IBootstrapper,
    IDependencyInjector,
    IServiceManager,
    IServiceProvider,
    ITypeRegistry,
    LookupHook,
    TypeRef,
)
from .models import ManagerOptions, PendingService, ResolutionContext, ResolvedService, ServiceEntry

__all__ = [
    # Enums
    "ServiceState",
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
    # Interfaces
    "ITypeRegistry",
    "IDependencyInjector",
    "IServiceManager",
    "IServiceProvider",
    "IBootstrapper",
    "LookupHook",
    "TypeRef",
    # Models
    "PendingService",
    "ResolvedService",
    "ServiceEntry",
    "ManagerOptions",
    "ResolutionContext",
]
