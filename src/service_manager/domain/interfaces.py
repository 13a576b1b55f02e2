from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

TypeRef = Union[str, Type]
"""A type identifier (dotted path) or the class it names."""

LookupHook = Callable[[str, Optional[str]], Tuple[bool, Any]]
"""Called by the injector as ``hook(param_name, param_type_id)``; returns ``(found, value)``."""


class ITypeRegistry(ABC):
    """Abstract interface for type-existence and subtype queries."""

    @abstractmethod
    def identify(self, type_ref: TypeRef) -> str:
        """Return the type identifier for a class or an identifier."""

    @abstractmethod
    def remember(self, cls: Type) -> str:
        """Make a class known under its identifier and return the identifier.

        Raises:
            TypeIdentifierConflictError: If a different class is already known
                under the same identifier.
        """

    @abstractmethod
    def exists(self, type_id: TypeRef) -> bool:
        """Return whether the identifier names an existing class.

        Raises:
            TypeUndefinedError: If the module holding the type fails while
                importing. The failure is kept as the cause.
        """

    @abstractmethod
    def lookup(self, type_id: TypeRef) -> Type:
        """Return the class named by the identifier.

        Raises:
            TypeUndefinedError: If no such class exists.
        """

    @abstractmethod
    def is_subtype_of(self, type_id: TypeRef, parent_id: TypeRef) -> bool:
        """Return whether ``type_id`` is a proper subclass of ``parent_id``."""


class IDependencyInjector(ABC):
    """Abstract interface for constructor injection."""

    @abstractmethod
    def instantiate(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> Any:
        """Create an instance of the type, filling constructor parameters.

        Args:
            type_id: The type to instantiate.
            params: Explicit values for constructor parameters, by name.

        Raises:
            InjectionError: If the constructor cannot be satisfied or raises.
        """

    @abstractmethod
    def on_lookup(self, hook: LookupHook) -> None:
        """Register a hook consulted for parameters without an explicit value."""


class IServiceManager(ABC):
    """Abstract interface for service registration and resolution."""

    @abstractmethod
    def register(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> None:
        """Register a service to be instantiated lazily with the given parameters."""

    @abstractmethod
    def set(self, type_id: TypeRef, instance: Any, auto_register: bool = True) -> None:
        """Set the singleton instance of a service explicitly."""

    @abstractmethod
    def get(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> Any:
        """Resolve and return the service instance."""

    @abstractmethod
    def has(self, type_id: TypeRef) -> bool:
        """Return whether the service can be resolved."""


class IServiceProvider(ABC):
    """Pluggable constructor for the types it claims.

    Providers are consulted before aliases and namespaces. The manager never
    caches what a provider returns; a provider that hands out singletons keeps
    them itself and reports so through ``is_singleton_expected``.
    """

    @abstractmethod
    def supports(self, type_id: str) -> bool:
        """Return whether this provider can build the given type."""

    @abstractmethod
    def handle(self, type_id: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Build (or return) an instance of the given type."""

    @abstractmethod
    def is_singleton_expected(self, type_id: str) -> bool:
        """Return whether ``handle`` returns the same instance on every call."""


class IBootstrapper(ABC):
    """Post-construction hook for services and providers.

    ``bootstrap`` is called exactly once, right after the instance is first
    stored by the manager.
    """

    @abstractmethod
    def bootstrap(self, manager: IServiceManager) -> None:
        """Finish initialization with access to the owning manager."""
