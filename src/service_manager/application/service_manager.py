import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from service_manager.application.alias_registry import AliasRegistry
from service_manager.application.circular_detector import CircularDependencyDetector
from service_manager.application.container import ServiceContainer
from service_manager.application.namespace_registry import NamespaceRegistry
from service_manager.application.provider_registry import ProviderRegistry
from service_manager.domain import (
    CircularDependencyError,
    IBootstrapper,
    IDependencyInjector,
    IServiceManager,
    ITypeRegistry,
    ManagerOptions,
    PendingService,
    ResolvedService,
    ServiceAlreadyRegisteredError,
    ServiceAlreadySetError,
    ServiceEntry,
    ServiceNotFoundError,
    ServiceNotInstanceOfError,
    ServiceParamsInvalidError,
    ServiceResolutionError,
    TypeRef,
    TypeUndefinedError,
)
from service_manager.infrastructure.injector import DependencyInjector
from service_manager.infrastructure.type_registry import TypeRegistry

logger = logging.getLogger(__name__)

_UNRESOLVED = object()


class ServiceManager(IServiceManager):
    """Registers, caches and resolves services by type.

    A request for a type is answered, in order, by:

    1. a literal registration (``register`` or ``set``);
    2. the first provider that supports the type;
    3. an alias, replaced by its target for the following steps;
    4. a registered namespace, which registers the type on the fly;

    and fails otherwise. Literal services are instantiated once through the
    dependency injector and cached for the lifetime of the manager. The manager
    hooks itself into the injector, so constructor parameters annotated with a
    resolvable service type receive that service.

    Attributes:
        _options: Manager configuration.
        _types: Type registry for identifiers, existence and subclass checks.
        _injector: Injector used to instantiate services and providers.
        _services: Service entries by type identifier.
        _namespaces: Namespaces eligible for auto-registration.
        _aliases: Alias to target mapping.
        _providers: Registered service providers.
        _circular_detector: Guards against self-dependent services.

    Example:
        >>> manager = ServiceManager()
        >>> manager.register(Mailer, {"host": "smtp.local"})
        >>> manager.has(Mailer)
        True
        >>> manager.get(Mailer) is manager.get(Mailer)
        True
    """

    def __init__(
        self,
        options: Optional[ManagerOptions] = None,
        type_registry: Optional[ITypeRegistry] = None,
        injector: Optional[IDependencyInjector] = None,
    ) -> None:
        """Initialize the manager, its registries and the injector hook.

        Args:
            options: Manager configuration; defaults to ``ManagerOptions()``.
            type_registry: Type registry to use; a fresh TypeRegistry by default.
            injector: Injector to use; a DependencyInjector over the type registry by default.
        """
        self._options = options or ManagerOptions()
        self._types: ITypeRegistry = type_registry or TypeRegistry()
        self._injector: IDependencyInjector = injector or DependencyInjector(self._types)
        self._services: Dict[str, ServiceEntry] = {}
        self._namespaces = NamespaceRegistry()
        self._aliases = AliasRegistry(self, self._types)
        self._providers = ProviderRegistry(self, self._injector, self._types)
        self._circular_detector = CircularDependencyDetector()

        self._injector.on_lookup(self.lookup_value)

        if self._options.register_container:
            self.register(ServiceContainer, {"manager": self})

    @property
    def options(self) -> ManagerOptions:
        return self._options

    @property
    def types(self) -> ITypeRegistry:
        return self._types

    @property
    def injector(self) -> IDependencyInjector:
        return self._injector

    @property
    def namespaces(self) -> NamespaceRegistry:
        return self._namespaces

    @property
    def aliases(self) -> AliasRegistry:
        return self._aliases

    @property
    def providers(self) -> ProviderRegistry:
        return self._providers

    def lookup_value(self, name: str, type_id: Optional[str]) -> Tuple[bool, Any]:
        """Injector hook: satisfy a constructor parameter with a resolvable service.

        Args:
            name: The parameter name (unused, services are looked up by type).
            type_id: The parameter's annotated type, if it has one.

        Returns:
            ``(True, service)`` when the type is resolvable, ``(False, None)`` otherwise.
        """
        if type_id is not None and self.has(type_id):
            return True, self.get(type_id)
        return False, None

    def register(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> None:
        """Register a service to be instantiated on first request.

        Only the literal service map is consulted: a type handled by a provider,
        an alias or a namespace can still be registered explicitly, and the
        explicit registration then takes precedence.

        Args:
            type_id: The service class or its identifier.
            params: Constructor parameters used when the service is instantiated.

        Raises:
            TypeUndefinedError: If the type does not exist.
            ServiceAlreadyRegisteredError: If the type is already registered.
            ServiceParamsInvalidError: If the parameters are not keyed by name.
        """
        type_id = self._types.identify(type_id)

        if not self._types.exists(type_id):
            raise TypeUndefinedError(type_id)

        if type_id in self._services:
            raise ServiceAlreadyRegisteredError(type_id)

        try:
            entry = PendingService(params=params or {})
        except ValidationError as e:
            raise ServiceParamsInvalidError(type_id, cause=e) from e

        self._services[type_id] = entry
        logger.debug("Registered service %s", type_id)

    def set(self, type_id: TypeRef, instance: Any, auto_register: bool = True) -> None:
        """Set the instance of a service explicitly, bypassing the injector.

        The instance's class must be the service type, a subclass of it or one
        of its base classes. All checks run before anything is stored.

        Args:
            type_id: The service class or its identifier.
            instance: The instance to cache for the service.
            auto_register: Register the service first if it is not registered.

        Raises:
            ServiceNotFoundError: If the service is not registered and ``auto_register`` is False.
            TypeUndefinedError: If the service type does not exist.
            ServiceAlreadySetError: If the service already holds an instance.
            ServiceNotInstanceOfError: If the instance's class is unrelated to the service type.
        """
        type_id = self._types.identify(type_id)
        entry = self._services.get(type_id)

        if entry is None:
            if not auto_register:
                raise ServiceNotFoundError(type_id)
            if not self._types.exists(type_id):
                raise TypeUndefinedError(type_id)
        elif isinstance(entry, ResolvedService):
            raise ServiceAlreadySetError(type_id)

        instance_type_id = self._types.identify(type(instance))
        if not (
            instance_type_id == type_id
            or self._types.is_subtype_of(instance_type_id, type_id)
            or self._types.is_subtype_of(type_id, instance_type_id)
        ):
            raise ServiceNotInstanceOfError(type_id, instance_type_id)

        if entry is None:
            self.register(type_id)

        self._services[type_id] = ResolvedService(instance=instance)
        logger.debug("Set service %s to an instance of %s", type_id, instance_type_id)

    def get(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> Any:
        """Resolve and return a service instance.

        Args:
            type_id: The service class or its identifier.
            params: Constructor parameters for providers and namespace auto-registration.

        Returns:
            The service instance.

        Raises:
            ServiceNotFoundError: If no resolution path yields the service.
            ServiceResolutionError: If instantiating or auto-registering the service fails.
            CircularDependencyError: If the service depends on itself.
        """
        type_id = self._types.identify(type_id)
        service = self._resolve(type_id, True, params or {})
        if service is _UNRESOLVED:
            raise ServiceNotFoundError(type_id)
        return service

    def has(self, type_id: TypeRef) -> bool:
        """Return whether the service can be resolved, without instantiating anything.

        A namespace match registers the type as a side effect, as ``get`` would.
        """
        type_id = self._types.identify(type_id)
        return self._resolve(type_id, False, {}) is not _UNRESOLVED

    def _resolve(self, type_id: str, instantiate: bool, params: Dict[str, Any]) -> Any:
        # Literal registrations take precedence over everything else
        if type_id in self._services:
            return self._resolve_literal(type_id, instantiate)

        provider = self._providers.get_provider_for(type_id)
        if provider is not None:
            if not instantiate:
                return True
            logger.debug("Resolving %s through provider %s", type_id, type(provider).__name__)
            return provider.handle(type_id, params)

        real_type_id = self._aliases.get(type_id) if self._aliases.has(type_id) else type_id

        if real_type_id not in self._services and self._namespaces.matches(real_type_id):
            try:
                self.register(real_type_id, params)
            except Exception as e:
                raise ServiceResolutionError(type_id, cause=e) from e
            logger.debug("Auto-registered %s from its namespace", real_type_id)

        return self._resolve_literal(real_type_id, instantiate)

    def _resolve_literal(self, type_id: str, instantiate: bool) -> Any:
        entry = self._services.get(type_id)
        if entry is None:
            return _UNRESOLVED

        if not instantiate:
            return True

        if isinstance(entry, ResolvedService):
            return entry.instance

        if self._options.detect_cycles:
            self._circular_detector.push(type_id)

        try:
            instance = self._injector.instantiate(type_id, entry.params)
            self._services[type_id] = ResolvedService(instance=instance)
            if isinstance(instance, IBootstrapper):
                instance.bootstrap(self)
        except CircularDependencyError:
            raise
        except Exception as e:
            raise ServiceResolutionError(type_id, cause=e) from e
        finally:
            if self._options.detect_cycles:
                self._circular_detector.pop()

        logger.debug("Resolved service %s", type_id)
        return instance
