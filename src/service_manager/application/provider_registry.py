import logging
from typing import Any, Dict, Optional

from service_manager.domain import (
    IBootstrapper,
    IDependencyInjector,
    IServiceManager,
    IServiceProvider,
    ITypeRegistry,
    NoProviderForServiceError,
    ProviderAlreadyRegisteredError,
    ProviderMissingContractError,
    ProviderNotRegisteredError,
    ProviderRegistrationError,
    ProviderTypeUndefinedError,
    TypeRef,
)

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Ordered collection of service providers.

    Providers are asked in registration order; the first one whose
    ``supports`` returns True handles the request. A provider registered after
    another one that claims the same types is never reached for those types.

    Attributes:
        _manager: The owning manager, handed to bootstrapping providers.
        _injector: Injector used to construct providers.
        _types: Type registry used for identifiers and contract checks.
        _providers: Provider instances by provider type identifier, in registration order.
    """

    def __init__(self, manager: IServiceManager, injector: IDependencyInjector, types: ITypeRegistry) -> None:
        """Initialize the provider registry with the collaborators used to build and bootstrap providers."""
        self._manager = manager
        self._injector = injector
        self._types = types
        self._providers: Dict[str, IServiceProvider] = {}

    def register_provider(self, provider_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> None:
        """Instantiate a provider through the injector and register it.

        Providers that are also IBootstrapper are bootstrapped once, right after
        they are stored.

        Args:
            provider_id: The provider class or its identifier.
            params: Explicit constructor parameters for the provider.

        Raises:
            ProviderTypeUndefinedError: If the provider type does not exist.
            ProviderAlreadyRegisteredError: If the provider type is already registered.
            ProviderMissingContractError: If the type does not implement IServiceProvider.
            ProviderRegistrationError: If constructing or bootstrapping the provider fails.
        """
        provider_id = self._types.identify(provider_id)

        if not self._types.exists(provider_id):
            raise ProviderTypeUndefinedError(provider_id)

        if self.has_provider(provider_id):
            raise ProviderAlreadyRegisteredError(provider_id)

        if not issubclass(self._types.lookup(provider_id), IServiceProvider):
            raise ProviderMissingContractError(provider_id)

        try:
            provider = self._injector.instantiate(provider_id, params or {})
            self._providers[provider_id] = provider
            if isinstance(provider, IBootstrapper):
                provider.bootstrap(self._manager)
        except Exception as e:
            raise ProviderRegistrationError(provider_id, cause=e) from e

        logger.debug("Registered service provider %s", provider_id)

    def has_provider(self, provider_id: TypeRef) -> bool:
        """Return whether the provider class has been registered."""
        return self._types.identify(provider_id) in self._providers

    def get_provider(self, provider_id: TypeRef) -> IServiceProvider:
        """Return a registered provider instance.

        Raises:
            ProviderNotRegisteredError: If the provider is not registered.
        """
        provider_id = self._types.identify(provider_id)
        if provider_id not in self._providers:
            raise ProviderNotRegisteredError(provider_id)
        return self._providers[provider_id]

    def get_provider_for(self, type_id: TypeRef) -> Optional[IServiceProvider]:
        """Return the first provider, in registration order, that supports the type."""
        type_id = self._types.identify(type_id)
        for provider in self._providers.values():
            if provider.supports(type_id):
                return provider
        return None

    def supports(self, type_id: TypeRef) -> bool:
        """Return whether any registered provider supports the type."""
        return self.get_provider_for(type_id) is not None

    def get(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> Any:
        """Build an instance through the first provider that supports the type.

        Raises:
            NoProviderForServiceError: If no registered provider supports the type.
        """
        type_id = self._types.identify(type_id)
        provider = self.get_provider_for(type_id)
        if provider is None:
            raise NoProviderForServiceError(type_id)
        return provider.handle(type_id, params or {})

    def __len__(self) -> int:
        return len(self._providers)
