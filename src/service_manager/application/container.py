from typing import Any

from service_manager.domain import IServiceManager, TypeRef


class ServiceContainer:
    """Read-only view of a service manager for application code.

    Every ServiceManager registers one bound to itself, so services can ask
    for ``ServiceContainer`` in their constructor instead of the manager.
    Meant to be used once registration and bootstrapping are complete.

    Example:
        >>> class ReportJob:
        ...     def __init__(self, services: ServiceContainer):
        ...         self.mailer = services.get(Mailer)
    """

    def __init__(self, manager: IServiceManager) -> None:
        """Initialize the container as a read-only view of the manager."""
        self._manager = manager

    def get(self, type_id: TypeRef) -> Any:
        """Resolve a service.

        Raises:
            ServiceNotFoundError: If the service cannot be resolved.
            ServiceResolutionError: If instantiating the service fails.
        """
        return self._manager.get(type_id)

    def has(self, type_id: TypeRef) -> bool:
        """Return whether the manager can resolve the service."""
        return self._manager.has(type_id)

    def __contains__(self, type_id: object) -> bool:
        return isinstance(type_id, (str, type)) and self.has(type_id)
