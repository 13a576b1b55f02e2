import logging
from typing import Dict

from service_manager.domain import (
    AliasAlreadyRegisteredError,
    AliasNotDerivedError,
    AliasNotRegisteredError,
    AliasTypeUndefinedError,
    IServiceManager,
    ITypeRegistry,
    ServiceNotFoundError,
    TypeRef,
)

logger = logging.getLogger(__name__)


class AliasRegistry:
    """Maps alias types to the service types they resolve to.

    An alias and its target must be related by subclassing in either
    direction, so resolving the alias always yields a compatible instance.
    Typical use is aliasing an abstract base to its registered implementation.

    Attributes:
        _manager: Manager consulted to validate alias targets.
        _types: Type registry used for identifiers and subclass checks.
        _aliases: Alias identifier to target identifier.
    """

    def __init__(self, manager: IServiceManager, types: ITypeRegistry) -> None:
        """Initialize the alias registry with the manager that resolves targets and the type registry."""
        self._manager = manager
        self._types = types
        self._aliases: Dict[str, str] = {}

    def has(self, alias_id: TypeRef) -> bool:
        """Return whether the alias has been registered."""
        return self._types.identify(alias_id) in self._aliases

    def get(self, alias_id: TypeRef) -> str:
        """Return the target identifier of an alias.

        Raises:
            AliasNotRegisteredError: If the alias is not registered.
        """
        alias_id = self._types.identify(alias_id)
        if alias_id not in self._aliases:
            raise AliasNotRegisteredError(alias_id)
        return self._aliases[alias_id]

    def register(self, alias_id: TypeRef, target_id: TypeRef) -> None:
        """Register an alias for a known service.

        Args:
            alias_id: The alias type, usually an abstract base of the target.
            target_id: The registered service the alias resolves to.

        Raises:
            AliasAlreadyRegisteredError: If the alias already points somewhere.
            ServiceNotFoundError: If the target cannot be resolved by the manager.
            AliasTypeUndefinedError: If the alias type does not exist.
            AliasNotDerivedError: If alias and target are not subclasses of one another.

        Example:
            >>> manager.register(SmtpMailer)
            >>> manager.aliases.register(Mailer, SmtpMailer)
            >>> manager.get(Mailer) is manager.get(SmtpMailer)
            True
        """
        alias_id = self._types.identify(alias_id)
        target_id = self._types.identify(target_id)

        if alias_id in self._aliases:
            raise AliasAlreadyRegisteredError(alias_id, target_id, self._aliases[alias_id])

        if not self._manager.has(target_id):
            raise ServiceNotFoundError(target_id)

        if not self._types.exists(alias_id):
            raise AliasTypeUndefinedError(alias_id)

        if not (self._types.is_subtype_of(alias_id, target_id) or self._types.is_subtype_of(target_id, alias_id)):
            raise AliasNotDerivedError(alias_id, target_id)

        self._aliases[alias_id] = target_id
        logger.debug("Registered alias %s -> %s", alias_id, target_id)

    def __contains__(self, alias_id: object) -> bool:
        return isinstance(alias_id, (str, type)) and self.has(alias_id)

    def __len__(self) -> int:
        return len(self._aliases)
