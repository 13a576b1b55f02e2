import logging
import re
from typing import Iterator, List

from service_manager.domain import NamespaceAlreadyRegisteredError, NamespaceInvalidError

logger = logging.getLogger(__name__)

SEPARATOR = "."

_NAMESPACE_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_.]*$")


class NamespaceRegistry:
    """Tracks module prefixes whose classes are registered on first request.

    Namespaces are stored with a trailing separator so that ``"app.services"``
    matches ``"app.services.Logger"`` but not ``"app.services_extra.Logger"``.

    Attributes:
        _namespaces: Normalized prefixes in registration order.
    """

    def __init__(self) -> None:
        """Initialize the registry with no namespaces."""
        self._namespaces: List[str] = []

    @staticmethod
    def normalize(namespace: str) -> str:
        """Append the separator to a namespace if it is missing."""
        return namespace if namespace.endswith(SEPARATOR) else namespace + SEPARATOR

    def matches(self, type_id: str) -> bool:
        """Return whether the identifier falls under any registered namespace."""
        return any(type_id.startswith(namespace) for namespace in self._namespaces)

    def register(self, namespace: str) -> None:
        """Register a namespace for auto-registration.

        Args:
            namespace: Dotted module path, with or without the trailing separator.

        Raises:
            NamespaceInvalidError: If the namespace is not a dotted identifier path.
            NamespaceAlreadyRegisteredError: If the normalized namespace is already registered.

        Example:
            >>> namespaces = NamespaceRegistry()
            >>> namespaces.register("app.services")
            >>> namespaces.matches("app.services.Logger")
            True
        """
        if not isinstance(namespace, str) or not _NAMESPACE_PATTERN.fullmatch(namespace):
            raise NamespaceInvalidError(namespace)

        namespace = self.normalize(namespace)
        if namespace in self._namespaces:
            raise NamespaceAlreadyRegisteredError(namespace)

        self._namespaces.append(namespace)
        logger.debug("Registered namespace %s", namespace)

    def __contains__(self, namespace: object) -> bool:
        return isinstance(namespace, str) and self.normalize(namespace) in self._namespaces

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._namespaces))

    def __len__(self) -> int:
        return len(self._namespaces)
