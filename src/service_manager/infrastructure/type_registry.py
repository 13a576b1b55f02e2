"""Infrastructure - Type identifiers backed by the Python import system."""

import importlib
import logging
from typing import Dict, Iterable, Optional, Type

from service_manager.domain import ITypeRegistry, TypeIdentifierConflictError, TypeRef, TypeUndefinedError

logger = logging.getLogger(__name__)


class TypeRegistry(ITypeRegistry):
    """Maps dotted type identifiers to classes.

    A type identifier is ``"<module>.<qualname>"``. Identifiers are resolved by
    importing the longest importable module prefix and walking the remaining
    attributes. Classes passed in directly are remembered under their
    identifier, so classes that cannot be imported by path (defined inside a
    function, for instance) still exist for this registry. An identifier names
    exactly one class: remembering a different class under a known identifier
    is an error.

    Attributes:
        _known: Classes already resolved or remembered, by identifier.
    """

    def __init__(self, types: Optional[Iterable[Type]] = None) -> None:
        """Initialize the registry.

        Args:
            types: Optional classes to remember up front.
        """
        self._known: Dict[str, Type] = {}
        for cls in types or ():
            self.remember(cls)

    @staticmethod
    def id_of(cls: Type) -> str:
        """Return the identifier of a class without remembering it."""
        return f"{cls.__module__}.{cls.__qualname__}"

    def remember(self, cls: Type) -> str:
        if not isinstance(cls, type):
            raise TypeError(f"Expected a class, got {cls!r}")
        type_id = self.id_of(cls)
        known = self._known.setdefault(type_id, cls)
        if known is not cls:
            raise TypeIdentifierConflictError(type_id)
        return type_id

    def identify(self, type_ref: TypeRef) -> str:
        if isinstance(type_ref, type):
            return self.remember(type_ref)
        if isinstance(type_ref, str):
            return type_ref
        raise TypeError(f"Type identifiers must be classes or strings, got {type_ref!r}")

    def exists(self, type_id: TypeRef) -> bool:
        try:
            self.lookup(type_id)
        except TypeUndefinedError as e:
            if e.cause is not None:
                raise
            return False
        return True

    def lookup(self, type_id: TypeRef) -> Type:
        type_id = self.identify(type_id)
        cls = self._known.get(type_id)
        if cls is None:
            cls = self._import(type_id)
            self._known[type_id] = cls
        return cls

    def is_subtype_of(self, type_id: TypeRef, parent_id: TypeRef) -> bool:
        try:
            cls = self.lookup(type_id)
            parent = self.lookup(parent_id)
        except TypeUndefinedError as e:
            if e.cause is not None:
                raise
            return False
        return cls is not parent and issubclass(cls, parent)

    def _import(self, type_id: str) -> Type:
        """Resolve a dotted path through the import system.

        A module that exists but fails while importing does not count as a
        missing prefix.

        Raises:
            TypeUndefinedError: If no module prefix imports or the attribute path
                does not end at a class. When a module body raised, the error is
                wrapped as the cause.
        """
        parts = type_id.split(".")
        if len(parts) < 2 or not all(parts):
            raise TypeUndefinedError(type_id)

        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target = importlib.import_module(module_name)
            except ImportError:
                continue
            except Exception as e:
                raise TypeUndefinedError(type_id, cause=e) from e

            for attribute in parts[split:]:
                target = getattr(target, attribute, None)
                if target is None:
                    raise TypeUndefinedError(type_id)

            if not isinstance(target, type):
                raise TypeUndefinedError(type_id)

            logger.debug("Resolved type %s from module %s", type_id, module_name)
            return target

        raise TypeUndefinedError(type_id)
