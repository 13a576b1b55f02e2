import inspect
import logging
from typing import Any, Dict, List, Optional, Tuple, Type, Union, get_args, get_origin, get_type_hints

from service_manager.domain import (
    IDependencyInjector,
    InjectionError,
    ITypeRegistry,
    LookupHook,
    ServiceManagementError,
    TypeRef,
)

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class DependencyInjector(IDependencyInjector):
    """Instantiates classes using constructor introspection and type hints.

    Each constructor parameter is filled from, in order:

    1. the explicit ``params`` mapping, by name;
    2. the registered lookup hooks, asked with the parameter's annotated type;
    3. the parameter's default value.

    A required parameter that none of these satisfy is an error.

    Attributes:
        _types: Registry used to turn identifiers into classes and annotations into identifiers.
        _hooks: Lookup hooks in registration order.
    """

    def __init__(self, types: ITypeRegistry) -> None:
        """Initialize the injector with the type registry used to resolve classes and annotations."""
        self._types = types
        self._hooks: List[LookupHook] = []

    def on_lookup(self, hook: LookupHook) -> None:
        self._hooks.append(hook)

    def instantiate(self, type_id: TypeRef, params: Optional[Dict[str, Any]] = None) -> Any:
        """Create an instance with all constructor parameters filled.

        Args:
            type_id: The type to instantiate.
            params: Explicit constructor values by parameter name.

        Returns:
            The new instance.

        Raises:
            TypeUndefinedError: If the type does not exist.
            InjectionError: If a parameter cannot be satisfied or the constructor raises.

        Example:
            >>> class Mailer:
            ...     def __init__(self, host: str, logger: Logger):
            ...         self.host = host
            ...         self.logger = logger
            >>>
            >>> injector.on_lookup(manager.lookup_value)
            >>> mailer = injector.instantiate(Mailer, {"host": "smtp.local"})
        """
        type_id = self._types.identify(type_id)
        cls = self._types.lookup(type_id)

        args, kwargs = self._build_arguments(cls, type_id, dict(params or {}))

        try:
            instance = cls(*args, **kwargs)
        except ServiceManagementError:
            raise
        except Exception as e:
            raise InjectionError(type_id, f"Constructor raised {e!r}", cause=e) from e

        logger.debug("Instantiated %s", type_id)
        return instance

    def _build_arguments(self, cls: Type, type_id: str, params: Dict[str, Any]) -> Tuple[List[Any], Dict[str, Any]]:
        try:
            signature = inspect.signature(cls.__init__)
        except (TypeError, ValueError) as e:
            raise InjectionError(type_id, f"Cannot inspect constructor: {e}", cause=e) from e

        try:
            type_hints = get_type_hints(cls.__init__)
        except (NameError, TypeError) as e:
            logger.warning("Error retrieving %s constructor type hints: %s", type_id, e)
            type_hints = {}

        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        accepts_extra = False

        for index, (param_name, param) in enumerate(signature.parameters.items()):
            # Skip the bound instance
            if index == 0 and param.kind != inspect.Parameter.KEYWORD_ONLY:
                continue

            if param.kind in _VARIADIC:
                accepts_extra = accepts_extra or param.kind == inspect.Parameter.VAR_KEYWORD
                continue

            if param_name in params:
                value = params.pop(param_name)
            else:
                found, value = self._lookup(param_name, type_hints.get(param_name))
                if not found:
                    if param.default is not inspect.Parameter.empty:
                        continue
                    raise InjectionError(
                        type_id,
                        f"Parameter '{param_name}' has no explicit value, no resolvable type hint and no default.",
                    )

            if param.kind == inspect.Parameter.POSITIONAL_ONLY:
                args.append(value)
            else:
                kwargs[param_name] = value

        if params:
            if not accepts_extra:
                raise InjectionError(type_id, f"Unknown constructor parameters: {', '.join(sorted(params))}")
            kwargs.update(params)

        return args, kwargs

    def _lookup(self, param_name: str, hint: Any) -> Tuple[bool, Any]:
        param_type = self._unwrap_optional(hint)
        param_type_id = self._types.identify(param_type) if isinstance(param_type, type) else None

        for hook in self._hooks:
            found, value = hook(param_name, param_type_id)
            if found:
                return True, value
        return False, None

    @staticmethod
    def _unwrap_optional(hint: Any) -> Any:
        """Return ``X`` for ``Optional[X]``, the hint itself otherwise."""
        if get_origin(hint) is Union:
            members = [arg for arg in get_args(hint) if arg is not type(None)]
            if len(members) == 1:
                return members[0]
        return hint
