from typing import List, Optional


class ServiceManagementError(Exception):
    """Base exception for service management errors.

    Attributes:
        code: Stable numeric code identifying the error kind.
        cause: The wrapped exception, if this error wraps another one.
    """

    code = 1400

    def __init__(self, message: str = "", cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class TypeUndefinedError(ServiceManagementError):
    """Raised when a type identifier does not name an existing class."""

    code = 1405

    def __init__(self, type_id: str, cause: Optional[BaseException] = None) -> None:
        self.type_id = type_id
        super().__init__(f"The class or interface {type_id} is not defined.", cause)


class TypeIdentifierConflictError(ServiceManagementError):
    """Raised when two different classes map to the same type identifier.

    Classes built by one factory function, or a class redefined in ``__main__``,
    share a module and a qualified name.

    Attributes:
        type_id: The identifier both classes map to.
    """

    code = 1421

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"Another class is already known as {type_id}.")


class InjectionError(ServiceManagementError):
    """Raised by the dependency injector when a constructor cannot be satisfied.

    This occurs when:
    - A required parameter has no explicit value, no resolvable type hint and no default.
    - Explicit parameters name arguments the constructor does not accept.
    - The constructor itself raises.

    Attributes:
        type_id: The type that could not be instantiated.
        reason: Optional reason for the failure.
    """

    code = 1420

    def __init__(self, type_id: str, reason: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        self.type_id = type_id
        self.reason = reason
        message = f"Cannot instantiate {type_id}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message, cause)


class CircularDependencyError(ServiceManagementError):
    """Raised when a service depends on itself, directly or transitively.

    Attributes:
        dependency_chain: Type identifiers forming the cycle, first and last equal.
    """

    code = 1419

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        super().__init__(f"Circular dependency detected: {' -> '.join(dependency_chain)}")


# Services


class ServiceAlreadyRegisteredError(ServiceManagementError):
    code = 1409

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"The service {type_id} is already registered or is handled by a service provider.")


class ServiceAlreadySetError(ServiceManagementError):
    code = 1410

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"The service {type_id} cannot be manually set because it's already been set.")


class ServiceParamsInvalidError(ServiceManagementError, ValueError):
    code = 1422

    def __init__(self, type_id: str, cause: Optional[BaseException] = None) -> None:
        self.type_id = type_id
        super().__init__(f"The parameters of the service {type_id} must be a mapping of parameter names.", cause)


class ServiceNotFoundError(ServiceManagementError, LookupError):
    """Raised when no resolution path yields the requested service."""

    code = 1411

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"The requested service {type_id} was not found in the container.")


class ServiceNotInstanceOfError(ServiceManagementError):
    """Raised when an explicitly set instance is unrelated to its service type.

    Attributes:
        type_id: The service the instance was set for.
        instance_type_id: The runtime type of the rejected instance.
    """

    code = 1412

    def __init__(self, type_id: str, instance_type_id: str) -> None:
        self.type_id = type_id
        self.instance_type_id = instance_type_id
        super().__init__(
            f"The service object {instance_type_id} is not an instance or a subclass of the service class {type_id}."
        )


class ServiceResolutionError(ServiceManagementError):
    """Raised when instantiating or auto-registering a service fails.

    The original exception is always available as ``cause`` and ``__cause__``.
    """

    code = 1418

    def __init__(self, type_id: str, cause: Optional[BaseException] = None) -> None:
        self.type_id = type_id
        message = f"An error occurred while resolving the service {type_id}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, cause)


# Aliases


class AliasAlreadyRegisteredError(ServiceManagementError):
    code = 1401

    def __init__(self, alias_id: str, target_id: str, existing_target_id: str) -> None:
        self.alias_id = alias_id
        self.target_id = target_id
        self.existing_target_id = existing_target_id
        super().__init__(
            f"The alias {alias_id} is already registered for the service {existing_target_id}, "
            f"it can't be used for the service {target_id}."
        )


class AliasNotDerivedError(ServiceManagementError):
    code = 1402

    def __init__(self, alias_id: str, target_id: str) -> None:
        self.alias_id = alias_id
        self.target_id = target_id
        super().__init__(f"The alias class {alias_id} and the service class {target_id} are not derived from each other.")


class AliasTypeUndefinedError(ServiceManagementError):
    code = 1403

    def __init__(self, alias_id: str) -> None:
        self.alias_id = alias_id
        super().__init__(f"The alias class {alias_id} was not found.")


class AliasNotRegisteredError(ServiceManagementError, LookupError):
    code = 1404

    def __init__(self, alias_id: str) -> None:
        self.alias_id = alias_id
        super().__init__(f"The alias {alias_id} has not been registered with a class.")


# Namespaces


class NamespaceAlreadyRegisteredError(ServiceManagementError):
    code = 1406

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"The namespace {namespace} is already registered.")


class NamespaceInvalidError(ServiceManagementError, ValueError):
    code = 1407

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"The namespace {namespace!r} is not a valid dotted module path.")


# Providers


class NoProviderForServiceError(ServiceManagementError, LookupError):
    code = 1408

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"There were no service providers available that supports the class {type_id}.")


class ProviderAlreadyRegisteredError(ServiceManagementError):
    code = 1413

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"The service provider {provider_id} is already registered.")


class ProviderMissingContractError(ServiceManagementError):
    code = 1414

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"The service provider {provider_id} does not implement ServiceProvider.")


class ProviderTypeUndefinedError(ServiceManagementError):
    code = 1415

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"The service provider class {provider_id} was not found.")


class ProviderNotRegisteredError(ServiceManagementError, LookupError):
    code = 1416

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"The service provider {provider_id} has not been registered.")


class ProviderRegistrationError(ServiceManagementError):
    """Raised when constructing or bootstrapping a provider fails."""

    code = 1417

    def __init__(self, provider_id: str, cause: Optional[BaseException] = None) -> None:
        self.provider_id = provider_id
        message = f"An unexpected exception was raised while registering the service provider {provider_id}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, cause)
