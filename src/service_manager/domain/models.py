from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from service_manager.domain.enums import ServiceState
from service_manager.domain.exceptions import CircularDependencyError


class PendingService(BaseModel):
    """Value object for a registered service that has not been instantiated yet.

    Attributes:
        state: Discriminator, always ``ServiceState.PENDING``.
        params: Named constructor parameters handed to the injector.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Literal[ServiceState.PENDING] = ServiceState.PENDING
    params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Named constructor parameters used when the service is instantiated.",
    )


class ResolvedService(BaseModel):
    """Value object for a service whose singleton instance is cached.

    Attributes:
        state: Discriminator, always ``ServiceState.RESOLVED``.
        instance: The cached instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Literal[ServiceState.RESOLVED] = ServiceState.RESOLVED
    instance: Any = Field(..., description="The singleton instance of the service.")


ServiceEntry = Union[PendingService, ResolvedService]


class ManagerOptions(BaseModel):
    """Configuration of a ServiceManager.

    Attributes:
        detect_cycles: Fail fast with CircularDependencyError on self-dependent services.
        register_container: Register the read-only ServiceContainer facade on construction.
    """

    model_config = ConfigDict(frozen=True)

    detect_cycles: bool = Field(
        default=True,
        description="Track services being instantiated and fail on re-entry.",
    )
    register_container: bool = Field(
        default=True,
        description="Register ServiceContainer bound to the manager as a service.",
    )


class ResolutionContext(BaseModel):
    """Tracks the services currently being instantiated.

    Attributes:
        stack: Type identifiers currently being instantiated, outermost first.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stack: List[str] = Field(
        default_factory=list,
        description="Stack of type identifiers currently being instantiated.",
    )

    def push(self, type_id: str) -> None:
        """Add a type identifier to the stack.

        Raises:
            CircularDependencyError: If the identifier is already in the stack.
        """
        if type_id in self.stack:
            cycle = self.stack[self.stack.index(type_id) :] + [type_id]
            raise CircularDependencyError(cycle)
        self.stack.append(type_id)

    def pop(self) -> None:
        """Remove the most recent identifier from the stack."""
        if self.stack:
            self.stack.pop()

    def clear(self) -> None:
        """Clear the entire stack."""
        self.stack.clear()
