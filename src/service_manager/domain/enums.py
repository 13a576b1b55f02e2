from enum import Enum


class ServiceState(str, Enum):
    """Defines the state of a registered service entry.

    Attributes:
        PENDING: Registered with constructor parameters, not yet instantiated.
        RESOLVED: Instantiated (or explicitly set); the instance is cached for good.
    """

    PENDING = "pending"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value
