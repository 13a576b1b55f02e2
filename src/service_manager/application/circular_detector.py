"""Application layer - Circular dependency detection."""

import threading
from typing import List

from service_manager.domain import ResolutionContext


class CircularDependencyDetector:
    """Detects services that depend on themselves during instantiation.

    Uses thread-local storage to keep one ResolutionContext per thread.
    When an identifier appears twice in the stack, a circular dependency is detected.

    Attributes:
        _local: Thread-local storage for resolution contexts.
    """

    def __init__(self) -> None:
        """Initialize the circular dependency detector with thread-local storage."""
        self._local = threading.local()

    def _get_context(self) -> ResolutionContext:
        """Get the current thread's resolution context, creating it on first use."""
        if not hasattr(self._local, "context"):
            self._local.context = ResolutionContext()
        return self._local.context

    @property
    def stack(self) -> List[str]:
        """Copy of the identifiers currently being instantiated on this thread."""
        return list(self._get_context().stack)

    def push(self, type_id: str) -> None:
        """Add a type identifier to the resolution stack.

        Args:
            type_id: The identifier being instantiated.

        Raises:
            CircularDependencyError: If the identifier is already in the stack.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> detector.push("app.ServiceA")
            >>> detector.push("app.ServiceB")
            >>> detector.push("app.ServiceA")  # Raises CircularDependencyError
        """
        self._get_context().push(type_id)

    def pop(self) -> None:
        """Remove the last identifier from the resolution stack."""
        self._get_context().pop()

    def clear(self) -> None:
        """Clear the entire resolution stack."""
        if hasattr(self._local, "context"):
            self._local.context.clear()
