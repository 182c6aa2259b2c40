"""
ResolutionContext

This module provides the context management for lookups.
The ResolutionContext tracks:

- Absolute specifiers currently being built (for circular dependency detection)
- Active container reference

The context is stored in a ContextVar and is automatically managed
by the Container during lookup.
"""

from contextvars import ContextVar
from typing import List, Optional, TYPE_CHECKING

from .exceptions import CircularDependencyError

if TYPE_CHECKING:
    from .container import Container


class ResolutionContext:
    """Context for one chain of nested lookups.

    Attributes:
        resolving: Absolute specifiers in the current chain, outermost first
        container: Reference to the container performing the lookup

    Note:
        This class is used internally by Container.
        Users should not need to interact with it directly.
    """

    def __init__(self, container: Optional['Container'] = None,
                 resolving: Optional[List[str]] = None):
        self.resolving: List[str] = list(resolving or [])  # For circular dependency detection
        self.container: Optional['Container'] = container

    def enter(self, specifier: str) -> 'ResolutionContext':
        """Return a child context with ``specifier`` appended to the chain.

        Raises:
            CircularDependencyError: When ``specifier`` is already being built
        """
        if specifier in self.resolving:
            cycle = " -> ".join(self.resolving + [specifier])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")
        return ResolutionContext(self.container, self.resolving + [specifier])


# Resolution context of the lookup currently running, if any
_resolution_context: ContextVar[Optional[ResolutionContext]] = ContextVar(
    '_OWNERDI_RESOLUTION_CONTEXT',
    default=None
)
