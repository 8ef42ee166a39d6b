"""Exceptions raised by RenderTree.

Plain rendering of a finite, acyclic tree cannot fail. These exceptions only
come from the opt-in surfaces: configuration validation and the
cycle/depth guards.
"""

from typing import List, Optional


class RenderError(Exception):
    """Base class for all RenderTree errors."""
    pass


class InvalidConfigError(RenderError):
    """Raised when a RenderConfig fails validation."""
    pass


class RenderGuardError(RenderError):
    """Raised when an enabled guard rejects the tree being rendered."""
    pass


class CycleDetectedError(RenderGuardError):
    """Raised when a node turns out to be its own ancestor.

    Attributes:
        name: Name of the node that closed the cycle
        path: Names from the root down to (and including) the repeated node
    """

    def __init__(self, name: str, path: Optional[List[str]] = None):
        self.name = name
        self.path = list(path) if path else [name]
        super().__init__(
            f"Cycle detected at node {name!r}: {' -> '.join(repr(p) for p in self.path)}"
        )


class DepthLimitExceededError(RenderGuardError):
    """Raised when the tree is deeper than the configured max_depth.

    Attributes:
        name: Name of the first node found beyond the limit
        max_depth: The configured limit (root is depth 0)
        depth: Depth of the offending node
    """

    def __init__(self, name: str, max_depth: int, depth: int):
        self.name = name
        self.max_depth = max_depth
        self.depth = depth
        super().__init__(
            f"Node {name!r} at depth {depth} exceeds max_depth={max_depth}"
        )
