"""Tree rendering strategies for RenderTree.

Renderers turn a node into the lines of a ``tree(1)``-style drawing:

    root
    ├── child 1
    │   └── grandchild
    └── child 2

Every renderer works with any object satisfying the RenderNode contract and
produces identical output; they only differ in how they walk the tree.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, List, Optional, Tuple, Union

from .node import identity_of
from ..config import GuardConfig, RenderStrategy, parse_strategy
from ..errors import CycleDetectedError, DepthLimitExceededError

logger = logging.getLogger(__name__)

# Connectors. Each is four columns wide so nested blocks line up.
BRANCH = "├── "        # First line of a child that has siblings after it
LAST_BRANCH = "└── "   # First line of the final child
PIPE = "│   "          # Continuation lines under a non-last child
SPACE = "    "         # Continuation lines under the last child


def prefix_block(block: List[str], first: str, rest: str) -> List[str]:
    """Prefix the first line of a rendered block with `first`, the others with `rest`."""
    return [first + block[0]] + [rest + line for line in block[1:]]


class TreeRenderer(ABC):
    """Abstract base class for rendering strategies.

    A renderer holds nothing but its guard settings, so one instance can be
    reused across calls and threads.
    """

    def __init__(self, guards: Optional[GuardConfig] = None):
        """Initialize renderer with optional guards.

        Args:
            guards: Cycle/depth checks to apply (None = no checks)
        """
        self.guards = guards or GuardConfig()

    @abstractmethod
    def render(self, root: Any) -> List[str]:
        """Render the tree below root.

        Args:
            root: Node satisfying the RenderNode contract

        Returns:
            One string per node; the first is the root's name, unprefixed

        Raises:
            CycleDetectedError: detect_cycles is on and the tree has a cycle
            DepthLimitExceededError: max_depth is set and the tree is deeper
        """
        pass

    def _enter(self,
               node: Any,
               name: str,
               depth: int,
               ancestors: FrozenSet[int],
               path: Tuple[Tuple[str, Any], ...]) -> Tuple[FrozenSet[int], Tuple[Tuple[str, Any], ...]]:
        """Apply the guards to a node about to be emitted.

        Args:
            node: Node being visited
            name: Its already-fetched name
            depth: Its depth (root = 0)
            ancestors: Identities of the nodes on the path above it
            path: (name, node) pairs on the path above it. Holding the nodes
                keeps their identities from being reused while they are
                still ancestors.

        Returns:
            (ancestors, path) to hand down to this node's children
        """
        path = path + ((name, node),)
        if self.guards.detect_cycles:
            key = identity_of(node)
            if key in ancestors:
                logger.debug("Cycle detected at %r after %d levels", name, depth)
                raise CycleDetectedError(name, [step for step, _ in path])
            ancestors = ancestors | {key}
        max_depth = self.guards.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug("Depth limit %d exceeded by %r", max_depth, name)
            raise DepthLimitExceededError(name, max_depth, depth)
        return ancestors, path


class RecursiveRenderer(TreeRenderer):
    """Depth-first, pre-order rendering by recursion.

    Each call renders one node: its own name, then the already-rendered
    blocks of its children with connectors glued on. Indentation therefore
    builds up one level at a time on the way back up. Recursion depth equals
    tree depth.
    """

    def render(self, root: Any) -> List[str]:
        if self.guards.enabled:
            return self._render_guarded(root, 0, frozenset(), ())
        return self._render(root)

    def _render(self, node: Any) -> List[str]:
        lines = [node.name()]
        children = list(node.children())
        if not children:
            return lines

        *non_last, last = children
        for child in non_last:
            lines.extend(prefix_block(self._render(child), BRANCH, PIPE))
        lines.extend(prefix_block(self._render(last), LAST_BRANCH, SPACE))
        return lines

    def _render_guarded(self,
                        node: Any,
                        depth: int,
                        ancestors: FrozenSet[int],
                        path: Tuple[Tuple[str, Any], ...]) -> List[str]:
        name = node.name()
        ancestors, path = self._enter(node, name, depth, ancestors, path)

        lines = [name]
        children = list(node.children())
        if not children:
            return lines

        *non_last, last = children
        for child in non_last:
            block = self._render_guarded(child, depth + 1, ancestors, path)
            lines.extend(prefix_block(block, BRANCH, PIPE))
        block = self._render_guarded(last, depth + 1, ancestors, path)
        lines.extend(prefix_block(block, LAST_BRANCH, SPACE))
        return lines


class IterativeRenderer(TreeRenderer):
    """Depth-first, pre-order rendering with an explicit stack.

    Each stack entry remembers the prefix for the node's own line and the
    continuation prefix its children inherit. Children are pushed in
    reverse so they pop in display order. Nothing is limited by the
    interpreter's recursion limit.
    """

    def render(self, root: Any) -> List[str]:
        lines: List[str] = []
        guarded = self.guards.enabled
        # (node, line prefix, child prefix, depth, ancestors, path)
        stack = [(root, "", "", 0, frozenset(), ())]

        while stack:
            node, line_prefix, child_prefix, depth, ancestors, path = stack.pop()
            name = node.name()
            if guarded:
                ancestors, path = self._enter(node, name, depth, ancestors, path)
            lines.append(line_prefix + name)

            children = list(node.children())
            last_index = len(children) - 1
            for index in range(last_index, -1, -1):
                if index == last_index:
                    connector, continuation = LAST_BRANCH, SPACE
                else:
                    connector, continuation = BRANCH, PIPE
                stack.append((
                    children[index],
                    child_prefix + connector,
                    child_prefix + continuation,
                    depth + 1,
                    ancestors,
                    path,
                ))

        return lines


# Factory function for creating renderers by strategy
def create_renderer(strategy: Union[RenderStrategy, str],
                    guards: Optional[GuardConfig] = None) -> TreeRenderer:
    """Create a renderer instance by strategy.

    Args:
        strategy: RenderStrategy or its name (recursive, iterative, stack)
        guards: Optional cycle/depth guards

    Returns:
        TreeRenderer instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    renderers = {
        RenderStrategy.RECURSIVE: RecursiveRenderer,
        RenderStrategy.ITERATIVE: IterativeRenderer,
    }
    return renderers[parse_strategy(strategy)](guards)
