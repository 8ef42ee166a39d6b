"""High-level API for RenderTree.

This module provides simple, functional interfaces for rendering trees.
These functions wrap the config/plan/renderer objects for the common case.
"""

from typing import Any, List, Optional, Union

from .config import RenderConfig, RenderStrategy
from .core.adapter import NodeAdapter
from .planning import RenderPlan


def render(
    node: Any,
    strategy: Union[RenderStrategy, str] = RenderStrategy.RECURSIVE,
    max_depth: Optional[int] = None,
    detect_cycles: bool = False,
    config: Optional[RenderConfig] = None,
) -> List[str]:
    """Render a tree as ``tree(1)``-style lines.

    The first line is the root's name. Every descendant adds one line,
    depth-first, with ``├── `` before each child that has later siblings,
    ``└── `` before the last child, and ``│   `` or four spaces continuing
    the blocks underneath them.

    Args:
        node: Root node; anything with name() and children()
        strategy: "recursive" (default) or "iterative"
        max_depth: Fail with DepthLimitExceededError below this depth
        detect_cycles: Fail with CycleDetectedError if a node is its own ancestor
        config: Complete RenderConfig; when given, the other options are ignored

    Returns:
        List of lines without line terminators

    Raises:
        InvalidConfigError: If the configuration is invalid
        ValueError: If strategy is an unknown name

    Example:
        >>> root = BasicNode("beans")
        >>> render(root)
        ['beans']
    """
    if config is None:
        config = RenderConfig.from_kwargs(
            strategy=strategy,
            max_depth=max_depth,
            detect_cycles=detect_cycles,
        )
    return RenderPlan(config).execute(node)


def render_text(node: Any, sep: str = "\n", **kwargs) -> str:
    """Render a tree and join the lines into one string.

    No trailing separator is added.

    Args:
        node: Root node
        sep: Line separator
        **kwargs: Render options (see render)
    """
    return sep.join(render(node, **kwargs))


def render_adapted(obj: Any, adapter: NodeAdapter, **kwargs) -> List[str]:
    """Render a structure that does not implement the node contract itself.

    Args:
        obj: Root object of the foreign structure
        adapter: NodeAdapter that knows how to label and navigate it
        **kwargs: Render options (see render)

    Example:
        >>> adapter = FunctionAdapter(lambda d: d["title"], lambda d: d["parts"])
        >>> render_adapted({"title": "book", "parts": []}, adapter)
        ['book']
    """
    return render(adapter.wrap(obj), **kwargs)


def count_nodes(node: Any) -> int:
    """Count the nodes in a tree (root included).

    For any finite, acyclic tree this equals ``len(render(node))``.
    Uses an explicit stack, so depth is not limited by recursion.
    """
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children())
    return count
