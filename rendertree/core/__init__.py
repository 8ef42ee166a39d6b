"""Core abstractions for RenderTree.

This package contains the node contract, the adapter abstraction and the
rendering strategies built on top of them.
"""

from .node import RenderNode, BasicNode, identity_of
from .adapter import NodeAdapter, FunctionAdapter, AdaptedNode
from .renderer import (
    TreeRenderer,
    RecursiveRenderer,
    IterativeRenderer,
    create_renderer,
)

__all__ = [
    "RenderNode",
    "BasicNode",
    "identity_of",
    "NodeAdapter",
    "FunctionAdapter",
    "AdaptedNode",
    "TreeRenderer",
    "RecursiveRenderer",
    "IterativeRenderer",
    "create_renderer",
]
