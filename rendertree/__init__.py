"""RenderTree - render any tree the way tree(1) does.

    Parent
    ├── Child 1
    ├── Child 2
    │   ├── Grandchild 1
    │   └── Grandchild 2
    └── Child 3

Any object with ``name()`` and ``children()`` can be rendered:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from rendertree import BasicNode, render

    root = BasicNode("Parent")
    root.add_child("Child 1")
    print("\\n".join(render(root)))
━━━━━━━━━━━━━━━━━━━━━━━━━━

Structures that cannot grow those methods go through an adapter
(FunctionAdapter, MappingAdapter). Rendering is pure: it returns a list of
lines and never prints.
"""

import logging

__version__ = "0.1.0"

from .core.node import RenderNode, BasicNode
from .core.adapter import NodeAdapter, FunctionAdapter, AdaptedNode
from .core.renderer import (
    TreeRenderer,
    RecursiveRenderer,
    IterativeRenderer,
    create_renderer,
)
from .adapters.mapping import MappingAdapter, from_mapping
from .config import RenderConfig, RenderStrategy, GuardConfig
from .planning import RenderPlan
from .errors import (
    RenderError,
    InvalidConfigError,
    RenderGuardError,
    CycleDetectedError,
    DepthLimitExceededError,
)
from .api import render, render_text, render_adapted, count_nodes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "RenderNode",
    "BasicNode",
    "NodeAdapter",
    "FunctionAdapter",
    "AdaptedNode",
    "TreeRenderer",
    "RecursiveRenderer",
    "IterativeRenderer",
    "create_renderer",
    # Adapters
    "MappingAdapter",
    "from_mapping",
    # Config
    "RenderConfig",
    "RenderStrategy",
    "GuardConfig",
    "RenderPlan",
    # Errors
    "RenderError",
    "InvalidConfigError",
    "RenderGuardError",
    "CycleDetectedError",
    "DepthLimitExceededError",
    # API
    "render",
    "render_text",
    "render_adapted",
    "count_nodes",
]
