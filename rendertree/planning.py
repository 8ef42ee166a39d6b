"""Render planning for RenderTree.

The RenderPlan validates a RenderConfig before any node is touched and picks
the renderer that will carry it out.
"""

import logging
from typing import Any, List

from .config import RenderConfig
from .core.renderer import TreeRenderer, create_renderer
from .errors import InvalidConfigError

logger = logging.getLogger(__name__)


class RenderPlan:
    """Validated plan for rendering a tree.

    Bridges what the caller asked for (RenderConfig) and the renderer that
    does it. Invalid configurations are rejected here, up front, so a bad
    setting never surfaces halfway through a render.
    """

    def __init__(self, config: RenderConfig):
        """Create and validate a render plan.

        Args:
            config: Caller's render configuration

        Raises:
            InvalidConfigError: If the configuration is inconsistent
        """
        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self.renderer: TreeRenderer = create_renderer(config.strategy, config.guards)
        logger.debug(
            "Planned %s (max_depth=%s, detect_cycles=%s)",
            self.renderer.__class__.__name__,
            config.guards.max_depth,
            config.guards.detect_cycles,
        )

    def execute(self, root: Any) -> List[str]:
        """Render the tree below root according to the plan."""
        return self.renderer.render(root)

    def __repr__(self) -> str:
        return f"RenderPlan(strategy={self.config.strategy.value!r}, guards={self.config.guards!r})"
