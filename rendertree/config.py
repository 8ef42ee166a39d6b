"""Configuration system for RenderTree.

This module defines how callers choose a rendering strategy and opt into
the cycle and depth guards. Connector style is fixed and not configurable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class RenderStrategy(Enum):
    """Which algorithm produces the lines.

    Both strategies give byte-identical output; they differ only in how
    they use the call stack.
    """
    RECURSIVE = "recursive"     # One call per node, depth-limited by the interpreter
    ITERATIVE = "iterative"     # Explicit stack, safe for very deep trees


@dataclass(frozen=True)
class GuardConfig:
    """Optional safety checks applied while rendering.

    Both checks are off by default, in which case the renderer assumes a
    finite, acyclic tree and does no bookkeeping at all.
    """

    max_depth: Optional[int] = None   # Deepest allowed node (root = 0)
    detect_cycles: bool = False       # Fail if a node is its own ancestor

    @property
    def enabled(self) -> bool:
        """True if any guard is switched on."""
        return self.detect_cycles or self.max_depth is not None

    def validate(self) -> List[str]:
        """Validate guard settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer or None")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")
        if not isinstance(self.detect_cycles, bool):
            errors.append("detect_cycles must be a bool")
        return errors


@dataclass(frozen=True)
class RenderConfig:
    """Complete configuration for one render call.

    Example:
        config = RenderConfig(
            strategy=RenderStrategy.ITERATIVE,
            guards=GuardConfig(detect_cycles=True),
        )
    """

    strategy: Union[RenderStrategy, str] = RenderStrategy.RECURSIVE
    guards: GuardConfig = field(default_factory=GuardConfig)

    def __post_init__(self):
        # Accept strategy names; unknown names raise ValueError
        if isinstance(self.strategy, str):
            object.__setattr__(self, "strategy", parse_strategy(self.strategy))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.strategy, RenderStrategy):
            errors.append(f"strategy must be a RenderStrategy, got {self.strategy!r}")
        if not isinstance(self.guards, GuardConfig):
            errors.append(f"guards must be a GuardConfig, got {self.guards!r}")
        else:
            errors.extend(self.guards.validate())
        return errors

    @classmethod
    def from_kwargs(cls,
                    strategy: Union[RenderStrategy, str] = RenderStrategy.RECURSIVE,
                    max_depth: Optional[int] = None,
                    detect_cycles: bool = False) -> "RenderConfig":
        """Build a config from the flat keyword arguments the API accepts.

        Raises:
            ValueError: If strategy is an unknown name
        """
        return cls(
            strategy=parse_strategy(strategy),
            guards=GuardConfig(max_depth=max_depth, detect_cycles=detect_cycles),
        )


def parse_strategy(strategy: Union[RenderStrategy, str]) -> RenderStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        RenderStrategy enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, RenderStrategy):
        return strategy

    strategy_map = {
        'recursive': RenderStrategy.RECURSIVE,
        'iterative': RenderStrategy.ITERATIVE,
        'stack': RenderStrategy.ITERATIVE,
        'explicit_stack': RenderStrategy.ITERATIVE,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(
        f"Unknown render strategy: {strategy}. "
        f"Choose from: {', '.join(strategy_map.keys())}"
    )
