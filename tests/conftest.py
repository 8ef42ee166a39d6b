"""Shared fixtures for the RenderTree test suite."""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rendertree import BasicNode


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py unless --all")


def build_selena_tree() -> BasicNode:
    """Two children with three and two leaf grandchildren.

    root - selena
    ├── child 1 - sam
    │   ├── grandchild 1A - burt
    │   ├── grandchild 1B - crabbod
    │   └── grandchild 1C - mario
    └── child 2 - dumptruck
        ├── grandchild 2A - tilly
        └── grandchild 2B - curling iron
    """
    return BasicNode("root - selena", [
        BasicNode("child 1 - sam", [
            BasicNode("grandchild 1A - burt"),
            BasicNode("grandchild 1B - crabbod"),
            BasicNode("grandchild 1C - mario"),
        ]),
        BasicNode("child 2 - dumptruck", [
            BasicNode("grandchild 2A - tilly"),
            BasicNode("grandchild 2B - curling iron"),
        ]),
    ])


def build_chain(depth: int, prefix: str = "level") -> BasicNode:
    """Root plus `depth` nodes, each the only child of the previous one."""
    root = BasicNode(f"{prefix}0")
    current = root
    for i in range(1, depth + 1):
        current = current.add_child(f"{prefix}{i}")
    return root


def build_random_tree(seed: int, max_nodes: int = 60, max_children: int = 4) -> BasicNode:
    """Deterministic pseudo-random tree with unique node names."""
    rng = random.Random(seed)
    root = BasicNode("n0")
    frontier = [root]
    count = 1
    while frontier and count < max_nodes:
        parent = frontier.pop(rng.randrange(len(frontier)))
        for _ in range(rng.randint(0, max_children)):
            if count >= max_nodes:
                break
            child = parent.add_child(f"n{count}")
            count += 1
            frontier.append(child)
    return root


@pytest.fixture
def selena_tree():
    return build_selena_tree()


@pytest.fixture(params=range(8))
def random_tree(request):
    return build_random_tree(seed=request.param)
