#!/usr/bin/env python3
"""
Comparison between the recursive and iterative render strategies.

This example demonstrates:
- Identical output from both strategies
- Timing on a wide tree
- The iterative strategy handling a chain deeper than the recursion limit
"""

import sys
import time
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from rendertree import BasicNode, render


def build_wide_tree(fanout: int, depth: int) -> BasicNode:
    """Complete tree with `fanout` children per node."""
    root = BasicNode("root")
    level = [root]
    for d in range(1, depth + 1):
        next_level = []
        for parent in level:
            for i in range(fanout):
                next_level.append(parent.add_child(f"d{d}-{i}"))
        level = next_level
    return root


def build_chain(depth: int) -> BasicNode:
    root = BasicNode("level0")
    current = root
    for i in range(1, depth + 1):
        current = current.add_child(f"level{i}")
    return root


def timed_render(root: BasicNode, strategy: str) -> Tuple[List[str], float]:
    start_time = time.perf_counter()
    lines = render(root, strategy=strategy)
    return lines, time.perf_counter() - start_time


def main():
    tree = build_wide_tree(fanout=6, depth=5)

    recursive_lines, recursive_time = timed_render(tree, "recursive")
    iterative_lines, iterative_time = timed_render(tree, "iterative")

    print("=" * 60)
    print(f"Wide tree: {len(recursive_lines)} lines")
    print(f"  recursive: {recursive_time:.3f}s")
    print(f"  iterative: {iterative_time:.3f}s")
    print(f"  identical output: {recursive_lines == iterative_lines}")

    depth = sys.getrecursionlimit() * 2
    chain = build_chain(depth)
    print("=" * 60)
    print(f"Chain of depth {depth}:")
    try:
        render(chain, strategy="recursive")
        print("  recursive: ok")
    except RecursionError:
        print("  recursive: RecursionError")
    lines = render(chain, strategy="iterative")
    print(f"  iterative: ok ({len(lines)} lines)")


if __name__ == "__main__":
    main()
