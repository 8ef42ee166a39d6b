#!/usr/bin/env python3
"""
Basic RenderTree usage.

This example demonstrates:
- Building a tree by hand with BasicNode
- Rendering an existing object model through a FunctionAdapter
- Rendering nested dicts and lists with from_mapping
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from rendertree import BasicNode, FunctionAdapter, from_mapping, render, render_text


class Employee:
    """A foreign tree type that knows nothing about RenderTree."""

    def __init__(self, name, title, reports=()):
        self.name = name
        self.title = title
        self.reports = list(reports)


def hand_built():
    root = BasicNode("root - selena")
    sam = root.add_child("child 1 - sam")
    for name in ("grandchild 1A - burt", "grandchild 1B - crabbod", "grandchild 1C - mario"):
        sam.add_child(name)
    dumptruck = root.add_child("child 2 - dumptruck")
    dumptruck.add_child("grandchild 2A - tilly")
    dumptruck.add_child("grandchild 2B - curling iron")
    return root


def org_chart():
    ceo = Employee("Ada", "CEO", [
        Employee("Grace", "CTO", [Employee("Linus", "Engineer"), Employee("Guido", "Engineer")]),
        Employee("Barbara", "CFO"),
    ])
    adapter = FunctionAdapter(
        name_fn=lambda e: f"{e.name} ({e.title})",
        children_fn=lambda e: e.reports,
    )
    return adapter.wrap(ceo)


def main():
    print("Hand-built tree:")
    print(render_text(hand_built()))

    print("\nOrg chart via FunctionAdapter:")
    for line in render(org_chart()):
        print(line)

    print("\nNested data via from_mapping:")
    project = {
        "src": {"rendertree": ["__init__.py", "api.py"]},
        "tests": ["test_render.py"],
        "setup.py": None,
    }
    print(render_text(from_mapping(project, "project")))


if __name__ == "__main__":
    main()
