#!/usr/bin/env python3
"""
Test the examples from the README to ensure they work as documented.
"""

from rendertree import (
    BasicNode,
    FunctionAdapter,
    from_mapping,
    render,
    render_adapted,
    render_text,
)


def test_quick_start_example():
    root = BasicNode("Parent")
    root.add_child("Child 1")
    child = root.add_child("Child 2")
    child.add_child("Grandchild 1")
    child.add_child("Grandchild 2")
    root.add_child("Child 3")

    assert "\n".join(render(root)) == (
        "Parent\n"
        "├── Child 1\n"
        "├── Child 2\n"
        "│   ├── Grandchild 1\n"
        "│   └── Grandchild 2\n"
        "└── Child 3"
    )


class Category:
    def __init__(self, title, subcategories=()):
        self.title = title
        self.subcategories = list(subcategories)

    def name(self):
        return self.title

    def children(self):
        return self.subcategories


def test_own_node_type_example():
    tree = Category("food", [Category("fruit"), Category("bread")])
    assert render(tree) == ["food", "├── fruit", "└── bread"]


def test_adapter_example():
    class Plain:
        def __init__(self, title, subcategories=()):
            self.title = title
            self.subcategories = list(subcategories)

    tree = Plain("food", [Plain("fruit"), Plain("bread")])
    adapter = FunctionAdapter(lambda e: e.title, lambda e: e.subcategories)
    assert render_adapted(tree, adapter) == ["food", "├── fruit", "└── bread"]


def test_mapping_example():
    text = render_text(from_mapping({"src": {"app.py": None}, "README.md": None}, "project"))
    assert text == (
        "project\n"
        "├── src\n"
        "│   └── app.py\n"
        "└── README.md"
    )
