"""Tests for adapters: FunctionAdapter, AdaptedNode and the mapping adapter."""

from collections import OrderedDict

import pytest

from rendertree import (
    AdaptedNode,
    FunctionAdapter,
    MappingAdapter,
    NodeAdapter,
    RenderNode,
    count_nodes,
    from_mapping,
    render,
    render_adapted,
)


class Section:
    """Stand-in for a foreign tree type with its own attribute names."""

    def __init__(self, title, parts=()):
        self.title = title
        self.parts = list(parts)


def make_document():
    return Section("book", [
        Section("chapter 1", [Section("1.1"), Section("1.2")]),
        Section("chapter 2"),
    ])


# FunctionAdapter

def test_function_adapter_render():
    adapter = FunctionAdapter(lambda s: s.title, lambda s: s.parts)
    assert render(adapter.wrap(make_document())) == [
        "book",
        "├── chapter 1",
        "│   ├── 1.1",
        "│   └── 1.2",
        "└── chapter 2",
    ]


def test_function_adapter_default_name_is_str():
    adapter = FunctionAdapter(children_fn=lambda n: range(n))
    assert render(adapter.wrap(3)) == [
        "3",
        "├── 0",
        "├── 1",
        "│   └── 0",
        "└── 2",
        "    ├── 0",
        "    └── 1",
        "        └── 0",
    ]


def test_function_adapter_requires_children_fn():
    with pytest.raises(TypeError):
        FunctionAdapter(lambda s: s.title)


def test_function_adapter_rejects_non_callables():
    with pytest.raises(TypeError):
        FunctionAdapter("title", "parts")


def test_function_adapter_errors_propagate():
    def children(section):
        if section.title == "chapter 2":
            raise LookupError("no parts for chapter 2")
        return section.parts

    adapter = FunctionAdapter(lambda s: s.title, children)
    for strategy in ("recursive", "iterative"):
        with pytest.raises(LookupError, match="no parts for chapter 2"):
            render_adapted(make_document(), adapter, strategy=strategy)


def test_render_adapted():
    adapter = FunctionAdapter(lambda s: s.title, lambda s: s.parts)
    assert render_adapted(make_document(), adapter) == render(adapter.wrap(make_document()))
    assert render_adapted(make_document(), adapter, strategy="iterative")[0] == "book"


def test_custom_adapter_subclass():
    class ReversedAdapter(NodeAdapter):
        def get_name(self, obj):
            return obj.title.upper()

        def get_children(self, obj):
            return reversed(obj.parts)

    assert render(ReversedAdapter().wrap(make_document())) == [
        "BOOK",
        "├── CHAPTER 2",
        "└── CHAPTER 1",
        "    ├── 1.2",
        "    └── 1.1",
    ]


def test_node_adapter_is_abstract():
    with pytest.raises(TypeError):
        NodeAdapter()


# AdaptedNode

def test_adapted_node_is_render_node():
    node = FunctionAdapter(lambda s: s.title, lambda s: s.parts).wrap(make_document())
    assert isinstance(node, RenderNode)
    assert node.name() == "book"
    assert all(isinstance(child, AdaptedNode) for child in node.children())


def test_adapted_node_identity_follows_target():
    adapter = FunctionAdapter(lambda s: s.title, lambda s: s.parts)
    doc = make_document()
    assert adapter.wrap(doc).identity() == adapter.wrap(doc).identity() == id(doc)


def test_adapted_node_exposes_target_and_adapter():
    adapter = FunctionAdapter(lambda s: s.title, lambda s: s.parts)
    doc = make_document()
    node = adapter.wrap(doc)
    assert node.target is doc
    assert node.adapter is adapter
    assert "FunctionAdapter" in repr(node)


def test_adapted_count_nodes():
    adapter = FunctionAdapter(lambda s: s.title, lambda s: s.parts)
    assert count_nodes(adapter.wrap(make_document())) == 5


# Mapping adapter

def test_mapping_nested_dicts():
    data = {"src": {"app.py": None, "util": {"io.py": None}}, "README.md": None}
    assert render(from_mapping(data, "project")) == [
        "project",
        "├── src",
        "│   ├── app.py",
        "│   └── util",
        "│       └── io.py",
        "└── README.md",
    ]


def test_mapping_default_root_name():
    assert render(from_mapping({})) == ["."]


def test_mapping_preserves_insertion_order():
    data = OrderedDict([("zeta", None), ("alpha", None)])
    assert render(from_mapping(data, "r")) == ["r", "├── zeta", "└── alpha"]


def test_mapping_scalar_values_become_leaves():
    data = {"name": "selena", "age": 7, "enabled": True, "empty": ""}
    assert render(from_mapping(data, "person")) == [
        "person",
        "├── name",
        "│   └── selena",
        "├── age",
        "│   └── 7",
        "├── enabled",
        "│   └── True",
        "└── empty",
        "    └── ",
    ]


def test_mapping_sequences():
    data = {"fruits": ["apple", "pear"], "mixed": [1, {"k": None}, ["x", "y"]]}
    assert render(from_mapping(data, "root")) == [
        "root",
        "├── fruits",
        "│   ├── apple",
        "│   └── pear",
        "└── mixed",
        "    ├── 1",
        "    ├── k",
        "    ├── x",
        "    └── y",
    ]


def test_mapping_top_level_sequence():
    assert render(from_mapping(("a", "b"), "list")) == ["list", "├── a", "└── b"]


def test_mapping_top_level_scalar():
    assert render(from_mapping("value", "key")) == ["key", "└── value"]


def test_mapping_non_string_keys():
    assert render(from_mapping({1: None, (2, 3): None}, "keys")) == [
        "keys",
        "├── 1",
        "└── (2, 3)",
    ]


def test_mapping_bytes_is_scalar():
    assert render(from_mapping({"blob": b"ab"}, "r")) == ["r", "└── blob", "    └── b'ab'"]


def test_mapping_adapter_wrap_root():
    node = MappingAdapter().wrap_root({"a": None}, "top")
    assert isinstance(node, AdaptedNode)
    assert node.name() == "top"
    assert [child.name() for child in node.children()] == ["a"]


def test_mapping_data_not_mutated():
    data = {"a": {"b": [1, 2]}}
    render(from_mapping(data, "r"))
    assert data == {"a": {"b": [1, 2]}}
