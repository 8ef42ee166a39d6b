"""Mapping adapter for RenderTree.

Renders nested in-memory containers (dicts, lists, tuples, scalars) without
requiring them to be turned into nodes first. This works on Python objects
that are already loaded; it does not parse any text format.

    >>> from rendertree import render
    >>> print("\\n".join(render(from_mapping({"src": {"app.py": None}}, "project"))))
    project
    └── src
        └── app.py
"""

from collections.abc import Mapping, Sequence
from typing import Any, FrozenSet, Iterator, Optional

from ..core.adapter import AdaptedNode, NodeAdapter
from ..errors import CycleDetectedError

DEFAULT_ROOT_NAME = "."


class _Entry:
    """One labelled position in the container: a name plus the value below it."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value

    def identity(self) -> int:
        # Containers are keyed by the container object; scalar entries are always distinct.
        if isinstance(self.value, Mapping) or _is_sequence(self.value):
            return id(self.value)
        return id(self)

    def __repr__(self) -> str:
        return f"_Entry({self.name!r})"


class MappingAdapter(NodeAdapter):
    """Adapter for nested mappings and sequences.

    Rules for the value below a name:
    - Mapping: one child per item, named str(key), in insertion order
    - list/tuple: each element contributes children; mappings and nested
      sequences are flattened into the parent, anything else becomes a leaf.
      A sequence that contains itself raises CycleDetectedError.
    - None: no children
    - any other value (strings included): a single leaf named str(value)
    """

    def get_name(self, obj: _Entry) -> str:
        return obj.name

    def get_children(self, obj: _Entry) -> Iterator[_Entry]:
        return self._entries(obj.value, obj.name)

    def _entries(self,
                 value: Any,
                 owner: str,
                 flattening: FrozenSet[int] = frozenset()) -> Iterator[_Entry]:
        """Yield the entries below `value`.

        Args:
            value: Container or scalar found under `owner`
            owner: Name of the entry the children belong to
            flattening: ids of the sequences currently being flattened

        Raises:
            CycleDetectedError: If a sequence contains itself, directly or
                through nested sequences
        """
        if value is None:
            return
        if isinstance(value, Mapping):
            for key, item in value.items():
                yield _Entry(str(key), item)
        elif _is_sequence(value):
            flattening = flattening | {id(value)}
            for element in value:
                if isinstance(element, Mapping):
                    yield from self._entries(element, owner, flattening)
                elif _is_sequence(element):
                    if id(element) in flattening:
                        raise CycleDetectedError(owner, [owner, "[...]"])
                    yield from self._entries(element, owner, flattening)
                else:
                    yield _Entry(str(element), None)
        else:
            yield _Entry(str(value), None)

    def wrap_root(self, data: Any, root_name: Optional[str] = None) -> AdaptedNode:
        """Wrap a whole container as the root of a renderable tree."""
        name = DEFAULT_ROOT_NAME if root_name is None else root_name
        return self.wrap(_Entry(name, data))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def from_mapping(data: Any, root_name: Optional[str] = None) -> AdaptedNode:
    """Build a renderable root node over a nested container.

    Args:
        data: Mapping, sequence or scalar to render below the root
        root_name: Label for the root line (defaults to ".")

    Returns:
        AdaptedNode ready to pass to render()
    """
    return MappingAdapter().wrap_root(data, root_name)
