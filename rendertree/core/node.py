"""Node abstraction for RenderTree.

A node is anything that can report a display name and its ordered children.
The renderer never needs more than that, so RenderNode is deliberately tiny.
Objects that already expose ``name()`` and ``children()`` satisfy the
contract without subclassing.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Union


class RenderNode(ABC):
    """Abstract base class for nodes that can be rendered as a tree.

    Subclasses only have to describe themselves: what label to print and
    which nodes hang below them. The renderer borrows both and never
    modifies the node.

    Any class providing callable ``name`` and ``children`` attributes is
    treated as a virtual subclass, so ``isinstance(obj, RenderNode)`` is
    True for duck-typed nodes too.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the label displayed for this node.

        Called once per node per render. The value is emitted verbatim:
        no escaping, trimming or wrapping is applied.

        Returns:
            str: Display label (may be empty)
        """
        pass

    @abstractmethod
    def children(self) -> Iterable["RenderNode"]:
        """Return the immediate children of this node, in display order.

        The iterable must be finite. It is consumed once per render, so a
        generator is fine.

        Returns:
            Iterable of child nodes (empty for a leaf)
        """
        pass

    def identity(self) -> int:
        """Return the key used to recognise this node during cycle checks.

        Defaults to the object's id(). Wrappers override it so that two
        wrappers of the same underlying object count as the same node.
        """
        return id(self)

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is RenderNode:
            if all(callable(getattr(subclass, attr, None)) for attr in ("name", "children")):
                return True
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name()!r})"


def identity_of(node: Any) -> int:
    """Identity key for any node, including duck-typed ones."""
    identity = getattr(node, "identity", None)
    if callable(identity):
        return identity()
    return id(node)


class BasicNode(RenderNode):
    """Plain in-memory node: a name and a list of children.

    The quickest way to build a tree by hand:

        root = BasicNode("root")
        sam = root.add_child("child 1 - sam")
        sam.add_child("grandchild 1A - burt")
    """

    def __init__(self, name: str, children: Optional[List["BasicNode"]] = None):
        self._name = name
        self._children = list(children) if children is not None else []

    def name(self) -> str:
        return self._name

    def children(self) -> List["BasicNode"]:
        return self._children

    def add_child(self, child: Union["BasicNode", str]) -> "BasicNode":
        """Append a child and return it.

        Args:
            child: An existing node, or a name to create a leaf from

        Returns:
            The appended child node
        """
        if isinstance(child, str):
            child = BasicNode(child)
        self._children.append(child)
        return child

    def is_leaf(self) -> bool:
        return not self._children

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same name and equal children."""
        if not isinstance(other, BasicNode):
            return NotImplemented
        return self._name == other._name and self._children == other._children

    __hash__ = None

    def __repr__(self) -> str:
        return f"BasicNode(name={self._name!r}, children={len(self._children)})"
