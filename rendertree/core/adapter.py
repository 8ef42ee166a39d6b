"""NodeAdapter abstraction for RenderTree.

Adapters let structures that know nothing about RenderNode be rendered
anyway. The adapter holds the navigation knowledge (how to label an object,
how to reach its children) and AdaptedNode binds it to one object so the
renderer sees an ordinary node.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, Optional
from .node import RenderNode, identity_of


class NodeAdapter(ABC):
    """Abstract adapter describing how to navigate a foreign tree type.

    The same object can be rendered differently by swapping adapters, and
    unrelated object types can be rendered uniformly by giving each an
    adapter. Adapters must be read-only: the renderer never mutates the tree
    and neither should they.
    """

    @abstractmethod
    def get_name(self, obj: Any) -> str:
        """Get the display label for the given object.

        Args:
            obj: An object from the adapted structure

        Returns:
            Label to print for this object
        """
        pass

    @abstractmethod
    def get_children(self, obj: Any) -> Iterable[Any]:
        """Get the ordered children of the given object.

        Args:
            obj: An object from the adapted structure

        Returns:
            Finite iterable of child objects (not yet wrapped)
        """
        pass

    def wrap(self, obj: Any) -> "AdaptedNode":
        """Bind this adapter to an object, producing a renderable node."""
        return AdaptedNode(obj, self)


class FunctionAdapter(NodeAdapter):
    """Adapter built from two plain callables.

    Example:
        adapter = FunctionAdapter(lambda d: d.title, lambda d: d.sections)
        lines = render(adapter.wrap(document))
    """

    def __init__(self,
                 name_fn: Optional[Callable[[Any], str]] = None,
                 children_fn: Optional[Callable[[Any], Iterable[Any]]] = None):
        """Initialize the adapter.

        Args:
            name_fn: Returns the label for an object (defaults to str)
            children_fn: Returns the children of an object

        Raises:
            TypeError: If children_fn is missing or either argument is not callable
        """
        if children_fn is None:
            raise TypeError("FunctionAdapter requires a children_fn")
        if name_fn is None:
            name_fn = str
        if not callable(name_fn) or not callable(children_fn):
            raise TypeError("name_fn and children_fn must be callable")
        self._name_fn = name_fn
        self._children_fn = children_fn

    def get_name(self, obj: Any) -> str:
        return self._name_fn(obj)

    def get_children(self, obj: Any) -> Iterable[Any]:
        return self._children_fn(obj)


class AdaptedNode(RenderNode):
    """A foreign object viewed through a NodeAdapter.

    Children are wrapped lazily as they are requested, so wrapping the root
    of a large structure costs nothing until rendering starts.
    """

    def __init__(self, target: Any, adapter: NodeAdapter):
        self.target = target
        self.adapter = adapter

    def name(self) -> str:
        return self.adapter.get_name(self.target)

    def children(self) -> Iterator["AdaptedNode"]:
        for child in self.adapter.get_children(self.target):
            yield AdaptedNode(child, self.adapter)

    def identity(self) -> int:
        return identity_of(self.target)

    def __repr__(self) -> str:
        return f"AdaptedNode(target={self.target!r}, adapter={self.adapter.__class__.__name__})"
