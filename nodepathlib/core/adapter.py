"""TreeAdapter abstraction for NodePathLib.

The adapter is the node capability the path engine consumes: it knows
how to enumerate the children, descendants and parent of a node in some
externally-owned tree. The engine never mutates the tree.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .node import node_key


_EXHAUSTED = object()


class TreeAdapter(ABC):
    """Abstract adapter for navigating a host tree.

    Only get_children() and get_parent() are required. Descendant and
    sibling enumeration are derived from them, but adapters backed by an
    index can override them with something faster.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes, in document order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes (possibly empty)
        """
        pass

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is a root
        """
        pass

    def get_descendants(self, node: Any) -> Iterator[Any]:
        """Get all descendants of a node in pre-order (document order).

        The node itself is not included.

        Args:
            node: Root of the subtree

        Returns:
            Iterator yielding every node reachable through get_children
        """
        # Explicit stack keeps deep trees clear of the recursion limit
        stack = [iter(self.get_children(node))]
        while stack:
            child = next(stack[-1], _EXHAUSTED)
            if child is _EXHAUSTED:
                stack.pop()
                continue
            yield child
            stack.append(iter(self.get_children(child)))

    def get_siblings(self, node: Any) -> Iterator[Any]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling nodes, empty for a root
        """
        parent = self.get_parent(node)
        if parent is None:
            return
        key = node_key(node)
        for child in self.get_children(parent):
            if node_key(child) != key:
                yield child


class AttributeTreeAdapter(TreeAdapter):
    """Adapter for objects that expose their links as attributes.

    Works with any node type holding a children sequence and a parent
    reference, such as MemoryNode or many hand-rolled AST classes.
    A missing attribute is treated as "no children" / "no parent".
    """

    def __init__(self, children_attr: str = "children", parent_attr: str = "parent"):
        """Initialize the adapter.

        Args:
            children_attr: Attribute holding the ordered children
            parent_attr: Attribute holding the parent (None for a root)
        """
        self.children_attr = children_attr
        self.parent_attr = parent_attr

    def get_children(self, node: Any) -> Iterator[Any]:
        return iter(getattr(node, self.children_attr, None) or ())

    def get_parent(self, node: Any) -> Optional[Any]:
        return getattr(node, self.parent_attr, None)
