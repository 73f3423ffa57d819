"""Ordered, duplicate-free node containers for NodePathLib.

A NodeCollection is the frontier of a navigation: the working set of
nodes at a given step. Insertion order reflects discovery order, and a
node inserted twice keeps its first position. Nodes are coalesced by
identity, so host objects need not be hashable; TreeNode subclasses opt
into coalescing by identifier through ``collection_key()``.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, Optional

from .node import node_key


class NodeCollection:
    """Ordered set of nodes.

    Backed by a dict from node key to node, so membership tests are O(1)
    and insertion order is preserved. Collections are transient - each
    navigate() call creates its own and never hands a caller's collection
    back to them.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Optional[Iterable[Any]] = None):
        """Create a collection, optionally seeded from an iterable.

        Args:
            nodes: Initial nodes; duplicates are coalesced
        """
        self._nodes: Dict[Hashable, Any] = {}
        if nodes is not None:
            for node in nodes:
                self._nodes.setdefault(node_key(node), node)

    # Mutation

    def add(self, node: Any) -> bool:
        """Add a node. Returns True if it was not already present."""
        key = node_key(node)
        if key in self._nodes:
            return False
        self._nodes[key] = node
        return True

    def add_all(self, nodes: Iterable[Any]) -> bool:
        """Add every node from ``nodes``. Returns True if anything changed."""
        before = len(self._nodes)
        for node in nodes:
            self._nodes.setdefault(node_key(node), node)
        return len(self._nodes) != before

    def remove_all(self, nodes: Iterable[Any]) -> bool:
        """Remove every node in ``nodes``. Returns True if anything changed."""
        before = len(self._nodes)
        for node in nodes:
            self._nodes.pop(node_key(node), None)
        return len(self._nodes) != before

    # Queries

    def filter(self, predicate: Any) -> 'NodeCollection':
        """Return a new collection with the nodes where ``predicate`` holds.

        Args:
            predicate: An ElementPredicate or any callable(node) -> bool

        Returns:
            New NodeCollection, or EMPTY when nothing matched
        """
        test: Callable[[Any], bool] = getattr(predicate, "test", predicate)
        matched = [node for node in self._nodes.values() if test(node)]
        if not matched:
            return EMPTY
        return NodeCollection(matched)

    def union(self, other: Iterable[Any]) -> 'NodeCollection':
        """Return a new collection holding this one followed by ``other``."""
        result = NodeCollection(self)
        result.add_all(other)
        return result

    def difference(self, other: Iterable[Any]) -> 'NodeCollection':
        """Return a new collection without the nodes in ``other``."""
        result = NodeCollection(self)
        result.remove_all(other)
        return result

    def size(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        return not self._nodes

    def first(self) -> Optional[Any]:
        """Return the first node in discovery order, or None if empty."""
        return next(iter(self._nodes.values()), None)

    def to_list(self) -> list:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes.values())

    def __contains__(self, node: object) -> bool:
        return node_key(node) in self._nodes

    def __eq__(self, other: object) -> bool:
        """Collections are equal if they hold the same nodes in the same order."""
        if not isinstance(other, NodeCollection):
            return NotImplemented
        return list(self._nodes) == list(other._nodes)

    __hash__ = None  # Mutable container

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()!r})"


class _EmptyNodeCollection(NodeCollection):
    """The canonical empty collection.

    Shared by every navigation that ends with no matches, so it must
    never gain members. Removing from it is harmless and allowed.
    """

    __slots__ = ()

    def __init__(self):
        super().__init__()

    def add(self, node: Any) -> bool:
        raise TypeError("EMPTY node collection is immutable")

    def add_all(self, nodes: Iterable[Any]) -> bool:
        for _ in nodes:
            raise TypeError("EMPTY node collection is immutable")
        return False

    def filter(self, predicate: Any) -> NodeCollection:
        return self

    def __repr__(self) -> str:
        return "NodeCollection.EMPTY"


EMPTY = _EmptyNodeCollection()
NodeCollection.EMPTY = EMPTY
