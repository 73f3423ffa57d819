"""In-memory tree nodes for NodePathLib.

MemoryNode is a lightweight concrete TreeNode, useful for building host
trees by hand (tests, configuration trees, small document models). It is
navigated by the default AttributeTreeAdapter.
"""

import itertools
from typing import Any, Iterator, List, Optional

from ..core.node import TreeNode


_ids = itertools.count(1)


class MemoryNode(TreeNode):
    """Concrete node that keeps its own children and parent links.

    Example:
        >>> root = MemoryNode("root",
        ...                   MemoryNode("a", MemoryNode("x")),
        ...                   MemoryNode("b"))
        >>> [child.name for child in root.children]
        ['a', 'b']
    """

    def __init__(self,
                 name: Optional[str] = None,
                 *children: 'MemoryNode',
                 kind: Optional[str] = None,
                 node_id: Optional[str] = None,
                 **attributes: Any):
        """Initialize a node and attach ``children`` to it.

        Args:
            name: Display name
            *children: Child nodes, in document order
            kind: Structural kind (defaults to None)
            node_id: Unique identifier (generated when omitted)
            **attributes: Extra data available through ``attributes``
        """
        self._name = name
        self._kind = kind
        self._id = node_id if node_id is not None else f"n{next(_ids)}"
        self.attributes = dict(attributes)
        self.parent: Optional['MemoryNode'] = None
        self.children: List['MemoryNode'] = []
        for child in children:
            self.add_child(child)

    def identifier(self) -> str:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def kind(self) -> Optional[str]:
        return self._kind

    def add_child(self, child: 'MemoryNode') -> 'MemoryNode':
        """Attach ``child`` as the last child and return it for chaining.

        Raises:
            ValueError: If ``child`` already has a parent
        """
        if child.parent is not None:
            raise ValueError(f"{child!r} is already attached to {child.parent!r}")
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator['MemoryNode']:
        """Traverse the subtree depth-first, yielding self then descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional['MemoryNode']:
        """Return the first node in this subtree called ``name``."""
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def __repr__(self) -> str:
        if self._kind:
            return f"MemoryNode({self._kind}:{self._name!r})"
        return f"MemoryNode({self._name!r})"
