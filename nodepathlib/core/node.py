"""TreeNode abstraction for NodePathLib.

Host trees are owned by someone else - NodePathLib only needs to compare
nodes and hand them to an adapter. TreeNode is an optional base class for
hosts whose node objects should be coalesced by a stable identifier.
Any object can be navigated; plain host objects are kept by identity.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional


class TreeNode(ABC):
    """Abstract base class for nodes with an explicit identity.

    Navigation logic (children, parent) is handled by the TreeAdapter,
    so the node itself stays a plain data container.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        This identifier must be:
        - Unique within the tree
        - Stable across multiple navigations

        NodeCollection coalesces nodes with equal identifiers (see
        collection_key).

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    def collection_key(self) -> Hashable:
        """Key used by NodeCollection to coalesce duplicate nodes."""
        return ("node", self.identifier())

    @property
    def kind(self) -> Optional[str]:
        """Structural kind of the node (element type, syntax class...)."""
        return None

    @property
    def name(self) -> Optional[str]:
        """Display name of the node, if it has one."""
        return None

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())


def node_key(node: Any) -> Hashable:
    """Return the key that identifies ``node`` within a navigation.

    TreeNode subclasses are keyed by identifier; any other host object
    is keyed by identity, so it need not be hashable.
    """
    if isinstance(node, TreeNode):
        return node.collection_key()
    return id(node)
