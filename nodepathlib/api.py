"""High-level API for NodePathLib.

This module provides simple, functional interfaces for one-off queries.
These functions build a throwaway ElementPath for the given steps; for
queries that run repeatedly, build the path once and reuse it.
"""

from typing import Any, Optional

from .config import PathConfig
from .core.adapter import TreeAdapter
from .core.collection import NodeCollection
from .core.path import ElementPath


def find_all(start: Any,
             *steps: Any,
             adapter: Optional[TreeAdapter] = None,
             config: Optional[PathConfig] = None) -> NodeCollection:
    """Return every node reached from ``start`` by ``steps``.

    Args:
        start: Starting node
        *steps: Predicates / traversal steps, as for ElementPath
        adapter: Host tree adapter
        config: Trace/adapter configuration

    Returns:
        NodeCollection of matches

    Example:
        >>> find_all(root, name_is("x").on_descendants())
        NodeCollection([MemoryNode('x')])
    """
    return ElementPath(*steps).navigate(start, adapter, config=config)


def find_first(start: Any,
               *steps: Any,
               adapter: Optional[TreeAdapter] = None,
               config: Optional[PathConfig] = None) -> Optional[Any]:
    """Return the first match in discovery order, or None."""
    return find_all(start, *steps, adapter=adapter, config=config).first()


def count_matches(start: Any,
                  *steps: Any,
                  adapter: Optional[TreeAdapter] = None,
                  config: Optional[PathConfig] = None) -> int:
    """Return how many nodes ``steps`` reaches from ``start``."""
    return len(find_all(start, *steps, adapter=adapter, config=config))
