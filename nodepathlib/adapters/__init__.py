"""Concrete host tree adapters for NodePathLib."""

from ..core.adapter import AttributeTreeAdapter
from .memory import MemoryNode
from .pyast import AstTreeAdapter, ast_kind, ast_name, node_name

__all__ = [
    'AttributeTreeAdapter',
    'MemoryNode',
    'AstTreeAdapter',
    'ast_kind',
    'ast_name',
    'node_name',
]
