"""Python syntax tree adapter for NodePathLib.

Exposes a tree produced by the standard ``ast`` module as a host tree.
ast nodes have no parent links, so the adapter indexes parents once when
it is created. Nodes are the ast objects themselves and compare by
identity.

CPython shares a single instance of each context (Load, Store, Del) and
operator (Add, And, Not, Eq...) node across the whole tree. Those leaves
have no single parent, so the adapter leaves them out; read them from the
owning node's ``ctx`` or ``op`` field instead.
"""

import ast
from typing import Any, Dict, Iterator, Optional, Union

from ..core.adapter import TreeAdapter
from ..core.predicate import ElementPredicate, FunctionPredicate


# Fields that carry an identifier on the various ast node classes
NAME_FIELDS = ("name", "id", "arg", "attr", "module")

# Leaf node classes that ast.parse shares between owners
SHARED_LEAF_TYPES = (ast.expr_context, ast.boolop, ast.operator, ast.unaryop, ast.cmpop)


class AstTreeAdapter(TreeAdapter):
    """Adapter for trees produced by ``ast.parse``.

    Example:
        >>> adapter = AstTreeAdapter.from_source("def f(x): return x")
        >>> path = ElementPath(ast_kind("Name").on_descendants())
        >>> [n.id for n in path.navigate(adapter.root, adapter)]
        ['x']
    """

    def __init__(self, tree: ast.AST):
        """Index the parents of every node in ``tree``.

        Args:
            tree: Root of a parsed syntax tree
        """
        self.root = tree
        self._parents: Dict[int, ast.AST] = {}
        for node in ast.walk(tree):
            for child in self.get_children(node):
                self._parents[id(child)] = node

    @classmethod
    def from_source(cls, source: str, filename: str = "<unknown>") -> 'AstTreeAdapter':
        """Parse ``source`` and wrap the resulting module.

        Raises:
            SyntaxError: If ``source`` is not valid Python
        """
        return cls(ast.parse(source, filename=filename))

    def get_children(self, node: ast.AST) -> Iterator[ast.AST]:
        return (
            child for child in ast.iter_child_nodes(node)
            if not isinstance(child, SHARED_LEAF_TYPES)
        )

    def get_parent(self, node: ast.AST) -> Optional[ast.AST]:
        return self._parents.get(id(node))


def node_name(node: Any) -> Optional[str]:
    """Return the identifier carried by an ast node, if any."""
    for field_name in NAME_FIELDS:
        value = getattr(node, field_name, None)
        if isinstance(value, str):
            return value
    return None


def ast_kind(*kinds: Union[str, type]) -> ElementPredicate:
    """Match ast nodes by class, given as classes or class names."""
    names = frozenset(k if isinstance(k, str) else k.__name__ for k in kinds)
    return FunctionPredicate(
        lambda node: type(node).__name__ in names,
        f"kind={'|'.join(sorted(names))}",
    )


def ast_name(*names: str) -> ElementPredicate:
    """Match ast nodes whose identifier (name, id, arg, attr) is in ``names``."""
    wanted = frozenset(names)
    return FunctionPredicate(
        lambda node: node_name(node) in wanted,
        f"name={'|'.join(names)}",
    )
