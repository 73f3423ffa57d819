"""Core abstractions for NodePathLib.

This package contains the node/adapter capability the engine consumes,
the NodeCollection frontier container, predicates and traversal steps,
the per-call navigation context, and the ElementPath engine itself.
"""

from .node import TreeNode, node_key
from .adapter import TreeAdapter, AttributeTreeAdapter
from .collection import NodeCollection, EMPTY
from .predicate import (
    StepKind,
    ElementPredicate,
    FunctionPredicate,
    TraversalPredicate,
    ChildrenTraversal,
    DescendantsTraversal,
    AllDescendantsTraversal,
    ParentTraversal,
    SiblingsTraversal,
    as_predicate,
    predicate,
    kind_is,
    name_is,
    name_matches,
    ANY,
    ALL_CHILDREN,
    ALL_CHILDREN_DEEP,
    ALL_DESCENDANTS,
    PARENT_ELEMENT,
    ALL_SIBLINGS,
)
from .trace import NavigationContext
from .path import ElementPath, UnionPath, ExclusionPath, AppendPath

__all__ = [
    "TreeNode",
    "node_key",
    "TreeAdapter",
    "AttributeTreeAdapter",
    "NodeCollection",
    "EMPTY",
    "StepKind",
    "ElementPredicate",
    "FunctionPredicate",
    "TraversalPredicate",
    "ChildrenTraversal",
    "DescendantsTraversal",
    "AllDescendantsTraversal",
    "ParentTraversal",
    "SiblingsTraversal",
    "as_predicate",
    "predicate",
    "kind_is",
    "name_is",
    "name_matches",
    "ANY",
    "ALL_CHILDREN",
    "ALL_CHILDREN_DEEP",
    "ALL_DESCENDANTS",
    "PARENT_ELEMENT",
    "ALL_SIBLINGS",
    "NavigationContext",
    "ElementPath",
    "UnionPath",
    "ExclusionPath",
    "AppendPath",
]
