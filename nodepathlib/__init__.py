"""NodePathLib - Structural Path Queries over Host Trees.

NodePathLib answers questions like "the parent's sibling whose name is x"
without hand-written tree walking. A path is an ordered program of
predicates and traversal steps; navigating it from a set of starting
nodes yields the nodes that satisfy it.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from nodepathlib import ElementPath, PARENT_ELEMENT, name_is

    path = ElementPath(PARENT_ELEMENT, name_is("x").on_siblings())
    matches = path.navigate(node, adapter)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Any tree can be navigated through a TreeAdapter; objects with
``children``/``parent`` attributes work out of the box.
"""

__version__ = "0.1.0"

from .core import (
    TreeNode,
    node_key,
    TreeAdapter,
    AttributeTreeAdapter,
    NodeCollection,
    EMPTY,
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
    NavigationContext,
    ElementPath,
    UnionPath,
    ExclusionPath,
    AppendPath,
)
from .config import TraceConfig, PathConfig, DEFAULT_CONFIG
from .errors import (
    PathError,
    MissingStepError,
    UnsupportedCompositionError,
    ConfigurationError,
)
from .adapters import MemoryNode, AstTreeAdapter, ast_kind, ast_name
from .api import find_all, find_first, count_matches

__all__ = [
    "__version__",
    # Core
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
    # Config
    "TraceConfig",
    "PathConfig",
    "DEFAULT_CONFIG",
    # Errors
    "PathError",
    "MissingStepError",
    "UnsupportedCompositionError",
    "ConfigurationError",
    # Adapters
    "MemoryNode",
    "AstTreeAdapter",
    "ast_kind",
    "ast_name",
    # API
    "find_all",
    "find_first",
    "count_matches",
]
