"""Predicates and traversal steps for NodePathLib.

A path program is a sequence of steps. Each step is one of two kinds:

- FILTER: a plain predicate; keeps the frontier nodes it accepts.
- TRAVERSAL: relocates the frontier (to children, parent, ...) and then
  applies its own test to the relocated nodes, optionally descending one
  more level when nothing matched.

The navigation loop dispatches on ``step.kind`` rather than on the class
of the step, so third-party steps only need to declare their kind.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional

from .adapter import TreeAdapter
from .collection import EMPTY, NodeCollection


class StepKind(Enum):
    """How the navigation loop executes a step."""
    FILTER = "filter"
    TRAVERSAL = "traversal"


class ElementPredicate(ABC):
    """A boolean test over a single node.

    Predicates must be deterministic and free of side effects: the same
    predicate may be called many times, from many threads, during one
    navigation.
    """

    kind = StepKind.FILTER

    @abstractmethod
    def test(self, node: Any) -> bool:
        """Return True if ``node`` matches."""
        pass

    @property
    def label(self) -> str:
        """Human-readable label used in trace output."""
        return self.__class__.__name__

    def __call__(self, node: Any) -> bool:
        return self.test(node)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.label}>"

    # Boolean combinators

    def __invert__(self) -> 'ElementPredicate':
        return FunctionPredicate(lambda node: not self.test(node), f"!{self.label}")

    def __and__(self, other: Any) -> 'ElementPredicate':
        other = as_predicate(other)
        if other.kind is StepKind.TRAVERSAL:
            return other & self
        return FunctionPredicate(
            lambda node: self.test(node) and other.test(node),
            f"({self.label} & {other.label})",
        )

    def __or__(self, other: Any) -> 'ElementPredicate':
        other = as_predicate(other)
        if other.kind is StepKind.TRAVERSAL:
            return other | self
        return FunctionPredicate(
            lambda node: self.test(node) or other.test(node),
            f"({self.label} | {other.label})",
        )

    # Lifting to traversal steps

    def on_children(self) -> 'TraversalPredicate':
        """Step to the direct children, keeping those that match."""
        return ChildrenTraversal(self)

    def on_descendants(self) -> 'TraversalPredicate':
        """Search descendants level by level, stopping at the shallowest match."""
        return DescendantsTraversal(self)

    def on_all_descendants(self) -> 'TraversalPredicate':
        """Step to every descendant at every depth, keeping those that match."""
        return AllDescendantsTraversal(self)

    def on_parent(self) -> 'TraversalPredicate':
        """Step to the parent, keeping it if it matches."""
        return ParentTraversal(self)

    def on_siblings(self) -> 'TraversalPredicate':
        """Step to the siblings, keeping those that match."""
        return SiblingsTraversal(self)


class FunctionPredicate(ElementPredicate):
    """Predicate backed by a plain callable."""

    def __init__(self, func: Callable[[Any], bool], label: Optional[str] = None):
        self._func = func
        self._label = label or getattr(func, "__name__", None) or repr(func)

    def test(self, node: Any) -> bool:
        return bool(self._func(node))

    @property
    def label(self) -> str:
        return self._label


class TraversalPredicate(ElementPredicate):
    """A predicate that first relocates the frontier, then tests it.

    The test is delegated to an inner predicate (ANY when omitted) and is
    applied to the relocated frontier, never the original one.
    """

    kind = StepKind.TRAVERSAL
    axis = "traverse"

    def __init__(self, inner: Optional[ElementPredicate] = None):
        self.inner = inner if inner is not None else ANY

    @abstractmethod
    def traverse(self, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
        """Relocate the frontier.

        Args:
            current: Frontier to relocate (never modified)
            adapter: Host tree adapter

        Returns:
            New frontier, EMPTY when relocation found nothing
        """
        pass

    def traverse_again_if_no_match(self) -> bool:
        """Whether to relocate again from the new frontier if nothing matched."""
        return False

    def with_inner(self, inner: ElementPredicate) -> 'TraversalPredicate':
        """Return a traversal along the same axis with a different test.

        Subclasses whose constructor takes more than the inner predicate
        must override this.
        """
        return type(self)(inner)

    # Combinators act on the test and keep the relocation

    def __invert__(self) -> 'TraversalPredicate':
        return self.with_inner(~self.inner)

    def __and__(self, other: Any) -> 'TraversalPredicate':
        return self.with_inner(self.inner & self._inner_of(other))

    def __or__(self, other: Any) -> 'TraversalPredicate':
        return self.with_inner(self.inner | self._inner_of(other))

    def _inner_of(self, other: Any) -> ElementPredicate:
        other = as_predicate(other)
        if other.kind is not StepKind.TRAVERSAL:
            return other
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {self.label} with {other.label}: "
                "traversals must share an axis"
            )
        return other.inner

    def test(self, node: Any) -> bool:
        return self.inner.test(node)

    @property
    def label(self) -> str:
        return f"{self.axis}:{self.inner.label}"

    @staticmethod
    def _collect(current: NodeCollection, relocate: Callable[[Any], Any]) -> NodeCollection:
        buffer = NodeCollection()
        for node in current:
            buffer.add_all(relocate(node))
        return buffer if buffer else EMPTY


class ChildrenTraversal(TraversalPredicate):
    """frontier := children(frontier)."""

    axis = "children"

    def traverse(self, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
        return self._collect(current, adapter.get_children)


class DescendantsTraversal(ChildrenTraversal):
    """Deepening search over descendants.

    Relocates one generation at a time and re-traverses while no node of
    the current generation matches. Matches are therefore only ever
    taken from the shallowest generation that has any.
    """

    axis = "descendants"

    def traverse_again_if_no_match(self) -> bool:
        return True


class AllDescendantsTraversal(TraversalPredicate):
    """frontier := every descendant at every depth (pre-order)."""

    axis = "all-descendants"

    def traverse(self, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
        return self._collect(current, adapter.get_descendants)


class ParentTraversal(TraversalPredicate):
    """frontier := parents of the frontier; roots drop out."""

    axis = "parent"

    def traverse(self, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
        buffer = NodeCollection()
        for node in current:
            parent = adapter.get_parent(node)
            if parent is not None:
                buffer.add(parent)
        return buffer if buffer else EMPTY


class SiblingsTraversal(TraversalPredicate):
    """frontier := siblings of each frontier node."""

    axis = "siblings"

    def traverse(self, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
        return self._collect(current, adapter.get_siblings)


class _AnyPredicate(ElementPredicate):

    def test(self, node: Any) -> bool:
        return True

    @property
    def label(self) -> str:
        return "*"


def as_predicate(obj: Any) -> ElementPredicate:
    """Coerce a callable into an ElementPredicate.

    Predicates are returned unchanged; None is returned unchanged too so
    that an absent step can be reported when the path is navigated.

    Raises:
        TypeError: If ``obj`` is neither a predicate nor callable
    """
    if obj is None or isinstance(obj, ElementPredicate):
        return obj
    if callable(obj):
        return FunctionPredicate(obj)
    raise TypeError(f"cannot use {obj!r} as a path step")


def predicate(func: Callable[[Any], bool], label: Optional[str] = None) -> ElementPredicate:
    """Create a labelled predicate from a callable."""
    return FunctionPredicate(func, label)


def kind_is(*kinds: str) -> ElementPredicate:
    """Match nodes whose ``kind`` attribute is one of ``kinds``."""
    wanted = frozenset(kinds)
    return FunctionPredicate(
        lambda node: getattr(node, "kind", None) in wanted,
        f"kind={'|'.join(kinds)}",
    )


def name_is(*names: str) -> ElementPredicate:
    """Match nodes whose ``name`` attribute is one of ``names``."""
    wanted = frozenset(names)
    return FunctionPredicate(
        lambda node: getattr(node, "name", None) in wanted,
        f"name={'|'.join(names)}",
    )


def name_matches(pattern: str) -> ElementPredicate:
    """Match nodes whose ``name`` attribute matches a regular expression."""
    regex = re.compile(pattern)

    def _test(node: Any) -> bool:
        name = getattr(node, "name", None)
        return isinstance(name, str) and regex.search(name) is not None

    return FunctionPredicate(_test, f"name~/{pattern}/")


ANY = _AnyPredicate()
ALL_CHILDREN = ANY.on_children()
ALL_CHILDREN_DEEP = ANY.on_descendants()
ALL_DESCENDANTS = ANY.on_all_descendants()
PARENT_ELEMENT = ANY.on_parent()
ALL_SIBLINGS = ANY.on_siblings()
