"""Path navigation engine for NodePathLib.

An ElementPath is a small program: an ordered list of steps applied to a
starting set of nodes. Plain predicates filter the frontier; traversal
predicates relocate it (to children, parent, descendants) before
filtering, and deepening traversals keep descending one generation at a
time until some generation matches.

Paths compose:

    >>> call_args = ElementPath(kind_is("Call"), ALL_CHILDREN)
    >>> names = ElementPath(kind_is("Name").on_descendants())
    >>> call_args.append(names).exclude(ElementPath(name_is("self")))

Composites (union, exclusion, append) grow in place when the same
operator is applied to them again. Finish composing before a path is
shared between threads; navigation itself keeps no state on the path.
"""

from typing import Any, Iterable, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, PathConfig
from ..errors import ConfigurationError, MissingStepError, UnsupportedCompositionError
from .adapter import AttributeTreeAdapter, TreeAdapter
from .collection import EMPTY, NodeCollection
from .predicate import ElementPredicate, StepKind, as_predicate
from .trace import NavigationContext


class ElementPath:
    """A sequence of predicates and traversal steps.

    Example:
        >>> # the parent's siblings named "x"
        >>> path = ElementPath(PARENT_ELEMENT, name_is("x").on_siblings())
        >>> matches = path.navigate(node, adapter)
    """

    def __init__(self, *steps: Any):
        """Create a path from an ordered list of steps.

        Args:
            *steps: ElementPredicate instances or callables(node) -> bool.
                None entries are kept and rejected when navigated.
        """
        self._steps: Tuple[Optional[ElementPredicate], ...] = tuple(
            as_predicate(step) for step in steps
        )
        self._name: Optional[str] = None
        self._trace_enabled = False

    # Introspection

    @property
    def steps(self) -> Tuple[Optional[ElementPredicate], ...]:
        return self._steps

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def is_traced(self) -> bool:
        return self._trace_enabled

    def __repr__(self) -> str:
        program = " / ".join(str(step) for step in self._steps)
        return f"{self.__class__.__name__}({program})"

    # Public navigation API

    def navigate(self,
                 start: Any,
                 adapter: Optional[TreeAdapter] = None,
                 *,
                 config: Optional[PathConfig] = None) -> NodeCollection:
        """Navigate from a single starting node.

        Args:
            start: Starting node
            adapter: Host tree adapter (defaults to the config's adapter,
                then to AttributeTreeAdapter)
            config: Trace/adapter configuration (defaults to DEFAULT_CONFIG)

        Returns:
            NodeCollection of matches (EMPTY when nothing matched)
        """
        return self.navigate_all((start,), adapter, config=config)

    def navigate_all(self,
                     start: Iterable[Any],
                     adapter: Optional[TreeAdapter] = None,
                     *,
                     config: Optional[PathConfig] = None) -> NodeCollection:
        """Navigate from a set of starting nodes.

        Args:
            start: Starting nodes; the iterable is copied, never modified
            adapter: Host tree adapter
            config: Trace/adapter configuration

        Returns:
            NodeCollection of matches (EMPTY when nothing matched)

        Raises:
            MissingStepError: If a None step is reached
            ConfigurationError: If ``config`` fails validation
        """
        context = _create_context(adapter, config)
        return self._run(NodeCollection(start), context)

    # Composition

    def or_(self, other: 'ElementPath') -> 'ElementPath':
        """Union of this path's and ``other``'s results over the same start."""
        return UnionPath(self, other)

    def exclude(self, other: 'ElementPath') -> 'ElementPath':
        """This path's results minus ``other``'s results over the same start."""
        return ExclusionPath(self, other)

    def append(self, *next_steps: Any) -> 'ElementPath':
        """Run another path against this path's results.

        Accepts either a single ElementPath or any number of predicates,
        which are wrapped in a new ElementPath. Appending no predicates
        returns this path unchanged.
        """
        if len(next_steps) == 1 and isinstance(next_steps[0], ElementPath):
            return AppendPath(self, next_steps[0])
        if not next_steps:
            return self
        return self.append(ElementPath(*next_steps))

    def trace(self, name: str) -> 'ElementPath':
        """Enable step-by-step trace output for this path under ``name``."""
        self._name = name
        self._trace_enabled = True
        return self

    # Execution

    def _run(self, start: NodeCollection, context: NavigationContext) -> NodeCollection:
        """Execute this path within an existing navigation context."""
        if not self._trace_enabled:
            return self._navigate_impl(start, context)
        with context.tracing(self._name):
            return self._navigate_impl(start, context)

    def _navigate_impl(self, start: NodeCollection, context: NavigationContext) -> NodeCollection:
        if not start:
            return EMPTY
        current = NodeCollection(start)
        last = len(self._steps) - 1
        for index, step in enumerate(self._steps):
            if not current:
                break
            if step is None:
                raise MissingStepError(index)

            if step.kind is StepKind.TRAVERSAL:
                current = _apply_traversal(step, current, context.adapter)
            else:
                current = current.filter(step)

            context.step(step.label, len(current))
            if not current and index < last:
                context.message("\tABORT!")

        return current if current else EMPTY


def _apply_traversal(step: Any, current: NodeCollection, adapter: TreeAdapter) -> NodeCollection:
    """Relocate the frontier and test it, deepening while allowed.

    Each retry relocates from the already relocated frontier, so a
    deepening step commits to the shallowest generation with a match and
    gives up only when relocation runs out of nodes.
    """
    while True:
        current = step.traverse(current, adapter)
        if not current:
            return EMPTY
        candidate = current.filter(step)
        if candidate or not step.traverse_again_if_no_match():
            return candidate


class UnionPath(ElementPath):
    """Union of several paths evaluated over the same starting set."""

    def __init__(self, *delegates: ElementPath):
        super().__init__()
        self._delegates: List[ElementPath] = list(delegates)

    @property
    def delegates(self) -> Tuple[ElementPath, ...]:
        return tuple(self._delegates)

    def __repr__(self) -> str:
        return " | ".join(repr(path) for path in self._delegates)

    def or_(self, other: ElementPath) -> ElementPath:
        self._delegates.append(other)
        return self

    def _navigate_impl(self, start: NodeCollection, context: NavigationContext) -> NodeCollection:
        if not start:
            return EMPTY
        buffer = NodeCollection()
        for path in self._delegates:
            buffer.add_all(path._run(start, context))
        return buffer if buffer else EMPTY


class ExclusionPath(ElementPath):
    """A base path minus the results of one or more excluded paths.

    Each excluded path is evaluated against the original starting set,
    not against the shrinking result. Exclusion is terminal for union:
    or_() is rejected.
    """

    def __init__(self, base: ElementPath, *excluded: ElementPath):
        super().__init__()
        self._base = base
        self._excluded: List[ElementPath] = list(excluded)

    @property
    def base(self) -> ElementPath:
        return self._base

    @property
    def excluded(self) -> Tuple[ElementPath, ...]:
        return tuple(self._excluded)

    def __repr__(self) -> str:
        removed = ", ".join(repr(path) for path in self._excluded)
        return f"{self._base!r} - [{removed}]"

    def or_(self, other: ElementPath) -> ElementPath:
        raise UnsupportedCompositionError("or_() is not supported after exclude()")

    def exclude(self, other: ElementPath) -> ElementPath:
        self._excluded.append(other)
        return self

    def _navigate_impl(self, start: NodeCollection, context: NavigationContext) -> NodeCollection:
        if not start:
            return EMPTY
        buffer = self._base._run(start, context)
        if not buffer:
            return EMPTY
        buffer = NodeCollection(buffer)
        for path in self._excluded:
            context.message("## begin exclude...")
            buffer.remove_all(path._run(start, context))
            context.message("## end exclude.")
            if not buffer:
                return EMPTY
        return buffer


class AppendPath(ElementPath):
    """Sequential chain: each path runs against the previous path's result."""

    def __init__(self, *sequence: ElementPath):
        super().__init__()
        self._sequence: List[ElementPath] = list(sequence)

    @property
    def sequence(self) -> Tuple[ElementPath, ...]:
        return tuple(self._sequence)

    def __repr__(self) -> str:
        return " >> ".join(repr(path) for path in self._sequence)

    def append(self, *next_steps: Any) -> ElementPath:
        if len(next_steps) == 1 and isinstance(next_steps[0], ElementPath):
            self._sequence.append(next_steps[0])
            return self
        return super().append(*next_steps)

    def _navigate_impl(self, start: NodeCollection, context: NavigationContext) -> NodeCollection:
        buffer = start
        for path in self._sequence:
            if not buffer:
                return EMPTY
            buffer = path._run(buffer, context)
        return buffer if buffer else EMPTY


def _create_context(adapter: Optional[TreeAdapter],
                    config: Optional[PathConfig]) -> NavigationContext:
    """Build the per-call context for a top-level navigate() call."""
    config = config if config is not None else DEFAULT_CONFIG
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    if adapter is None:
        adapter = config.adapter if config.adapter is not None else AttributeTreeAdapter()
    return NavigationContext(adapter, config.trace.resolve_sink())
