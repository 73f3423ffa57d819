"""Per-call navigation context and trace facility.

Every public navigate() call creates one NavigationContext and threads it
through all nested delegations. The context carries the adapter and the
trace state, so two navigations running at the same time (in different
threads or tasks) never see each other's trace flag.

Tracing is scoped: entering a traced path switches tracing on for that
path and everything it delegates to, and the previous state is restored
when the path returns.
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .adapter import TreeAdapter


class NavigationContext:
    """Execution state of a single navigate() call.

    Attributes:
        adapter: TreeAdapter used by traversal steps
        sink: Callable receiving each formatted trace line
        active: Whether trace output is currently enabled
    """

    __slots__ = ("adapter", "sink", "active")

    def __init__(self,
                 adapter: TreeAdapter,
                 sink: Callable[[str], None],
                 active: bool = False):
        self.adapter = adapter
        self.sink = sink
        self.active = active

    @contextmanager
    def tracing(self, name: Optional[str]) -> Iterator['NavigationContext']:
        """Enable tracing for the duration of a path invocation.

        Emits the begin/end bracket lines and restores the previous trace
        state on exit, even when the body raises.
        """
        previous = self.active
        self.active = True
        self.message("## [ begin path: %s ]", name)
        try:
            yield self
        finally:
            self.message("## [ end path: %s ]", name)
            self.active = previous

    def message(self, fmt: str, *args: Any) -> None:
        """Send a trace line to the sink if tracing is active."""
        if not self.active:
            return
        self.sink(fmt % args if args else fmt)

    def step(self, label: str, count: int) -> None:
        """Record the outcome of one path step."""
        if not self.active:
            return
        self.message("\t%s (%d %s)", label, count, "node" if count == 1 else "nodes")
