"""Test fixtures for NodePathLib consumers.

These helpers make it easy to observe what a navigation did - which
nodes a predicate was asked about and which trace lines were emitted -
without reaching into the engine's internals.
"""

import threading
from typing import Any, List, Optional

from ..config import PathConfig
from ..core.predicate import ElementPredicate, as_predicate


class CountingPredicate(ElementPredicate):
    """Predicate wrapper that records every node it is asked about.

    Example:
        counter = CountingPredicate(name_is("x"))
        ElementPath(counter).navigate_all([])
        assert counter.calls == 0
    """

    def __init__(self, inner: Any = None, label: Optional[str] = None):
        """Wrap ``inner`` (a predicate or callable; None matches everything)."""
        self._inner = as_predicate(inner) if inner is not None else None
        self._label = label
        self._lock = threading.Lock()
        self.seen: List[Any] = []

    def test(self, node: Any) -> bool:
        with self._lock:
            self.seen.append(node)
        return True if self._inner is None else self._inner.test(node)

    @property
    def calls(self) -> int:
        return len(self.seen)

    @property
    def label(self) -> str:
        if self._label:
            return self._label
        return f"count({self._inner.label if self._inner else '*'})"

    def reset(self) -> None:
        with self._lock:
            self.seen.clear()


class TraceRecorder:
    """Trace sink that keeps every line in memory.

    Example:
        recorder = TraceRecorder()
        path.trace("demo").navigate(root, config=recorder.config())
        assert recorder.lines[0] == "## [ begin path: demo ]"
    """

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def config(self, base: Optional[PathConfig] = None) -> PathConfig:
        """Return a PathConfig whose trace output goes to this recorder."""
        return (base or PathConfig()).with_sink(self)

    def step_lines(self) -> List[str]:
        """Lines describing individual steps (tab-indented)."""
        return [line for line in self.lines if line.startswith("\t")]

    def clear(self) -> None:
        self.lines.clear()
