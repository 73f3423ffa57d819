"""Testing helpers for NodePathLib consumers."""

from .fixtures import CountingPredicate, TraceRecorder

__all__ = [
    'CountingPredicate',
    'TraceRecorder',
]
