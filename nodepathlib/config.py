"""Configuration system for NodePathLib.

This module defines how users control the ambient behaviour of path
navigation: where trace output goes and which adapter is used when the
caller does not supply one.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional


@dataclass
class TraceConfig:
    """Configuration for diagnostic trace output.

    Trace lines are only produced for paths that had trace() enabled.
    When no sink is given they are sent to the stdlib logger named
    ``logger_name`` at ``level``.
    """

    logger_name: str = "nodepathlib.trace"
    level: int = logging.INFO
    sink: Optional[Callable[[str], None]] = None  # Receives each formatted line

    def resolve_sink(self) -> Callable[[str], None]:
        """Return the callable that receives trace lines."""
        if self.sink is not None:
            return self.sink
        logger = logging.getLogger(self.logger_name)
        level = self.level

        def _log(line: str) -> None:
            logger.log(level, "%s", line)

        return _log


@dataclass
class PathConfig:
    """Complete configuration for a navigate() call.

    Attributes:
        trace: Trace output settings
        adapter: Default TreeAdapter (None = attribute-based adapter)
    """

    trace: TraceConfig = field(default_factory=TraceConfig)
    adapter: Optional[Any] = None

    def with_sink(self, sink: Callable[[str], None]) -> 'PathConfig':
        """Return a copy of this config that traces into ``sink``."""
        return PathConfig(
            trace=TraceConfig(
                logger_name=self.trace.logger_name,
                level=self.trace.level,
                sink=sink,
            ),
            adapter=self.adapter,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.trace, TraceConfig):
            errors.append("trace must be a TraceConfig")
            return errors

        if not self.trace.logger_name:
            errors.append("trace.logger_name cannot be empty")

        if not isinstance(self.trace.level, int) or self.trace.level < 0:
            errors.append("trace.level must be a non-negative logging level")

        if self.trace.sink is not None and not callable(self.trace.sink):
            errors.append("trace.sink must be callable")

        if self.adapter is not None:
            for method in ("get_children", "get_parent"):
                if not callable(getattr(self.adapter, method, None)):
                    errors.append(f"adapter is missing {method}()")

        return errors


DEFAULT_CONFIG = PathConfig()
