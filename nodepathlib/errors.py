"""Exception hierarchy for NodePathLib.

Every error raised by the library itself derives from PathError so callers
can catch library failures in one place. Exceptions raised by host
adapters or predicates are never wrapped - they propagate unchanged.
"""


class PathError(Exception):
    """Base class for all NodePathLib errors."""
    pass


class MissingStepError(PathError, TypeError):
    """Raised when a path program contains an absent (None) step.

    Attributes:
        index: Position of the offending step in the path program
    """

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"path step [{index}] is None")


class UnsupportedCompositionError(PathError, NotImplementedError):
    """Raised when a composition operator is not allowed on a path.

    Exclusion paths are terminal with respect to union: calling or_()
    on one is rejected.
    """
    pass


class ConfigurationError(PathError, ValueError):
    """Raised when a PathConfig fails validation."""
    pass
