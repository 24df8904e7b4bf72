class InvalidConfigurationError(ValueError):
    """Raised when a heap is constructed with an unusable branching factor."""


class EmptyHeapError(RuntimeError):
    """Raised when reading the maximum of a heap that holds no elements."""
