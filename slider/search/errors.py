class InvalidArgumentError(ValueError):
    """Raised when the solver is handed no initial board."""


class EmptyQueueError(IndexError):
    """Raised on extraction from an empty priority queue."""
