"""Exceptions raised by shortpath."""


class ShortestPathError(ValueError):
    """Base class for graph and solver errors."""


class InvalidWeightError(ShortestPathError):
    """Raised when an edge is given a weight that is not a non-negative number."""


class NegativeWeightError(ShortestPathError):
    """Raised when a solve encounters a negative edge weight.

    Edge insertion already rejects negative weights, so this only fires when
    edge attributes were edited directly on the underlying NetworkX graph.
    """
