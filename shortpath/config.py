"""Configuration classes for shortpath components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for graph construction and shortest-path solves.

    ``check_weights`` can be overridden per ``ShortestPathEngine``.
    ``default_weight`` is only read from the global ``SOLVER_CONFIG`` by
    ``WeightedDiGraph.add_edge``, ``from_networkx`` and the edge-list and
    node-link readers.
    """

    # Re-check every weight during relaxation and raise NegativeWeightError
    check_weights: bool = True

    # Weight given to edges imported without a weight attribute
    default_weight: float = 1.0


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
