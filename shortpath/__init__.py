"""shortpath: single-source shortest paths over weighted digraphs.

Primary API:
    ShortestPathEngine - build a graph edge by edge and query distances
    WeightedDiGraph - NetworkX-based multigraph with validated weights
    spf() - Dijkstra over a WeightedDiGraph returning distances and predecessors
    Path - a reconstructed path with its cost
    from_networkx() / to_networkx() - conversion to and from NetworkX graphs

Example:
    from shortpath import ShortestPathEngine

    engine = ShortestPathEngine()
    engine.add_edge("A", "B", 2)
    engine.add_edge("B", "C", 3)
    engine.shortest_paths("A")   # {"A": 0, "B": 2, "C": 5}
"""

from __future__ import annotations

from shortpath import logging
from shortpath.config import SOLVER_CONFIG, SolverConfig
from shortpath.engine import ShortestPathEngine
from shortpath.exceptions import (
    InvalidWeightError,
    NegativeWeightError,
    ShortestPathError,
)
from shortpath.lib.algorithms.path_utils import resolve_to_paths
from shortpath.lib.algorithms.spf import spf
from shortpath.lib.graph import WeightedDiGraph
from shortpath.lib.nx import from_networkx, to_networkx
from shortpath.lib.path import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "ShortestPathEngine",
    # Graph and algorithms
    "WeightedDiGraph",
    "spf",
    "resolve_to_paths",
    "Path",
    # Errors
    "ShortestPathError",
    "InvalidWeightError",
    "NegativeWeightError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # NetworkX integration
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
