"""Single-source shortest-path engine.

``ShortestPathEngine`` owns a ``WeightedDiGraph``, grows it one directed edge
at a time and answers shortest-distance queries with Dijkstra's algorithm.

Example:
    >>> engine = ShortestPathEngine()
    >>> engine.add_edge(0, 1, 4)
    >>> engine.add_edge(0, 2, 6)
    >>> engine.add_edge(1, 3, 5)
    >>> engine.add_edge(2, 3, 2)
    >>> engine.shortest_paths(0)
    {0: 0, 1: 4, 2: 6, 3: 8}

Edges are directed. To model an undirected edge, add it in both directions.
The engine does no locking: do not add edges while a solve on the same
instance is running.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from shortpath.config import SOLVER_CONFIG, SolverConfig
from shortpath.lib.algorithms.base import DistanceTable, PredMap
from shortpath.lib.algorithms.path_utils import resolve_to_paths
from shortpath.lib.algorithms.spf import spf
from shortpath.lib.graph import Cost, VertexID, WeightedDiGraph, check_weight
from shortpath.lib.path import Path
from shortpath.logging import get_logger

logger = get_logger(__name__)


class ShortestPathEngine:
    """Incrementally built weighted digraph with Dijkstra shortest paths.

    Attributes:
        config: Solver settings; defaults to the global ``SOLVER_CONFIG``.
            Only ``check_weights`` is read per engine. ``add_edge`` always
            needs an explicit weight, so ``default_weight`` plays no part
            here; graph construction and importers read it from
            ``SOLVER_CONFIG``.
    """

    def __init__(
        self,
        graph: Optional[WeightedDiGraph] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        """Create an engine.

        Args:
            graph: Existing graph to take ownership of. A new empty graph is
                created when None.
            config: Solver settings override. Its ``check_weights`` applies to
                every solve on this engine.
        """
        self._graph = graph if graph is not None else WeightedDiGraph()
        self.config = config if config is not None else SOLVER_CONFIG

    @property
    def graph(self) -> WeightedDiGraph:
        """The underlying graph."""
        return self._graph

    def add_edge(self, u: VertexID, v: VertexID, weight: Cost) -> None:
        """Add a directed edge u -> v.

        Args:
            u: Tail vertex; created if unknown.
            v: Head vertex; created if unknown.
            weight: Non-negative edge weight.

        Raises:
            InvalidWeightError: If weight is negative, NaN or not a number. The
                graph is left unchanged.
        """
        key = self._graph.add_edge(u, v, weight=check_weight(weight))
        logger.debug("Added edge %r -> %r (key %r, weight %r)", u, v, key, weight)

    def shortest_paths(self, source: VertexID) -> DistanceTable:
        """Compute the shortest distance from source to every reachable vertex.

        Args:
            source: Start vertex. Need not be in the graph.

        Returns:
            A new dict of vertex -> minimal total weight. The source maps to 0;
            unreachable vertices are absent.

        Raises:
            NegativeWeightError: If a negative weight was written into the
                graph behind ``add_edge``'s back.
        """
        costs, _ = self._solve(source, multipath=False)
        return costs

    def predecessors(self, source: VertexID) -> PredMap:
        """Return the equal-cost predecessor map of a solve from source.

        Returns:
            vertex -> {predecessor: [edge keys]} for every reachable vertex.
        """
        _, pred = self._solve(source, multipath=True)
        return pred

    def shortest_path(self, source: VertexID, target: VertexID) -> Optional[Path]:
        """Return one minimal-weight path from source to target.

        The search stops as soon as target's distance is final.

        Returns:
            The path, or None if target is unreachable.
        """
        costs, pred = self._solve(source, multipath=False, dst_node=target)
        if target not in costs:
            return None
        path_tuple = next(resolve_to_paths(source, target, pred))
        return Path(path_tuple, costs[target])

    def all_shortest_paths(self, source: VertexID, target: VertexID) -> Iterator[Path]:
        """Yield every minimal-weight path from source to target.

        Parallel edges of equal weight are grouped in one path element.
        Nothing is yielded if target is unreachable.
        """
        costs, pred = self._solve(source, multipath=True)
        if target not in costs:
            return
        for path_tuple in resolve_to_paths(source, target, pred):
            yield Path(path_tuple, costs[target])

    def _solve(
        self,
        source: VertexID,
        multipath: bool,
        dst_node: Optional[VertexID] = None,
    ) -> Tuple[DistanceTable, PredMap]:
        costs, pred = spf(
            self._graph,
            source,
            multipath=multipath,
            dst_node=dst_node,
            check_weights=self.config.check_weights,
        )
        logger.debug(
            "Solved from %r over %d vertices / %d edges: %d reached",
            source,
            self._graph.number_of_nodes(),
            self._graph.number_of_edges(),
            len(costs),
        )
        return costs, pred
