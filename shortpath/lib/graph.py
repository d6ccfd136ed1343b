from __future__ import annotations

from numbers import Complex, Number, Real
from pickle import dumps, loads
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple, Union

import networkx as nx

from shortpath.config import SOLVER_CONFIG
from shortpath.exceptions import InvalidWeightError

VertexID = Hashable
EdgeID = Hashable
Cost = Union[int, float, Number]
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[VertexID, VertexID, EdgeID, AttrDict]

#: Name of the edge attribute holding the weight.
WEIGHT_ATTR = "weight"


def check_weight(weight: Any) -> Cost:
    """
    Validate an edge weight.

    Any ordered ``numbers.Number`` is accepted, including ``Decimal`` and
    ``Fraction``. Weights of one graph must add up with each other, so
    ``Decimal`` and ``float`` weights cannot be mixed.

    Args:
        weight: Candidate weight.

    Returns:
        The weight unchanged.

    Raises:
        InvalidWeightError: If the weight is not a number, is a bool or a
            complex number, is NaN, or is negative.
    """
    if (
        isinstance(weight, bool)
        or not isinstance(weight, Number)
        or (isinstance(weight, Complex) and not isinstance(weight, Real))
    ):
        raise InvalidWeightError(
            f"Edge weight must be a number, got {type(weight).__name__} {weight!r}."
        )
    try:
        # NaN is the only value unequal to itself
        invalid = weight != weight or weight < 0
    except ArithmeticError:
        # Signaling Decimal NaN
        invalid = True
    if invalid:
        raise InvalidWeightError(f"Edge weight must be >= 0, got {weight!r}.")
    return weight


class WeightedDiGraph(nx.MultiDiGraph):
    """
    A directed multigraph whose edges carry a validated non-negative weight.

    This class enforces:
      - Every edge has a ``weight`` attribute that passes ``check_weight``.
        A missing weight falls back to ``SOLVER_CONFIG.default_weight``.
      - Generated edge keys are integers from a per-graph counter, so they
        identify edges across the whole graph, not only between two vertices.
      - Re-using a key between the same pair of vertices raises ValueError
        instead of silently updating the existing edge.
      - A rejected edge leaves the graph untouched (no vertices are created).

    Missing vertices are created on edge insertion. Parallel edges and
    self-loops are allowed.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        self._next_key = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: VertexID, v: VertexID) -> EdgeID:
        """
        Return the next unused integer edge key.

        Overrides the NetworkX default, which numbers edges per (u, v) pair.
        """
        key = self._next_key
        self._next_key += 1
        return key

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedDiGraph:
        """
        Create a copy of this graph.

        Args:
            as_view: If True, return a read-only view (only with pickle=False).
            pickle: If True, perform a pickle-based deep copy, which also
                preserves the edge key counter.

        Returns:
            A new WeightedDiGraph (or a view of this one).
        """
        if not pickle:
            return super().copy(as_view=as_view)
        return loads(dumps(self))

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: VertexID,
        v_for_edge: VertexID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """
        Add a directed edge from u_for_edge to v_for_edge.

        Args:
            u_for_edge: The tail vertex. Created if missing.
            v_for_edge: The head vertex. Created if missing.
            key: Optional edge key. Generated when None.
            **attr: Edge attributes. ``weight`` defaults to
                ``SOLVER_CONFIG.default_weight``.

        Returns:
            The key of the new edge.

        Raises:
            InvalidWeightError: If the weight is invalid.
            ValueError: If an edge u_for_edge -> v_for_edge with this key exists.
        """
        weight = attr.get(WEIGHT_ATTR)
        if weight is None:
            weight = SOLVER_CONFIG.default_weight
        attr[WEIGHT_ATTR] = check_weight(weight)

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self.edges_between(u_for_edge, v_for_edge):
                raise ValueError(
                    f"Edge with id '{key}' from '{u_for_edge}' to '{v_for_edge}' "
                    "already exists."
                )
            # Keep generated keys clear of explicit integer keys
            if isinstance(key, int) and not isinstance(key, bool):
                self._next_key = max(self._next_key, key + 1)

        return super().add_edge(u_for_edge, v_for_edge, key=key, **attr)

    def add_edges_from(self, ebunch_to_add: Iterable[Tuple], **attr: Any) -> List[EdgeID]:
        """
        Add several edges, each validated by ``add_edge``.

        Accepts the NetworkX edge forms (u, v), (u, v, key), (u, v, data) and
        (u, v, key, data). Attributes in ``attr`` apply to every edge unless
        overridden by per-edge data.

        Returns:
            The keys of the added edges, in order.
        """
        keys = []
        for e in ebunch_to_add:
            ne = len(e)
            if ne == 4:
                u, v, key, data = e
            elif ne == 3:
                u, v, data = e
                key = None
                if not isinstance(data, dict):
                    key, data = data, {}
            elif ne == 2:
                u, v = e
                key, data = None, {}
            else:
                raise nx.NetworkXError(f"Edge tuple {e} must be a 2-, 3- or 4-tuple.")
            keys.append(self.add_edge(u, v, key, **{**attr, **data}))
        return keys

    def add_vertex(self, v: VertexID, **attr: Any) -> None:
        """Add a vertex without edges (only updates attributes if it exists)."""
        self.add_node(v, **attr)

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[VertexID, AttrDict]:
        """
        Retrieve all vertices and their attributes.

        Returns:
            A mapping of vertex to its attribute dict, in insertion order.
        """
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """
        Retrieve all edges by key.

        Explicit keys that repeat across different vertex pairs collapse to
        the last such edge; generated keys are always distinct.

        Returns:
            A mapping of edge key to (tail, head, key, attributes).
        """
        return {
            key: (u, v, key, attr)
            for u, v, key, attr in self.edges(keys=True, data=True)
        }

    def get_edge_weight(self, key: EdgeID) -> Cost:
        """
        Return the weight of the edge with the given key.

        Raises:
            ValueError: If no edge with this key exists.
        """
        for _, _, e_key, weight in self.edges(keys=True, data=WEIGHT_ATTR):
            if e_key == key:
                return weight
        raise ValueError(f"Edge with id='{key}' not found.")

    def edges_between(self, u: VertexID, v: VertexID) -> List[EdgeID]:
        """
        List the keys of all edges from u to v (empty if there are none).
        """
        if u not in self._succ or v not in self._succ[u]:
            return []
        return list(self._succ[u][v].keys())

    def adjacency_list(self) -> Dict[VertexID, List[Tuple[VertexID, Cost]]]:
        """
        Return the graph as vertex -> [(head, weight), ...].

        Every vertex appears as a key, including those without outgoing edges.
        """
        return {
            u: [
                (v, attr[WEIGHT_ATTR])
                for v, edges_map in nbrs.items()
                for attr in edges_map.values()
            ]
            for u, nbrs in self._adj.items()
        }
