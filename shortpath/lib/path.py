"""A shortest path as a value: vertex/edge sequence plus total weight."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, Set, Tuple

from shortpath.lib.algorithms.base import PathElement, PathTuple
from shortpath.lib.graph import WEIGHT_ATTR, Cost, EdgeID, VertexID, WeightedDiGraph


@dataclass
class Path:
    """
    A single path through a WeightedDiGraph.

    Attributes:
        path_tuple: Sequence of (vertex, (edge_keys...)) elements; the final
            element has an empty tuple.
        cost: Total weight of the path.
        edges: All edge keys used by the path.
        nodes: All vertices on the path.
        edge_tuples: All groups of parallel edges (including the final empty tuple).
    """

    path_tuple: PathTuple
    cost: Cost
    edges: Set[EdgeID] = field(init=False, default_factory=set, repr=False)
    nodes: Set[VertexID] = field(init=False, default_factory=set, repr=False)
    edge_tuples: Set[Tuple[EdgeID, ...]] = field(
        init=False, default_factory=set, repr=False
    )

    def __post_init__(self) -> None:
        for node, parallel_edges in self.path_tuple:
            self.nodes.add(node)
            self.edges.update(parallel_edges)
            self.edge_tuples.add(parallel_edges)

    def __getitem__(self, idx: int) -> PathElement:
        return self.path_tuple[idx]

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.path_tuple)

    def __len__(self) -> int:
        return len(self.path_tuple)

    @property
    def src_node(self) -> VertexID:
        """First vertex of the path."""
        return self.path_tuple[0][0]

    @property
    def dst_node(self) -> VertexID:
        """Last vertex of the path."""
        return self.path_tuple[-1][0]

    def __lt__(self, other: Any) -> bool:
        """Paths order by cost only."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (self.path_tuple == other.path_tuple) and (self.cost == other.cost)

    def __hash__(self) -> int:
        return hash((self.path_tuple, self.cost))

    def __repr__(self) -> str:
        return f"Path({self.path_tuple}, cost={self.cost})"

    @cached_property
    def nodes_seq(self) -> Tuple[VertexID, ...]:
        """Vertices in order from source to destination."""
        return tuple(node for node, _ in self.path_tuple)

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[EdgeID, ...], ...]:
        """Parallel-edge groups for every hop (empty for a single-vertex path)."""
        return tuple(parallel_edges for _, parallel_edges in self.path_tuple[:-1])

    def get_sub_path(self, dst_node: VertexID, graph: WeightedDiGraph) -> Path:
        """
        Cut the path at the first occurrence of dst_node.

        The cost is recomputed from the graph as the sum over hops of the
        minimal weight among each hop's parallel edges.

        Args:
            dst_node: Vertex to stop at.
            graph: Graph holding the edge weights.

        Returns:
            A new Path from the same source to dst_node.

        Raises:
            ValueError: If dst_node is not on this path.
        """
        new_elements = []
        new_cost: Cost = 0

        for idx, (node, parallel_edges) in enumerate(self.path_tuple):
            if node == dst_node:
                new_elements.append((node, ()))
                return Path(tuple(new_elements), new_cost)

            new_elements.append((node, parallel_edges))
            if parallel_edges:
                next_node = self.path_tuple[idx + 1][0]
                hop = graph[node][next_node]
                new_cost += min(hop[e_id][WEIGHT_ATTR] for e_id in parallel_edges)

        raise ValueError(f"Node '{dst_node}' not found in path.")
