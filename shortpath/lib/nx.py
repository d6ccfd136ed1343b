"""NetworkX graph conversion utilities.

Any NetworkX graph can be turned into a WeightedDiGraph for use with the
engine, and back into a plain NetworkX graph for drawing or for NetworkX's own
algorithms.

Example:
    >>> import networkx as nx
    >>> from shortpath.lib.nx import from_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=3)
    >>> graph = from_networkx(G)  # undirected: one edge per direction
    >>> sorted(graph.edges(data="weight"))
    [('A', 'B', 3), ('B', 'A', 3)]
"""

from __future__ import annotations

from typing import Optional, Union

import networkx as nx

from shortpath.config import SOLVER_CONFIG
from shortpath.lib.graph import WEIGHT_ATTR, Cost, WeightedDiGraph
from shortpath.logging import get_logger

logger = get_logger(__name__)

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = WEIGHT_ATTR,
    default_weight: Optional[Cost] = None,
    bidirectional: bool = False,
) -> WeightedDiGraph:
    """Convert a NetworkX graph to a WeightedDiGraph.

    Args:
        G: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight for edges without ``weight_attr``; falls back to
            ``SOLVER_CONFIG.default_weight``.
        bidirectional: Also add the reverse of every edge. Undirected inputs
            always get both directions.

    Returns:
        A new WeightedDiGraph. Node attributes are copied; edge attributes
        other than the weight are copied onto every edge created from them.

    Raises:
        TypeError: If G is not a NetworkX graph.
        InvalidWeightError: If any weight is negative or not a number.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}.")

    if default_weight is None:
        default_weight = SOLVER_CONFIG.default_weight
    both_ways = bidirectional or not G.is_directed()

    graph = WeightedDiGraph(**G.graph)
    graph.add_nodes_from(G.nodes(data=True))

    for u, v, data in G.edges(data=True):
        attr = {k: val for k, val in data.items() if k != weight_attr}
        weight = data.get(weight_attr, default_weight)
        graph.add_edge(u, v, **attr, weight=weight)
        if both_ways and u != v:
            graph.add_edge(v, u, **attr, weight=weight)

    logger.debug(
        "Converted %s with %d nodes into %d directed edges",
        type(G).__name__,
        G.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def to_networkx(graph: WeightedDiGraph, multigraph: bool = True) -> NxGraph:
    """Convert a WeightedDiGraph into a plain NetworkX graph.

    Args:
        graph: Source graph.
        multigraph: If True, return an ``nx.MultiDiGraph`` keeping every edge
            with its key. If False, return an ``nx.DiGraph`` where parallel
            edges collapse to the one with minimal weight.

    Returns:
        A new NetworkX graph with node, edge and graph attributes copied.
    """
    if multigraph:
        out: NxGraph = nx.MultiDiGraph(**graph.graph)
        out.add_nodes_from(graph.nodes(data=True))
        out.add_edges_from(
            (u, v, key, dict(data))
            for u, v, key, data in graph.edges(keys=True, data=True)
        )
        return out

    out = nx.DiGraph(**graph.graph)
    out.add_nodes_from(graph.nodes(data=True))
    for u, v, data in graph.edges(data=True):
        if out.has_edge(u, v):
            if out[u][v][WEIGHT_ATTR] <= data[WEIGHT_ATTR]:
                continue
            out.remove_edge(u, v)
        out.add_edge(u, v, **data)
    return out
