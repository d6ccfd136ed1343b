"""Graph, path and conversion building blocks used by the engine."""

from shortpath.lib.graph import WeightedDiGraph, check_weight
from shortpath.lib.io import (
    edgelist_to_graph,
    graph_to_edgelist,
    graph_to_node_link,
    node_link_to_graph,
)
from shortpath.lib.nx import from_networkx, to_networkx
from shortpath.lib.path import Path

__all__ = [
    "WeightedDiGraph",
    "check_weight",
    "Path",
    "edgelist_to_graph",
    "graph_to_edgelist",
    "graph_to_node_link",
    "node_link_to_graph",
    "from_networkx",
    "to_networkx",
]
