from __future__ import annotations

import math
from heapq import heappop, heappush
from itertools import count
from typing import Iterable, List, Optional, Set, Tuple

from shortpath.config import SOLVER_CONFIG
from shortpath.exceptions import NegativeWeightError
from shortpath.lib.algorithms.base import DistanceTable, PredMap
from shortpath.lib.graph import WEIGHT_ATTR, Cost, EdgeID, VertexID, WeightedDiGraph
from shortpath.logging import get_logger

logger = get_logger(__name__)


def spf(
    graph: WeightedDiGraph,
    src_node: VertexID,
    multipath: bool = True,
    excluded_nodes: Optional[Iterable[VertexID]] = None,
    dst_node: Optional[VertexID] = None,
    check_weights: Optional[bool] = None,
) -> Tuple[DistanceTable, PredMap]:
    """
    Compute shortest distances from a source vertex with Dijkstra's algorithm.

    The frontier is a binary heap without decrease-key: an improved distance
    pushes a new entry, and superseded entries are skipped when popped because
    their vertex is already finalized. Between parallel edges only the
    minimal-weight one(s) are considered.

    Args:
        graph: The directed graph.
        src_node: The source vertex. It does not have to be in the graph; an
            unknown source simply reaches nothing but itself.
        multipath: Record every equal-cost predecessor (and every parallel edge
            sharing the minimal weight). If False, a later equal-cost
            discovery does not replace the first one.
        excluded_nodes: Vertices to treat as absent. An excluded source is
            still reported at distance 0 but is not expanded.
        dst_node: If given, stop once this vertex is finalized.
        check_weights: Raise NegativeWeightError on negative or NaN weights.
            Defaults to ``SOLVER_CONFIG.check_weights``.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each finalized vertex to its minimal distance.
          - pred: For each finalized vertex, a dict of predecessor -> list of
            edge keys from that predecessor. The source maps to {}.

    Raises:
        NegativeWeightError: If weight checking is on and a bad weight is found.
    """
    if check_weights is None:
        check_weights = SOLVER_CONFIG.check_weights
    excluded: Set[VertexID] = set(excluded_nodes) if excluded_nodes else set()

    outgoing_adjacencies = graph._adj
    costs: DistanceTable = {src_node: 0}
    pred: PredMap = {src_node: {}}
    finalized: Set[VertexID] = set()

    # Entries are (cost, seq, vertex); seq keeps vertices out of comparisons
    seq = count()
    min_pq: List[Tuple[Cost, int, VertexID]] = [(0, next(seq), src_node)]
    pushed = 1
    stale = 0

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if node_id in finalized:
            stale += 1
            continue
        finalized.add(node_id)

        if node_id == dst_node:
            break
        if node_id in excluded:
            continue

        for neighbor_id, edges_map in outgoing_adjacencies.get(node_id, {}).items():
            # Validate every edge, including those into finalized or excluded vertices
            if check_weights:
                for e_id, e_attr in edges_map.items():
                    if not e_attr[WEIGHT_ATTR] >= 0:
                        raise NegativeWeightError(
                            f"Edge '{e_id}' from '{node_id}' to '{neighbor_id}' "
                            f"has invalid weight {e_attr[WEIGHT_ATTR]!r}."
                        )
            if neighbor_id in finalized or neighbor_id in excluded:
                continue

            min_edge_cost: Optional[Cost] = None
            selected_edges: List[EdgeID] = []

            # Gather the minimal weight edge(s)
            for e_id, e_attr in edges_map.items():
                edge_cost = e_attr[WEIGHT_ATTR]
                if min_edge_cost is None or edge_cost < min_edge_cost:
                    min_edge_cost = edge_cost
                    selected_edges = [e_id]
                elif multipath and edge_cost == min_edge_cost:
                    selected_edges.append(e_id)

            if min_edge_cost is None:
                continue

            new_cost = current_cost + min_edge_cost
            if math.isinf(new_cost):
                continue

            if (neighbor_id not in costs) or (new_cost < costs[neighbor_id]):
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = {node_id: selected_edges}
                heappush(min_pq, (new_cost, next(seq), neighbor_id))
                pushed += 1
            elif multipath and new_cost == costs[neighbor_id]:
                pred[neighbor_id][node_id] = selected_edges

    if min_pq:
        # Early exit: drop tentative entries that were never finalized
        costs = {v: c for v, c in costs.items() if v in finalized}
        pred = {v: p for v, p in pred.items() if v in finalized}

    logger.debug(
        "SPF from %r: %d finalized, %d pushed, %d stale",
        src_node,
        len(finalized),
        pushed,
        stale,
    )
    return costs, pred
