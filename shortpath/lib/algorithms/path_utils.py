from __future__ import annotations

from itertools import product
from typing import Iterator, List, Tuple

from shortpath.lib.algorithms.base import PathElement, PathTuple, PredMap
from shortpath.lib.graph import VertexID


def resolve_to_paths(
    src_node: VertexID,
    dst_node: VertexID,
    pred: PredMap,
    split_parallel_edges: bool = False,
) -> Iterator[PathTuple]:
    """
    Enumerate all source->destination paths encoded in a predecessor map.

    The walk goes backwards from dst_node through ``pred`` with an explicit
    stack, so long paths do not hit the recursion limit. Predecessor cycles
    (possible with zero-weight edges) are skipped.

    Args:
        src_node: Source vertex.
        dst_node: Destination vertex.
        pred: Predecessor map as returned by ``spf``.
        split_parallel_edges: If True, yield one path per combination of
            parallel edges instead of grouping them in a single element.

    Yields:
        Tuples of (vertex, (edge_keys...)) from src_node to dst_node. The last
        element has an empty edge tuple.
    """
    if dst_node not in pred:
        return

    # Reversed partial path (dst first) and, per level, the predecessors left to try
    chain: List[PathElement] = [(dst_node, ())]
    on_chain = {dst_node}
    pending: List[Iterator[Tuple[VertexID, List]]] = [iter(pred[dst_node].items())]

    while pending:
        current_node = chain[-1][0]
        if current_node == src_node:
            path = tuple(reversed(chain))
            if split_parallel_edges:
                yield from _split_parallel(path)
            else:
                yield path
            # Backtrack: the source has nothing further to explore
            pending.pop()
            on_chain.discard(chain.pop()[0])
            continue

        step = next(pending[-1], None)
        if step is None:
            pending.pop()
            on_chain.discard(chain.pop()[0])
            continue

        prev_node, edge_list = step
        if prev_node in on_chain:
            continue
        chain.append((prev_node, tuple(edge_list)))
        on_chain.add(prev_node)
        pending.append(iter(pred.get(prev_node, {}).items()))


def _split_parallel(path: PathTuple) -> Iterator[PathTuple]:
    """Expand each group of parallel edges into single-edge paths."""
    choices = [elem[1] for elem in path[:-1]]
    for combo in product(*choices):
        yield tuple(
            (node, (combo[i],)) for i, (node, _) in enumerate(path[:-1])
        ) + (path[-1],)
