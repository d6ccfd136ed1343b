from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from shortpath.exceptions import InvalidWeightError
from shortpath.lib.graph import WEIGHT_ATTR, Cost, VertexID, WeightedDiGraph


def graph_to_node_link(graph: WeightedDiGraph) -> Dict[str, Any]:
    """
    Convert a WeightedDiGraph into a node-link dict (JSON friendly).

    The returned dict has the following structure:
        {
            "graph": { ... graph attributes ... },
            "nodes": [{"id": vertex, "attr": { ... }}, ...],
            "links": [
                {"source": <node index>, "target": <node index>,
                 "key": <edge key>, "attr": {"weight": ..., ...}},
                ...
            ]
        }

    Args:
        graph: The graph to convert.

    Returns:
        The node-link dict. Node indices follow vertex insertion order.
    """
    node_dict = graph.get_nodes()
    node_index = {node_id: i for i, node_id in enumerate(node_dict)}

    return {
        "graph": dict(graph.graph),
        "nodes": [
            {"id": node_id, "attr": dict(attr)} for node_id, attr in node_dict.items()
        ],
        "links": [
            {
                "source": node_index[src],
                "target": node_index[dst],
                "key": edge_key,
                "attr": dict(edge_attrs),
            }
            for src, dst, edge_key, edge_attrs in graph.edges(keys=True, data=True)
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> WeightedDiGraph:
    """
    Rebuild a WeightedDiGraph from the output of ``graph_to_node_link``.

    Args:
        data: Node-link dict. Missing "graph", "nodes" or "links" sections
            are treated as empty; a link without "key" gets a generated one.

    Returns:
        The reconstructed graph.

    Raises:
        InvalidWeightError: If a link carries an invalid weight.
    """
    graph = WeightedDiGraph(**data.get("graph", {}))

    index_to_node: Dict[int, VertexID] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        graph.add_node(node_obj["id"], **node_obj.get("attr", {}))
        index_to_node[idx] = node_obj["id"]

    for link in data.get("links", []):
        graph.add_edge(
            index_to_node[link["source"]],
            index_to_node[link["target"]],
            key=link.get("key"),
            **link.get("attr", {}),
        )

    return graph


def _parse_weight(token: str) -> Cost:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise InvalidWeightError(f"Edge weight '{token}' is not a number.") from None


def edgelist_to_graph(
    lines: Iterable[str],
    columns: List[str],
    separator: str = " ",
    graph: Optional[WeightedDiGraph] = None,
    source: str = "src",
    target: str = "dst",
    key: str = "key",
    weight: str = WEIGHT_ATTR,
) -> WeightedDiGraph:
    """
    Build or extend a WeightedDiGraph from an edge list.

    Each line is split by ``separator`` into tokens matched against
    ``columns``. The ``source`` and ``target`` tokens become vertices (as
    strings), the ``key`` token (if the column exists) becomes the edge key,
    and the ``weight`` token is parsed as an int or float. Any other column
    becomes a string edge attribute. Without a weight column every edge gets
    the configured default weight.

    Args:
        lines: Lines of text, one edge per line. Blank lines are skipped.
        columns: Column names, e.g. ["src", "dst", "weight"].
        separator: Token separator (default: a single space).
        graph: Existing graph to extend; a new one is created if None.
        source: Column name of the tail vertex.
        target: Column name of the head vertex.
        key: Column name of the edge key.
        weight: Column name of the edge weight.

    Returns:
        The updated (or newly created) graph.

    Raises:
        RuntimeError: If a line has the wrong number of tokens.
        InvalidWeightError: If a weight is not a non-negative number.
    """
    if graph is None:
        graph = WeightedDiGraph()

    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        tokens = line.split(separator)
        if len(tokens) != len(columns):
            raise RuntimeError(
                f"Line '{line}' does not match expected columns {columns} (token count mismatch)."
            )

        line_dict = dict(zip(columns, tokens))
        attr_dict: Dict[str, Any] = {
            k: v for k, v in line_dict.items() if k not in (source, target, key, weight)
        }
        if weight in line_dict:
            attr_dict[WEIGHT_ATTR] = _parse_weight(line_dict[weight])

        graph.add_edge(
            line_dict[source],
            line_dict[target],
            key=line_dict.get(key) or None,
            **attr_dict,
        )

    return graph


def graph_to_edgelist(
    graph: WeightedDiGraph,
    columns: Optional[List[str]] = None,
    separator: str = " ",
    source_col: str = "src",
    target_col: str = "dst",
    key_col: str = "key",
) -> List[str]:
    """
    Convert a WeightedDiGraph into edge-list lines.

    By default, the columns are [source_col, target_col, key_col] followed by
    the sorted edge attribute names (``weight`` among them). With an explicit
    ``columns`` list, absent values are written as empty strings.

    Args:
        graph: The graph to export.
        columns: Optional explicit column list.
        separator: Token separator (default: a single space).
        source_col: Column name for the tail vertex.
        target_col: Column name for the head vertex.
        key_col: Column name for the edge key.

    Returns:
        One line per edge, in the graph's edge iteration order.
    """
    rows: List[Dict[str, str]] = []
    attr_names = set()

    for src, dst, edge_key, edge_attrs in graph.edges(keys=True, data=True):
        row = {source_col: str(src), target_col: str(dst), key_col: str(edge_key)}
        for attr_key, attr_val in edge_attrs.items():
            row[attr_key] = str(attr_val)
            attr_names.add(attr_key)
        rows.append(row)

    if columns is None:
        columns = [source_col, target_col, key_col] + sorted(attr_names)

    return [separator.join(row.get(col, "") for col in columns) for row in rows]
