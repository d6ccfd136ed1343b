import math
from decimal import Decimal
from fractions import Fraction

import pytest

from shortpath.config import SOLVER_CONFIG
from shortpath.exceptions import InvalidWeightError
from shortpath.lib.graph import WeightedDiGraph, check_weight


def test_init_empty_graph():
    g = WeightedDiGraph()
    assert len(g) == 0
    assert g.get_edges() == {}
    assert g.adjacency_list() == {}


def test_add_edge_creates_vertices():
    g = WeightedDiGraph()
    key = g.add_edge("A", "B", weight=3)
    assert "A" in g and "B" in g
    assert g.get_edges() == {key: ("A", "B", key, {"weight": 3})}


def test_generated_keys_are_graph_wide():
    """Keys keep counting across different vertex pairs."""
    g = WeightedDiGraph()
    keys = [g.add_edge("A", "B", weight=1), g.add_edge("B", "C", weight=1)]
    keys.append(g.add_edge("A", "B", weight=2))
    assert keys == [0, 1, 2]


def test_explicit_int_key_advances_counter():
    g = WeightedDiGraph()
    g.add_edge("A", "B", key=10, weight=1)
    assert g.add_edge("B", "C", weight=1) == 11


def test_duplicate_key_rejected():
    g = WeightedDiGraph()
    g.add_edge("A", "B", key="x", weight=1)
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("A", "B", key="x", weight=5)
    assert g["A"]["B"]["x"]["weight"] == 1


def test_parallel_edges_and_self_loops():
    g = WeightedDiGraph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("A", "B", weight=2)
    g.add_edge("A", "A", weight=0)
    assert g.edges_between("A", "B") == [0, 1]
    assert g.edges_between("A", "A") == [2]
    assert g.edges_between("B", "A") == []
    assert g.edges_between("Q", "A") == []


@pytest.mark.parametrize("weight", [-1, -0.5, float("nan"), "3", True, [1]])
def test_invalid_weight_rejected(weight):
    g = WeightedDiGraph()
    with pytest.raises(InvalidWeightError):
        g.add_edge("A", "B", weight=weight)
    # Nothing was added, not even the vertices
    assert len(g) == 0
    assert g.number_of_edges() == 0


@pytest.mark.parametrize(
    "weight", [Decimal("2.5"), Fraction(3, 4), Decimal("Infinity"), 0]
)
def test_ordered_number_weights_accepted(weight):
    assert check_weight(weight) is weight
    g = WeightedDiGraph()
    key = g.add_edge("A", "B", weight=weight)
    assert g.get_edge_weight(key) == weight


@pytest.mark.parametrize(
    "weight", [1 + 2j, complex(3, 0), Decimal("-1"), Decimal("NaN"), Decimal("sNaN")]
)
def test_complex_and_bad_decimal_rejected(weight):
    with pytest.raises(InvalidWeightError):
        check_weight(weight)


def test_default_weight(monkeypatch):
    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0)
    assert g.get_edge_weight(0) == SOLVER_CONFIG.default_weight

    monkeypatch.setattr(SOLVER_CONFIG, "default_weight", 7)
    g.add_edge("A", "B", key=1)
    assert g.get_edge_weight(1) == 7


def test_get_edge_weight_missing():
    g = WeightedDiGraph()
    with pytest.raises(ValueError, match="not found"):
        g.get_edge_weight(42)


def test_add_edges_from_validates():
    g = WeightedDiGraph()
    keys = g.add_edges_from([("A", "B", {"weight": 2}), ("B", "C"), ("C", "D", "k")])
    assert keys == [0, 1, "k"]
    assert g.get_edge_weight(1) == SOLVER_CONFIG.default_weight

    with pytest.raises(InvalidWeightError):
        g.add_edges_from([("X", "Y", {"weight": -2})])
    assert "X" not in g


def test_add_weighted_edges_from_validates():
    g = WeightedDiGraph()
    g.add_weighted_edges_from([("A", "B", 1.5)])
    assert g.adjacency_list() == {"A": [("B", 1.5)], "B": []}
    with pytest.raises(InvalidWeightError):
        g.add_weighted_edges_from([("A", "B", -1)])


def test_add_vertex():
    g = WeightedDiGraph()
    g.add_vertex("A", color="red")
    assert g.get_nodes() == {"A": {"color": "red"}}
    assert g.adjacency_list() == {"A": []}


def test_adjacency_list():
    g = WeightedDiGraph()
    g.add_edge(0, 1, weight=4)
    g.add_edge(0, 2, weight=6)
    g.add_edge(0, 1, weight=9)
    assert g.adjacency_list() == {0: [(1, 4), (1, 9), (2, 6)], 1: [], 2: []}


def test_copy_pickle_preserves_counter():
    g = WeightedDiGraph()
    g.add_edge("A", "B", weight=1)
    g2 = g.copy()
    assert g2.get_edges() == g.get_edges()
    assert g2.add_edge("B", "C", weight=1) == 1
    # Original untouched by edits to the copy
    assert "C" not in g


def test_copy_without_pickle():
    g = WeightedDiGraph()
    g.add_edge("A", "B", weight=2)
    g2 = g.copy(pickle=False)
    assert isinstance(g2, WeightedDiGraph)
    assert g2.get_edges() == g.get_edges()


def test_check_weight_accepts_valid():
    assert check_weight(0) == 0
    assert check_weight(2.5) == 2.5
    assert check_weight(math.inf) == math.inf
