import pytest

from shortpath.lib.graph import WeightedDiGraph


@pytest.fixture
def line1():
    # Weight:
    #      [1]      [1,1,2]
    #  A◄───────►B◄───────►C
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=1)
    g.add_edge("B", "A", key=1, weight=1)
    g.add_edge("B", "C", key=2, weight=1)
    g.add_edge("C", "B", key=3, weight=1)
    g.add_edge("B", "C", key=4, weight=1)
    g.add_edge("C", "B", key=5, weight=1)
    g.add_edge("B", "C", key=6, weight=2)
    g.add_edge("C", "B", key=7, weight=2)
    return g


@pytest.fixture
def square1():
    # Weight:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=1)
    g.add_edge("B", "C", key=1, weight=1)
    g.add_edge("A", "D", key=2, weight=2)
    g.add_edge("D", "C", key=3, weight=2)
    return g


@pytest.fixture
def square2():
    # Weight:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=1)
    g.add_edge("B", "C", key=1, weight=1)
    g.add_edge("A", "D", key=2, weight=1)
    g.add_edge("D", "C", key=3, weight=1)
    return g


@pytest.fixture
def diamond1():
    # Weight:
    #       [4]        [5]
    #   ┌────────►1─────────┐
    #   │                   │
    #   │                   ▼
    #   0                   3
    #   │                   ▲
    #   │   [6]        [2]  │
    #   └────────►2─────────┘
    #

    g = WeightedDiGraph()
    g.add_edge(0, 1, key=0, weight=4)
    g.add_edge(0, 2, key=1, weight=6)
    g.add_edge(1, 3, key=2, weight=5)
    g.add_edge(2, 3, key=3, weight=2)
    return g


@pytest.fixture
def graph3():
    # Weight:
    #      [1,1,1]       [1,1,1]       [1]
    #  A ─────────► B ─────────► C ─────────► F
    #  │                       ▲ │            │
    #  │ [1]          [1]      │ │ [2]   [1]  │
    #  └─────────► E ──────────┘ ▼            │
    #  A ───────────[4]──────────► D ◄────────┘
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=1)
    g.add_edge("A", "B", key=1, weight=1)
    g.add_edge("A", "B", key=2, weight=1)
    g.add_edge("B", "C", key=3, weight=1)
    g.add_edge("B", "C", key=4, weight=1)
    g.add_edge("B", "C", key=5, weight=1)
    g.add_edge("C", "D", key=6, weight=2)
    g.add_edge("A", "E", key=7, weight=1)
    g.add_edge("E", "C", key=8, weight=1)
    g.add_edge("A", "D", key=9, weight=4)
    g.add_edge("C", "F", key=10, weight=1)
    g.add_edge("F", "D", key=11, weight=1)
    return g


@pytest.fixture
def disconnected1():
    # Weight:
    #      [3]                 [1]
    #  A ───────► B        X ───────► Y
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=3)
    g.add_edge("X", "Y", key=1, weight=1)
    g.add_vertex("Z")
    return g


@pytest.fixture
def zero_cycle1():
    # Weight:
    #      [0]        [0]        [5]
    #  A ───────► B ◄──────► C ───────► D
    #

    g = WeightedDiGraph()
    g.add_edge("A", "B", key=0, weight=0)
    g.add_edge("B", "C", key=1, weight=0)
    g.add_edge("C", "B", key=2, weight=0)
    g.add_edge("C", "D", key=3, weight=5)
    return g
