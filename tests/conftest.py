"""Shared fixtures for bipartite graph tests."""

import pytest

from bipartite import BipartiteGraph


@pytest.fixture()
def graph():
    """Fresh empty graph."""
    return BipartiteGraph()


@pytest.fixture()
def populated_graph():
    """Reference graph.

    A-nodes (3): "X", "Y", "Z"
    B-nodes (4): 0, 1, 2, 3

    Edges (6):
        X - 0
        Y - 0, Y - 1
        Z - 1, Z - 2, Z - 3
    """
    g = BipartiteGraph()
    for a, b in [("X", 0), ("Y", 0), ("Y", 1), ("Z", 1), ("Z", 2), ("Z", 3)]:
        g.add(a, b)
    return g
