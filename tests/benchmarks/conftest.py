"""Benchmark fixtures for bipartite graph performance tests."""

import random

import pytest

from bipartite import BipartiteGraph


def generate_random_graph(
    num_a: int,
    num_b: int,
    num_edges: int,
    seed: int = 42,
) -> BipartiteGraph:
    """Generate a random bipartite graph for benchmarking.

    A-nodes are strings ``"a_<i>"`` and B-nodes are integers. Duplicate
    draws collapse into one edge, so the result may hold fewer than
    ``num_edges`` edges.

    Args:
        num_a: Number of candidate A-nodes
        num_b: Number of candidate B-nodes
        num_edges: Number of edges to draw
        seed: Random seed for reproducibility

    Returns:
        BipartiteGraph with random data
    """
    rng = random.Random(seed)
    graph: BipartiteGraph[str, int] = BipartiteGraph()
    for _ in range(num_edges):
        graph.add(f"a_{rng.randrange(num_a)}", rng.randrange(num_b))
    return graph


@pytest.fixture
def graph_10k() -> BipartiteGraph:
    """10K A-nodes, 5K B-nodes, 50K edges - medium benchmark graph."""
    return generate_random_graph(num_a=10000, num_b=5000, num_edges=50000)


@pytest.fixture
def dense_graph_1k() -> BipartiteGraph:
    """1K A-nodes against 100 B-nodes - high B-side degree."""
    return generate_random_graph(num_a=1000, num_b=100, num_edges=50000)
