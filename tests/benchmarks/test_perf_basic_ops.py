"""Performance benchmarks for basic bipartite graph operations."""

import time

import pytest

pytestmark = pytest.mark.benchmark


class TestMutationPerformance:
    """Benchmarks for add and delete."""

    def test_add_performance(self, graph_10k):
        """Adding an edge should be O(1)."""
        start = time.perf_counter()
        for i in range(10000):
            graph_10k.add(f"new_{i}", i % 5000)
        elapsed = time.perf_counter() - start

        # 10K adds should take < 100ms (10us per add)
        assert elapsed < 0.1, f"Adding 10K edges took {elapsed:.3f}s"

    def test_delete_performance(self, graph_10k):
        """Deleting an edge should be O(1)."""
        edges = graph_10k.edges()[:10000]
        start = time.perf_counter()
        for a, b in edges:
            graph_10k.delete(a, b)
        elapsed = time.perf_counter() - start

        assert elapsed < 0.1, f"Deleting 10K edges took {elapsed:.3f}s"
        assert graph_10k.validate().valid

    def test_remove_b_high_degree(self, dense_graph_1k):
        """remove_b on a high-degree node is linear in its degree."""
        start = time.perf_counter()
        for b in range(100):
            dense_graph_1k.remove_b(b)
        elapsed = time.perf_counter() - start

        assert elapsed < 0.5, f"Removing 100 dense B-nodes took {elapsed:.3f}s"
        assert dense_graph_1k.num_a() == 0
        assert dense_graph_1k.num_edges() == 0


class TestQueryPerformance:
    """Benchmarks for O(1) queries."""

    def test_adjacent_performance(self, graph_10k):
        start = time.perf_counter()
        for i in range(10000):
            _ = graph_10k.adjacent(f"a_{i}", i % 5000)
        elapsed = time.perf_counter() - start

        # 10K lookups should take < 50ms (5us per lookup)
        assert elapsed < 0.05, f"10K adjacency checks took {elapsed:.3f}s"

    def test_degree_performance(self, graph_10k):
        """Degree must come from the stored set size, not a materialized list."""
        start = time.perf_counter()
        for i in range(10000):
            _ = graph_10k.deg_a(f"a_{i}")
            _ = graph_10k.deg_b(i % 5000)
        elapsed = time.perf_counter() - start

        assert elapsed < 0.1, f"20K degree checks took {elapsed:.3f}s"

    def test_copy_performance(self, graph_10k):
        start = time.perf_counter()
        c = graph_10k.copy()
        elapsed = time.perf_counter() - start

        assert c == graph_10k
        assert elapsed < 0.5, f"Copying a 50K-edge graph took {elapsed:.3f}s"
