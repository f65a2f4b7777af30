"""Core bipartite graph data structure.

A minimal, in-memory bipartite adjacency container: two disjoint node sets
(the A-side and the B-side) with edges permitted only between them.

Storage:
    Adjacency is recorded in both directions, A -> set of B and B -> set of A,
    so lookups are O(1) from either side. The two mappings mirror each other
    exactly. A node is present if and only if it has at least one edge; a node
    whose last edge is deleted disappears from the graph.

    The A id-space and the B id-space are independent. ``g.add("1", "1")``
    creates two distinct nodes, one on each side.

Thread Safety:
    This module is NOT thread-safe and takes no locks. Callers mutating a
    graph from several threads must synchronize externally.
"""

import logging
from collections.abc import Hashable, Iterable
from typing import Any, Generic, TypeVar

from bipartite.models import GraphStats, ValidationResult

logger = logging.getLogger("bipartite.engine")

A = TypeVar("A", bound=Hashable)
B = TypeVar("B", bound=Hashable)


def _check_hashable(value: Any, side: str) -> None:
    try:
        hash(value)
    except TypeError:
        raise TypeError(f"{side}-node must be hashable, got: {type(value).__name__}") from None


class BipartiteGraph(Generic[A, B]):
    """An undirected bipartite graph.

    Nodes are arbitrary hashable values. Every edge joins one A-node to one
    B-node; there are no weights and no multi-edges.

    Example:
        g = BipartiteGraph()
        g.add("doc1", "word")
        g.add("doc2", "word")
        g.adj_to_b("word")   # ["doc1", "doc2"] in some order
        g.remove_a("doc1")
        g.deg_b("word")      # 1
    """

    def __init__(self, edges: Iterable[tuple[A, B]] | None = None) -> None:
        self._ab: dict[A, set[B]] = {}
        self._ba: dict[B, set[A]] = {}
        self._num_edges = 0
        if edges is not None:
            for a, b in edges:
                self.add(a, b)

    def copy(self) -> "BipartiteGraph[A, B]":
        """Return a graph deeply equal to this one that shares no storage with it."""
        new_graph: BipartiteGraph[A, B] = BipartiteGraph.__new__(type(self))
        new_graph._ab = {a: set(bs) for a, bs in self._ab.items()}
        new_graph._ba = {b: set(as_) for b, as_ in self._ba.items()}
        new_graph._num_edges = self._num_edges
        logger.debug(
            "Copied graph with %d A-nodes, %d B-nodes, %d edges",
            len(self._ab),
            len(self._ba),
            self._num_edges,
        )
        return new_graph

    def __copy__(self) -> "BipartiteGraph[A, B]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BipartiteGraph[A, B]":
        new_graph = self.copy()
        memo[id(self)] = new_graph
        return new_graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BipartiteGraph):
            return NotImplemented
        return self._ab == other._ab and self._ba == other._ba

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BipartiteGraph(num_a={len(self._ab)}, num_b={len(self._ba)}, "
            f"num_edges={self._num_edges})"
        )

    # ========== Mutation ==========

    def add(self, a: A, b: B) -> None:
        """Add a and b to the graph if not present, and record that they are adjacent.

        Adding an edge that already exists is a no-op.

        Raises:
            TypeError: If a or b is not hashable
        """
        _check_hashable(a, "A")
        _check_hashable(b, "B")
        neighbors = self._ab.setdefault(a, set())
        if b in neighbors:
            return
        neighbors.add(b)
        self._ba.setdefault(b, set()).add(a)
        self._num_edges += 1

    def delete(self, a: A, b: B) -> None:
        """Record that a and b are not adjacent.

        If either node loses its last edge, it is removed from the graph.
        Deleting an edge that does not exist, or whose nodes are absent,
        leaves the graph unchanged.
        """
        removed = False
        b_neighbors = self._ab.get(a)
        if b_neighbors is not None and b in b_neighbors:
            b_neighbors.discard(b)
            removed = True
            if not b_neighbors:
                del self._ab[a]
        a_neighbors = self._ba.get(b)
        if a_neighbors is not None and a in a_neighbors:
            a_neighbors.discard(a)
            if not a_neighbors:
                del self._ba[b]
        if removed:
            self._num_edges -= 1

    def remove_a(self, a: A) -> None:
        """Delete every edge of A-node a, removing a from the graph.

        B-nodes left without edges are removed as well. No-op if a is absent.
        """
        # Snapshot: delete() shrinks (and finally drops) the set being walked.
        neighbors = list(self._ab.get(a, ()))
        for b in neighbors:
            self.delete(a, b)
        if neighbors:
            logger.debug("Removed A-node %r with %d edges", a, len(neighbors))

    def remove_b(self, b: B) -> None:
        """Delete every edge of B-node b, removing b from the graph.

        A-nodes left without edges are removed as well. No-op if b is absent.
        """
        neighbors = list(self._ba.get(b, ()))
        for a in neighbors:
            self.delete(a, b)
        if neighbors:
            logger.debug("Removed B-node %r with %d edges", b, len(neighbors))

    # ========== Queries ==========

    def adjacent(self, a: A, b: B) -> bool:
        """Report whether a and b are adjacent."""
        neighbors = self._ab.get(a)
        return neighbors is not None and b in neighbors

    def adj_to_a(self, a: A) -> list[B]:
        """Return an unordered list of the B-nodes adjacent to a.

        Returns an empty list if a is not in the graph.
        """
        return list(self._ab.get(a, ()))

    def adj_to_b(self, b: B) -> list[A]:
        """Return an unordered list of the A-nodes adjacent to b.

        Returns an empty list if b is not in the graph.
        """
        return list(self._ba.get(b, ()))

    def deg_a(self, a: A) -> int:
        """Number of B-nodes adjacent to a. Equivalent to len(adj_to_a(a)), but O(1)."""
        neighbors = self._ab.get(a)
        return len(neighbors) if neighbors is not None else 0

    def deg_b(self, b: B) -> int:
        """Number of A-nodes adjacent to b. Equivalent to len(adj_to_b(b)), but O(1)."""
        neighbors = self._ba.get(b)
        return len(neighbors) if neighbors is not None else 0

    def a_nodes(self) -> list[A]:
        """All A-nodes, unordered."""
        return list(self._ab)

    def b_nodes(self) -> list[B]:
        """All B-nodes, unordered."""
        return list(self._ba)

    def num_a(self) -> int:
        """Number of A-nodes. Equivalent to len(a_nodes()), but O(1)."""
        return len(self._ab)

    def num_b(self) -> int:
        """Number of B-nodes. Equivalent to len(b_nodes()), but O(1)."""
        return len(self._ba)

    def has_a(self, a: A) -> bool:
        """Check if a is an A-node. Does not consult the B-side."""
        return a in self._ab

    def has_b(self, b: B) -> bool:
        """Check if b is a B-node. Does not consult the A-side."""
        return b in self._ba

    def edges(self) -> list[tuple[A, B]]:
        """All edges as (a, b) pairs, unordered."""
        return [(a, b) for a, bs in self._ab.items() for b in bs]

    def num_edges(self) -> int:
        return self._num_edges

    # ========== Statistics & Validation ==========

    def stats(self) -> GraphStats:
        """Get node and edge counts for both sides.

        Returns:
            A ``GraphStats`` with ``a_count``, ``b_count``, ``edge_count``,
            ``max_deg_a`` and ``max_deg_b`` fields.
        """
        return GraphStats(
            a_count=len(self._ab),
            b_count=len(self._ba),
            edge_count=self._num_edges,
            max_deg_a=max((len(bs) for bs in self._ab.values()), default=0),
            max_deg_b=max((len(as_) for as_ in self._ba.values()), default=0),
        )

    def validate(self) -> ValidationResult:
        """Check that the two adjacency directions mirror each other.

        Checks for:
        - Edges recorded from the A-side but missing from the B-side, and vice versa
        - Nodes kept in the graph with an empty neighbor set
        - Edge counter drift

        Returns:
            A ``ValidationResult`` with ``valid``, ``errors`` and ``warnings`` fields.
        """
        errors: list[str] = []

        for a, bs in self._ab.items():
            if not bs:
                errors.append(f"A-node {a!r} has no edges")
            for b in bs:
                if a not in self._ba.get(b, ()):
                    errors.append(f"Edge ({a!r}, {b!r}) missing from B-side index")

        ba_edges = 0
        for b, as_ in self._ba.items():
            if not as_:
                errors.append(f"B-node {b!r} has no edges")
            ba_edges += len(as_)
            for a in as_:
                if b not in self._ab.get(a, ()):
                    errors.append(f"Edge ({a!r}, {b!r}) missing from A-side index")

        ab_edges = sum(len(bs) for bs in self._ab.values())
        if ab_edges != self._num_edges or ba_edges != self._num_edges:
            errors.append(
                f"Edge count {self._num_edges} does not match stored edges "
                f"(A-side {ab_edges}, B-side {ba_edges})"
            )

        if errors:
            logger.warning("Graph validation found %d errors", len(errors))
        return ValidationResult(valid=not errors, errors=errors)
