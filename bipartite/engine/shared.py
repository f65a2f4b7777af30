"""Bipartite graph over a single shared key space.

An alternate mode to ``BipartiteGraph``: one adjacency mapping keyed by node
value, plus two membership sets recording which values were added on the
A-side and which on the B-side. Queries such as ``adj_to`` and ``deg`` take a
node without naming its side.

Because both roles share one key space, a value added as an A-node and also
as a B-node is a single node with a single neighbor set. ``add(1, 1)`` makes
1 adjacent to itself. Use ``BipartiteGraph`` unless cross-role value reuse is
actually wanted.
"""

import logging
from collections.abc import Hashable
from typing import Any

from bipartite.engine.core import _check_hashable

logger = logging.getLogger("bipartite.engine.shared")


class SharedKeyGraph:
    """An undirected bipartite graph whose sides share one key space."""

    def __init__(self) -> None:
        self._adj: dict[Hashable, set[Hashable]] = {}
        self._as: set[Hashable] = set()
        self._bs: set[Hashable] = set()

    def copy(self) -> "SharedKeyGraph":
        """Return a graph deeply equal to this one that shares no storage with it."""
        new_graph = SharedKeyGraph.__new__(type(self))
        new_graph._adj = {node: set(neighbors) for node, neighbors in self._adj.items()}
        new_graph._as = set(self._as)
        new_graph._bs = set(self._bs)
        logger.debug("Copied shared-key graph with %d nodes", len(self._adj))
        return new_graph

    def __copy__(self) -> "SharedKeyGraph":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "SharedKeyGraph":
        new_graph = self.copy()
        memo[id(self)] = new_graph
        return new_graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharedKeyGraph):
            return NotImplemented
        return self._adj == other._adj and self._as == other._as and self._bs == other._bs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SharedKeyGraph(num_a={len(self._as)}, num_b={len(self._bs)})"

    def add(self, a: Any, b: Any) -> None:
        """Add a to the A-side and b to the B-side if not present, and record that they are adjacent."""
        _check_hashable(a, "A")
        _check_hashable(b, "B")
        self._as.add(a)
        self._bs.add(b)
        self._adj.setdefault(a, set()).add(b)
        self._adj.setdefault(b, set()).add(a)

    def adjacent(self, a: Any, b: Any) -> bool:
        """Report whether A-node a and b are adjacent."""
        if a not in self._as:
            return False
        return b in self._adj.get(a, ())

    def adj_to(self, node: Any) -> list[Any]:
        """Return an unordered list of the nodes adjacent to node, or [] if absent."""
        return list(self._adj.get(node, ()))

    def deg(self, node: Any) -> int:
        """Number of nodes adjacent to node. Equivalent to len(adj_to(node)), but O(1)."""
        neighbors = self._adj.get(node)
        return len(neighbors) if neighbors is not None else 0

    def a_nodes(self) -> list[Any]:
        return list(self._as)

    def b_nodes(self) -> list[Any]:
        return list(self._bs)

    def num_a(self) -> int:
        return len(self._as)

    def num_b(self) -> int:
        return len(self._bs)

    def delete(self, a: Any, b: Any) -> None:
        """Record that a and b are not adjacent.

        A value whose last edge is deleted leaves the graph, from both sides.
        """
        self._detach(a, b)
        self._detach(b, a)

    def _detach(self, node: Any, other: Any) -> None:
        neighbors = self._adj.get(node)
        if neighbors is None:
            return
        neighbors.discard(other)
        if not neighbors:
            del self._adj[node]
            self._as.discard(node)
            self._bs.discard(node)

    def remove(self, node: Any) -> None:
        """Delete all of node's edges and remove it from the graph.

        Works for a node on either side. No-op if node is absent.
        """
        neighbors = list(self._adj.get(node, ()))
        for other in neighbors:
            self.delete(node, other)
            self.delete(other, node)
        if neighbors:
            logger.debug("Removed node %r with %d edges", node, len(neighbors))
