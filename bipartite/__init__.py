"""bipartite: an in-memory bipartite graph container for Python."""

__version__ = "0.1.0"

from bipartite.engine import BipartiteGraph, SharedKeyGraph
from bipartite.models import GraphStats, ValidationResult

__all__ = [
    "BipartiteGraph",
    "GraphStats",
    "SharedKeyGraph",
    "ValidationResult",
    "__version__",
]
