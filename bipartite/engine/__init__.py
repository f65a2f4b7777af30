from bipartite.engine.core import BipartiteGraph
from bipartite.engine.shared import SharedKeyGraph

__all__ = [
    "BipartiteGraph",
    "SharedKeyGraph",
]
