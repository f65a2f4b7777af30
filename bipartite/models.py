"""Pydantic models for bipartite graph reports.

Returned by ``BipartiteGraph.stats()`` and ``BipartiteGraph.validate()``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphStats(BaseModel):
    """Summary counts for a bipartite graph.

    Reports node counts per side, the edge count, and the largest degree
    found on each side (0 for an empty side).
    """

    a_count: int = Field(ge=0)
    b_count: int = Field(ge=0)
    edge_count: int = Field(ge=0)
    max_deg_a: int = Field(default=0, ge=0)
    max_deg_b: int = Field(default=0, ge=0)


class ValidationResult(BaseModel):
    """Result of a graph consistency check.

    Contains a pass/fail flag, a list of errors, and a list of warnings
    found during validation.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
