"""Shortest-path computation and influence scoring."""

from src.paths.engine import (
    UNREACHABLE,
    DistanceTable,
    ShortestPathEngine,
    compute_shortest_paths,
    influence_score,
)

__all__ = [
    "UNREACHABLE",
    "DistanceTable",
    "ShortestPathEngine",
    "compute_shortest_paths",
    "influence_score",
]
