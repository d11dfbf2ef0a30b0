"""Single-source shortest paths (Dijkstra, lazy deletion) and influence score.

The priority queue holds ``(distance, node)`` tuples, so ties on distance
are broken by the lower node id. Improved distances push a new entry and
leave the old one in the heap; entries whose distance exceeds the recorded
distance are discarded when popped.
"""

import heapq
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from src.graph.network import Graph

log = logging.getLogger(__name__)

# Sentinel for unreachable nodes (int64 max).
UNREACHABLE = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class DistanceTable:
    """Shortest-path distances from one source node.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__.
    """

    source: int
    distances: np.ndarray  # int64 array of length total_nodes
    settled: tuple[int, ...]  # nodes in the order they were finalized

    def __len__(self) -> int:
        return len(self.distances)

    def __getitem__(self, v: int) -> int:
        return int(self.distances[v])

    def is_reachable(self, v: int) -> bool:
        return int(self.distances[v]) != UNREACHABLE

    def reachable(self) -> list[int]:
        """Node ids with a finite distance, ascending (source included)."""
        return np.flatnonzero(self.distances != UNREACHABLE).tolist()

    def to_list(self) -> list[int | None]:
        """Distances as Python ints, with None for unreachable nodes."""
        return [None if d == UNREACHABLE else d for d in self.distances.tolist()]


def compute_shortest_paths(graph: Graph, source: int) -> DistanceTable:
    """Compute shortest-path distances from source to every node.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start node.

    Returns:
        A new DistanceTable. Unreachable nodes hold UNREACHABLE.

    Raises:
        NodeOutOfRangeError: If source is not a valid node id.
        OverflowError: If a path length reaches the sentinel value.
    """
    graph.check_node(source)

    dist = [UNREACHABLE] * graph.total_nodes
    dist[source] = 0
    heap: list[tuple[int, int]] = [(0, source)]
    settled: list[int] = []
    pushes = 1
    stale = 0

    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            stale += 1
            continue
        settled.append(u)

        for v, w in graph.neighbors(u):
            candidate = d + w
            if candidate >= UNREACHABLE:
                raise OverflowError(
                    f"path length to node {v} exceeds the distance range"
                )
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
                pushes += 1

    log.debug(
        "Dijkstra from %d: settled=%d, pushes=%d, stale_pops=%d",
        source,
        len(settled),
        pushes,
        stale,
    )

    return DistanceTable(
        source=source,
        distances=np.array(dist, dtype=np.int64),
        settled=tuple(settled),
    )


def influence_score(
    distances: DistanceTable | Sequence[int | None] | np.ndarray,
) -> float:
    """Average inverse reachability of a source node.

    ``(total_nodes - 1) / S`` where S sums the finite, strictly positive
    distances. The numerator counts every other node in the graph, reached
    or not, while S only covers reached nodes. Returns 0.0 when nothing
    besides the source is reachable.

    Plain sequences may mark unreachable nodes with either UNREACHABLE or
    None, so ``DistanceTable.to_list()`` output is accepted too.
    """
    if isinstance(distances, DistanceTable):
        values = distances.distances
    elif isinstance(distances, np.ndarray):
        values = distances.astype(np.int64, copy=False)
    else:
        values = np.array(
            [UNREACHABLE if d is None else d for d in distances], dtype=np.int64
        )

    mask = (values > 0) & (values != UNREACHABLE)
    if not mask.any():
        return 0.0

    total = sum(int(d) for d in values[mask])
    return (len(values) - 1) / total


class ShortestPathEngine:
    """Shortest paths and influence scoring over one graph.

    The engine only reads the graph, so several engines (or several calls
    on one engine) can share a graph once it is fully loaded.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def compute(self, source: int) -> DistanceTable:
        return compute_shortest_paths(self.graph, source)

    def influence_score(self, distances: DistanceTable | Sequence[int | None]) -> float:
        return influence_score(distances)
