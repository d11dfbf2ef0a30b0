"""Undirected adjacency-list graph of users with optional edge weights.

Each node owns a list of ``(neighbor, weight)`` links in insertion order.
Inserting an edge appends a link on both endpoints, so parallel edges and
self-loops simply add more links. The structure is sized at construction
and append-only.
"""

import logging
import numbers
from collections.abc import Iterator

import numpy as np
import scipy.sparse

log = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1


class GraphError(Exception):
    """Base class for graph contract violations."""


class NodeOutOfRangeError(GraphError, IndexError):
    """Raised when a node id falls outside ``[0, total_nodes)``."""


class MissingWeightError(GraphError, ValueError):
    """Raised when an edge is added to a weighted graph without a weight."""


class NegativeWeightError(GraphError, ValueError):
    """Raised when an edge weight is negative."""


class InvalidWeightError(GraphError, TypeError):
    """Raised when an edge weight is not an integer."""


class Graph:
    """Fixed-size undirected graph backed by per-node adjacency lists.

    Args:
        total_nodes: Number of nodes; valid ids are ``0 .. total_nodes - 1``.
        weighted: If False, every edge gets weight 1 and supplied weights
            are ignored. If True, every insertion must carry a weight.
    """

    def __init__(self, total_nodes: int, weighted: bool) -> None:
        if total_nodes < 0:
            raise ValueError(f"total_nodes must be >= 0, got {total_nodes}")
        self._adjacency: list[list[tuple[int, int]]] = [
            [] for _ in range(total_nodes)
        ]
        self._weighted = weighted
        self._num_edges = 0

    @property
    def total_nodes(self) -> int:
        return len(self._adjacency)

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def num_edges(self) -> int:
        """Number of undirected edges inserted so far."""
        return self._num_edges

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        mode = "weighted" if self._weighted else "unweighted"
        return f"Graph(total_nodes={self.total_nodes}, edges={self._num_edges}, {mode})"

    def check_node(self, v: int) -> None:
        """Raise NodeOutOfRangeError unless v is a valid node id."""
        if not 0 <= v < len(self._adjacency):
            raise NodeOutOfRangeError(
                f"node {v} out of range for graph with "
                f"{len(self._adjacency)} nodes"
            )

    def add_edge(self, a: int, b: int, weight: int | None = None) -> None:
        """Insert the undirected edge (a, b).

        Args:
            a: First endpoint.
            b: Second endpoint.
            weight: Integer edge cost. Required for weighted graphs, ignored
                for unweighted ones. Zero is accepted: shortest paths stay
                correct, and zero-distance nodes drop out of the score.

        Raises:
            NodeOutOfRangeError: If either endpoint is out of range.
            MissingWeightError: If the graph is weighted and weight is None.
            InvalidWeightError: If the graph is weighted and weight is not
                an integer (bools and floats included).
            NegativeWeightError: If the graph is weighted and weight < 0.
        """
        self.check_node(a)
        self.check_node(b)

        if self._weighted:
            if weight is None:
                raise MissingWeightError(
                    f"edge ({a}, {b}) needs a weight in a weighted graph"
                )
            if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
                raise InvalidWeightError(
                    f"edge ({a}, {b}) weight must be an integer, got {weight!r}"
                )
            if weight < 0:
                raise NegativeWeightError(
                    f"edge ({a}, {b}) has negative weight {weight}"
                )
            w = int(weight)
        else:
            w = DEFAULT_WEIGHT

        self._adjacency[a].append((b, w))
        self._adjacency[b].append((a, w))
        self._num_edges += 1

    def neighbors(self, v: int) -> Iterator[tuple[int, int]]:
        """Return an iterator over ``(neighbor, weight)`` links of v.

        The range check runs immediately; the links are yielded lazily in
        insertion order.
        """
        self.check_node(v)
        return iter(self._adjacency[v])

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Export as a symmetric sparse matrix of edge weights.

        Parallel links collapse to their lightest weight, which is the only
        one a shortest path can use.
        """
        n = len(self._adjacency)
        lightest: dict[tuple[int, int], int] = {}
        for u, links in enumerate(self._adjacency):
            for v, w in links:
                key = (u, v)
                if key not in lightest or w < lightest[key]:
                    lightest[key] = w

        if not lightest:
            return scipy.sparse.csr_matrix((n, n), dtype=np.int64)

        rows = np.fromiter((u for u, _ in lightest), dtype=np.int64, count=len(lightest))
        cols = np.fromiter((v for _, v in lightest), dtype=np.int64, count=len(lightest))
        data = np.fromiter(lightest.values(), dtype=np.int64, count=len(lightest))
        log.debug("Exporting graph to CSR: n=%d, nnz=%d", n, len(lightest))
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))
