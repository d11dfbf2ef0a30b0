"""Edge-list data structures for the social network loader."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """A single undirected connection between two users.

    ``weight`` is None when the edge line carried no weight, or when the
    graph is unweighted and the weight token is ignored.
    """

    a: int
    b: int
    weight: int | None = None


@dataclass(frozen=True)
class EdgeList:
    """Parsed contents of an edge-list file.

    Holds the declared mode, the edges in file order, and the inferred node
    count (1 + max node id, or 0 for a file with no edges).
    """

    weighted: bool
    edges: tuple[Edge, ...]
    total_nodes: int
    skipped_lines: int = 0  # lines dropped for having the wrong token count
