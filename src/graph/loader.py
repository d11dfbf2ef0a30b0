"""Edge-list parser and graph builder.

File format:
- line 1: whitespace-separated metadata tokens. The graph is weighted when
  there are exactly three tokens and the third matches the weighted keyword
  (case-insensitive).
- every later line: ``a b`` or ``a b weight``. Blank lines are skipped, and
  so are lines with any other token count.

The node count is inferred as ``1 + max(node id)``.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.graph.network import DEFAULT_WEIGHT, Graph
from src.graph.types import Edge, EdgeList

log = logging.getLogger(__name__)


class EdgeListParseError(ValueError):
    """Raised when an edge-list file cannot be parsed."""


def _is_weighted_header(header: str, weighted_keyword: str) -> bool:
    parts = header.split()
    return len(parts) == 3 and parts[2].casefold() == weighted_keyword.casefold()


def _parse_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise EdgeListParseError(
            f"line {line_no}: expected an integer, got {token!r}"
        ) from None


def parse_edge_list(
    lines: Iterable[str], weighted_keyword: str = "weighted"
) -> EdgeList:
    """Parse edge-list text into an EdgeList.

    Args:
        lines: Lines of the file, header first. Trailing newlines are fine.
        weighted_keyword: Third header token that marks a weighted graph.

    Returns:
        The parsed EdgeList.

    Raises:
        EdgeListParseError: If there is no header line or a node id or
            weight is not an integer.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise EdgeListParseError("edge list is empty (missing header line)") from None

    weighted = _is_weighted_header(header, weighted_keyword)

    edges: list[Edge] = []
    max_id = -1
    skipped = 0
    for line_no, line in enumerate(it, start=2):
        parts = line.split()
        if not parts:
            continue
        if len(parts) not in (2, 3):
            skipped += 1
            log.debug("Skipping malformed line %d: %r", line_no, line.rstrip("\n"))
            continue

        a = _parse_int(parts[0], line_no)
        b = _parse_int(parts[1], line_no)
        weight = None
        if len(parts) == 3 and weighted:
            weight = _parse_int(parts[2], line_no)

        max_id = max(max_id, a, b)
        edges.append(Edge(a, b, weight))

    if skipped:
        log.warning("Skipped %d malformed edge line(s)", skipped)

    return EdgeList(
        weighted=weighted,
        edges=tuple(edges),
        total_nodes=max_id + 1,
        skipped_lines=skipped,
    )


def load_edge_list(
    path: Path | str, weighted_keyword: str = "weighted"
) -> EdgeList:
    """Read and parse an edge-list file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        EdgeListParseError: If the contents cannot be parsed.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        edge_list = parse_edge_list(f, weighted_keyword)
    log.info(
        "Loaded %s: %d edges, %d nodes, %s",
        path,
        len(edge_list.edges),
        edge_list.total_nodes,
        "weighted" if edge_list.weighted else "unweighted",
    )
    return edge_list


def build_graph(edge_list: EdgeList) -> Graph:
    """Build a Graph from a parsed EdgeList.

    In a weighted list, edges whose line had no weight get weight 1.
    """
    graph = Graph(edge_list.total_nodes, edge_list.weighted)
    for edge in edge_list.edges:
        weight = edge.weight if edge.weight is not None else DEFAULT_WEIGHT
        graph.add_edge(edge.a, edge.b, weight)
    log.info("Built %r", graph)
    return graph
