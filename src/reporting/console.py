"""Plain-text rendering of the network, distance table, and influence score."""

from src.graph.network import Graph
from src.paths.engine import DistanceTable


def format_network(graph: Graph) -> list[str]:
    """One line per user listing its links in insertion order.

    Example: ``User[0] -> 1(1) -> 2(5) -> Null``
    """
    lines: list[str] = []
    for user in range(graph.total_nodes):
        links = "".join(f"{v}({w}) -> " for v, w in graph.neighbors(user))
        lines.append(f"User[{user}] -> {links}Null")
    return lines


def format_distances(
    table: DistanceTable, unreachable_label: str = "Unreachable"
) -> list[str]:
    """One ``User i -> Distance: d`` line per node."""
    return [
        f"User {user} -> Distance: "
        f"{unreachable_label if d is None else d}"
        for user, d in enumerate(table.to_list())
    ]


def format_score(source: int, score: float, decimals: int = 2) -> str:
    return f"Influence score for user {source} = {score:.{decimals}f}"
