"""Social network graph: adjacency structure, errors, and edge-list loading."""

from src.graph.loader import (
    EdgeListParseError,
    build_graph,
    load_edge_list,
    parse_edge_list,
)
from src.graph.network import (
    DEFAULT_WEIGHT,
    Graph,
    GraphError,
    InvalidWeightError,
    MissingWeightError,
    NegativeWeightError,
    NodeOutOfRangeError,
)
from src.graph.types import Edge, EdgeList

__all__ = [
    "DEFAULT_WEIGHT",
    "Edge",
    "EdgeList",
    "EdgeListParseError",
    "Graph",
    "GraphError",
    "InvalidWeightError",
    "MissingWeightError",
    "NegativeWeightError",
    "NodeOutOfRangeError",
    "build_graph",
    "load_edge_list",
    "parse_edge_list",
]
