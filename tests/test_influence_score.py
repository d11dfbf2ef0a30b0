"""Tests for the influence score aggregation."""

import numpy as np
import pytest

from src.graph import Graph
from src.paths import UNREACHABLE, ShortestPathEngine, compute_shortest_paths, influence_score


def _line_graph(n: int) -> Graph:
    graph = Graph(n, weighted=False)
    for v in range(n - 1):
        graph.add_edge(v, v + 1)
    return graph


class TestInfluenceScore:
    """Score formula and its edge cases."""

    def test_unweighted_path(self) -> None:
        table = compute_shortest_paths(_line_graph(3), 0)
        # (3 - 1) / (1 + 2)
        assert influence_score(table) == pytest.approx(2 / 3)

    def test_weighted_detour(self) -> None:
        graph = Graph(3, weighted=True)
        graph.add_edge(0, 1, 5)
        graph.add_edge(0, 2, 2)
        graph.add_edge(2, 1, 1)
        table = compute_shortest_paths(graph, 0)
        # (3 - 1) / (3 + 2)
        assert influence_score(table) == pytest.approx(0.4)

    def test_isolated_source_scores_zero(self) -> None:
        table = compute_shortest_paths(Graph(1, weighted=False), 0)
        assert influence_score(table) == 0.0

    def test_source_with_no_reachable_neighbors_in_larger_graph(self) -> None:
        graph = Graph(4, weighted=False)
        graph.add_edge(1, 2)
        graph.add_edge(2, 3)
        table = compute_shortest_paths(graph, 0)
        assert influence_score(table) == 0.0

    def test_only_zero_distance_neighbors_scores_zero(self) -> None:
        graph = Graph(2, weighted=True)
        graph.add_edge(0, 1, 0)
        table = compute_shortest_paths(graph, 0)
        assert influence_score(table) == 0.0

    def test_accepts_plain_sequences(self) -> None:
        assert influence_score([0, 1, 2]) == pytest.approx(2 / 3)
        assert influence_score(np.array([0, 3, 2])) == pytest.approx(0.4)
        assert influence_score([0, UNREACHABLE, UNREACHABLE]) == 0.0

    def test_accepts_none_tagged_list(self) -> None:
        graph = Graph(4, weighted=False)
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        table = compute_shortest_paths(graph, 0)
        assert table.to_list() == [0, 1, 2, None]
        assert influence_score(table.to_list()) == influence_score(table)
        assert influence_score(table.to_list()) == pytest.approx(1.0)
        assert influence_score([0, None, None]) == 0.0

    def test_large_distances_do_not_overflow(self) -> None:
        big = 2**62
        score = influence_score([0, big, big, big])
        assert score == pytest.approx(3 / (3 * big))


class TestDisconnectedScoring:
    """Unreachable nodes are excluded from the sum but not from the node count.

    The numerator counts every other node in the graph while the denominator
    only sums distances to reached nodes. This asymmetry is the documented
    behavior: sparse reachability is not renormalized.
    """

    def test_unreachable_excluded_from_sum(self) -> None:
        graph = _line_graph(3)
        graph_with_island = Graph(4, weighted=False)
        graph_with_island.add_edge(0, 1)
        graph_with_island.add_edge(1, 2)

        table = compute_shortest_paths(graph_with_island, 0)
        assert table.to_list() == [0, 1, 2, None]
        # Sum covers {1, 2} only: (4 - 1) / 3
        assert influence_score(table) == pytest.approx(1.0)

        # Adding the island raises the score relative to the connected graph
        connected = influence_score(compute_shortest_paths(graph, 0))
        assert influence_score(table) > connected

    def test_numerator_uses_total_node_count(self) -> None:
        distances = [0, 2, UNREACHABLE, UNREACHABLE, UNREACHABLE]
        # Not 1 / 2: the numerator is total_nodes - 1 = 4
        assert influence_score(distances) == pytest.approx(4 / 2)

    def test_source_excluded(self) -> None:
        assert influence_score([5, 0, 5]) == pytest.approx(2 / 10)


class TestEngineScore:
    """Scoring through ShortestPathEngine."""

    def test_engine_influence_score(self) -> None:
        engine = ShortestPathEngine(_line_graph(4))
        table = engine.compute(0)
        # (4 - 1) / (1 + 2 + 3)
        assert engine.influence_score(table) == pytest.approx(0.5)

    def test_score_is_pure(self) -> None:
        engine = ShortestPathEngine(_line_graph(4))
        table = engine.compute(1)
        before = table.distances.copy()
        s1 = engine.influence_score(table)
        s2 = engine.influence_score(table)
        assert s1 == s2
        assert np.array_equal(table.distances, before)
