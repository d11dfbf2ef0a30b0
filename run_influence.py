#!/usr/bin/env python3
"""Entry point for computing a user's influence score in a social network.

Loads an edge list, prints the network, asks for a starting user (unless
one is given), computes shortest-path distances from that user, and prints
the distances and the influence score with timings.

Usage:
    python run_influence.py --edges data/network.edges
    python run_influence.py --edges data/network.edges --source 3
    python run_influence.py --config config.json --verbose
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable

from dacite import DaciteError

from src.config import DEFAULT_CONFIG, InfluenceConfig, config_from_json
from src.graph import EdgeListParseError, GraphError, build_graph, load_edge_list
from src.paths import ShortestPathEngine
from src.reporting import format_distances, format_network, format_score, timed

log = logging.getLogger(__name__)

SOURCE_PROMPT = "Enter the starting user ID for influence score calculation:"


def read_source(prompt: Callable[[str], str] = input) -> int:
    """Ask for the starting user id on stdin.

    Raises:
        ValueError: If the answer is not an integer.
    """
    print(SOURCE_PROMPT)
    answer = prompt("").strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"starting user id must be an integer, got {answer!r}") from None


def run_influence(
    config: InfluenceConfig,
    prompt: Callable[[str], str] = input,
) -> float:
    """Run the load -> shortest paths -> influence score pipeline.

    Args:
        config: Run configuration.
        prompt: Input function used when config.source is None.

    Returns:
        The influence score of the starting user.
    """
    edges_path = Path(config.loader.edges_path)
    edge_list = load_edge_list(edges_path, config.loader.weighted_keyword)

    print(f"Loading graph with {edge_list.total_nodes} users...")
    graph_type = "weighted" if edge_list.weighted else "unweighted"
    print(f"Graph type: {graph_type} influence score.")

    graph = build_graph(edge_list)
    if config.report.print_network:
        for line in format_network(graph):
            print(line)
    print(f"Total number of users in the network = {graph.total_nodes}")

    source = config.source if config.source is not None else read_source(prompt)
    log.info("Starting user: %d", source)

    engine = ShortestPathEngine(graph)

    with timed("shortest paths") as t_paths:
        table = engine.compute(source)
    print(f"Time taken to compute shortest paths: {t_paths.elapsed:.6f}s")

    print(f"Shortest distances from user {source}:")
    for line in format_distances(table, config.report.unreachable_label):
        print(line)

    with timed("influence score") as t_score:
        score = engine.influence_score(table)
    print(f"Time taken to calculate influence score: {t_score.elapsed:.6f}s")

    print()
    print(format_score(source, score, config.report.score_decimals))
    log.info(
        "User %d reaches %d of %d users, influence score %.6f",
        source,
        len(table.reachable()) - 1,
        graph.total_nodes - 1,
        score,
    )
    return score


def build_config(args: argparse.Namespace) -> InfluenceConfig:
    """Merge the optional JSON config file with command-line overrides."""
    config = DEFAULT_CONFIG
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())

    if args.edges is not None:
        config = replace(config, loader=replace(config.loader, edges_path=args.edges))
    if args.source is not None:
        config = replace(config, source=args.source)
    if args.no_print_network:
        config = replace(
            config, report=replace(config.report, print_network=False)
        )
    return config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compute shortest-path distances and the influence score of a user"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a run config JSON file",
    )
    parser.add_argument(
        "--edges",
        type=str,
        default=None,
        help=f"Edge-list file (default: {DEFAULT_CONFIG.loader.edges_path})",
    )
    parser.add_argument(
        "--source",
        type=int,
        default=None,
        help="Starting user id (prompted for when omitted)",
    )
    parser.add_argument(
        "--no-print-network",
        action="store_true",
        help="Skip printing the adjacency lists",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(args)
    except (ValueError, DaciteError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    edges_path = Path(config.loader.edges_path)
    if not edges_path.exists():
        print(f"File not found: {edges_path}")
        return

    try:
        run_influence(config)
    except (GraphError, EdgeListParseError, ValueError, OverflowError) as exc:
        log.debug("Run failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
