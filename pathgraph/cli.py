"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import json
import math
import sys
from time import perf_counter
from typing import Any, Dict, List, Optional

from pathgraph.lib.algorithms.base import PathAlg
from pathgraph.lib.algorithms.bellman_ford import bellman_ford
from pathgraph.lib.algorithms.floyd_warshall import floyd_warshall
from pathgraph.lib.algorithms.markov import most_probable_paths, validate_markov
from pathgraph.lib.algorithms.spf import dijkstra
from pathgraph.lib.algorithms.types import AllPairsShortestPaths, ShortestPaths
from pathgraph.lib.graph import GraphList, GraphMatrix
from pathgraph.logging import get_logger, level_from_flags, set_global_log_level

logger = get_logger(__name__)

_COMMANDS = {
    "dijkstra": PathAlg.DIJKSTRA,
    "markov": PathAlg.MARKOV,
    "bellman-ford": PathAlg.BELLMAN_FORD,
    "floyd-warshall": PathAlg.FLOYD_WARSHALL,
}


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: float) -> str:
    """Return a distance formatted with up to three decimals; ``inf`` as ``inf``.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    s = f"{value:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_path(path: List[int]) -> str:
    return " -> ".join(str(v) for v in path) if path else "-"


def _json_number(value: float) -> Optional[float]:
    return None if math.isinf(value) else value


def _single_source_rows(result: ShortestPaths, probability: bool) -> List[List[str]]:
    rows = []
    for v in range(len(result)):
        value = result.distances[v]
        shown = f"{value:.6g}" if probability else _format_cost(value)
        rows.append([str(v), shown, _format_path(result.path_to(v))])
    return rows


def _single_source_dict(alg: PathAlg, result: ShortestPaths) -> Dict[str, Any]:
    paths = {}
    if not result.neg_weight_cycle:
        paths = {str(v): result.path_to(v) for v in range(len(result))}
    return {
        "algorithm": alg.label,
        "source": result.source,
        "neg_weight_cycle": result.neg_weight_cycle,
        "distances": [_json_number(d) for d in result.distances],
        "predecessors": list(result.predecessors),
        "paths": paths,
    }


def _all_pairs_dict(result: AllPairsShortestPaths) -> Dict[str, Any]:
    n = len(result)
    return {
        "algorithm": PathAlg.FLOYD_WARSHALL.label,
        "neg_weight_cycle": result.neg_weight_cycle,
        "distances": [
            [_json_number(result.distance(v, w)) for w in range(n)] for v in range(n)
        ],
        "predecessors": [
            [result.predecessor(v, w) for w in range(n)] for v in range(n)
        ],
    }


def _print_single_source(alg: PathAlg, result: ShortestPaths) -> None:
    print(f"{alg.label} from vertex {result.source}:")
    if result.neg_weight_cycle:
        print("Graph contains a negative weight cycle. No shortest paths printed.")
        return
    probability = alg is PathAlg.MARKOV
    header = "probability" if probability else "distance"
    print(
        _format_table(
            ["vertex", header, "path"], _single_source_rows(result, probability)
        )
    )


def _print_all_pairs(result: AllPairsShortestPaths) -> None:
    n = len(result)
    print(f"{PathAlg.FLOYD_WARSHALL.label} distance matrix:")
    headers = ["src\\dst"] + [str(w) for w in range(n)]
    rows = [
        [str(v)] + [_format_cost(result.distance(v, w)) for w in range(n)]
        for v in range(n)
    ]
    print(_format_table(headers, rows, min_width=4))
    if result.neg_weight_cycle:
        print("Graph contains a negative weight cycle. No shortest paths printed.")
        return
    print()
    rows = [
        [
            str(v),
            str(w),
            _format_cost(result.distance(v, w)),
            _format_path(result.path(v, w)),
        ]
        for v in range(n)
        for w in range(n)
    ]
    print(_format_table(["src", "dst", "distance", "path"], rows))


def _run(
    alg: PathAlg,
    vertices: int,
    adjacencies: str,
    directed: bool,
    start: int,
    as_json: bool,
) -> None:
    """Build the graph, run one algorithm and print its result table."""
    _start_time = perf_counter()
    try:
        if alg in (PathAlg.DIJKSTRA, PathAlg.MARKOV):
            graph = GraphList.from_adjacencies(vertices, adjacencies, directed)
        else:
            graph = GraphMatrix.from_adjacencies(vertices, adjacencies, directed)
        logger.info(f"Loaded {graph!r}")

        if alg is PathAlg.FLOYD_WARSHALL:
            all_pairs = floyd_warshall(graph)
            if as_json:
                print(json.dumps(_all_pairs_dict(all_pairs), indent=2))
            else:
                _print_all_pairs(all_pairs)
        else:
            if alg is PathAlg.DIJKSTRA:
                result = dijkstra(graph, start)
            elif alg is PathAlg.MARKOV:
                validate_markov(graph)
                result = most_probable_paths(graph, start)
            else:
                result = bellman_ford(graph, start)
            if as_json:
                print(json.dumps(_single_source_dict(alg, result), indent=2))
            else:
                _print_single_source(alg, result)

        _elapsed = perf_counter() - _start_time
        logger.info(f"{alg.label} completed in {_elapsed * 1000.0:.1f} ms")
    except Exception as e:
        logger.error(f"Failed to run {alg.label}: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to run {alg.label}: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Compute shortest or most-probable paths on a weighted graph.",
        epilog=(
            'Example: pathgraph dijkstra -n 8 -a "0:1/1.0,2/2.0 1:2/1.5 2:3/1.0 '
            '3:5/8.1,6/5.1 5:7/0.7,4/9.1" -s 3'
        ),
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{" + ",".join(_COMMANDS) + "}",
        help="Available commands",
    )

    for name, alg in _COMMANDS.items():
        p = subparsers.add_parser(name, help=f"Run {alg.label}")
        p.add_argument(
            "--vertices",
            "-n",
            type=int,
            required=True,
            help="Number of vertices",
        )
        p.add_argument(
            "--adjacencies",
            "-a",
            required=True,
            help='Adjacency lists, e.g. "0:1/1.0,2/2.0 1:2/1.5"',
        )
        if alg is not PathAlg.MARKOV:
            p.add_argument(
                "--directed",
                "-d",
                action="store_true",
                help="Treat the graph as directed (default: undirected)",
            )
        if alg is not PathAlg.FLOYD_WARSHALL:
            p.add_argument(
                "--start",
                "-s",
                type=int,
                default=0,
                help="Source vertex (default: 0)",
            )
        p.add_argument(
            "--json",
            action="store_true",
            help="Print the result table as JSON",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    alg = _COMMANDS[args.command]
    _run(
        alg,
        vertices=args.vertices,
        adjacencies=args.adjacencies,
        # Markov chains are directed by definition
        directed=getattr(args, "directed", alg is PathAlg.MARKOV),
        start=getattr(args, "start", 0),
        as_json=args.json,
    )


if __name__ == "__main__":
    main()
