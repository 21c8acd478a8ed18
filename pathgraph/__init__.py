"""pathgraph: shortest and most-probable paths over weighted graphs.

Primary API:
    GraphList, GraphMatrix - immutable graph containers
    IndexedMinHeap - vertex-indexed binary min-heap
    dijkstra() - single-source shortest paths, non-negative weights
    most_probable_paths() - maximum-probability paths in a Markov chain
    bellman_ford() - single-source shortest paths with negative-cycle detection
    floyd_warshall() - all-pairs shortest paths

Example:
    from pathgraph import GraphList, dijkstra

    graph = GraphList(4, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0), (2, 3, 1.0)])
    result = dijkstra(graph, 0)
    result.distances    # (0.0, 1.0, 3.0, 4.0)
    result.path_to(3)   # [0, 1, 2, 3]
"""

from __future__ import annotations

from pathgraph.lib.algorithms.bellman_ford import bellman_ford
from pathgraph.lib.algorithms.floyd_warshall import floyd_warshall
from pathgraph.lib.algorithms.markov import (
    check_markov,
    most_probable_paths,
    validate_markov,
)
from pathgraph.lib.algorithms.path_utils import resolve_path
from pathgraph.lib.algorithms.spf import dijkstra
from pathgraph.lib.algorithms.types import AllPairsShortestPaths, ShortestPaths
from pathgraph.lib.graph import Edge, Graph, GraphList, GraphMatrix
from pathgraph.lib.heap import HeapEntry, IndexedMinHeap

__all__ = [
    "AllPairsShortestPaths",
    "Edge",
    "Graph",
    "GraphList",
    "GraphMatrix",
    "HeapEntry",
    "IndexedMinHeap",
    "ShortestPaths",
    "bellman_ford",
    "check_markov",
    "dijkstra",
    "floyd_warshall",
    "most_probable_paths",
    "resolve_path",
    "validate_markov",
]
