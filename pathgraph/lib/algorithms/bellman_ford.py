"""Bellman-Ford single-source shortest paths with negative-cycle detection."""

from __future__ import annotations

from typing import List, Optional

from pathgraph.lib.algorithms.base import INF, Cost, PathAlg, require_graph
from pathgraph.lib.algorithms.types import ShortestPaths
from pathgraph.lib.graph import GraphMatrix, VertexID
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(graph: GraphMatrix, src_node: VertexID) -> ShortestPaths:
    """
    Bellman-Ford shortest paths from ``src_node``.

    Relaxes every finite-weight ordered pair ``n - 1`` times (stopping early
    once a round changes nothing), then makes one more pass. If that pass can
    still shorten a distance, a negative-weight cycle is reachable from the
    source and the result is flagged.

    Args:
        graph: Adjacency-matrix graph; negative weights are allowed.
        src_node: Source vertex.

    Returns:
        ShortestPaths. When ``neg_weight_cycle`` is True the distances and
        predecessors are not meaningful.

    Raises:
        TypeError: If ``graph`` is not a GraphMatrix.
        ValueError: If ``src_node`` is out of range.
    """
    require_graph(graph, GraphMatrix, PathAlg.BELLMAN_FORD)
    src_node = graph.check_vertex(src_node)

    num_vertices = graph.num_vertices
    dist: List[Cost] = [INF] * num_vertices
    pred: List[Optional[VertexID]] = [None] * num_vertices
    dist[src_node] = 0.0
    pred[src_node] = src_node

    edges = graph.finite_edges()
    logger.debug(
        "Bellman-Ford from vertex %d over %d vertices, %d weighted pairs",
        src_node,
        num_vertices,
        len(edges),
    )

    rounds = 0
    for _ in range(num_vertices - 1):
        rounds += 1
        changed = False
        for u, w, weight in edges:
            if dist[u] == INF:
                continue
            new_dist = dist[u] + weight
            if new_dist < dist[w]:
                dist[w] = new_dist
                pred[w] = u
                changed = True
        if not changed:
            break

    neg_weight_cycle = False
    for u, w, weight in edges:
        if dist[u] + weight < dist[w]:
            neg_weight_cycle = True
            logger.info("Negative weight cycle detected at vertex %d.", w)
            break

    logger.debug("Bellman-Ford finished after %d relaxation rounds", rounds)
    return ShortestPaths(
        source=src_node,
        distances=tuple(dist),
        predecessors=tuple(pred),
        neg_weight_cycle=neg_weight_cycle,
    )
