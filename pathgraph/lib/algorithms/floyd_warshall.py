"""Floyd-Warshall all-pairs shortest paths."""

from __future__ import annotations

import numpy as np

from pathgraph.lib.algorithms.base import NO_PREDECESSOR, PathAlg, require_graph
from pathgraph.lib.algorithms.types import AllPairsShortestPaths
from pathgraph.lib.graph import GraphMatrix
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def floyd_warshall(graph: GraphMatrix) -> AllPairsShortestPaths:
    """
    Floyd-Warshall shortest paths between every ordered pair of vertices.

    ``dist`` starts as the weight matrix and ``parent[v, w]`` as ``v`` wherever
    ``v -> w`` has a finite weight (the diagonal included). For each
    intermediate vertex ``k`` every pair is relaxed through ``k`` at once:
    ``dist[v, w] = dist[v, k] + dist[k, w]`` and ``parent[v, w] = parent[k, w]``
    wherever that is strictly shorter. Row and column ``k`` cannot improve
    during round ``k`` unless ``dist[k, k] < 0``, so the vectorized round
    matches the scalar triple loop on graphs without negative cycles.

    Negative cycles are detected once, after the last round, from the
    diagonal.

    Args:
        graph: Adjacency-matrix graph; negative weights are allowed.

    Returns:
        AllPairsShortestPaths. When ``neg_weight_cycle`` is True the tables are
        not meaningful.

    Raises:
        TypeError: If ``graph`` is not a GraphMatrix.
    """
    require_graph(graph, GraphMatrix, PathAlg.FLOYD_WARSHALL)

    num_vertices = graph.num_vertices
    dist = np.array(graph.weights, dtype=np.float64, copy=True)
    parent = np.where(
        np.isfinite(dist),
        np.arange(num_vertices, dtype=np.int64)[:, np.newaxis],
        np.int64(NO_PREDECESSOR),
    )
    logger.debug("Floyd-Warshall over %d vertices", num_vertices)

    for k in range(num_vertices):
        through_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        shorter = through_k < dist
        if shorter.any():
            dist = np.where(shorter, through_k, dist)
            parent = np.where(shorter, parent[np.newaxis, k, :], parent)

    neg_weight_cycle = bool((np.diagonal(dist) < 0).any())
    if neg_weight_cycle:
        logger.info(
            "Negative weight cycle detected through vertices %s.",
            np.flatnonzero(np.diagonal(dist) < 0).tolist(),
        )

    return AllPairsShortestPaths(
        distances=dist,
        predecessors=parent,
        neg_weight_cycle=neg_weight_cycle,
    )
