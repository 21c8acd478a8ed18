"""Shortest-path-first (SPF) algorithm.

Implements Dijkstra's label-setting search over a ``GraphList`` driven by the
indexed heap. The heap never holds two entries for one vertex: pushing a
better key for a queued vertex lowers that vertex's key in place.

Notes:
    Distances are frozen only when a vertex is extracted from the heap. An
    extracted vertex that is already finalized is skipped; with the indexed
    heap this can only happen through re-insertion after extraction, never
    through stale duplicates.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from pathgraph.lib.algorithms.base import INF, Cost, PathAlg, require_graph
from pathgraph.lib.algorithms.types import ShortestPaths
from pathgraph.lib.graph import GraphList, VertexID
from pathgraph.lib.heap import HeapEntry, IndexedMinHeap
from pathgraph.logging import get_logger

logger = get_logger(__name__)

#: Maps an edge weight to the additive cost the search minimizes.
EdgeCostFunc = Callable[[float], Cost]


def label_setting_search(
    graph: GraphList,
    src_node: VertexID,
    edge_cost: Optional[EdgeCostFunc] = None,
) -> Tuple[List[Cost], List[Optional[VertexID]]]:
    """
    Heap-driven single-source search shared by the SPF engines.

    Args:
        graph: Adjacency-list graph.
        src_node: Source vertex.
        edge_cost: Optional transform applied to each edge weight before it is
            added to a path key. The transformed costs must be non-negative.

    Returns:
        A tuple of (keys, pred):
          - keys: Final key of each vertex; ``inf`` where unreachable.
          - pred: Predecessor of each vertex; the source maps to itself and
            unreachable vertices map to None.
    """
    src_node = graph.check_vertex(src_node)
    num_vertices = graph.num_vertices
    keys: List[Cost] = [INF] * num_vertices
    pred: List[Optional[VertexID]] = [None] * num_vertices
    finalized = [False] * num_vertices

    heap = IndexedMinHeap(num_vertices)
    heap.add(HeapEntry(src_node, 0.0, src_node))

    adjacency = graph.adjacency()
    while not heap.empty():
        node_id, current_key, prev_id = heap.pop()
        if finalized[node_id]:
            continue

        finalized[node_id] = True
        keys[node_id] = current_key
        pred[node_id] = prev_id

        for neighbor_id, weight in adjacency[node_id]:
            cost = weight if edge_cost is None else edge_cost(weight)
            new_key = current_key + cost
            if new_key < keys[neighbor_id]:
                heap.add(HeapEntry(neighbor_id, new_key, node_id))

    return keys, pred


def dijkstra(graph: GraphList, src_node: VertexID) -> ShortestPaths:
    """
    Dijkstra's shortest paths from ``src_node``.

    Args:
        graph: Adjacency-list graph with non-negative weights.
        src_node: Source vertex.

    Returns:
        ShortestPaths with the distance and predecessor of every vertex.
        Unreachable vertices keep distance ``inf`` and predecessor None.

    Raises:
        TypeError: If ``graph`` is not a GraphList.
        ValueError: If ``src_node`` is out of range or any weight is negative.
    """
    require_graph(graph, GraphList, PathAlg.DIJKSTRA)
    src_node = graph.check_vertex(src_node)
    min_weight = graph.min_weight()
    if min_weight < 0:
        raise ValueError(
            f"Dijkstra requires non-negative weights; found weight {min_weight}."
        )

    logger.debug(
        "Dijkstra from vertex %d over %d vertices", src_node, graph.num_vertices
    )
    costs, pred = label_setting_search(graph, src_node)
    logger.debug(
        "Dijkstra reached %d of %d vertices",
        sum(p is not None for p in pred),
        graph.num_vertices,
    )
    return ShortestPaths(
        source=src_node, distances=tuple(costs), predecessors=tuple(pred)
    )
