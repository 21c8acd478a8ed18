"""Most-probable paths in Markov chain graphs.

Edge weights are transition probabilities. Maximizing a product of
probabilities is the same as minimizing the sum of their negative logarithms,
so the search reuses the SPF label-setting core with ``-log(p)`` edge costs and
converts each final key back with ``exp(-key)``.
"""

from __future__ import annotations

import math
from typing import Optional

from pathgraph.config import MARKOV_CONFIG, MarkovConfig
from pathgraph.lib.algorithms.base import PathAlg, require_graph
from pathgraph.lib.algorithms.spf import label_setting_search
from pathgraph.lib.algorithms.types import ShortestPaths
from pathgraph.lib.graph import GraphList, VertexID
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def _neg_log(probability: float) -> float:
    return -math.log(probability)


def check_markov(graph: GraphList, config: Optional[MarkovConfig] = None) -> bool:
    """
    Check whether a graph describes a Markov chain.

    The graph must be directed, and the outgoing weights of every vertex that
    has outgoing edges must sum to 1 within the configured tolerance. Vertices
    without outgoing edges are absorbing and are not checked.

    Args:
        graph: Adjacency-list graph.
        config: Validation settings; defaults to ``MARKOV_CONFIG``.

    Returns:
        True if the graph satisfies the Markov conditions.
    """
    config = config or MARKOV_CONFIG
    if not graph.directed:
        logger.warning("Graph is not directed; it cannot be a Markov chain.")
        return False

    for v, adj in enumerate(graph.adjacency()):
        if not adj:
            continue
        total = math.fsum(weight for _, weight in adj)
        if not config.is_stochastic(total):
            logger.warning(
                "Vertex %d does not satisfy the Markov condition "
                "(sum of outgoing weights = %f).",
                v,
                total,
            )
            return False
    return True


def validate_markov(graph: GraphList, config: Optional[MarkovConfig] = None) -> None:
    """
    Raise if the graph is not a Markov chain.

    Raises:
        ValueError: If ``check_markov`` fails.
    """
    if not check_markov(graph, config):
        raise ValueError(
            "Graph is not a Markov chain: it must be directed and the outgoing "
            "probabilities of every non-absorbing vertex must sum to 1."
        )


def most_probable_paths(graph: GraphList, src_node: VertexID) -> ShortestPaths:
    """
    Maximum-probability paths from ``src_node``.

    The chain property (outgoing probabilities summing to 1) is the caller's
    responsibility; see ``validate_markov``. When several paths share the
    maximal probability, which one is reported is unspecified.

    Args:
        graph: Directed adjacency-list graph whose weights lie in ``(0, 1]``.
        src_node: Source vertex.

    Returns:
        ShortestPaths whose ``distances`` are path probabilities: ``1.0`` at the
        source, ``0.0`` for unreachable vertices.

    Raises:
        TypeError: If ``graph`` is not a GraphList.
        ValueError: If ``src_node`` is out of range or a weight is not a
            probability in ``(0, 1]``.
    """
    require_graph(graph, GraphList, PathAlg.MARKOV)
    src_node = graph.check_vertex(src_node)
    for src, dst, weight in graph.edges:
        if not 0.0 < weight <= 1.0:
            raise ValueError(
                f"Edge {src}->{dst} has weight {weight}; transition probabilities "
                f"must lie in (0, 1]."
            )

    logger.debug(
        "Most-probable paths from vertex %d over %d vertices",
        src_node,
        graph.num_vertices,
    )
    keys, pred = label_setting_search(graph, src_node, edge_cost=_neg_log)
    return ShortestPaths(
        source=src_node,
        distances=tuple(math.exp(-key) for key in keys),
        predecessors=tuple(pred),
    )
