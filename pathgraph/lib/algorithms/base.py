from __future__ import annotations

import math
from enum import IntEnum
from typing import Type, Union

from pathgraph.lib.graph import Graph

#: Represents a path length (or, for the Markov engine, a probability).
Cost = Union[int, float]

#: Distance of a vertex that cannot be reached.
INF = math.inf

#: Predecessor marker for "none" inside integer predecessor matrices.
NO_PREDECESSOR = -1


class PathAlg(IntEnum):
    """
    Shortest-path algorithms provided by the package.
    """

    DIJKSTRA = 1
    MARKOV = 2
    BELLMAN_FORD = 3
    FLOYD_WARSHALL = 4

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Bellman-Ford"``."""
        return _LABELS[self]


_LABELS = {
    PathAlg.DIJKSTRA: "Dijkstra",
    PathAlg.MARKOV: "Dijkstra (Markov)",
    PathAlg.BELLMAN_FORD: "Bellman-Ford",
    PathAlg.FLOYD_WARSHALL: "Floyd-Warshall",
}


def require_graph(graph: object, graph_cls: Type[Graph], alg: PathAlg) -> None:
    """
    Ensure an algorithm receives the graph representation it runs on.

    Raises:
        TypeError: If ``graph`` is not an instance of ``graph_cls``.
    """
    if not isinstance(graph, graph_cls):
        raise TypeError(
            f"{alg.label} requires a {graph_cls.__name__}, "
            f"got {type(graph).__name__}."
        )
