"""Conversion between NetworkX graphs and pathgraph graphs.

NetworkX nodes can be any hashable; pathgraph vertices are ``0 .. n - 1``.
``from_networkx`` numbers the nodes and returns the numbering as a ``NodeMap``
so results can be read back in terms of the original names.

Example:
    >>> import networkx as nx
    >>> from pathgraph import dijkstra
    >>> from pathgraph.lib.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=1.5)
    >>> G.add_edge("B", "C", weight=2.0)
    >>> graph, node_map = from_networkx(G)
    >>> result = dijkstra(graph, node_map.index("A"))
    >>> node_map.names_of(result.path_to(node_map.index("C")))
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple, Type, Union

import networkx as nx

from pathgraph.lib.graph import Graph, GraphList, VertexID

_NX_GRAPH_TYPES = (nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph)


@dataclass(frozen=True)
class NodeMap:
    """Names of the vertices of a converted graph.

    Vertex ``i`` is ``names[i]``. Lookups in both directions are O(1).

    Example:
        >>> node_map = NodeMap(("A", "B", "C"))
        >>> node_map.index("B")
        1
        >>> node_map.names_of([0, 2])
        ['A', 'C']
    """

    names: Tuple[Hashable, ...]
    _index: Dict[Hashable, VertexID] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        index = {name: i for i, name in enumerate(self.names)}
        if len(index) != len(self.names):
            raise ValueError("Node names must be unique")
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_nodes(cls, nodes: Iterable[Hashable]) -> "NodeMap":
        """Index nodes in order of their string form, for a stable numbering."""
        return cls(tuple(sorted(nodes, key=str)))

    def __len__(self) -> int:
        return len(self.names)

    def index(self, name: Hashable) -> VertexID:
        """
        Vertex index of a node name.

        Raises:
            KeyError: If the name is not mapped.
        """
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Unknown node {name!r}") from None

    def name(self, v: VertexID) -> Hashable:
        return self.names[v]

    def names_of(self, path: Iterable[VertexID]) -> List[Hashable]:
        """Translate a vertex path (e.g. ``ShortestPaths.path_to``) to node names."""
        return [self.names[v] for v in path]


def from_networkx(
    G: Any,
    *,
    weight: str = "weight",
    default_weight: float = 1.0,
    graph_cls: Type[Graph] = GraphList,
    directed: Optional[bool] = None,
) -> Tuple[Graph, NodeMap]:
    """Build a pathgraph graph from a NetworkX graph.

    Parallel edges of a multigraph are all passed on; ``GraphList`` keeps each
    of them while ``GraphMatrix`` keeps the last.

    Args:
        G: ``nx.Graph``, ``nx.DiGraph``, ``nx.MultiGraph`` or ``nx.MultiDiGraph``.
        weight: Edge attribute holding the weight.
        default_weight: Weight of edges that lack the attribute.
        graph_cls: ``GraphList`` or ``GraphMatrix``.
        directed: Directed flag of the result; defaults to ``G.is_directed()``.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes, or a weight is not finite.
    """
    if not isinstance(G, _NX_GRAPH_TYPES):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")
    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_map = NodeMap.from_nodes(G.nodes)
    edges = [
        (node_map.index(u), node_map.index(v), data.get(weight, default_weight))
        for u, v, data in G.edges(data=True)
    ]
    if directed is None:
        directed = G.is_directed()
    return graph_cls(len(node_map), edges, directed=directed), node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight: str = "weight",
) -> Union[nx.DiGraph, nx.Graph]:
    """Build a NetworkX graph from a pathgraph graph.

    Repeated ``(src, dst)`` pairs collapse to the last one.

    Args:
        graph: Graph to convert.
        node_map: Names to use for the vertices; vertex indices otherwise.
        weight: Edge attribute to store the weight under.

    Returns:
        ``nx.DiGraph`` for directed graphs, ``nx.Graph`` otherwise.
    """
    G: Any = nx.DiGraph() if graph.directed else nx.Graph()
    names: Any = node_map.names if node_map is not None else range(len(graph))
    G.add_nodes_from(names)
    G.add_weighted_edges_from(
        ((names[src], names[dst], w) for src, dst, w in graph.edges), weight=weight
    )
    return G
