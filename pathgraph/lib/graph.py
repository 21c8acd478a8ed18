from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

import numpy as np

VertexID = int


class Edge(NamedTuple):
    """A directed (or, on undirected graphs, symmetric) weighted edge."""

    src: VertexID
    dst: VertexID
    weight: float


#: A single adjacency-list element: (neighbor, weight).
AdjEntry = Tuple[VertexID, float]

EdgeLike = Union[Edge, Tuple[VertexID, VertexID, float]]


class Graph:
    """
    Immutable weighted graph over the vertices ``0 .. num_vertices - 1``.

    This base class holds what both representations share: the vertex count,
    the directed flag, and the validated edge set exactly as supplied. The
    concrete storage lives in the subclasses.

    Construction enforces:
      - ``num_vertices`` must be a positive integer.
      - Every edge endpoint must lie in ``[0, num_vertices)``.
      - Every weight must be a finite real number.

    Range checks on weights specific to an algorithm (non-negative for
    Dijkstra, probabilities for the Markov engine) are left to the algorithm.
    """

    def __init__(
        self,
        num_vertices: int,
        edges: Iterable[EdgeLike] = (),
        directed: bool = False,
    ) -> None:
        """
        Initialize a graph.

        Args:
            num_vertices: Number of vertices; must be > 0.
            edges: Iterable of ``(src, dst, weight)`` triples or ``Edge`` objects.
            directed: If False, each edge is stored in both directions.

        Raises:
            ValueError: If the vertex count is not positive, an endpoint is out of
                range, or a weight is not finite.
        """
        if isinstance(num_vertices, bool) or not isinstance(num_vertices, int):
            raise ValueError(
                f"Vertex count must be an integer, got {num_vertices!r}."
            )
        if num_vertices <= 0:
            raise ValueError(f"Vertex count must be positive, got {num_vertices}.")

        self._num_vertices = num_vertices
        self._directed = bool(directed)
        self._edges: Tuple[Edge, ...] = tuple(self._make_edge(e) for e in edges)

    def _make_edge(self, edge: EdgeLike) -> Edge:
        src, dst, weight = edge
        self.check_vertex(src)
        self.check_vertex(dst)
        weight = float(weight)
        if not math.isfinite(weight):
            raise ValueError(f"Edge {src}->{dst} has a non-finite weight {weight}.")
        return Edge(int(src), int(dst), weight)

    @classmethod
    def from_adjacencies(
        cls, num_vertices: int, text: str, directed: bool = False
    ) -> "Graph":
        """
        Build a graph from the adjacency-list text grammar.

        Args:
            num_vertices: Number of vertices.
            text: Adjacencies such as ``"0:1/1.0,2/2.0 1:2/1.5"``.
            directed: Directed flag.

        Returns:
            A graph of the class this method is called on.
        """
        from pathgraph.lib.io import parse_adjacencies

        return cls(num_vertices, parse_adjacencies(text), directed=directed)

    #
    # Accessors
    #
    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in the order they were supplied (undirected edges appear once)."""
        return self._edges

    def __len__(self) -> int:
        return self._num_vertices

    def has_vertex(self, v: VertexID) -> bool:
        return (
            isinstance(v, (int, np.integer))
            and not isinstance(v, bool)
            and 0 <= v < self._num_vertices
        )

    def check_vertex(self, v: VertexID) -> int:
        """
        Return ``v`` as a plain int, or raise if it is not a vertex of this graph.

        Raises:
            ValueError: If ``v`` is not an integer in ``[0, num_vertices)``.
        """
        if not self.has_vertex(v):
            raise ValueError(
                f"Vertex {v!r} is out of range for a graph of "
                f"{self._num_vertices} vertices."
            )
        return int(v)

    def min_weight(self) -> float:
        """Smallest edge weight, or ``inf`` for an edgeless graph."""
        return min((e.weight for e in self._edges), default=math.inf)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"{type(self).__name__}({self._num_vertices} vertices, "
            f"{len(self._edges)} edges, {kind})"
        )


class GraphList(Graph):
    """
    Adjacency-list representation used by the heap-driven engines.

    Each vertex owns an ordered tuple of ``(neighbor, weight)`` pairs. Duplicate
    ``(src, dst)`` edges accumulate as separate entries.
    """

    def __init__(
        self,
        num_vertices: int,
        edges: Iterable[EdgeLike] = (),
        directed: bool = False,
    ) -> None:
        super().__init__(num_vertices, edges, directed)

        adj: List[List[AdjEntry]] = [[] for _ in range(self._num_vertices)]
        for src, dst, weight in self._edges:
            adj[src].append((dst, weight))
            if not self._directed:
                adj[dst].append((src, weight))
        self._adj: Tuple[Tuple[AdjEntry, ...], ...] = tuple(tuple(a) for a in adj)

    def neighbors(self, v: VertexID) -> Tuple[AdjEntry, ...]:
        """
        Outgoing ``(neighbor, weight)`` pairs of ``v``.

        Raises:
            ValueError: If ``v`` is not a vertex of this graph.
        """
        self.check_vertex(v)
        return self._adj[v]

    def out_degree(self, v: VertexID) -> int:
        return len(self.neighbors(v))

    def adjacency(self) -> Tuple[Tuple[AdjEntry, ...], ...]:
        """All adjacency lists, indexed by vertex."""
        return self._adj

    def to_matrix(self) -> "GraphMatrix":
        """Rebuild the same edge set as a ``GraphMatrix``."""
        return GraphMatrix(self._num_vertices, self._edges, directed=self._directed)


class GraphMatrix(Graph):
    """
    Adjacency-matrix representation used by the all-edges engines.

    Weights live in one read-only ``n x n`` float64 array: ``inf`` where there
    is no edge and ``0`` on the diagonal. Duplicate ``(src, dst)`` edges
    overwrite each other (last write wins). A self-loop only replaces the
    diagonal when its weight is negative, since a non-negative loop can never
    beat staying in place.
    """

    def __init__(
        self,
        num_vertices: int,
        edges: Iterable[EdgeLike] = (),
        directed: bool = False,
    ) -> None:
        super().__init__(num_vertices, edges, directed)

        n = self._num_vertices
        weights = np.full((n, n), np.inf, dtype=np.float64)
        np.fill_diagonal(weights, 0.0)
        for src, dst, weight in self._edges:
            if src == dst:
                if weight < 0:
                    weights[src, src] = weight
                continue
            weights[src, dst] = weight
            if not self._directed:
                weights[dst, src] = weight
        weights.flags.writeable = False
        self._weights = weights

        rows, cols = np.nonzero(np.isfinite(weights))
        self._finite_edges: Tuple[Edge, ...] = tuple(
            Edge(int(u), int(w), float(weights[u, w])) for u, w in zip(rows, cols)
        )

    @property
    def weights(self) -> np.ndarray:
        """The read-only ``n x n`` weight matrix."""
        return self._weights

    def weight(self, u: VertexID, w: VertexID) -> float:
        """
        Weight of ``u -> w`` (``inf`` if absent, ``0`` on the diagonal).

        Raises:
            ValueError: If either vertex is out of range.
        """
        self.check_vertex(u)
        self.check_vertex(w)
        return float(self._weights[u, w])

    def has_edge(self, u: VertexID, w: VertexID) -> bool:
        return math.isfinite(self.weight(u, w))

    def finite_edges(self) -> Sequence[Edge]:
        """
        Every ordered pair with a finite weight, in row-major order.

        The diagonal is included; its zero weight can never relax anything.
        """
        return self._finite_edges

    def to_list(self) -> GraphList:
        """Rebuild the same edge set as a ``GraphList``."""
        return GraphList(self._num_vertices, self._edges, directed=self._directed)
