"""Result tables returned by the shortest-path algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from pathgraph.lib.algorithms.base import INF, NO_PREDECESSOR, Cost
from pathgraph.lib.algorithms.path_utils import check_index, resolve_path
from pathgraph.lib.graph import VertexID


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source result table.

    For the Markov engine ``distances`` holds path probabilities instead of
    lengths: ``1.0`` at the source and ``0.0`` where nothing is reachable.

    Attributes:
        source: The vertex the search started from.
        distances: Distance (or probability) of each vertex, indexed by vertex.
            Unreachable vertices hold ``inf`` (``0.0`` for probabilities).
        predecessors: Predecessor of each vertex on a best path. The source is
            its own predecessor; unreachable vertices hold None.
        neg_weight_cycle: True if a negative-weight cycle is reachable from the
            source. Distances and predecessors are then not meaningful.
    """

    source: VertexID
    distances: Tuple[Cost, ...]
    predecessors: Tuple[Optional[VertexID], ...]
    neg_weight_cycle: bool = False

    def __len__(self) -> int:
        return len(self.distances)

    def is_reachable(self, v: VertexID) -> bool:
        return self.predecessors[check_index(v, len(self))] is not None

    def path_to(self, dst_node: VertexID) -> List[VertexID]:
        """Vertices from the source to ``dst_node``, or [] if unreachable."""
        return resolve_path(self.predecessors, dst_node)


@dataclass(frozen=True, eq=False)
class AllPairsShortestPaths:
    """All-pairs result table.

    Attributes:
        distances: Read-only ``n x n`` float array; ``distances[v, w]`` is the
            shortest distance from ``v`` to ``w`` (``inf`` if unreachable).
        predecessors: Read-only ``n x n`` integer array; ``predecessors[v, w]``
            is the vertex preceding ``w`` on a shortest ``v -> w`` path, with
            ``NO_PREDECESSOR`` (-1) for "none".
        neg_weight_cycle: True if some diagonal distance ended up negative.

    Both arrays are copied on construction, so the arrays passed in stay
    writeable and later changes to them do not reach the table.
    """

    distances: np.ndarray
    predecessors: np.ndarray
    neg_weight_cycle: bool = False

    def __post_init__(self) -> None:
        distances = np.array(self.distances, dtype=np.float64)
        predecessors = np.array(self.predecessors, dtype=np.int64)
        if distances.ndim != 2 or distances.shape[0] != distances.shape[1]:
            raise ValueError(
                f"Distance table must be square, got shape {distances.shape}."
            )
        if predecessors.shape != distances.shape:
            raise ValueError(
                f"Predecessor table shape {predecessors.shape} does not match "
                f"distance table shape {distances.shape}."
            )
        distances.flags.writeable = False
        predecessors.flags.writeable = False
        object.__setattr__(self, "distances", distances)
        object.__setattr__(self, "predecessors", predecessors)

    def __len__(self) -> int:
        return self.distances.shape[0]

    def _check_pair(self, src_node: VertexID, dst_node: VertexID) -> Tuple[int, int]:
        n = len(self)
        return check_index(src_node, n), check_index(dst_node, n)

    def distance(self, src_node: VertexID, dst_node: VertexID) -> float:
        src_node, dst_node = self._check_pair(src_node, dst_node)
        return float(self.distances[src_node, dst_node])

    def predecessor(
        self, src_node: VertexID, dst_node: VertexID
    ) -> Optional[VertexID]:
        src_node, dst_node = self._check_pair(src_node, dst_node)
        prev = int(self.predecessors[src_node, dst_node])
        return None if prev == NO_PREDECESSOR else prev

    def row(self, src_node: VertexID) -> ShortestPaths:
        """Single-source view of the table for ``src_node``."""
        src_node = check_index(src_node, len(self))
        return ShortestPaths(
            source=src_node,
            distances=tuple(float(d) for d in self.distances[src_node]),
            predecessors=tuple(
                None if p == NO_PREDECESSOR else int(p)
                for p in self.predecessors[src_node]
            ),
            neg_weight_cycle=self.neg_weight_cycle,
        )

    def path(self, src_node: VertexID, dst_node: VertexID) -> List[VertexID]:
        """Vertices of a shortest ``src_node -> dst_node`` path, or []."""
        src_node, dst_node = self._check_pair(src_node, dst_node)
        if self.distances[src_node, dst_node] == INF:
            return []
        return self.row(src_node).path_to(dst_node)
