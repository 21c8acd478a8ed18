from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from pathgraph.lib.graph import VertexID


def check_index(v: VertexID, num_vertices: int) -> int:
    """
    Return ``v`` as a plain int if it indexes a table of ``num_vertices`` rows.

    Raises:
        ValueError: If ``v`` is not an integer in ``[0, num_vertices)``.
    """
    if (
        isinstance(v, bool)
        or not isinstance(v, (int, np.integer))
        or not 0 <= v < num_vertices
    ):
        raise ValueError(
            f"Vertex {v!r} is out of range for a table of {num_vertices} vertices."
        )
    return int(v)


def resolve_path(
    predecessors: Sequence[Optional[VertexID]],
    dst_node: VertexID,
) -> List[VertexID]:
    """
    Rebuild the source -> destination path from a predecessor table.

    The walk starts at ``dst_node`` and follows predecessors until it reaches
    a vertex that is its own predecessor (the source). A ``None`` predecessor
    means the destination is unreachable.

    Args:
        predecessors: Predecessor of each vertex; the source maps to itself and
            unreached vertices map to None.
        dst_node: Destination vertex.

    Returns:
        Vertices from the source to ``dst_node`` inclusive, or an empty list if
        ``dst_node`` is unreachable.

    Raises:
        ValueError: If ``dst_node`` is out of range, or if the chain does not
            reach the source within ``len(predecessors)`` steps (a negative
            cycle corrupted the table).
    """
    num_vertices = len(predecessors)
    dst_node = check_index(dst_node, num_vertices)

    path = [dst_node]
    current = dst_node
    for _ in range(num_vertices):
        prev = predecessors[current]
        if prev is None:
            return []
        if prev == current:
            path.reverse()
            return path
        path.append(prev)
        current = prev

    raise ValueError(
        f"Predecessor chain from vertex {dst_node} does not reach a source within "
        f"{num_vertices} steps; the table is not a shortest-path tree."
    )
