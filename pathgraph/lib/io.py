"""Adjacency-list text format.

A graph is written as space-separated groups, one per source vertex::

    "0:1/1.0,2/2.0 1:2/1.5 2:3/1.0"

Each group is ``src:`` followed by comma-separated ``dst/weight`` entries.
Vertex ids are non-negative decimal integers and weights are floats. A group
may list no entries (``"4:"``).
"""

from __future__ import annotations

import re
from typing import Dict, List

from pathgraph.lib.graph import Edge, Graph, VertexID

_GROUP_RE = re.compile(r"\S+")


class AdjacencyParseError(ValueError):
    """Raised for malformed adjacency text.

    Attributes:
        text: The full input.
        offset: Character offset where parsing failed.
    """

    def __init__(self, reason: str, text: str, offset: int) -> None:
        self.text = text
        self.offset = offset
        marker = " " * (offset + 1) + "^"
        super().__init__(f'{reason} at offset {offset}:\n"{text}"\n{marker}')


def _parse_vertex(token: str, text: str, offset: int) -> VertexID:
    if not (token.isascii() and token.isdigit()):
        raise AdjacencyParseError(
            f"Invalid vertex id {token!r}", text, offset
        )
    return int(token)


def parse_adjacencies(text: str) -> List[Edge]:
    """
    Parse adjacency-list text into edges.

    Args:
        text: Adjacency text such as ``"0:1/1.0,2/2.0 1:2/1.5"``.

    Returns:
        Edges in textual order. Vertex ranges are not checked here; the graph
        constructor does that.

    Raises:
        AdjacencyParseError: If the text does not follow the grammar.
    """
    edges: List[Edge] = []
    for group in _GROUP_RE.finditer(text):
        token = group.group()
        offset = group.start()

        head, colon, tail = token.partition(":")
        if not colon:
            raise AdjacencyParseError(
                "Invalid edge format (missing ':')", text, offset + len(head)
            )
        src = _parse_vertex(head, text, offset)
        if not tail:
            continue

        entry_offset = offset + len(head) + 1
        for entry in tail.split(","):
            dst_token, slash, weight_token = entry.partition("/")
            if not slash:
                raise AdjacencyParseError(
                    "Invalid edge format (missing '/')",
                    text,
                    entry_offset + len(dst_token),
                )
            dst = _parse_vertex(dst_token, text, entry_offset)
            try:
                weight = float(weight_token)
            except ValueError:
                raise AdjacencyParseError(
                    f"Invalid weight {weight_token!r}",
                    text,
                    entry_offset + len(dst_token) + 1,
                ) from None
            edges.append(Edge(src, dst, weight))
            entry_offset += len(entry) + 1
    return edges


def _format_weight(weight: float) -> str:
    if weight.is_integer():
        return f"{weight:.1f}"
    return repr(weight)


def format_adjacencies(graph: Graph) -> str:
    """
    Render a graph's edges in the adjacency-list text format.

    Edges are grouped by source vertex in order of first appearance; an
    undirected edge is written once, as supplied.

    Args:
        graph: Any graph.

    Returns:
        Text that ``parse_adjacencies`` turns back into the same edges.
    """
    groups: Dict[VertexID, List[str]] = {}
    for src, dst, weight in graph.edges:
        groups.setdefault(src, []).append(f"{dst}/{_format_weight(weight)}")
    return " ".join(f"{src}:{','.join(items)}" for src, items in groups.items())
