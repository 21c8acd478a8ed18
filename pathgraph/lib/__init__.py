"""Graph containers, the indexed heap and the path algorithms.

This package also contains integration modules for external libraries.
"""

from pathgraph.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
