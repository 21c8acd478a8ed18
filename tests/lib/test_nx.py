import dataclasses

import networkx as nx
import pytest

from pathgraph.lib.algorithms.spf import dijkstra
from pathgraph.lib.graph import Edge, GraphList, GraphMatrix
from pathgraph.lib.nx import NodeMap, from_networkx, to_networkx


class TestNodeMap:
    def test_lookups(self):
        node_map = NodeMap(["A", "B", "C"])
        assert node_map.names == ("A", "B", "C")
        assert node_map.index("B") == 1
        assert node_map.name(2) == "C"
        assert len(node_map) == 3

    def test_from_nodes_orders_by_string(self):
        node_map = NodeMap.from_nodes([10, "b", 2, "a"])
        assert node_map.names == (10, 2, "a", "b")

    def test_names_of_path(self):
        node_map = NodeMap(("s", "x", "t"))
        assert node_map.names_of([0, 1, 2]) == ["s", "x", "t"]
        assert node_map.names_of([]) == []

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown node 'Z'"):
            NodeMap(("A",)).index("Z")

    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="unique"):
            NodeMap(("A", "A"))

    def test_frozen(self):
        node_map = NodeMap(("A",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node_map.names = ("B",)


class TestFromNetworkx:
    def test_digraph(self):
        G = nx.DiGraph()
        G.add_edge("B", "C", weight=2.0)
        G.add_edge("A", "B", weight=1.5)
        graph, node_map = from_networkx(G)

        assert isinstance(graph, GraphList)
        assert graph.directed
        assert node_map.names == ("A", "B", "C")
        assert set(graph.edges) == {Edge(0, 1, 1.5), Edge(1, 2, 2.0)}

    def test_undirected_and_default_weight(self):
        G = nx.Graph()
        G.add_edge(1, 2)
        G.add_edge(2, 3, cost=4.0)
        graph, node_map = from_networkx(G, weight="cost", default_weight=0.5)

        assert not graph.directed
        a, b, c = (node_map.index(v) for v in (1, 2, 3))
        assert sorted(graph.edges) == sorted([Edge(a, b, 0.5), Edge(b, c, 4.0)])

    def test_isolated_nodes_are_kept(self):
        G = nx.DiGraph()
        G.add_nodes_from(["x", "y"])
        graph, node_map = from_networkx(G)
        assert graph.num_vertices == 2
        assert graph.edges == ()

    def test_matrix_and_directed_override(self):
        G = nx.Graph()
        G.add_edge("a", "b", weight=3.0)
        graph, _ = from_networkx(G, graph_cls=GraphMatrix, directed=True)
        assert isinstance(graph, GraphMatrix)
        assert graph.weight(0, 1) == 3.0
        assert graph.weight(1, 0) == float("inf")

    def test_multidigraph_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("s", "t", weight=5.0)
        G.add_edge("s", "t", weight=2.0)
        graph, node_map = from_networkx(G)
        result = dijkstra(graph, node_map.index("s"))
        assert result.distances[node_map.index("t")] == 2.0

    def test_not_a_graph(self):
        with pytest.raises(TypeError, match="Expected a NetworkX graph"):
            from_networkx({"A": ["B"]})

    def test_no_nodes(self):
        with pytest.raises(ValueError, match="no nodes"):
            from_networkx(nx.DiGraph())

    def test_negative_weight_rejected_by_engine_not_converter(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=-1.0)
        graph, _ = from_networkx(G)
        with pytest.raises(ValueError, match="non-negative"):
            dijkstra(graph, 0)


class TestToNetworkx:
    def test_directed(self):
        graph = GraphMatrix(3, [(0, 1, 1.0), (2, 0, 4.0)], directed=True)
        G = to_networkx(graph)
        assert isinstance(G, nx.DiGraph)
        assert sorted(G.nodes) == [0, 1, 2]
        assert G[2][0]["weight"] == 4.0
        assert not G.has_edge(1, 0)

    def test_undirected_with_names(self):
        graph = GraphList(2, [(0, 1, 2.5)])
        G = to_networkx(graph, NodeMap(("p", "q")), weight="w")
        assert not G.is_directed()
        assert G["q"]["p"]["w"] == 2.5

    def test_round_trip_preserves_shortest_paths(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from(
            [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0), ("C", "D", 1.0)]
        )
        graph, node_map = from_networkx(G)
        G_out = to_networkx(graph, node_map)
        assert nx.shortest_path_length(G_out, "A", "D", weight="weight") == 4.0
        assert dijkstra(graph, 0).distances == (0, 1, 3, 4)
        path = dijkstra(graph, node_map.index("A")).path_to(node_map.index("D"))
        assert node_map.names_of(path) == ["A", "B", "C", "D"]
