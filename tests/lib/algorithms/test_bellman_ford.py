import logging
import math

import numpy as np
import pytest

from pathgraph.lib.algorithms.bellman_ford import bellman_ford
from pathgraph.lib.graph import GraphList, GraphMatrix
from tests.lib.algorithms.sample_graphs import *


class TestBellmanFord:
    def test_bellman_ford_1(self, chain4_edges):
        result = bellman_ford(GraphMatrix(4, chain4_edges), 0)
        assert result.distances == (0, 1, 3, 4)
        assert result.predecessors == (0, 0, 1, 2)
        assert not result.neg_weight_cycle

    def test_bellman_ford_negative_edge(self, negative_dag_edges):
        """The negative edge makes the detour through 2 cheaper than 0 -> 1."""
        result = bellman_ford(GraphMatrix(4, negative_dag_edges, directed=True), 0)
        assert result.distances == (0, -1, 2, 1)
        assert result.predecessors == (0, 2, 0, 1)
        assert result.path_to(3) == [0, 2, 1, 3]
        assert not result.neg_weight_cycle

    def test_bellman_ford_unreachable(self, disconnected_edges):
        result = bellman_ford(GraphMatrix(5, disconnected_edges, directed=True), 0)
        assert result.distances == (0, 2, 4, math.inf, math.inf)
        assert result.predecessors == (0, 0, 1, None, None)

    def test_bellman_ford_negative_cycle(self, negative_cycle_edges, caplog):
        graph = GraphMatrix(2, negative_cycle_edges, directed=True)
        with caplog.at_level(logging.INFO, logger="pathgraph"):
            result = bellman_ford(graph, 0)
        assert result.neg_weight_cycle
        assert "Negative weight cycle" in caplog.text

    def test_bellman_ford_unreachable_negative_cycle(
        self, unreachable_negative_cycle_edges
    ):
        graph = GraphMatrix(4, unreachable_negative_cycle_edges, directed=True)
        result = bellman_ford(graph, 0)
        assert not result.neg_weight_cycle
        assert result.distances == (0, 1, math.inf, math.inf)
        assert bellman_ford(graph, 2).neg_weight_cycle

    def test_bellman_ford_undirected_negative_edge(self):
        """An undirected negative edge can be walked back and forth."""
        graph = GraphMatrix(2, [(0, 1, -1.0)])
        assert bellman_ford(graph, 0).neg_weight_cycle

    def test_bellman_ford_negative_self_loop(self):
        graph = GraphMatrix(2, [(0, 1, 1.0), (1, 1, -0.5)], directed=True)
        assert bellman_ford(graph, 0).neg_weight_cycle

    def test_bellman_ford_single_vertex(self):
        result = bellman_ford(GraphMatrix(1), 0)
        assert result.distances == (0,)
        assert result.predecessors == (0,)
        assert not result.neg_weight_cycle

    def test_bellman_ford_is_idempotent(self, negative_dag_edges):
        graph = GraphMatrix(4, negative_dag_edges, directed=True)
        assert bellman_ford(graph, 0) == bellman_ford(graph, 0)

    def test_bellman_ford_bad_source(self, chain4_edges):
        with pytest.raises(ValueError, match="out of range"):
            bellman_ford(GraphMatrix(4, chain4_edges), 4)

    def test_bellman_ford_numpy_source(self, chain4_edges):
        graph = GraphMatrix(4, chain4_edges)
        result = bellman_ford(graph, np.int64(1))
        assert result == bellman_ford(graph, 1)
        assert type(result.source) is int

    def test_bellman_ford_requires_matrix(self, chain4_edges):
        with pytest.raises(TypeError, match="GraphMatrix"):
            bellman_ford(GraphList(4, chain4_edges), 0)
