import math

import pytest

from pathgraph.lib.graph import Edge, GraphList, GraphMatrix
from pathgraph.lib.io import AdjacencyParseError, format_adjacencies, parse_adjacencies


class TestParseAdjacencies:
    def test_parse_basic(self):
        edges = parse_adjacencies("0:1/1.0,2/2.0 1:2/1.5 2:3/1.0")
        assert edges == [
            Edge(0, 1, 1.0),
            Edge(0, 2, 2.0),
            Edge(1, 2, 1.5),
            Edge(2, 3, 1.0),
        ]

    def test_parse_extra_whitespace_and_empty_group(self):
        edges = parse_adjacencies("  3:0/-2.5\n\t4:   1:0/7 ")
        assert edges == [Edge(3, 0, -2.5), Edge(1, 0, 7.0)]

    def test_parse_empty(self):
        assert parse_adjacencies("") == []
        assert parse_adjacencies("   ") == []

    def test_parse_exponent_weight(self):
        assert parse_adjacencies("0:1/1e-3") == [Edge(0, 1, 0.001)]

    def test_parse_does_not_check_ranges(self):
        (edge,) = parse_adjacencies("0:99/inf")
        assert edge.dst == 99
        assert math.isinf(edge.weight)

    def test_missing_colon(self):
        with pytest.raises(AdjacencyParseError, match="missing ':'") as exc_info:
            parse_adjacencies("0:1/1.0 12")
        assert exc_info.value.offset == 10
        assert exc_info.value.text == "0:1/1.0 12"

    def test_missing_slash(self):
        with pytest.raises(AdjacencyParseError, match="missing '/'") as exc_info:
            parse_adjacencies("0:1/1.0 1:2-1.5")
        assert exc_info.value.offset == 15

    def test_empty_entry(self):
        with pytest.raises(AdjacencyParseError, match="missing '/'"):
            parse_adjacencies("0:1/1.0,,2/3.0")

    @pytest.mark.parametrize("text", ["a:1/1.0", "0:-1/1.0", "0:x/1.0", ":1/1.0"])
    def test_invalid_vertex(self, text):
        with pytest.raises(AdjacencyParseError, match="Invalid vertex id"):
            parse_adjacencies(text)

    def test_invalid_weight(self):
        with pytest.raises(AdjacencyParseError, match="Invalid weight") as exc_info:
            parse_adjacencies("0:1/abc")
        assert exc_info.value.offset == 4

    def test_error_is_value_error_with_marker(self):
        with pytest.raises(ValueError) as exc_info:
            parse_adjacencies("0:1/abc")
        lines = str(exc_info.value).splitlines()
        assert lines[1] == '"0:1/abc"'
        assert lines[2] == "     ^"


class TestFormatAdjacencies:
    def test_format_basic(self):
        graph = GraphList(3, [(0, 1, 1.0), (0, 2, 2.5), (1, 2, 1.5)], directed=True)
        assert format_adjacencies(graph) == "0:1/1.0,2/2.5 1:2/1.5"

    def test_format_groups_by_source(self):
        graph = GraphMatrix(3, [(1, 2, 4.0), (0, 1, -0.125), (1, 0, 3.0)])
        assert format_adjacencies(graph) == "1:2/4.0,0/3.0 0:1/-0.125"

    def test_format_no_edges(self):
        assert format_adjacencies(GraphList(2)) == ""

    def test_format_parses_back(self):
        graph = GraphList.from_adjacencies(4, "0:1/0.1,3/2.0 2:1/1e-07")
        assert parse_adjacencies(format_adjacencies(graph)) == list(graph.edges)
