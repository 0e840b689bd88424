from pathlib import Path

import pytest

from sssp.exceptions import (
    GraphBuildError,
    InvalidEdgeTarget,
    NegativeWeight,
    ParseError,
    VertexCountMismatch,
)
from sssp.graph.adjacency import Graph
from sssp.graph.builder import HeaderOrder, ParsedInput, parse_graph, read_graph

SCENARIO = "0\n3\n1,3 2,3\n\n1,2\n"


class TestParseGraph:
    def test_documented_format(self):
        parsed = parse_graph(SCENARIO)
        assert parsed == ParsedInput(
            source=0, graph=Graph.from_edges(3, [(0, 1, 3), (0, 2, 3), (2, 1, 2)])
        )

    def test_header_on_one_line(self):
        parsed = parse_graph("2 3\n1,3 2,3\n\n1,2")
        assert parsed.source == 2
        assert parsed.graph.n_vertices == 3

    def test_count_first_header(self):
        text = "5 1\n1,3 3,4\n3,4 4,2\n4,2 3,2\n2,2\n4,2 3,2 1,4\n"
        parsed = parse_graph(text, header_order=HeaderOrder.COUNT_FIRST)
        assert parsed.source == 1
        assert parsed.graph == Graph.from_adjacency(
            [
                [(1, 3), (3, 4)],
                [(3, 4), (4, 2)],
                [(4, 2), (3, 2)],
                [(2, 2)],
                [(4, 2), (3, 2), (1, 4)],
            ]
        )

    def test_count_first_two_line_header(self):
        parsed = parse_graph("2\n1\n0,1\n\n", header_order=HeaderOrder.COUNT_FIRST)
        assert parsed.source == 1
        assert list(parsed.graph.edges()) == [(0, 0, 1)]

    def test_header_order_is_not_guessed(self):
        # Read source-first, "3 1" means source 3 with a single vertex.
        parsed = parse_graph("3 1\n\n")
        assert parsed.source == 3
        assert parsed.graph.n_vertices == 1

    def test_empty_lines_are_vertices_without_edges(self):
        parsed = parse_graph("0\n3\n\n\n\n")
        assert parsed.graph.n_vertices == 3
        assert parsed.graph.n_edges == 0

    def test_extra_whitespace_and_crlf(self):
        parsed = parse_graph("0\r\n2\r\n  1,4\t 1,2 \r\n\r\n")
        assert list(parsed.graph.edges()) == [(0, 1, 4), (0, 1, 2)]

    def test_trailing_blank_lines_tolerated(self):
        parsed = parse_graph("0\n2\n1,1\n0,1\n\n\n")
        assert parsed.graph.n_vertices == 2

    def test_zero_vertices(self):
        parsed = parse_graph("0\n0\n")
        assert parsed.graph.n_vertices == 0

    def test_source_not_range_checked(self):
        assert parse_graph("9\n1\n\n").source == 9


class TestParseErrors:
    @pytest.mark.parametrize(
        "text",
        ["", "\n1\n", "0 1 2\n\n", "x\n1\n\n", "0\nfour\n\n", "0\n", "0\n1 2\n\n"],
    )
    def test_malformed_header(self, text):
        with pytest.raises(ParseError):
            parse_graph(text)

    def test_negative_vertex_count(self):
        with pytest.raises(ParseError) as exc_info:
            parse_graph("0\n-2\n")
        assert exc_info.value.line == 2
        assert exc_info.value.token == "-2"

    @pytest.mark.parametrize("token", ["12", "1,", ",3", "1,2,3", "a,1", "1,b", "1;2"])
    def test_malformed_edge_token(self, token):
        with pytest.raises(ParseError) as exc_info:
            parse_graph(f"0\n2\n1,1 {token}\n\n")
        assert exc_info.value.line == 3
        assert token in str(exc_info.value)

    def test_non_integer_weight(self):
        with pytest.raises(ParseError):
            parse_graph("0\n2\n1,1.5\n\n")

    def test_fewer_lines_than_declared(self):
        with pytest.raises(VertexCountMismatch) as exc_info:
            parse_graph("0\n5\n1,1\n2,1\n3,1\n4,1")
        assert exc_info.value.expected == 5
        assert exc_info.value.actual == 4

    def test_more_lines_than_declared(self):
        with pytest.raises(VertexCountMismatch) as exc_info:
            parse_graph("0\n2\n1,1\n0,1\n1,1\n")
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    @pytest.mark.parametrize("token", ["2,1", "-1,1", "99,0"])
    def test_invalid_edge_target(self, token):
        with pytest.raises(InvalidEdgeTarget) as exc_info:
            parse_graph(f"0\n2\n\n{token}\n")
        assert exc_info.value.line == 4
        assert exc_info.value.token == token

    def test_negative_weight(self):
        with pytest.raises(NegativeWeight) as exc_info:
            parse_graph("0\n3\n1,3 2,-3\n\n1,2\n")
        assert exc_info.value.line == 3
        assert exc_info.value.token == "2,-3"
        assert "line 3" in str(exc_info.value)

    def test_all_build_errors_share_base(self):
        for text in ("", "0\n5\n", "0\n1\n5,1\n", "0\n1\n0,-1\n"):
            with pytest.raises(GraphBuildError):
                parse_graph(text)


class TestReadGraph:
    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "graph.txt"
        path.write_text(SCENARIO, encoding="utf-8")
        assert read_graph(path) == parse_graph(SCENARIO)
        assert read_graph(str(path)).source == 0

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_graph(tmp_path / "missing.txt")


class TestHeaderOrder:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("source-first", HeaderOrder.SOURCE_FIRST),
            ("COUNT_FIRST", HeaderOrder.COUNT_FIRST),
            (" count-first ", HeaderOrder.COUNT_FIRST),
        ],
    )
    def test_from_string(self, value, expected):
        assert HeaderOrder.from_string(value) is expected

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Valid values"):
            HeaderOrder.from_string("auto")
