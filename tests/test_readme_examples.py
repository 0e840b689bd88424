"""Tests for examples from README.md and the package docstring."""

from pathlib import Path

import sssp


def test_package_docstring_example():
    from sssp import compute, parse_graph, path_to

    parsed = parse_graph("0\n3\n1,3 2,3\n\n1,2\n")
    table = compute(parsed.graph, parsed.source)
    assert table.distance(1) == 3
    assert path_to(table, 2).render() == "0 -> 2"


def test_library_readme_example(tmp_path: Path):
    from sssp import compute, path_to, read_graph

    path = tmp_path / "graph.txt"
    path.write_text("0\n3\n1,3 2,3\n\n1,2\n")
    parsed = read_graph(path)
    table = compute(parsed.graph, parsed.source)
    rows = [(v, table.distance(v), path_to(table, v)) for v in range(table.n_vertices)]
    assert [(v, d, list(p)) for v, d, p in rows] == [
        (0, 0, [0]),
        (1, 3, [0, 1]),
        (2, 3, [0, 2]),
    ]


def test_public_api_exports():
    for name in sssp.__all__:
        assert hasattr(sssp, name), name
    assert sssp.__version__ == "0.3.0"
