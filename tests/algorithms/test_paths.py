import random

import pytest

from sssp.algorithms.paths import Path, iter_paths, path_to
from sssp.algorithms.spf import INF, DistanceTable, compute
from sssp.exceptions import AlgorithmError, InvalidVertex
from sssp.graph.adjacency import Graph


def min_edge_weight(graph: Graph, u: int, v: int):
    weights = [w for t, w in graph.neighbors(u) if t == v]
    return min(weights) if weights else None


class TestPathTo:
    def test_scenario_direct_edge(self, triangle1):
        table = compute(triangle1, 0)
        assert path_to(table, 0).vertices == (0,)
        assert path_to(table, 1).vertices == (0, 1)
        assert path_to(table, 2).vertices == (0, 2)
        assert path_to(table, 1).cost == 3
        assert path_to(table, 2).cost == 3

    def test_scenario_detour(self, triangle2):
        table = compute(triangle2, 0)
        path = path_to(table, 1)
        assert path.vertices == (0, 2, 1)
        assert path.cost == 2
        assert path.render() == "0 -> 2 -> 1"

    def test_mesh_paths(self, mesh8):
        table = compute(mesh8, 6)
        paths = [None if p is None else list(p) for _, p in iter_paths(table)]
        assert paths == [
            [6, 0],
            [6, 1],
            [6, 1, 3, 2],
            [6, 1, 3],
            [6, 1, 3, 4],
            [6, 1, 3, 4, 5],
            [6],
            [6, 1, 3, 7],
        ]

    def test_square_paths(self, square1):
        table = compute(square1, 2)
        assert [list(path_to(table, v)) for v in range(4)] == [
            [2, 0],
            [2, 1],
            [2],
            [2, 3],
        ]

    def test_unreachable_has_no_path(self, isolated_source):
        table = compute(isolated_source, 0)
        for v in (1, 2, 3):
            assert table.distance(v) == INF
            assert path_to(table, v) is None

    def test_source_path_is_single_vertex(self, mesh8):
        table = compute(mesh8, 3)
        path = path_to(table, 3)
        assert len(path) == 1
        assert path.src == path.dst == 3
        assert path.cost == 0
        assert path.edges() == []

    def test_invalid_target(self, triangle1):
        table = compute(triangle1, 0)
        with pytest.raises(InvalidVertex):
            path_to(table, 3)

    def test_long_chain_is_not_recursive(self):
        n = 5000
        g = Graph.from_edges(n, [(i, i + 1, 1) for i in range(n - 1)])
        table = compute(g, 0)
        path = path_to(table, n - 1)
        assert len(path) == n
        assert path.src == 0 and path.dst == n - 1
        assert path.cost == n - 1

    @pytest.mark.parametrize("seed", range(15))
    def test_paths_are_valid(self, seed):
        rng = random.Random(seed)
        n = 12
        edges = [
            (rng.randrange(n), rng.randrange(n), rng.randint(0, 6)) for _ in range(40)
        ]
        g = Graph.from_edges(n, edges)
        table = compute(g, 0)
        for v, path in iter_paths(table):
            if path is None:
                assert not table.is_reachable(v)
                continue
            assert path.src == 0
            assert path.dst == v
            assert len(set(path)) == len(path)
            total = 0
            for u, w in path.edges():
                weight = min_edge_weight(g, u, w)
                assert weight is not None
                total += weight
            assert total == table.distance(v) == path.cost


class TestPathReconstructionErrors:
    def test_cycle_in_predecessors(self):
        table = DistanceTable(
            source=0, distances=(0, 1, 1), predecessors=(None, 2, 1)
        )
        with pytest.raises(AlgorithmError):
            path_to(table, 1)

    def test_chain_not_ending_at_source(self):
        table = DistanceTable(
            source=0, distances=(0, 1, 2), predecessors=(None, None, 1)
        )
        with pytest.raises(AlgorithmError):
            path_to(table, 2)


class TestPath:
    def test_sequence_protocol(self):
        path = Path(vertices=(4, 1, 7), cost=9)
        assert path[0] == 4
        assert path[-1] == 7
        assert list(path) == [4, 1, 7]
        assert len(path) == 3
        assert path.edges() == [(4, 1), (1, 7)]

    def test_render_separator(self):
        path = Path(vertices=(0, 2, 1), cost=2)
        assert path.render() == "0 -> 2 -> 1"
        assert path.render(",") == "0,2,1"
