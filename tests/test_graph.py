"""
Unit tests for graph construction, edge mutation and the debug dump.
"""

import numpy as np
import pytest

from travgraph import Graph, InvalidArgument


class TestConstruction:
    @pytest.mark.parametrize("n", [1, 2, 7, 50])
    def test_fresh_graph_is_empty(self, n):
        g = Graph(n)
        assert g.vertex_count() == n
        assert g.edge_count() == 0
        assert all(v.adjacency == {} for v in g.vertices)

    def test_vertex_ids_match_positions(self):
        g = Graph(5)
        assert [v.id for v in g.vertices] == list(range(5))

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_rejects_non_positive_count(self, n):
        with pytest.raises(InvalidArgument):
            Graph(n)

    def test_rejects_non_integer_count(self):
        with pytest.raises(InvalidArgument):
            Graph(2.5)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Graph(0)


class TestDirectedEdges:
    def test_add_edge_sets_single_arc(self):
        g = Graph(3)
        g.add_edge(0, 2, 7)
        assert g.weight(0, 2) == 7
        assert g.weight(2, 0) is None
        assert g.edge_count() == 1

    def test_re_adding_overwrites_weight(self):
        g = Graph(3)
        g.add_edge(0, 1, 4)
        g.add_edge(0, 1, 9)
        assert g.weight(0, 1) == 9
        assert g.out_degree(0) == 1
        assert g.edge_count() == 2

    def test_overwrite_keeps_insertion_position(self):
        g = Graph(4)
        g.add_edge(0, 1, 1)
        g.add_edge(0, 2, 1)
        g.add_edge(0, 1, 5)
        assert list(g.neighbors(0)) == [(1, 5), (2, 1)]

    def test_self_loop_allowed(self):
        g = Graph(2)
        g.add_edge(1, 1, 3)
        assert g.weight(1, 1) == 3

    @pytest.mark.parametrize("u,v", [(-1, 0), (0, -1), (3, 0), (0, 3), (True, 0)])
    def test_out_of_range_rejected_without_mutation(self, u, v):
        g = Graph(3)
        with pytest.raises(InvalidArgument):
            g.add_edge(u, v, 1)
        assert g.edge_count() == 0
        assert all(vx.adjacency == {} for vx in g.vertices)


class TestUndirectedEdges:
    def test_symmetric_and_counted_once(self):
        g = Graph(4)
        g.add_undirected_edge(1, 3, 6)
        assert g.weight(1, 3) == g.weight(3, 1) == 6
        assert g.edge_count() == 1

    def test_out_of_range_rejected_without_mutation(self):
        g = Graph(2)
        with pytest.raises(InvalidArgument):
            g.add_undirected_edge(0, 2, 1)
        assert g.vertices[0].adjacency == {}
        assert g.edge_count() == 0

    def test_demo_graph_counts_calls(self, demo_graph):
        assert demo_graph.edge_count() == 8
        assert demo_graph.weight(5, 5) == 1


class TestFromEdges:
    def test_directed(self):
        g = Graph.from_edges(3, [(0, 1, 2), (1, 2, 3)])
        assert g.weight(1, 2) == 3
        assert g.weight(2, 1) is None

    def test_undirected(self):
        g = Graph.from_edges(3, [(0, 1, 2)], directed=False)
        assert g.weight(1, 0) == 2
        assert g.edge_count() == 1


class TestAccessorsValidate:
    def test_weight_out_of_range(self):
        with pytest.raises(InvalidArgument):
            Graph(2).weight(0, 2)

    def test_neighbors_out_of_range(self):
        with pytest.raises(InvalidArgument):
            list(Graph(2).neighbors(5))


def test_str_dump(demo_graph):
    lines = str(demo_graph).splitlines()
    assert len(lines) == 6
    assert lines[0] == "0\t:\t1(1)\t3(1)\t"
    assert lines[5] == "5\t:\t4(1)\t5(1)\t"


def test_str_dump_vertex_without_arcs():
    assert str(Graph(1)) == "0\t:\t\n"


class TestIndexTypes:
    def test_numpy_indices_from_matrix_view(self, demo_graph):
        targets = np.flatnonzero(np.isfinite(demo_graph.adjacency_matrix()[0]))
        t = targets[0]
        assert isinstance(t, np.integer)
        assert demo_graph.is_reachable(np.int64(0), t) == 1
        assert demo_graph.dijkstra(np.int64(0), np.int64(5)) == 4
        assert demo_graph.dijkstra(np.int64(0)) == [0, 1, 2, 1, 3, 4]
        assert demo_graph.bfs(np.int64(0)).distance(np.int64(5)) == 4
        assert demo_graph.display_path(np.int64(0), np.int64(5)) == "0 -> 1 -> 2 -> 4 -> 5"

    def test_numpy_indices_stored_as_int(self):
        g = Graph(3)
        g.add_edge(np.int32(0), np.int64(2), 4)
        assert list(g.neighbors(0)) == [(2, 4)]
        assert type(next(iter(g.vertices[0].adjacency))) is int

    def test_source_normalised_in_result(self, demo_graph):
        assert type(demo_graph.bfs(np.int64(2)).source) is int

    @pytest.mark.parametrize("bad", [True, False, 1.0, "1", None])
    def test_non_integer_indices_rejected(self, demo_graph, bad):
        with pytest.raises(InvalidArgument):
            demo_graph.bfs(bad)

    def test_result_accessors_reject_bool(self, demo_graph):
        res = demo_graph.bfs(0)
        with pytest.raises(InvalidArgument):
            res.distance(True)
        assert res.distance(np.int64(3)) == 1

    def test_numpy_index_out_of_range(self, demo_graph):
        with pytest.raises(InvalidArgument):
            demo_graph.dfs(np.int64(6))


def test_neighbors_validates_on_call():
    g = Graph(2)
    with pytest.raises(InvalidArgument):
        g.neighbors(99)


def test_neighbors_snapshot_survives_mutation():
    g = Graph(3)
    g.add_edge(0, 1, 1)
    arcs = g.neighbors(0)
    g.add_edge(0, 2, 1)
    assert list(arcs) == [(1, 1)]
