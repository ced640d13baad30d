"""Tests for the graph store and its builder."""

import pytest

from edgegraph.domain.errors import VertexNotFoundError
from edgegraph.domain.models import Edge, Vertex
from edgegraph.graph.store import DirectedGraph, GraphBuilder, UndirectedGraph


def _edge(start: str, end: str, weight: int = 1, id: str = "e") -> Edge:
    return Edge(Vertex(start), Vertex(end), weight, id)


def test_edge_reverse_keeps_weight_and_id():
    edge = _edge("A", "B", 7, "e1")
    reverse = edge.reverse()

    assert reverse == _edge("B", "A", 7, "e1")
    assert reverse.reverse() == edge


def test_edges_differing_in_weight_are_distinct():
    assert _edge("A", "B", 1, "e1") != _edge("A", "B", 2, "e1")
    assert _edge("A", "B", 1, "e1") != _edge("A", "B", 1, "e2")


def test_builder_produces_requested_variant():
    assert isinstance(GraphBuilder(directed=True).build(), DirectedGraph)
    assert isinstance(GraphBuilder(directed=False).build(), UndirectedGraph)


class TestDirectedGraph:
    """Adjacency of directed stores."""

    def test_adjacency_holds_only_added_edges(self):
        graph = DirectedGraph.from_edges(
            [_edge("A", "B", 1, "e1"), _edge("B", "C", 2, "e2")]
        )

        assert graph.adjacency("A") == (_edge("A", "B", 1, "e1"),)
        assert graph.adjacency("B") == (_edge("B", "C", 2, "e2"),)
        assert graph.adjacency("C") == ()

    def test_duplicate_edge_is_ignored(self):
        edge = _edge("A", "B", 1, "e1")
        graph = DirectedGraph.from_edges([edge, edge])

        assert graph.adjacency("A") == (edge,)
        assert graph.edge_count == 1

    def test_vertices_in_first_seen_order(self):
        graph = DirectedGraph.from_edges(
            [_edge("B", "A", id="e1"), _edge("C", "B", id="e2"), _edge("A", "D", id="e3")]
        )

        assert [v.label for v in graph.vertices] == ["B", "A", "C", "D"]
        assert graph.vertex_count == 4

    def test_self_loop_registers_vertex_once(self):
        graph = DirectedGraph.from_edges([_edge("A", "A", 3, "loop")])

        assert graph.vertices == (Vertex("A"),)
        assert graph.vertex_neighbours("A") == (Vertex("A"),)

    def test_parallel_edges_are_not_collapsed(self):
        graph = DirectedGraph.from_edges(
            [_edge("A", "B", 1, "e1"), _edge("A", "B", 5, "e2")]
        )

        assert graph.vertex_neighbours("A") == (Vertex("B"), Vertex("B"))
        assert graph.degree("A") == 2


class TestUndirectedGraph:
    """Mirroring and the flat edge list of undirected stores."""

    def test_edge_is_mirrored(self):
        edge = _edge("A", "B", 4, "e1")
        graph = UndirectedGraph.from_edges([edge])

        assert graph.adjacency("A") == (edge,)
        assert graph.adjacency("B") == (edge.reverse(),)
        assert graph.edges == (edge,)

    def test_insertion_is_idempotent(self):
        edge = _edge("A", "B", 4, "e1")
        graph = UndirectedGraph.from_edges([edge, edge, edge.reverse()])

        assert graph.adjacency("A") == (edge,)
        assert graph.adjacency("B") == (edge.reverse(),)
        assert graph.edge_count == 1

    def test_vertex_neighbours_follow_both_directions(self):
        graph = UndirectedGraph.from_edges(
            [_edge("A", "B", id="e1"), _edge("C", "A", id="e2")]
        )

        assert graph.vertex_neighbours("A") == (Vertex("B"), Vertex("C"))
        assert graph.vertex_neighbours("C") == (Vertex("A"),)

    def test_edge_neighbours_share_an_endpoint(self):
        e1 = _edge("A", "B", id="e1")
        e2 = _edge("B", "C", id="e2")
        e3 = _edge("C", "D", id="e3")
        graph = UndirectedGraph.from_edges([e1, e2, e3])

        assert graph.edge_neighbours(e2) == (e1, e3)
        assert graph.edge_neighbours(e1) == (e2,)
        assert graph.edge_neighbours(e1.reverse()) == (e2,)

    def test_every_endpoint_is_a_vertex(self):
        edges = [_edge("A", "B", id="e1"), _edge("B", "C", id="e2"), _edge("D", "A", id="e3")]
        graph = UndirectedGraph.from_edges(edges)

        endpoints = {v for e in edges for v in (e.start, e.end)}
        assert set(graph.vertices) == endpoints
        assert len(graph.vertices) == len(endpoints)


def test_unknown_vertex_raises():
    graph = DirectedGraph.from_edges([_edge("A", "B")])

    with pytest.raises(VertexNotFoundError) as excinfo:
        graph.adjacency("Z")
    assert excinfo.value.vertex_label == "Z"

    with pytest.raises(VertexNotFoundError):
        graph.vertex("Z")


def test_membership_accepts_labels_and_vertices():
    graph = DirectedGraph.from_edges([_edge("A", "B")])

    assert "A" in graph
    assert Vertex("B") in graph
    assert "Z" not in graph
    assert 42 not in graph
    assert graph.vertex("A") == Vertex("A")
