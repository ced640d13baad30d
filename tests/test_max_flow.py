"""Tests for the unit-augmentation max-flow engine."""

import pytest

from edgegraph.domain.errors import FlowNetworkError, VertexNotFoundError
from edgegraph.domain.models import Edge, Vertex
from edgegraph.graph.max_flow import find_augmenting_path, max_flow
from edgegraph.graph.store import DirectedGraph


def _edge(start: str, end: str, capacity: int, id: str) -> Edge:
    return Edge(Vertex(start), Vertex(end), capacity, id)


@pytest.fixture
def diamond() -> DirectedGraph:
    return DirectedGraph.from_edges(
        [
            _edge("s", "a", 1, "sa"),
            _edge("a", "t", 1, "at"),
            _edge("s", "b", 1, "sb"),
            _edge("b", "t", 1, "bt"),
        ]
    )


@pytest.fixture
def layered() -> DirectedGraph:
    return DirectedGraph.from_edges(
        [
            _edge("s", "a", 3, "sa"),
            _edge("s", "b", 2, "sb"),
            _edge("a", "c", 2, "ac"),
            _edge("b", "c", 2, "bc"),
            _edge("c", "t", 3, "ct"),
            _edge("a", "t", 1, "at"),
            _edge("t", "s", 4, "ts"),
        ]
    )


def test_diamond_max_flow_is_two(diamond):
    result = max_flow(diamond, "s", "t")

    assert result.value == 2
    assert all(units == 1 for units in result.flow.values())


def test_value_equals_net_outflow_of_source(diamond, layered):
    for graph in (diamond, layered):
        result = max_flow(graph, "s", "t")
        assert result.value == result.net_outflow(Vertex("s"))


def test_flow_respects_capacity_and_conservation(layered):
    result = max_flow(layered, "s", "t")

    assert result.value == 4
    for edge, units in result.flow.items():
        assert 0 <= units <= edge.weight
    for label in ("a", "b", "c"):
        assert result.net_outflow(Vertex(label)) == 0


def test_bottleneck_limits_flow():
    graph = DirectedGraph.from_edges([_edge("s", "a", 5, "sa"), _edge("a", "t", 2, "at")])

    result = max_flow(graph, "s", "t")

    assert result.value == 2
    assert result.flow[_edge("s", "a", 5, "sa")] == 2
    assert result.augmentations == 2


def test_zero_capacity_edges_carry_nothing():
    graph = DirectedGraph.from_edges([_edge("s", "t", 0, "st"), _edge("s", "a", 1, "sa")])

    result = max_flow(graph, "s", "t")

    assert result.value == 0
    assert set(result.flow.values()) == {0}


def test_unreachable_sink_gives_zero_flow():
    graph = DirectedGraph.from_edges([_edge("s", "a", 3, "sa"), _edge("t", "a", 3, "ta")])

    result = max_flow(graph, "s", "t")

    assert result.value == 0
    assert len(result.flow) == 2


def test_augmenting_path_runs_from_source_to_sink(layered):
    used = {edge: 0 for edge in layered.edges}

    path = find_augmenting_path(layered, Vertex("s"), Vertex("t"), used)

    assert path is not None
    assert path[0].start == Vertex("s")
    assert path[-1].end == Vertex("t")
    for before, after in zip(path, path[1:]):
        assert before.end == after.start


def test_unknown_vertices_raise(diamond):
    with pytest.raises(VertexNotFoundError):
        max_flow(diamond, "x", "t")
    with pytest.raises(VertexNotFoundError):
        max_flow(diamond, "s", "x")


def test_source_must_differ_from_sink(diamond):
    with pytest.raises(FlowNetworkError):
        max_flow(diamond, "s", "s")
