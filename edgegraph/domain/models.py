"""Immutable domain models for the edgegraph toolkit.

All models are frozen dataclasses with slots. Vertices and edges carry
identity only; everything an algorithm computes about them (distances,
colors, flow) lives in the result models below, keyed by vertex or edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph vertex, identified by its label alone."""

    label: str

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted, labelled edge from ``start`` to ``end``.

    Equality covers the full tuple: two edges between the same endpoints
    with different weights or ids are distinct edges.

    Attributes:
        start: Vertex the edge leaves
        end: Vertex the edge enters
        weight: Integer weight (capacity for max-flow)
        id: Edge identity label, independent from vertex labels
    """

    start: Vertex
    end: Vertex
    weight: int
    id: str

    def reverse(self) -> Edge:
        """Return the same edge with swapped endpoints."""
        return Edge(start=self.end, end=self.start, weight=self.weight, id=self.id)

    @property
    def is_loop(self) -> bool:
        return self.start == self.end

    def touches(self, other: Edge) -> bool:
        """Check whether both edges share at least one endpoint."""
        return bool({self.start, self.end} & {other.start, other.end})

    def __str__(self) -> str:
        return f"{self.id}({self.start}->{self.end}, {self.weight})"


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """One parsed row of an edge record file.

    Attributes:
        start_id: Label of the start vertex
        end_id: Label of the end vertex
        weight: Integer weight (-1 for unweighted records)
        edge_id: Edge identity label
    """

    start_id: str
    end_id: str
    weight: int
    edge_id: str

    def to_edge(self) -> Edge:
        return Edge(
            start=Vertex(self.start_id),
            end=Vertex(self.end_id),
            weight=self.weight,
            id=self.edge_id,
        )


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Single-source shortest distances.

    Attributes:
        source: The vertex distances are measured from
        distances: Distance for every vertex of the store, ``math.inf``
            when the vertex cannot be reached
        predecessors: Incoming edge on the best known path, per reached vertex
    """

    source: Vertex
    distances: Mapping[Vertex, float]
    predecessors: Mapping[Vertex, Edge] = field(default_factory=dict)

    def is_reachable(self, vertex: Vertex) -> bool:
        """Check if ``vertex`` can be reached from the source."""
        return not math.isinf(self.distances.get(vertex, math.inf))

    def distance_to(self, vertex: Vertex) -> float:
        """Return the distance to ``vertex`` (``math.inf`` if unreachable)."""
        return self.distances.get(vertex, math.inf)

    def path_to(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Return the edges of the best path from the source to ``vertex``.

        Returns an empty tuple when ``vertex`` is the source itself or is
        unreachable.
        """
        if not self.is_reachable(vertex):
            return ()

        path: list[Edge] = []
        seen: set[Vertex] = set()
        current = vertex
        while current != self.source and current not in seen:
            seen.add(current)
            edge = self.predecessors.get(current)
            if edge is None:
                return ()
            path.append(edge)
            current = edge.start

        path.reverse()
        return tuple(path)


@dataclass(frozen=True, slots=True)
class SpanningTreeResult:
    """Edges selected by Prim's algorithm, in the order they were added.

    Attributes:
        start: Vertex the tree was grown from
        edges: Tree edges in order of addition
        vertices: Vertices covered by the tree
        vertex_count: Number of vertices in the whole store
    """

    start: Optional[Vertex]
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    vertices: frozenset[Vertex] = field(default_factory=frozenset)
    vertex_count: int = 0

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    @property
    def is_spanning(self) -> bool:
        """Check if the tree covers every vertex of the store."""
        return len(self.vertices) == self.vertex_count


@dataclass(frozen=True, slots=True)
class ColoringResult:
    """Color assignment for vertices or edges.

    Attributes:
        colors: Color per entity (vertex or edge)
        passes: Number of full passes run until the fixpoint
    """

    colors: Mapping[Any, int]
    passes: int = 0

    @property
    def color_count(self) -> int:
        """Return the number of distinct colors used."""
        return len(set(self.colors.values()))

    def color_of(self, entity: Any) -> int:
        return self.colors[entity]


@dataclass(frozen=True, slots=True)
class MatchingResult:
    """Best matching found by the randomized greedy search.

    Attributes:
        edges: Pairwise vertex-disjoint edges
        iterations: Number of maximal matchings generated
        is_maximum_bound_reached: Whether the matching covers every vertex,
            or every vertex but one for an odd vertex count
    """

    edges: tuple[Edge, ...] = field(default_factory=tuple)
    iterations: int = 0
    is_maximum_bound_reached: bool = False

    @property
    def size(self) -> int:
        return len(self.edges)


@dataclass(frozen=True, slots=True)
class FlowResult:
    """Flow assignment produced by unit augmentation.

    Attributes:
        source: Source vertex
        sink: Sink vertex
        flow: Units of flow sent through every edge of the store
        value: Total flow from source to sink
        augmentations: Number of augmenting paths found
    """

    source: Vertex
    sink: Vertex
    flow: Mapping[Edge, int]
    value: int = 0
    augmentations: int = 0

    def net_outflow(self, vertex: Vertex) -> int:
        """Return flow leaving ``vertex`` minus flow entering it."""
        leaving = sum(units for edge, units in self.flow.items() if edge.start == vertex)
        entering = sum(units for edge, units in self.flow.items() if edge.end == vertex)
        return leaving - entering
