"""Graph store: adjacency lists for directed and undirected graphs.

A store is assembled through a ``GraphBuilder`` and finalized by
``build()`` into an immutable ``DirectedGraph`` or ``UndirectedGraph``.
Vertices live in an arena indexed by integer handle (first-seen order),
and adjacency is kept as handle-indexed tuples of outgoing edges.

The undirected variant has no dedicated edge type: every inserted edge is
mirrored with ``Edge.reverse()`` into the adjacency of its end vertex,
while the flat edge list keeps the edge once, as inserted.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Dict, Iterable, List, Set, Tuple, Union

from ..domain.errors import VertexNotFoundError
from ..domain.models import Edge, Vertex

VertexLike = Union[Vertex, str]

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Mutable builder collecting edges before a store is finalized.

    ``add_edge`` is the only way a store grows. Insertion is idempotent:
    an edge equal to one already listed for its start vertex is ignored.

    Example:
        builder = GraphBuilder(directed=True)
        builder.add_edge(Edge(Vertex("A"), Vertex("B"), 1, "e1"))
        graph = builder.build()
    """

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._vertices: List[Vertex] = []
        self._index: Dict[Vertex, int] = {}
        self._adjacency: List[List[Edge]] = []
        self._adjacency_seen: List[Set[Edge]] = []
        self._edges: List[Edge] = []
        self._edges_seen: Set[Edge] = set()

    def _register(self, vertex: Vertex) -> int:
        handle = self._index.get(vertex)
        if handle is None:
            handle = len(self._vertices)
            self._index[vertex] = handle
            self._vertices.append(vertex)
            self._adjacency.append([])
            self._adjacency_seen.append(set())
        return handle

    def _insert(self, handle: int, edge: Edge) -> None:
        if edge not in self._adjacency_seen[handle]:
            self._adjacency_seen[handle].add(edge)
            self._adjacency[handle].append(edge)

    def add_edge(self, edge: Edge) -> None:
        """Insert ``edge`` into the store under construction.

        For undirected builders the reversed edge is inserted into the end
        vertex's adjacency under the same de-duplication rule. Both
        endpoints are registered as vertices if new.

        Args:
            edge: The edge to insert.
        """
        start = self._register(edge.start)
        end = self._register(edge.end)

        self._insert(start, edge)
        if not self.directed:
            self._insert(end, edge.reverse())

        duplicate = edge in self._edges_seen or (
            not self.directed and edge.reverse() in self._edges_seen
        )
        if not duplicate:
            self._edges_seen.add(edge)
            self._edges.append(edge)

    def add_edges(self, edges: Iterable[Edge]) -> GraphBuilder:
        """Insert every edge of ``edges`` and return the builder."""
        for edge in edges:
            self.add_edge(edge)
        return self

    def build(self) -> Graph:
        """Finalize the builder into an immutable store."""
        cls = DirectedGraph if self.directed else UndirectedGraph
        graph = cls(
            vertices=tuple(self._vertices),
            adjacency=tuple(tuple(edges) for edges in self._adjacency),
            edges=tuple(self._edges),
        )
        logger.debug(
            "Graph built",
            extra={
                "directed": self.directed,
                "vertices": graph.vertex_count,
                "edges": graph.edge_count,
            },
        )
        return graph


class Graph:
    """Immutable adjacency-list graph store.

    Use ``DirectedGraph`` or ``UndirectedGraph``; both are produced by
    ``GraphBuilder.build()`` or their ``from_edges`` constructor.

    Complexity:
        - vertex_count / edge_count: O(1)
        - adjacency / vertex_neighbours: O(deg(v))
        - edge_neighbours: O(deg(start) + deg(end))
    """

    directed: ClassVar[bool] = False

    def __init__(
        self,
        vertices: Tuple[Vertex, ...],
        adjacency: Tuple[Tuple[Edge, ...], ...],
        edges: Tuple[Edge, ...],
    ) -> None:
        self._vertices = vertices
        self._index: Dict[Vertex, int] = {v: i for i, v in enumerate(vertices)}
        self._labels: Dict[str, Vertex] = {v.label: v for v in vertices}
        self._adjacency = adjacency
        self._edges = edges

        # Flat-edge positions touching each vertex handle
        incidence: List[List[int]] = [[] for _ in vertices]
        for position, edge in enumerate(edges):
            incidence[self._index[edge.start]].append(position)
            if edge.end != edge.start:
                incidence[self._index[edge.end]].append(position)
        self._incidence: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(positions) for positions in incidence
        )

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> Graph:
        """Build a store of this variant from ``edges`` in one call."""
        return GraphBuilder(directed=cls.directed).add_edges(edges).build()

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices, in first-seen order."""
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Logical edges as inserted, without mirrored duplicates."""
        return self._edges

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _resolve(self, vertex: VertexLike) -> Vertex:
        if isinstance(vertex, Vertex):
            return vertex
        return Vertex(vertex)

    def handle(self, vertex: VertexLike) -> int:
        """Return the integer handle of ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex is not part of the store.
        """
        resolved = self._resolve(vertex)
        try:
            return self._index[resolved]
        except KeyError:
            raise VertexNotFoundError(
                f"Vertex not in graph: {resolved.label}",
                vertex_label=resolved.label,
            ) from None

    def has_vertex(self, vertex: VertexLike) -> bool:
        return self._resolve(vertex) in self._index

    def vertex(self, label: str) -> Vertex:
        """Look up a vertex by label.

        Args:
            label: The vertex label.

        Returns:
            The stored vertex.

        Raises:
            VertexNotFoundError: If no vertex carries this label.
        """
        found = self._labels.get(label)
        if found is None:
            raise VertexNotFoundError(
                f"Vertex not in graph: {label}",
                vertex_label=label,
            )
        return found

    def adjacency(self, vertex: VertexLike) -> Tuple[Edge, ...]:
        """Outgoing edges of ``vertex`` in insertion order."""
        return self._adjacency[self.handle(vertex)]

    def degree(self, vertex: VertexLike) -> int:
        """Number of adjacency entries of ``vertex``."""
        return len(self.adjacency(vertex))

    def vertex_neighbours(self, vertex: VertexLike) -> Tuple[Vertex, ...]:
        """Endpoints reachable by one outgoing edge.

        Parallel edges yield the same neighbour more than once.
        """
        return tuple(edge.end for edge in self.adjacency(vertex))

    def edge_neighbours(self, edge: Edge) -> Tuple[Edge, ...]:
        """Logical edges sharing at least one endpoint with ``edge``.

        The edge itself (and, for undirected stores, its mirror) is not
        included. Order follows the flat edge list.

        Raises:
            VertexNotFoundError: If an endpoint is not part of the store.
        """
        excluded = {edge} if self.directed else {edge, edge.reverse()}
        positions = set(self._incidence[self.handle(edge.start)])
        positions.update(self._incidence[self.handle(edge.end)])
        return tuple(
            self._edges[p] for p in sorted(positions) if self._edges[p] not in excluded
        )

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, (Vertex, str)):
            return self.has_vertex(vertex)
        return False

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )


class DirectedGraph(Graph):
    """Store whose adjacency holds exactly the edges added from each vertex."""

    directed: ClassVar[bool] = True


class UndirectedGraph(Graph):
    """Store mirroring every edge into the adjacency of both endpoints."""

    directed: ClassVar[bool] = False
