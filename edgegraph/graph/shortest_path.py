"""Single-source shortest paths using a selection-based Dijkstra.

The frontier is scanned linearly for its closest member, which keeps the
algorithm at O(V^2) per source. Edge weights must be non-negative; this
is not checked.
"""

from __future__ import annotations

import math
from typing import Dict, List, Union

from ..domain.models import Edge, ShortestPathResult, Vertex
from .store import Graph


def shortest_paths(graph: Graph, source: Union[Vertex, str]) -> ShortestPathResult:
    """Compute the distance from ``source`` to every vertex of ``graph``.

    Parameters
    ----------
    graph:
        Store to search, usually a ``DirectedGraph``.
    source:
        Vertex (or vertex label) the distances are measured from.

    Returns
    -------
    ShortestPathResult
        Distances for every vertex, ``math.inf`` for unreachable ones,
        and the predecessor edge of every reached vertex.

    Raises
    ------
    VertexNotFoundError
        If ``source`` is not part of the store.
    """
    origin = graph.vertices[graph.handle(source)]

    distances: Dict[Vertex, float] = {vertex: math.inf for vertex in graph.vertices}
    predecessors: Dict[Vertex, Edge] = {}
    distances[origin] = 0

    # Direct neighbours are known up front
    for edge in graph.adjacency(origin):
        if edge.end != origin and edge.weight < distances[edge.end]:
            distances[edge.end] = edge.weight
            predecessors[edge.end] = edge

    frontier = dict.fromkeys(graph.vertices)

    while frontier:
        u = min(frontier, key=distances.__getitem__)
        del frontier[u]

        if math.isinf(distances[u]):
            # Every vertex still on the frontier is unreachable
            break

        for edge in graph.adjacency(u):
            v = edge.end
            if v not in frontier:
                continue
            alt = distances[u] + edge.weight
            if alt < distances[v]:
                distances[v] = alt
                predecessors[v] = edge

    return ShortestPathResult(
        source=origin,
        distances=distances,
        predecessors=predecessors,
    )


def all_shortest_paths(graph: Graph) -> List[ShortestPathResult]:
    """Run ``shortest_paths`` from every vertex, in vertex order."""
    return [shortest_paths(graph, vertex) for vertex in graph.vertices]
