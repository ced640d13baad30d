"""Maximum flow by unit augmentation along depth-first paths.

Edge weights are capacities. Every augmenting path found raises the flow
of each of its edges by exactly one unit, whatever the residual capacity
along the path. The number of path searches is therefore the flow value
itself, and capacities must be integers.

Only forward residual capacity is considered: flow already sent through
an edge is never cancelled.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Set, Union

from ..domain.errors import FlowNetworkError
from ..domain.models import Edge, FlowResult, Vertex
from .store import Graph

logger = logging.getLogger(__name__)


def find_augmenting_path(
    graph: Graph,
    source: Vertex,
    sink: Vertex,
    used: Mapping[Edge, int],
) -> Optional[List[Edge]]:
    """Search depth-first for a source-to-sink path with spare capacity.

    Parameters
    ----------
    graph:
        Flow network.
    source, sink:
        Path endpoints, both part of ``graph``.
    used:
        Flow already sent through each edge.

    Returns
    -------
    list[Edge] or None
        Path edges from source to sink, or ``None`` if the sink cannot be
        reached through edges with spare capacity.
    """
    parents: Dict[Vertex, Edge] = {}
    visited: Set[Vertex] = {source}
    stack: List[Vertex] = [source]

    while stack:
        vertex = stack.pop()
        if vertex == sink:
            break

        for edge in graph.adjacency(vertex):
            if edge.end in visited or edge.weight - used[edge] <= 0:
                continue
            visited.add(edge.end)
            parents[edge.end] = edge
            stack.append(edge.end)

    if sink not in parents:
        return None

    path: List[Edge] = []
    current = sink
    while current != source:
        edge = parents[current]
        path.append(edge)
        current = edge.start

    path.reverse()
    return path


def max_flow(
    graph: Graph,
    source: Union[Vertex, str],
    sink: Union[Vertex, str],
) -> FlowResult:
    """Compute a feasible flow from ``source`` to ``sink`` and its value.

    Parameters
    ----------
    graph:
        Flow network, usually a ``DirectedGraph``.
    source:
        Vertex (or label) the flow leaves.
    sink:
        Vertex (or label) the flow enters.

    Returns
    -------
    FlowResult
        Units sent through every edge of the store and the total flow.

    Raises
    ------
    VertexNotFoundError
        If ``source`` or ``sink`` is not part of the store.
    FlowNetworkError
        If ``source`` and ``sink`` are the same vertex.
    """
    origin = graph.vertices[graph.handle(source)]
    target = graph.vertices[graph.handle(sink)]
    if origin == target:
        raise FlowNetworkError(
            f"Source and sink must differ, got {origin.label} for both",
            source=origin.label,
            sink=target.label,
        )

    used: Dict[Edge, int] = {}
    for vertex in graph.vertices:
        for edge in graph.adjacency(vertex):
            used[edge] = 0

    value = 0
    while True:
        path = find_augmenting_path(graph, origin, target, used)
        if path is None:
            break
        for edge in path:
            used[edge] += 1
        value += 1

    logger.debug(
        "Max flow computed",
        extra={"source": origin.label, "sink": target.label, "value": value},
    )
    return FlowResult(
        source=origin,
        sink=target,
        flow=used,
        value=value,
        augmentations=value,
    )
