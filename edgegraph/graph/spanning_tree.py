"""Minimum spanning tree using Prim's algorithm.

The tree is grown from a start vertex by repeatedly scanning every edge
leaving the tree and keeping the lightest one. Each pass is a full scan
of the tree's adjacency, so no priority queue is involved.

On a disconnected store only the component of the start vertex is
covered; the partial tree is returned as a regular result.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Union

from ..domain.models import Edge, SpanningTreeResult, Vertex
from .store import Graph

logger = logging.getLogger(__name__)


def prim_mst(
    graph: Graph, start: Optional[Union[Vertex, str]] = None
) -> SpanningTreeResult:
    """Compute a minimum spanning tree of the component containing ``start``.

    Parameters
    ----------
    graph:
        Store to span, usually an ``UndirectedGraph``.
    start:
        Vertex to grow the tree from. Defaults to the first vertex.

    Returns
    -------
    SpanningTreeResult
        Tree edges in the order they were added. Compare trees by edge set
        or total weight: ties between equal weights are resolved by scan
        order.

    Raises
    ------
    VertexNotFoundError
        If ``start`` is not part of the store.
    """
    if graph.vertex_count == 0:
        return SpanningTreeResult(start=None)

    root = graph.vertices[0] if start is None else graph.vertices[graph.handle(start)]

    tree_order: List[Vertex] = [root]
    in_tree: Set[Vertex] = {root}
    tree_edges: List[Edge] = []

    max_passes = 2 * graph.vertex_count ** 2
    passes = 0

    while len(in_tree) < graph.vertex_count and passes < max_passes:
        passes += 1
        best: Optional[Edge] = None

        for vertex in tree_order:
            for edge in graph.adjacency(vertex):
                if edge.end in in_tree:
                    continue
                if best is None or edge.weight < best.weight:
                    best = edge

        if best is None:
            # Nothing left to reach from the tree
            break

        in_tree.add(best.end)
        tree_order.append(best.end)
        tree_edges.append(best)

    result = SpanningTreeResult(
        start=root,
        edges=tuple(tree_edges),
        vertices=frozenset(in_tree),
        vertex_count=graph.vertex_count,
    )

    if not result.is_spanning:
        logger.warning(
            "Graph is disconnected, returning partial spanning tree",
            extra={
                "start": root.label,
                "covered": len(in_tree),
                "vertices": graph.vertex_count,
            },
        )

    return result
