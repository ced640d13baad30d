"""Greedy vertex and edge coloring by fixpoint refinement.

The same algorithm colors vertices and edges; only the notion of
neighbourhood changes. Vertices are adjacent when joined by an edge,
edges are adjacent when they share an endpoint.

The result is a proper coloring but not necessarily a minimal one.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Hashable, Iterable, Mapping, Optional, TypeVar

from ..domain.models import ColoringResult, Edge, Vertex
from .store import Graph

E = TypeVar("E", bound=Hashable)

UNCOLORED = sys.maxsize

logger = logging.getLogger(__name__)


def _smallest_free_color(used: set[int]) -> int:
    color = 0
    while color in used:
        color += 1
    return color


def greedy_coloring(
    entities: Iterable[E],
    neighbours: Callable[[E], Iterable[E]],
    initial: Optional[Mapping[E, int]] = None,
) -> ColoringResult:
    """Assign each entity the smallest color unused by its neighbours.

    Every entity starts uncolored (or at its ``initial`` color). Full
    passes are repeated until one changes nothing; within a pass an entity
    only ever moves to a strictly smaller color, and colors are read as
    they are updated.

    Parameters
    ----------
    entities:
        Entities to color, in pass order.
    neighbours:
        Returns the entities adjacent to a given entity. An entity listed
        as its own neighbour is ignored.
    initial:
        Optional starting colors, e.g. a previous fixpoint.

    Returns
    -------
    ColoringResult
        Color per entity and the number of passes run.
    """
    order = list(entities)
    colors: Dict[E, int] = {entity: UNCOLORED for entity in order}
    if initial:
        for entity, color in initial.items():
            if entity in colors:
                colors[entity] = color

    adjacency = {entity: [n for n in neighbours(entity) if n != entity] for entity in order}

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        for entity in order:
            used = {colors[n] for n in adjacency[entity] if n in colors}
            proposed = _smallest_free_color(used)
            if proposed < colors[entity]:
                colors[entity] = proposed
                changed = True

    logger.debug(
        "Coloring reached fixpoint",
        extra={"entities": len(order), "passes": passes},
    )
    return ColoringResult(colors=colors, passes=passes)


def vertex_coloring(
    graph: Graph, initial: Optional[Mapping[Vertex, int]] = None
) -> ColoringResult:
    """Color the vertices of ``graph`` so that neighbours differ."""
    return greedy_coloring(graph.vertices, graph.vertex_neighbours, initial)


def edge_coloring(
    graph: Graph, initial: Optional[Mapping[Edge, int]] = None
) -> ColoringResult:
    """Color the logical edges of ``graph`` so that touching edges differ."""
    return greedy_coloring(graph.edges, graph.edge_neighbours, initial)
