"""Plain-text rendering of algorithm results.

Every formatter returns the full text without a trailing newline; the
caller decides where it is written.
"""

from __future__ import annotations

from typing import Iterable

from ..domain.models import (
    ColoringResult,
    Edge,
    FlowResult,
    MatchingResult,
    ShortestPathResult,
    SpanningTreeResult,
)

NO_PATH = "No path!"


def format_shortest_paths(results: Iterable[ShortestPathResult]) -> str:
    """One ``source<TAB>target<TAB>distance`` line per vertex pair."""
    lines = []
    for result in results:
        for vertex, distance in result.distances.items():
            value = str(int(distance)) if result.is_reachable(vertex) else NO_PATH
            lines.append(f"{result.source}\t{vertex}\t{value}")
    return "\n".join(lines)


def format_edge_ids(edges: Iterable[Edge]) -> str:
    """Edge ids sorted and joined with commas."""
    return ",".join(sorted(edge.id for edge in edges))


def format_spanning_tree(tree: SpanningTreeResult) -> str:
    return format_edge_ids(tree.edges)


def format_matching(matching: MatchingResult) -> str:
    return format_edge_ids(matching.edges)


def format_coloring(coloring: ColoringResult) -> str:
    """One ``label: color`` line per vertex or edge.

    Edges are labelled by their id.
    """
    lines = []
    for entity, color in coloring.colors.items():
        label = entity.id if isinstance(entity, Edge) else str(entity)
        lines.append(f"{label}: {color}")
    return "\n".join(lines)


def format_flow(flow: FlowResult) -> str:
    """One ``id: units`` line per edge, then the total flow."""
    lines = [f"{edge.id}: {units}" for edge, units in flow.flow.items()]
    lines.extend(["", "", f"Max flow: {flow.value}"])
    return "\n".join(lines)
