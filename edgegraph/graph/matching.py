"""Randomized greedy maximum-cardinality matching.

Each iteration grows one maximal matching by drawing random addable
edges, and the largest matching across iterations is kept. Edges whose
start vertex has degree one ("mono" edges) are drawn first, since a leaf
can only ever be matched through its single edge.

The result is always a valid maximal matching; maximum cardinality is
only reached heuristically.
"""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional, Set

from ..domain.models import Edge, MatchingResult, Vertex
from .store import Graph

logger = logging.getLogger(__name__)


def covers_maximum(vertex_count: int, matching_size: int) -> bool:
    """Check whether a matching of this size cannot be improved.

    True when the matching covers every vertex, or every vertex but one
    for an odd vertex count.
    """
    if matching_size == 0:
        return False
    return (
        vertex_count // matching_size == 2 and vertex_count % matching_size in (0, 1)
    )


def _random_maximal_matching(
    candidates: List[Edge], mono: Set[Edge], rng: random.Random
) -> List[Edge]:
    matching: List[Edge] = []
    matched: Set[Vertex] = set()

    while True:
        addable = [
            edge
            for edge in candidates
            if edge.start not in matched and edge.end not in matched
        ]
        if not addable:
            return matching

        pool = [edge for edge in addable if edge in mono] or addable
        chosen = rng.choice(pool)
        matching.append(chosen)
        matched.add(chosen.start)
        matched.add(chosen.end)


def max_cardinality_matching(
    graph: Graph,
    max_iterations: int,
    rng: Optional[random.Random] = None,
) -> MatchingResult:
    """Search for a maximum-cardinality matching of ``graph``.

    Parameters
    ----------
    graph:
        Connected ``UndirectedGraph`` to match.
    max_iterations:
        Upper bound on the number of random maximal matchings generated.
    rng:
        Randomness source. A fresh generator seeded from the
        high-resolution clock is used when omitted.

    Returns
    -------
    MatchingResult
        The largest matching seen. Generation stops early once a matching
        covers all vertices (all but one for odd vertex counts).

    Raises
    ------
    ValueError
        If ``max_iterations`` is smaller than 1.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

    if rng is None:
        rng = random.Random(time.perf_counter_ns())

    candidates = [edge for edge in graph.edges if not edge.is_loop]
    if not candidates:
        return MatchingResult()

    mono = {edge for edge in candidates if graph.degree(edge.start) == 1}

    best: List[Edge] = []
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        matching = _random_maximal_matching(candidates, mono, rng)

        if covers_maximum(graph.vertex_count, len(matching)):
            logger.debug(
                "Matching covers every vertex",
                extra={"size": len(matching), "iterations": iterations},
            )
            return MatchingResult(
                edges=tuple(matching),
                iterations=iterations,
                is_maximum_bound_reached=True,
            )

        if len(matching) > len(best):
            best = matching

    logger.info(
        "Matching iteration cap reached",
        extra={"size": len(best), "iterations": iterations},
    )
    return MatchingResult(edges=tuple(best), iterations=iterations)
