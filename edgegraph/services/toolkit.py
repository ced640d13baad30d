"""Graph toolkit service - Main orchestrator.

This service loads the right store variant for each algorithm through
an injected record source, runs the algorithm and logs the outcome.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import AlgorithmConfig, get_config
from ..domain.models import (
    ColoringResult,
    FlowResult,
    MatchingResult,
    ShortestPathResult,
    SpanningTreeResult,
)
from ..graph import (
    all_shortest_paths,
    edge_coloring,
    max_cardinality_matching,
    max_flow,
    prim_mst,
    vertex_coloring,
)
from ..ports.graph import EdgeRecordSourcePort, PathLike


@dataclass
class GraphToolkitService:
    """Runs one graph algorithm on a store loaded from a record source.

    Shortest paths and max flow use directed stores; spanning trees,
    colorings and matchings use undirected ones.

    Attributes:
        records: Source of edge records
        config: Algorithm configuration (matching iterations, seed)
    """

    records: EdgeRecordSourcePort
    config: AlgorithmConfig = field(default_factory=lambda: get_config().algorithms)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_paths(self, path: PathLike) -> List[ShortestPathResult]:
        """Compute shortest distances from every vertex of a directed graph.

        Args:
            path: Location of the edge records.

        Returns:
            One ShortestPathResult per vertex, in vertex order.

        Raises:
            GraphLoadError: If the records cannot be read.
        """
        graph = self.records.load_directed(path)
        results = all_shortest_paths(graph)
        self._logger.info(
            "Shortest paths computed",
            extra={"sources": len(results), "vertices": graph.vertex_count},
        )
        return results

    def minimum_spanning_tree(
        self, path: PathLike, start: Optional[str] = None
    ) -> SpanningTreeResult:
        """Compute a minimum spanning tree with Prim's algorithm.

        Args:
            path: Location of the edge records.
            start: Label of the start vertex (first vertex if omitted).

        Returns:
            SpanningTreeResult, partial when the graph is disconnected.

        Raises:
            GraphLoadError: If the records cannot be read.
            VertexNotFoundError: If ``start`` is not in the graph.
        """
        graph = self.records.load_undirected(path)
        tree = prim_mst(graph, start)
        self._logger.info(
            "Spanning tree computed",
            extra={
                "edges": len(tree.edges),
                "total_weight": tree.total_weight,
                "spanning": tree.is_spanning,
            },
        )
        return tree

    def vertex_colors(self, path: PathLike) -> ColoringResult:
        """Greedily color the vertices of an undirected graph."""
        graph = self.records.load_undirected(path)
        coloring = vertex_coloring(graph)
        self._logger.info(
            "Vertex coloring computed",
            extra={"colors": coloring.color_count, "passes": coloring.passes},
        )
        return coloring

    def edge_colors(self, path: PathLike) -> ColoringResult:
        """Greedily color the edges of an undirected graph."""
        graph = self.records.load_undirected(path)
        coloring = edge_coloring(graph)
        self._logger.info(
            "Edge coloring computed",
            extra={"colors": coloring.color_count, "passes": coloring.passes},
        )
        return coloring

    def max_matching(
        self,
        path: PathLike,
        max_iterations: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> MatchingResult:
        """Search for a maximum-cardinality matching.

        Args:
            path: Location of the edge records.
            max_iterations: Iteration cap (config default if omitted).
            rng: Randomness source. When omitted, seeded from the configured
                seed if there is one, from the clock otherwise.

        Returns:
            The best MatchingResult found.

        Raises:
            GraphLoadError: If the records cannot be read.
            ValueError: If ``max_iterations`` is smaller than 1.
        """
        graph = self.records.load_undirected(path)
        iterations = (
            self.config.matching_iterations if max_iterations is None else max_iterations
        )
        if rng is None and self.config.random_seed is not None:
            rng = random.Random(self.config.random_seed)

        matching = max_cardinality_matching(graph, iterations, rng)
        self._logger.info(
            "Matching computed",
            extra={
                "size": matching.size,
                "iterations": matching.iterations,
                "maximum_bound_reached": matching.is_maximum_bound_reached,
            },
        )
        return matching

    def max_flow(self, path: PathLike, source: str, sink: str) -> FlowResult:
        """Compute a maximum flow between two vertices of a directed graph.

        Args:
            path: Location of the edge records.
            source: Label of the source vertex.
            sink: Label of the sink vertex.

        Returns:
            FlowResult with per-edge flow and total value.

        Raises:
            GraphLoadError: If the records cannot be read.
            VertexNotFoundError: If source or sink is not in the graph.
            FlowNetworkError: If source and sink are the same vertex.
        """
        graph = self.records.load_directed(path)
        flow = max_flow(graph, source, sink)
        self._logger.info(
            "Max flow computed",
            extra={"source": source, "sink": sink, "value": flow.value},
        )
        return flow
