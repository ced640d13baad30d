"""Graph store and the algorithms that run on it.

This subpackage contains the immutable adjacency-list store and the
shortest-path, spanning-tree, coloring, matching and max-flow engines.
Engines only read the store they are given.
"""

from .coloring import edge_coloring, greedy_coloring, vertex_coloring
from .matching import max_cardinality_matching
from .max_flow import max_flow
from .shortest_path import all_shortest_paths, shortest_paths
from .spanning_tree import prim_mst
from .store import DirectedGraph, Graph, GraphBuilder, UndirectedGraph

__all__ = [
    "Graph",
    "GraphBuilder",
    "DirectedGraph",
    "UndirectedGraph",
    "shortest_paths",
    "all_shortest_paths",
    "prim_mst",
    "greedy_coloring",
    "vertex_coloring",
    "edge_coloring",
    "max_cardinality_matching",
    "max_flow",
]
