"""Top-level package for the edgegraph toolkit.

This package builds weighted graph stores from tabular edge records and
runs classical algorithms on them: shortest paths, minimum spanning
trees, greedy vertex and edge coloring, maximum-cardinality matching
and maximum flow.
"""

__version__ = "0.1.0"
