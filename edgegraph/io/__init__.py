"""Input/output helpers for the edgegraph toolkit.

This subpackage renders algorithm results as the plain text printed by
the command line interface.
"""

from .formatting import (
    format_coloring,
    format_edge_ids,
    format_flow,
    format_matching,
    format_shortest_paths,
    format_spanning_tree,
)

__all__ = [
    "format_shortest_paths",
    "format_edge_ids",
    "format_spanning_tree",
    "format_matching",
    "format_coloring",
    "format_flow",
]
