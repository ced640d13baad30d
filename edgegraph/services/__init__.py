"""Services layer - Application orchestration.

Available services:
- GraphToolkitService: Loads a graph store and runs one algorithm on it
"""

from .toolkit import GraphToolkitService

__all__ = ["GraphToolkitService"]
