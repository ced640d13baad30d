"""Domain layer - Core graph models and errors.

This module contains immutable domain models and typed errors
used throughout the toolkit. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EdgeGraphError,
    FlowNetworkError,
    GraphLoadError,
    VertexNotFoundError,
)
from .models import (
    ColoringResult,
    Edge,
    EdgeRecord,
    FlowResult,
    MatchingResult,
    ShortestPathResult,
    SpanningTreeResult,
    Vertex,
)

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "EdgeRecord",
    "ShortestPathResult",
    "SpanningTreeResult",
    "ColoringResult",
    "MatchingResult",
    "FlowResult",
    # Errors
    "EdgeGraphError",
    "GraphLoadError",
    "VertexNotFoundError",
    "FlowNetworkError",
    "ConfigurationError",
]
