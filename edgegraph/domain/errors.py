"""Typed domain errors for the edgegraph toolkit.

Errors are raised only for genuine failures: an unreadable record source,
a vertex that is not part of the store, or an invalid flow network.
Unreachable vertices, partial spanning trees and exhausted matching
iterations are regular results and never raise.

All errors inherit from EdgeGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EdgeGraphError(Exception):
    """Base error for the edgegraph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphLoadError(EdgeGraphError):
    """The edge record source could not be read.

    Malformed rows are skipped by the reader; this error is reserved for
    hard failures such as a missing file.

    Attributes:
        file_path: Path to the record file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(EdgeGraphError):
    """A start, source or sink vertex is not part of the graph store.

    Attributes:
        vertex_label: The label that was looked up
    """

    vertex_label: str = ""


@dataclass
class FlowNetworkError(EdgeGraphError):
    """The requested flow network is not usable.

    Attributes:
        source: Source vertex label
        sink: Sink vertex label
    """

    source: str = ""
    sink: str = ""


@dataclass
class ConfigurationError(EdgeGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
