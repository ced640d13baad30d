"""Ports layer - Abstract interfaces (Protocols) for the toolkit.

Ports define the contracts between the algorithm core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import EdgeRecordSourcePort, PathLike

__all__ = [
    "EdgeRecordSourcePort",
    "PathLike",
]
