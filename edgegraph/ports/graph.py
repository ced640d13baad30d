"""Graph ports - Abstractions for loading graph stores.

These protocols define the contract between the toolkit service and the
source of edge records, so that stores can come from files, fixtures or
any other tabular source.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import EdgeRecord
    from ..graph.store import DirectedGraph, UndirectedGraph

PathLike = Union[str, Path]


class EdgeRecordSourcePort(Protocol):
    """Port for reading edge records and building stores from them.

    Implementation: adapters/graph/csv_repository.py

    Malformed records are dropped by the source; only hard I/O failures
    surface as errors.
    """

    def read_records(self, path: PathLike, directed: bool) -> Iterator[EdgeRecord]:
        """Yield the well-formed edge records of a source.

        Args:
            path: Location of the record source.
            directed: Whether records feed a directed store; undirected
                stores also accept unweighted 3-field records.

        Yields:
            Parsed edge records in source order.
        """
        ...

    def load_directed(self, path: PathLike) -> DirectedGraph:
        """Build a directed store from a record source.

        Args:
            path: Location of the record source.

        Returns:
            The finalized directed store.
        """
        ...

    def load_undirected(self, path: PathLike) -> UndirectedGraph:
        """Build an undirected store from a record source.

        Args:
            path: Location of the record source.

        Returns:
            The finalized undirected store.
        """
        ...
