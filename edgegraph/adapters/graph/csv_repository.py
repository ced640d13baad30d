"""CSV edge record repository adapter.

Reads delimited edge records (tab separated by default) and builds
directed or undirected graph stores from them:
- Configuration injection (delimiter, encoding from config)
- Silent skipping of malformed rows
- Caching of loaded stores
- Typed error for unreadable sources
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, cast

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import EdgeRecord
from ...graph.store import DirectedGraph, Graph, GraphBuilder, UndirectedGraph
from ...ports.graph import PathLike

UNWEIGHTED = -1


def parse_weight(text: str) -> Optional[int]:
    """Parse an integer weight, or return None if ``text`` is not one.

    Accepts signed decimals and 0x/0o/0b prefixed literals.
    """
    try:
        return int(text.strip(), 0)
    except ValueError:
        return None


def parse_record(row: List[str], directed: bool) -> Optional[EdgeRecord]:
    """Turn one row into an EdgeRecord, or None if the row is malformed.

    Rows are ``[start, end, weight, id]``. Undirected stores also accept
    ``[start, end, id]``, weighted -1.
    """
    if len(row) == 4:
        start_id, end_id, weight_text, edge_id = row
        weight = parse_weight(weight_text)
        if weight is None:
            return None
    elif len(row) == 3 and not directed:
        start_id, end_id, edge_id = row
        weight = UNWEIGHTED
    else:
        return None

    if not start_id or not end_id:
        return None

    return EdgeRecord(
        start_id=start_id,
        end_id=end_id,
        weight=weight,
        edge_id=edge_id,
    )


@dataclass
class CSVEdgeRepository:
    """Edge record source backed by delimited text files.

    This adapter implements EdgeRecordSourcePort.

    Attributes:
        config: Graph configuration (delimiter, encoding, caching)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached stores, keyed by (resolved path, directed)
    _graphs: Dict[Tuple[str, bool], Graph] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read_records(self, path: PathLike, directed: bool) -> Iterator[EdgeRecord]:
        """Yield the well-formed edge records of a file.

        Args:
            path: Path to the record file.
            directed: Whether records feed a directed store.

        Yields:
            Parsed edge records in file order.

        Raises:
            GraphLoadError: If the file cannot be read or parsed as CSV.
        """
        file_path = Path(path)
        skipped = 0
        try:
            with file_path.open(newline="", encoding=self.config.encoding) as f:
                reader = csv.reader(f, delimiter=self.config.delimiter)
                for row in reader:
                    record = parse_record(row, directed)
                    if record is None:
                        skipped += 1
                        continue
                    yield record
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to read edge records from {file_path}",
                file_path=str(file_path),
                cause=e,
            ) from e

        if skipped:
            self._logger.debug(
                "Skipped malformed rows",
                extra={"file_path": str(file_path), "skipped": skipped},
            )

    def load_directed(self, path: PathLike) -> DirectedGraph:
        """Build a directed store from a record file.

        Raises:
            GraphLoadError: If the file cannot be read.
        """
        return cast(DirectedGraph, self._load(path, directed=True))

    def load_undirected(self, path: PathLike) -> UndirectedGraph:
        """Build an undirected store from a record file.

        Raises:
            GraphLoadError: If the file cannot be read.
        """
        return cast(UndirectedGraph, self._load(path, directed=False))

    def _load(self, path: PathLike, directed: bool) -> Graph:
        key = (str(Path(path).resolve()), directed)
        if self.config.cache_graphs and key in self._graphs:
            return self._graphs[key]

        self._logger.debug(
            "Loading graph",
            extra={"file_path": str(path), "directed": directed},
        )

        builder = GraphBuilder(directed=directed)
        for record in self.read_records(path, directed):
            builder.add_edge(record.to_edge())
        graph = builder.build()

        self._logger.info(
            "Graph loaded",
            extra={
                "file_path": str(path),
                "vertices": graph.vertex_count,
                "edges": graph.edge_count,
            },
        )

        if self.config.cache_graphs:
            self._graphs[key] = graph
        return graph

    def clear_cache(self) -> None:
        """Clear cached graph stores."""
        self._graphs.clear()
        self._logger.debug("Graph cache cleared")
