"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVEdgeRepository: Loads graph stores from delimited edge records
"""

from .csv_repository import CSVEdgeRepository, parse_record, parse_weight

__all__ = ["CSVEdgeRepository", "parse_record", "parse_weight"]
