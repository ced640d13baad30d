"""Shared fixtures for edgegraph tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from edgegraph.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no cached configuration leaks between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Write rows of fields to a delimited file and return its path."""

    def _write(
        rows: Sequence[Sequence[str]],
        name: str = "graph.tsv",
        delimiter: str = "\t",
    ) -> Path:
        path = tmp_path / name
        path.write_text(
            "\n".join(delimiter.join(row) for row in rows) + "\n",
            encoding="utf-8",
        )
        return path

    return _write
