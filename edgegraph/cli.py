"""Command line interface for the edgegraph toolkit.

Each sub-command reads one edge record file and prints the result of
one algorithm:

    edgegraph shortest-path graph.tsv
    edgegraph prim graph.tsv
    edgegraph max-flow graph.tsv --source s --sink t
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional, TypeVar

import click
from pydantic import ValidationError

from .adapters.graph import CSVEdgeRepository
from .config import GraphConfig, get_config
from .domain.errors import ConfigurationError, EdgeGraphError
from .io import (
    format_coloring,
    format_flow,
    format_matching,
    format_shortest_paths,
    format_spanning_tree,
)
from .services import GraphToolkitService

T = TypeVar("T")


def _configure_logging(level: Optional[str]) -> None:
    observability = get_config().observability
    name = (level or observability.level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ConfigurationError(
            f"Unknown log level: {name}",
            setting_name="log_level",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )
    logging.basicConfig(level=numeric, format=observability.format)


def _graph_config(delimiter: Optional[str]) -> GraphConfig:
    base = get_config().graph
    if delimiter is None:
        return base
    try:
        return GraphConfig(
            delimiter=delimiter,
            encoding=base.encoding,
            cache_graphs=base.cache_graphs,
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid delimiter {delimiter!r}",
            setting_name="delimiter",
            expected_type="single character",
            cause=e,
        ) from e


def _run(action: Callable[[], T]) -> T:
    try:
        return action()
    except (EdgeGraphError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (defaults to EDGEGRAPH_LOG_LEVEL or WARNING).",
)
@click.option(
    "--delimiter",
    default=None,
    help="Field separator of the record file (defaults to a tab).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], delimiter: Optional[str]) -> None:
    """Classical graph algorithms on delimited edge records."""
    _run(lambda: _configure_logging(log_level))
    graph_config = _run(lambda: _graph_config(delimiter))
    ctx.obj = GraphToolkitService(records=CSVEdgeRepository(graph_config))


@cli.command("shortest-path")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_obj
def shortest_path(service: GraphToolkitService, path: str) -> None:
    """Shortest distances between every pair of vertices (directed)."""
    results = _run(lambda: service.shortest_paths(path))
    click.echo(format_shortest_paths(results))


@cli.command("prim")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--start", default=None, help="Start vertex (first vertex by default).")
@click.pass_obj
def prim(service: GraphToolkitService, path: str, start: Optional[str]) -> None:
    """Minimum spanning tree edge ids (undirected)."""
    tree = _run(lambda: service.minimum_spanning_tree(path, start))
    click.echo(format_spanning_tree(tree))


@cli.command("vertex-colors")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_obj
def vertex_colors(service: GraphToolkitService, path: str) -> None:
    """Greedy vertex coloring (undirected)."""
    click.echo(format_coloring(_run(lambda: service.vertex_colors(path))))


@cli.command("edge-colors")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_obj
def edge_colors(service: GraphToolkitService, path: str) -> None:
    """Greedy edge coloring (undirected)."""
    click.echo(format_coloring(_run(lambda: service.edge_colors(path))))


@cli.command("max-card-matching")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--iterations", type=int, default=None, help="Random restarts cap.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible runs.")
@click.pass_obj
def max_card_matching(
    service: GraphToolkitService,
    path: str,
    iterations: Optional[int],
    seed: Optional[int],
) -> None:
    """Maximum-cardinality matching edge ids (undirected, connected)."""
    rng = random.Random(seed) if seed is not None else None
    matching = _run(lambda: service.max_matching(path, iterations, rng))
    click.echo(format_matching(matching))


@cli.command("max-flow")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--source", required=True, help="Source vertex label.")
@click.option("--sink", required=True, help="Sink vertex label.")
@click.pass_obj
def max_flow(service: GraphToolkitService, path: str, source: str, sink: str) -> None:
    """Per-edge flow and max flow value (directed)."""
    flow = _run(lambda: service.max_flow(path, source, sink))
    click.echo(format_flow(flow))


def main() -> None:
    cli(prog_name="edgegraph")


if __name__ == "__main__":
    main()
