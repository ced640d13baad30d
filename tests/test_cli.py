"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from edgegraph.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def triangle_file(write_records):
    return write_records(
        [["A", "B", "1", "e1"], ["B", "C", "2", "e2"], ["A", "C", "5", "e3"]]
    )


@pytest.fixture
def diamond_file(write_records):
    return write_records(
        [
            ["s", "a", "1", "sa"],
            ["a", "t", "1", "at"],
            ["s", "b", "1", "sb"],
            ["b", "t", "1", "bt"],
        ],
        name="diamond.tsv",
    )


def test_shortest_path_prints_every_pair(runner, triangle_file):
    result = runner.invoke(cli, ["shortest-path", str(triangle_file)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "A\tC\t3" in lines
    assert "C\tA\tNo path!" in lines
    assert len(lines) == 9


def test_prim_prints_sorted_edge_ids(runner, triangle_file):
    result = runner.invoke(cli, ["prim", str(triangle_file)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "e1,e2"


def test_vertex_and_edge_colors(runner, triangle_file):
    vertices = runner.invoke(cli, ["vertex-colors", str(triangle_file)])
    edges = runner.invoke(cli, ["edge-colors", str(triangle_file)])

    assert vertices.exit_code == 0
    assert sorted(vertices.output.splitlines()) == ["A: 0", "B: 1", "C: 2"]
    assert edges.exit_code == 0
    assert len(edges.output.splitlines()) == 3


def test_max_card_matching_with_seed(runner, write_records):
    path = write_records([["a", "b", "e1"], ["b", "c", "e2"], ["c", "d", "e3"]])

    result = runner.invoke(
        cli, ["max-card-matching", str(path), "--iterations", "10", "--seed", "1"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "e1,e3"


def test_max_flow_prints_total(runner, diamond_file):
    result = runner.invoke(
        cli, ["max-flow", str(diamond_file), "--source", "s", "--sink", "t"]
    )

    assert result.exit_code == 0, result.output
    assert "sa: 1" in result.output
    assert result.output.rstrip().endswith("Max flow: 2")


def test_unknown_vertex_is_reported(runner, diamond_file):
    result = runner.invoke(
        cli, ["max-flow", str(diamond_file), "--source", "nope", "--sink", "t"]
    )

    assert result.exit_code == 1
    assert "Vertex not in graph: nope" in result.output


def test_missing_file_is_reported(runner, tmp_path):
    result = runner.invoke(cli, ["prim", str(tmp_path / "missing.tsv")])

    assert result.exit_code == 1
    assert "Failed to read edge records" in result.output


def test_custom_delimiter(runner, write_records):
    path = write_records([["A", "B", "4", "e1"]], name="graph.csv", delimiter=",")

    result = runner.invoke(cli, ["--delimiter", ",", "prim", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "e1"


def test_invalid_delimiter_is_rejected(runner, triangle_file):
    result = runner.invoke(cli, ["--delimiter", ";;", "prim", str(triangle_file)])

    assert result.exit_code == 1
    assert "Invalid delimiter" in result.output
