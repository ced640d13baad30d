"""Tests for environment driven configuration."""

import pytest
from pydantic import ValidationError

from edgegraph.config import GraphConfig, get_config


def test_defaults():
    config = get_config()

    assert config.graph.delimiter == "\t"
    assert config.algorithms.matching_iterations == 10000
    assert config.algorithms.random_seed is None
    assert config.observability.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EDGEGRAPH_ALGO_MATCHING_ITERATIONS", "25")
    monkeypatch.setenv("EDGEGRAPH_ALGO_RANDOM_SEED", "9")
    monkeypatch.setenv("EDGEGRAPH_GRAPH_DELIMITER", ",")

    config = get_config()

    assert config.algorithms.matching_iterations == 25
    assert config.algorithms.random_seed == 9
    assert config.graph.delimiter == ","


def test_escaped_tab_delimiter():
    assert GraphConfig(delimiter="\\t").delimiter == "\t"


def test_delimiter_must_be_single_character():
    with pytest.raises(ValidationError):
        GraphConfig(delimiter="::")


def test_config_is_cached():
    assert get_config() is get_config()
