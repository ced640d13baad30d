"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the settings of the
record reader, the algorithms and logging.

Configuration can be overridden via environment variables:
- EDGEGRAPH_GRAPH_DELIMITER=,
- EDGEGRAPH_ALGO_MATCHING_ITERATIONS=500
- EDGEGRAPH_ALGO_RANDOM_SEED=42
- EDGEGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Edge record reader configuration.

    Environment variables prefixed with EDGEGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_GRAPH_")

    delimiter: str = "\t"
    encoding: str = "utf-8"
    cache_graphs: bool = True

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if value == "\\t":
            return "\t"
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value


class AlgorithmConfig(BaseSettings):
    """Algorithm tuning.

    Environment variables prefixed with EDGEGRAPH_ALGO_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_ALGO_")

    matching_iterations: int = Field(default=10000, ge=1)
    random_seed: Optional[int] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with EDGEGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.delimiter)
        print(config.algorithms.matching_iterations)

    Environment variables prefixed with EDGEGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    algorithms: AlgorithmConfig = Field(default_factory=AlgorithmConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
