"""Run configuration for the command-line tools.

Defaults live in :class:`RunConfig`. A YAML file can override them::

    header_order: count-first
    unreachable_label: no path
    benchmark_iterations: 500
    benchmark_workers: 4

Command-line flags take precedence over file values.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from sssp.exceptions import ConfigError
from sssp.graph.builder import HeaderOrder


@dataclass(frozen=True)
class RunConfig:
    """Settings shared by the ``run`` and ``benchmark`` commands."""

    # Order of the two header integers in input files
    header_order: HeaderOrder = HeaderOrder.SOURCE_FIRST

    # Text printed in place of a path for unreachable vertices
    unreachable_label: str = "unreachable"

    # Separator between vertices of a rendered path
    path_separator: str = " -> "

    # Default number of timed queries per benchmark
    benchmark_iterations: int = 1000

    # Default number of benchmark worker threads
    benchmark_workers: int = 1

    def __post_init__(self) -> None:
        if self.benchmark_iterations < 1:
            raise ConfigError("'benchmark_iterations' must be at least 1")
        if self.benchmark_workers < 1:
            raise ConfigError("'benchmark_workers' must be at least 1")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """Build a config from a mapping, rejecting unknown keys and bad types."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ConfigError(f"Unrecognized config keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "header_order":
                try:
                    values[key] = HeaderOrder.from_string(str(value))
                except ValueError as exc:
                    raise ConfigError(str(exc)) from exc
            elif key in ("benchmark_iterations", "benchmark_workers"):
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ConfigError(f"'{key}' must be an integer")
                values[key] = value
            else:
                if not isinstance(value, str):
                    raise ConfigError(f"'{key}' must be a string")
                values[key] = value
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: Union[str, Path]) -> RunConfig:
    """Load a :class:`RunConfig` from a YAML file.

    An empty file yields the defaults.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the YAML is malformed or holds invalid settings.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return RunConfig()
    if not isinstance(data, dict):
        raise ConfigError("The config file must map to a dictionary at top-level.")
    return RunConfig.from_dict(data)
