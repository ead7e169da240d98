"""Configuration for graph analysis and output."""

from dataclasses import dataclass, fields, replace
import logging
import math
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidParameter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisConfig:
    """Constants controlling ranking, path output and default file names."""

    damping: float = 0.85
    max_iterations: int = 100
    tolerance: float = 1e-8

    path_separator: str = " -> "
    score_precision: int = 6

    dot_file: str = "graph.dot"
    walk_file: str = "walk_output.txt"
    html_file: str = "output/graph.html"

    def with_overrides(self, **overrides: Any) -> "AnalysisConfig":
        """Return a copy with the given fields replaced and validated."""
        return validate_config(replace(self, **overrides))


DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()


def validate_damping(damping: Any) -> float:
    """Check a damping factor and return it as a float.

    Accepted range is 0 <= d < 1. At d == 1 there is no teleport term and
    the iteration need not converge, so it is rejected with the rest.
    """
    if isinstance(damping, bool) or not isinstance(damping, (int, float)):
        raise InvalidParameter(f"Damping factor must be a number, got {damping!r}")
    value = float(damping)
    if math.isnan(value) or value < 0.0 or value >= 1.0:
        raise InvalidParameter(
            f"Damping factor must be in [0, 1), got {damping!r}"
        )
    return value


def validate_config(config: AnalysisConfig) -> AnalysisConfig:
    """Reject configurations the analysis code cannot run with."""
    validate_damping(config.damping)
    if config.max_iterations < 1:
        raise InvalidParameter(
            f"max_iterations must be positive, got {config.max_iterations}"
        )
    if not config.tolerance > 0:
        raise InvalidParameter(f"tolerance must be positive, got {config.tolerance}")
    if config.score_precision < 0:
        raise InvalidParameter(
            f"score_precision must not be negative, got {config.score_precision}"
        )
    if not config.path_separator:
        raise InvalidParameter("path_separator must not be empty")
    return config


def load_config(path: str | Path | None) -> AnalysisConfig:
    """Load overrides from a YAML mapping on top of the defaults.

    Args:
        path: YAML file; ``None`` returns the defaults

    Returns:
        Validated AnalysisConfig
    """
    if path is None:
        return DEFAULT_ANALYSIS_CONFIG

    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise InvalidParameter(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidParameter(f"Config {config_path} must be a mapping")

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidParameter(f"Unknown config keys: {', '.join(unknown)}")

    log.info(f"Loaded config overrides from {config_path}: {sorted(data)}")
    try:
        return DEFAULT_ANALYSIS_CONFIG.with_overrides(**data)
    except TypeError as exc:
        raise InvalidParameter(f"Invalid value in {config_path}: {exc}") from exc
