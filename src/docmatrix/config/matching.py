"""Matching thresholds for the reconciliation engine."""

from __future__ import annotations

from dataclasses import replace

from docmatrix.domain.reconciliation.settings import MatchingConfig

from .env import optional_float_env
from .errors import ConfigurationError

SEMANTIC_THRESHOLD_ENV = "DOCMATRIX_SEMANTIC_THRESHOLD"
SATISFIED_THRESHOLD_ENV = "DOCMATRIX_SATISFIED_THRESHOLD"


def get_matching_config(*, base: MatchingConfig | None = None) -> MatchingConfig:
    """Return the matching config, honouring optional threshold overrides."""

    config = base or MatchingConfig()
    return replace(
        config,
        semantic_threshold=_ratio(SEMANTIC_THRESHOLD_ENV, config.semantic_threshold),
        satisfied_threshold=_ratio(SATISFIED_THRESHOLD_ENV, config.satisfied_threshold),
    )


def _ratio(name: str, default: float) -> float:
    value = optional_float_env(name, default)
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be between 0 and 1, got {value}")
    return value
