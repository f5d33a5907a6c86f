"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_float_env
from .errors import ConfigurationError
from .logging import configure_logging
from .matching import get_matching_config

__all__ = [
    "ConfigurationError",
    "configure_logging",
    "get_matching_config",
    "optional_float_env",
]
