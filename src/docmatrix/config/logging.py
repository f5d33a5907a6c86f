"""Root logger setup for the docmatrix entry points."""

from __future__ import annotations

import logging

from .errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    ``level`` accepts a number or a level name in any case ("debug", "INFO").
    Without ``force`` an already configured root logger is left alone.
    """

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.strip().upper())
    if resolved is None:
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return resolved
