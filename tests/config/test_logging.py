from __future__ import annotations

import logging

import pytest

from docmatrix.config import ConfigurationError
from docmatrix.config.logging import resolve_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_resolve_level(level: int | str, expected: int) -> None:
    assert resolve_level(level) == expected


def test_unknown_level_raises() -> None:
    with pytest.raises(ConfigurationError, match="verbose"):
        resolve_level("verbose")
