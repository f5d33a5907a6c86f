from __future__ import annotations

import pytest

from docmatrix.config.matching import SATISFIED_THRESHOLD_ENV, SEMANTIC_THRESHOLD_ENV
from docmatrix.domain.reconciliation import MatchingConfig, ReconciliationEngine, StcwHierarchy
from tests.helpers.documents import FixedClock


@pytest.fixture(autouse=True)
def _clear_threshold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SEMANTIC_THRESHOLD_ENV, raising=False)
    monkeypatch.delenv(SATISFIED_THRESHOLD_ENV, raising=False)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def engine(clock: FixedClock) -> ReconciliationEngine:
    return ReconciliationEngine.from_config(
        MatchingConfig(),
        hierarchy=StcwHierarchy(),
        clock=clock,
    )
