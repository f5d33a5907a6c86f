"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from docmatrix.adapters.export import verdict_rows, write_csv
from docmatrix.adapters.snapshot import load_snapshot
from docmatrix.config import get_matching_config
from docmatrix.domain.comparison import compare_candidate, compare_vacancy
from docmatrix.domain.reconciliation import ReconciliationEngine, StcwHierarchy
from docmatrix.domain.reconciliation.validity import utcnow

if TYPE_CHECKING:
    from docmatrix.domain.comparison import CandidateComparison, VacancyComparison
    from docmatrix.domain.reconciliation import Clock

log = getLogger(__name__)


def build_engine(*, clock: Clock = utcnow) -> ReconciliationEngine:
    """Engine wired with the configured thresholds and the STCW hierarchy."""

    return ReconciliationEngine.from_config(
        get_matching_config(),
        hierarchy=StcwHierarchy(),
        clock=clock,
    )


def run_candidate_comparison(
    snapshot_path: str | Path,
    *,
    candidate_id: str | None = None,
    csv_path: str | Path | None = None,
    engine: ReconciliationEngine | None = None,
) -> tuple[CandidateComparison, ...]:
    """Compare one candidate (or every candidate) of a snapshot against its matrix."""

    snapshot = load_snapshot(snapshot_path)
    effective_engine = engine or build_engine()
    candidates = (
        (snapshot.candidate(candidate_id),) if candidate_id is not None else snapshot.candidates
    )
    log.info(
        "Starting comparison: matrix=%s, candidates=%s",
        snapshot.matrix.id,
        len(candidates),
    )

    comparisons = tuple(
        compare_candidate(effective_engine, candidate, snapshot.matrix)
        for candidate in candidates
    )

    if csv_path is not None:
        rows = [row for comparison in comparisons for row in verdict_rows(comparison)]
        with Path(csv_path).open("w", newline="", encoding="utf-8") as handle:
            write_csv(rows, handle)
        log.info("Exported %s verdict rows to %s", len(rows), csv_path)

    return comparisons


def run_vacancy_ranking(
    snapshot_path: str | Path,
    *,
    engine: ReconciliationEngine | None = None,
) -> VacancyComparison:
    """Rank the snapshot's candidates for its vacancy."""

    snapshot = load_snapshot(snapshot_path)
    if snapshot.vacancy is None:
        raise ValueError(f"Snapshot {snapshot_path} has no vacancy")
    effective_engine = engine or build_engine()
    result = compare_vacancy(effective_engine, snapshot.vacancy, snapshot.candidates)
    log.info(
        "Ranked %s candidates for vacancy %s",
        len(result.comparisons),
        snapshot.vacancy.id,
    )
    return result
