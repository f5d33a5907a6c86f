"""Application services comparing candidates against vacancy matrices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docmatrix.domain.model import RequirementStatus
from docmatrix.domain.reconciliation import aggregate, aggregate_by

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docmatrix.domain.model import Candidate, CandidateDocument, Matrix, Vacancy
    from docmatrix.domain.reconciliation import (
        AggregateSummary,
        ReconciliationEngine,
        Verdict,
    )

DEFAULT_GROUP = "Other"

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CandidateComparison:
    """Verdicts of one candidate against one matrix, plus derived summaries."""

    candidate: Candidate
    matrix: Matrix
    verdicts: tuple[Verdict, ...]
    summary: AggregateSummary

    @property
    def by_group(self) -> dict[str, AggregateSummary]:
        return aggregate_by(self.verdicts, _group_of)

    @property
    def by_obligation(self) -> dict[str, AggregateSummary]:
        return aggregate_by(self.verdicts, _obligation_of)

    @property
    def open_items(self) -> tuple[Verdict, ...]:
        """Partial and pending verdicts, in matrix order."""

        return tuple(
            verdict
            for verdict in self.verdicts
            if verdict.status is not RequirementStatus.SATISFIED
        )

    @property
    def unused_documents(self) -> tuple[CandidateDocument, ...]:
        """Candidate documents no requirement of this matrix matched."""

        used = {
            verdict.matched_document.id
            for verdict in self.verdicts
            if verdict.matched_document is not None
        }
        return tuple(doc for doc in self.candidate.documents if doc.id not in used)


@dataclass(frozen=True, slots=True)
class VacancyComparison:
    vacancy: Vacancy
    comparisons: tuple[CandidateComparison, ...]

    def ranking(self) -> tuple[CandidateComparison, ...]:
        """Candidates by adherence, then satisfied count, then name."""

        return tuple(
            sorted(
                self.comparisons,
                key=lambda comparison: (
                    -comparison.summary.adherence_percentage,
                    -comparison.summary.satisfied,
                    comparison.candidate.name,
                ),
            )
        )


def compare_candidate(
    engine: ReconciliationEngine,
    candidate: Candidate,
    matrix: Matrix,
) -> CandidateComparison:
    """Resolve every requirement of ``matrix`` for ``candidate``."""

    verdicts = tuple(
        engine.resolve_requirement(requirement, candidate.documents)
        for requirement in matrix.requirements
    )
    summary = aggregate(verdicts)
    log.info(
        "Candidate %s vs matrix %s: %s/%s satisfied, %s partial, %s pending (%s%%)",
        candidate.id,
        matrix.id,
        summary.satisfied,
        summary.total,
        summary.partial,
        summary.pending,
        summary.adherence_percentage,
    )
    return CandidateComparison(
        candidate=candidate,
        matrix=matrix,
        verdicts=verdicts,
        summary=summary,
    )


def compare_vacancy(
    engine: ReconciliationEngine,
    vacancy: Vacancy,
    candidates: Iterable[Candidate],
) -> VacancyComparison:
    """Compare the vacancy's candidates against its matrix.

    When the vacancy lists candidate ids only those candidates are compared;
    otherwise every supplied candidate is.
    """

    wanted = set(vacancy.candidate_ids)
    comparisons = tuple(
        compare_candidate(engine, candidate, vacancy.matrix)
        for candidate in candidates
        if not wanted or candidate.id in wanted
    )
    return VacancyComparison(vacancy=vacancy, comparisons=comparisons)


def _group_of(verdict: Verdict) -> str:
    requirement = verdict.requirement
    if requirement is None or not requirement.group:
        return DEFAULT_GROUP
    return requirement.group


def _obligation_of(verdict: Verdict) -> str:
    requirement = verdict.requirement
    if requirement is None:
        return DEFAULT_GROUP
    return str(requirement.obligation)
