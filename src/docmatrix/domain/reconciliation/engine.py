"""Orchestrator for the reconciliation subsystem.

The engine composes the stages for one requirement:
match resolution -> quality gates -> fact record -> (status, observations).
It never raises for a single requirement; malformed input and internal errors
degrade to a pending verdict so one bad row cannot blank a comparison table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docmatrix.domain.model import MatchType, RequirementStatus, ValidityStatus

from .contracts import RequirementFacts, Verdict
from .gates import evaluate_quality_gates
from .observations import INVALID_REQUIREMENT, compose_observations
from .policy import StatusDecider
from .resolve import MatchResolver
from .strategies import default_strategies
from .validity import utcnow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docmatrix.domain.model import CandidateDocument, Requirement

    from .hierarchy import RegulatoryHierarchy
    from .settings import MatchingConfig
    from .validity import Clock

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationEngine:
    """Resolve one requirement against a candidate's documents into a verdict."""

    resolver: MatchResolver = field(default_factory=MatchResolver)
    decider: StatusDecider = field(default_factory=StatusDecider)
    clock: Clock = utcnow

    @classmethod
    def from_config(
        cls,
        config: MatchingConfig,
        *,
        hierarchy: RegulatoryHierarchy | None = None,
        clock: Clock = utcnow,
    ) -> ReconciliationEngine:
        return cls(
            resolver=MatchResolver(default_strategies(config, hierarchy=hierarchy)),
            decider=StatusDecider(config),
            clock=clock,
        )

    def resolve_requirement(
        self,
        requirement: Requirement | None,
        documents: Iterable[CandidateDocument],
    ) -> Verdict:
        """Return the verdict for ``requirement``; never raises."""

        if requirement is None or not requirement.id:
            log.warning("Skipping invalid matrix requirement: %r", requirement)
            return _pending(requirement, INVALID_REQUIREMENT)

        try:
            facts = self.evaluate(requirement, documents)
            verdict = project_verdict(facts, self.decider)
        except Exception as exc:  # noqa: BLE001
            log.exception("Comparison failed for requirement %s", requirement.id)
            return _pending(requirement, f"comparison error: {exc}")

        log.debug(
            "Requirement %s -> %s (%s, similarity=%.2f)",
            requirement.id,
            verdict.status,
            verdict.match_type,
            verdict.similarity_score,
        )
        return verdict

    def evaluate(
        self,
        requirement: Requirement,
        documents: Iterable[CandidateDocument],
    ) -> RequirementFacts:
        """Collect the fact record both verdict projections read."""

        match = self.resolver.resolve(requirement, documents)
        if not match.found:
            return RequirementFacts(requirement=requirement, match=match)
        gates = evaluate_quality_gates(requirement, match, clock=self.clock)
        return RequirementFacts(requirement=requirement, match=match, gates=gates)


def project_verdict(facts: RequirementFacts, decider: StatusDecider) -> Verdict:
    """Project one fact record into status and text at the same time."""

    match = facts.match
    status = decider.decide(facts)
    observations = compose_observations(facts)
    if facts.gates is None or match.document is None:
        return Verdict(
            requirement=facts.requirement,
            status=status,
            validity_status=ValidityStatus.MISSING,
            observations=observations,
        )
    return Verdict(
        requirement=facts.requirement,
        status=status,
        validity_status=facts.gates.validity_status,
        validity_date=match.document.expiry_date,
        observations=observations,
        similarity_score=match.confidence,
        match_type=match.match_type,
        matched_document=match.document,
    )


def _pending(requirement: Requirement | None, observations: str) -> Verdict:
    return Verdict(
        requirement=requirement,
        status=RequirementStatus.PENDING,
        validity_status=ValidityStatus.MISSING,
        observations=observations,
        similarity_score=0.0,
        match_type=MatchType.NONE,
    )
