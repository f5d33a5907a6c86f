"""Value objects exchanged between reconciliation stages.

This module intentionally holds only data: match results, gate outcomes, the
fact record the status and observation projections share, and the verdict
and summary records handed to presentation and export code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docmatrix.domain.model import (
    CodeMatchBasis,
    MatchType,
    RequirementStatus,
    ValidityStatus,
)

if TYPE_CHECKING:
    from docmatrix.domain.model import CandidateDocument, Requirement


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchResult:
    """Which strategy located a document for a requirement, and how sure it is."""

    match_type: MatchType
    confidence: float = 0.0
    document: CandidateDocument | None = None
    basis: CodeMatchBasis | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Match confidence must be within [0, 1], got {self.confidence}")
        if (self.document is None) != (self.match_type is MatchType.NONE):
            raise ValueError("A match result carries a document exactly when it matched")

    @property
    def found(self) -> bool:
        return self.document is not None

    @classmethod
    def no_match(cls) -> MatchResult:
        return cls(match_type=MatchType.NONE)


@dataclass(frozen=True, slots=True, kw_only=True)
class QualityGates:
    """Hard gates (hours, validity) and the informational modality check."""

    hours_sufficient: bool
    actual_hours: float | None
    required_hours: float | None
    validity_status: ValidityStatus
    modality_compatible: bool = True
    modality_note: str | None = None

    @property
    def expired(self) -> bool:
        return self.validity_status is ValidityStatus.EXPIRED


@dataclass(frozen=True, slots=True, kw_only=True)
class RequirementFacts:
    """Everything the status decider and the observation composer may read."""

    requirement: Requirement
    match: MatchResult
    gates: QualityGates | None = None

    def __post_init__(self) -> None:
        if self.match.found and self.gates is None:
            raise ValueError("Matched requirements must carry quality gate results")

    @property
    def is_declaration_link(self) -> bool:
        document = self.match.document
        return (
            document is not None
            and document.is_declaration
            and self.match.match_type is MatchType.IDENTITY
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Verdict:
    """Final, explainable outcome for one requirement."""

    requirement: Requirement | None
    status: RequirementStatus
    validity_status: ValidityStatus
    observations: str
    similarity_score: float = 0.0
    match_type: MatchType = MatchType.NONE
    validity_date: str | None = None
    matched_document: CandidateDocument | None = None

    def __post_init__(self) -> None:
        if (self.status is RequirementStatus.PENDING) != (self.matched_document is None):
            raise ValueError("Pending verdicts are exactly the ones without a matched document")


@dataclass(frozen=True, slots=True, kw_only=True)
class AggregateSummary:
    total: int = 0
    satisfied: int = 0
    partial: int = 0
    pending: int = 0
    adherence_percentage: int = 0
