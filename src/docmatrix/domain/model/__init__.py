"""Public domain model surface."""

from __future__ import annotations

from docmatrix.domain.model.document import Candidate, CandidateDocument
from docmatrix.domain.model.enums import (
    CodeMatchBasis,
    MatchType,
    ObligationLevel,
    RequirementStatus,
    ValidityStatus,
)
from docmatrix.domain.model.requirement import NOT_APPLICABLE, Matrix, Requirement, Vacancy

__all__ = [
    "NOT_APPLICABLE",
    "Candidate",
    "CandidateDocument",
    "CodeMatchBasis",
    "MatchType",
    "Matrix",
    "ObligationLevel",
    "Requirement",
    "RequirementStatus",
    "ValidityStatus",
    "Vacancy",
]
