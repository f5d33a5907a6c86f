from __future__ import annotations

import pytest

from docmatrix.domain.model import CandidateDocument, MatchType, RequirementStatus, ValidityStatus
from docmatrix.domain.reconciliation import MatchResult, RequirementFacts, Verdict
from tests.helpers.documents import make_document, make_matrix, make_requirement


def test_requirement_rejects_negative_hours() -> None:
    with pytest.raises(ValueError, match="negative required hours"):
        make_requirement(required_hours=-1)


def test_document_rejects_negative_hours() -> None:
    with pytest.raises(ValueError, match="negative practical hours"):
        CandidateDocument(id="doc", name="Altura", practical_hours=-2)


def test_matrix_rejects_duplicate_requirements() -> None:
    with pytest.raises(ValueError, match="more than once"):
        make_matrix(make_requirement(), make_requirement())


def test_match_result_confidence_is_bounded() -> None:
    with pytest.raises(ValueError, match="confidence"):
        MatchResult(match_type=MatchType.CODE, confidence=1.2, document=make_document())


def test_match_result_document_follows_match_type() -> None:
    with pytest.raises(ValueError, match="carries a document"):
        MatchResult(match_type=MatchType.CODE, confidence=0.9)
    with pytest.raises(ValueError, match="carries a document"):
        MatchResult(match_type=MatchType.NONE, document=make_document())


def test_matched_facts_require_gates() -> None:
    match = MatchResult(match_type=MatchType.CODE, confidence=0.9, document=make_document())

    with pytest.raises(ValueError, match="quality gate"):
        RequirementFacts(requirement=make_requirement(), match=match)


def test_pending_verdicts_have_no_document() -> None:
    with pytest.raises(ValueError, match="Pending"):
        Verdict(
            requirement=make_requirement(),
            status=RequirementStatus.PENDING,
            validity_status=ValidityStatus.VALID,
            observations="",
            matched_document=make_document(),
        )
    with pytest.raises(ValueError, match="Pending"):
        Verdict(
            requirement=make_requirement(),
            status=RequirementStatus.SATISFIED,
            validity_status=ValidityStatus.VALID,
            observations="",
        )
