from __future__ import annotations

import pytest

from docmatrix.domain.model import MatchType, RequirementStatus, ValidityStatus
from docmatrix.domain.reconciliation import (
    MatchingConfig,
    MatchResult,
    QualityGates,
    RequirementFacts,
)
from docmatrix.domain.reconciliation.policy import StatusDecider
from tests.helpers.documents import make_document, make_requirement


def _facts(
    match_type: MatchType,
    confidence: float,
    *,
    hours_sufficient: bool = True,
    validity: ValidityStatus = ValidityStatus.VALID,
) -> RequirementFacts:
    return RequirementFacts(
        requirement=make_requirement(),
        match=MatchResult(match_type=match_type, confidence=confidence, document=make_document()),
        gates=QualityGates(
            hours_sufficient=hours_sufficient,
            actual_hours=8,
            required_hours=8,
            validity_status=validity,
        ),
    )


def test_no_match_is_pending() -> None:
    facts = RequirementFacts(requirement=make_requirement(), match=MatchResult.no_match())

    assert StatusDecider().decide(facts) is RequirementStatus.PENDING


@pytest.mark.parametrize(
    ("match_type", "confidence"),
    [
        (MatchType.IDENTITY, 1.0),
        (MatchType.CODE, 0.85),
        (MatchType.ABBREVIATION, 0.9),
        (MatchType.EXACT_NAME, 0.95),
    ],
)
def test_structural_matches_are_satisfied(match_type: MatchType, confidence: float) -> None:
    assert StatusDecider().decide(_facts(match_type, confidence)) is RequirementStatus.SATISFIED


@pytest.mark.parametrize(
    ("confidence", "expected"),
    [
        (1.0, RequirementStatus.SATISFIED),
        (0.9, RequirementStatus.SATISFIED),
        (0.85, RequirementStatus.PARTIAL),
        (0.71, RequirementStatus.PARTIAL),
    ],
)
def test_semantic_matches_depend_on_the_satisfied_cut(
    confidence: float,
    expected: RequirementStatus,
) -> None:
    assert StatusDecider().decide(_facts(MatchType.SEMANTIC_NAME, confidence)) is expected


def test_satisfied_cut_is_configurable() -> None:
    decider = StatusDecider(MatchingConfig(satisfied_threshold=0.8))

    assert decider.decide(_facts(MatchType.SEMANTIC_NAME, 0.8)) is RequirementStatus.SATISFIED


def test_expiry_beats_identity() -> None:
    facts = _facts(MatchType.IDENTITY, 1.0, validity=ValidityStatus.EXPIRED)

    assert StatusDecider().decide(facts) is RequirementStatus.PARTIAL


def test_missing_hours_beat_exact_code() -> None:
    facts = _facts(MatchType.CODE, 0.9, hours_sufficient=False)

    assert StatusDecider().decide(facts) is RequirementStatus.PARTIAL


@pytest.mark.parametrize("validity", [ValidityStatus.NOT_APPLICABLE, ValidityStatus.MISSING])
def test_unknown_validity_does_not_block(validity: ValidityStatus) -> None:
    facts = _facts(MatchType.CODE, 0.9, validity=validity)

    assert StatusDecider().decide(facts) is RequirementStatus.SATISFIED
