from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docmatrix.domain.model import MatchType, RequirementStatus, ValidityStatus
from docmatrix.domain.reconciliation import MatchResolver, ReconciliationEngine
from tests.helpers.documents import PAST_DATE, make_document, make_requirement

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docmatrix.domain.model import CandidateDocument, Requirement
    from docmatrix.domain.reconciliation import MatchResult
    from tests.helpers.documents import FixedClock


def test_code_match_with_enough_hours_is_satisfied(engine: ReconciliationEngine) -> None:
    document = make_document(code="NR-35", total_hours=8)

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.status is RequirementStatus.SATISFIED
    assert verdict.match_type is MatchType.CODE
    assert verdict.similarity_score == 0.9
    assert verdict.validity_status is ValidityStatus.VALID
    assert verdict.matched_document is document
    assert verdict.observations == "exact code match | document valid | similarity 90%"


def test_short_hours_are_partial_and_quoted(engine: ReconciliationEngine) -> None:
    document = make_document(code="NR-35", total_hours=4)

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.status is RequirementStatus.PARTIAL
    assert "4h" in verdict.observations
    assert "8h" in verdict.observations


def test_expired_exact_code_is_partial(engine: ReconciliationEngine) -> None:
    document = make_document(code="NR-35", total_hours=8, expiry_date=PAST_DATE)

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.status is RequirementStatus.PARTIAL
    assert verdict.validity_status is ValidityStatus.EXPIRED
    assert verdict.validity_date == PAST_DATE
    assert "document expired" in verdict.observations


def test_borderline_name_similarity_is_partial(engine: ReconciliationEngine) -> None:
    requirement = make_requirement(
        "Curso de Primeiros Socorros",
        requirement_id="cat-ps",
        code=None,
        required_hours=None,
    )
    document = make_document("Treinamento de Primeiros Socorros Básico", expiry_date=None)

    verdict = engine.resolve_requirement(requirement, [document])

    assert verdict.match_type is MatchType.SEMANTIC_NAME
    assert 0.8 <= verdict.similarity_score < 0.9
    assert verdict.status is RequirementStatus.PARTIAL
    assert verdict.validity_status is ValidityStatus.NOT_APPLICABLE
    assert verdict.observations == "name similarity with differences | similarity 80%"


def test_unmatched_requirement_is_pending(engine: ReconciliationEngine) -> None:
    document = make_document("Certificado de Mergulho", document_id="doc-x")

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.status is RequirementStatus.PENDING
    assert verdict.observations == "document not found"
    assert verdict.similarity_score == 0
    assert verdict.match_type is MatchType.NONE
    assert verdict.validity_status is ValidityStatus.MISSING
    assert verdict.matched_document is None


def test_declaration_linked_by_catalog_id_is_evaluated(engine: ReconciliationEngine) -> None:
    declaration = make_document(
        "Declaração de experiência",
        catalog_id="cat-nr35",
        total_hours=8,
        is_declaration=True,
    )

    verdict = engine.resolve_requirement(make_requirement(), [declaration])

    assert verdict.match_type is MatchType.IDENTITY
    assert verdict.similarity_score == 1.0
    assert verdict.status is RequirementStatus.SATISFIED
    assert verdict.observations.startswith("Declaration | exact catalog ID match")
    assert "similarity" not in verdict.observations


def test_declarations_never_match_by_code_or_name(engine: ReconciliationEngine) -> None:
    declaration = make_document(
        "NR-35 Trabalho em Altura",
        code="NR-35",
        total_hours=8,
        is_declaration=True,
    )

    verdict = engine.resolve_requirement(make_requirement(), [declaration])

    assert verdict.status is RequirementStatus.PENDING


def test_identity_wins_over_code(engine: ReconciliationEngine) -> None:
    by_code = make_document(document_id="doc-code", code="NR-35", total_hours=8)
    by_link = make_document(document_id="doc-link", catalog_id="cat-nr35", total_hours=8)

    verdict = engine.resolve_requirement(make_requirement(), [by_code, by_link])

    assert verdict.matched_document is by_link
    assert verdict.match_type is MatchType.IDENTITY


def test_verdicts_are_deterministic(engine: ReconciliationEngine) -> None:
    documents = [
        make_document(document_id="doc-a", code="NR-35", total_hours=4),
        make_document("Primeiros Socorros", document_id="doc-b"),
    ]
    requirement = make_requirement()

    first = engine.resolve_requirement(requirement, documents)
    second = engine.resolve_requirement(requirement, documents)

    assert first == second


def test_invalid_requirement_becomes_pending(engine: ReconciliationEngine) -> None:
    verdict = engine.resolve_requirement(None, [make_document()])

    assert verdict.status is RequirementStatus.PENDING
    assert verdict.observations == "invalid matrix requirement"
    assert verdict.requirement is None


def test_requirement_without_id_becomes_pending(engine: ReconciliationEngine) -> None:
    requirement = make_requirement(requirement_id="")

    verdict = engine.resolve_requirement(requirement, [make_document(code="NR-35")])

    assert verdict.status is RequirementStatus.PENDING
    assert verdict.observations == "invalid matrix requirement"


def test_internal_errors_become_pending_verdicts(clock: FixedClock) -> None:
    class _Exploding:
        includes_declarations = False

        def try_match(
            self,
            requirement: Requirement,
            documents: Sequence[CandidateDocument],
        ) -> MatchResult | None:
            raise RuntimeError("boom")

    engine = ReconciliationEngine(resolver=MatchResolver((_Exploding(),)), clock=clock)

    verdict = engine.resolve_requirement(make_requirement(), [make_document()])

    assert verdict.status is RequirementStatus.PENDING
    assert verdict.observations == "comparison error: boom"
    assert verdict.similarity_score == 0


@pytest.mark.parametrize(
    ("total_hours", "expiry_date", "expected"),
    [
        (8, None, RequirementStatus.SATISFIED),
        (2, None, RequirementStatus.PARTIAL),
        (8, PAST_DATE, RequirementStatus.PARTIAL),
        (2, PAST_DATE, RequirementStatus.PARTIAL),
    ],
)
def test_hard_gates_override_structural_matches(
    engine: ReconciliationEngine,
    total_hours: float,
    expiry_date: str | None,
    expected: RequirementStatus,
) -> None:
    document = make_document(code="NR-35", total_hours=total_hours, expiry_date=expiry_date)

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.status is expected


def test_date_only_expiry_of_today_is_partial(engine: ReconciliationEngine) -> None:
    document = make_document(code="NR-35", total_hours=8, expiry_date="2025-06-01")

    verdict = engine.resolve_requirement(make_requirement(), [document])

    assert verdict.validity_status is ValidityStatus.EXPIRED
    assert verdict.status is RequirementStatus.PARTIAL
