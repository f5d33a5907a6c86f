"""Quality gates evaluated on a matched document.

Hours and validity are hard gates. Modality is informational only: its note
reaches the observation text but never the status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docmatrix.domain.normalize import is_not_applicable, normalize_text

from .contracts import QualityGates
from .validity import evaluate_validity, utcnow

if TYPE_CHECKING:
    from docmatrix.domain.model import CandidateDocument, Requirement

    from .contracts import MatchResult
    from .validity import Clock

IN_PERSON = "presencial"

MODALITY_CLASSES: dict[str, frozenset[str]] = {
    IN_PERSON: frozenset({"presencial", "presence", "in-person", "in person"}),
    "ead": frozenset({"ead", "e-learning", "elearning", "online", "distancia", "a distancia"}),
    "hibrido": frozenset({"hibrido", "hybrid", "blended"}),
    "semipresencial": frozenset({"semipresencial", "semi-presencial"}),
}


def evaluate_quality_gates(
    requirement: Requirement,
    match: MatchResult,
    *,
    clock: Clock = utcnow,
) -> QualityGates:
    """Evaluate every gate for ``match``; the match must carry a document."""

    document = match.document
    if document is None:
        raise ValueError("Quality gates need a matched document")

    required_hours = requirement.required_hours
    actual_hours = document.total_hours
    hours_sufficient = True
    if required_hours is not None and required_hours > 0:
        hours_sufficient = (actual_hours or 0) >= required_hours

    modality_compatible, modality_note = check_modality(requirement.modality, document)
    return QualityGates(
        hours_sufficient=hours_sufficient,
        actual_hours=actual_hours,
        required_hours=required_hours,
        validity_status=evaluate_validity(document.expiry_date, clock=clock),
        modality_compatible=modality_compatible,
        modality_note=modality_note,
    )


def check_modality(
    required: str | None,
    document: CandidateDocument,
) -> tuple[bool, str | None]:
    """Return ``(compatible, note)`` for the requirement and document modalities."""

    if is_not_applicable(required) or is_not_applicable(document.modality):
        return True, None

    wanted = normalize_text(required)
    held = normalize_text(document.modality)
    wanted_class = modality_class(wanted)
    if wanted == held or (wanted_class is not None and wanted_class == modality_class(held)):
        return True, None

    reported = document.modality
    if wanted_class == IN_PERSON:
        return False, f"requirement demands in-person training; document reports {reported}"
    return False, f"different modality: requirement asks {required}, document reports {reported}"


def modality_class(normalized: str) -> str | None:
    for name, variants in MODALITY_CLASSES.items():
        if normalized in variants:
            return name
    return None
