"""Human-readable explanation of a verdict.

The composer reads the same ``RequirementFacts`` the status decider reads, so
the text shown next to a badge cannot contradict it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docmatrix.domain.model import CodeMatchBasis, MatchType, ValidityStatus

if TYPE_CHECKING:
    from .contracts import RequirementFacts

SEPARATOR = " | "
DECLARATION_MARKER = "Declaration"
NOT_FOUND = "document not found"
INVALID_REQUIREMENT = "invalid matrix requirement"

_STRATEGY_PHRASES: dict[MatchType, str] = {
    MatchType.IDENTITY: "exact catalog ID match",
    MatchType.ABBREVIATION: "abbreviation match",
    MatchType.SEMANTIC_NAME: "name similarity with differences",
    MatchType.EXACT_NAME: "identical course name",
    MatchType.NONE: "no code/name comparison found",
}

_CODE_PHRASES: dict[CodeMatchBasis, str] = {
    CodeMatchBasis.HIERARCHY: "regulatory-hierarchy code match",
    CodeMatchBasis.SUBTYPE: "code subtype match",
    CodeMatchBasis.CODE: "exact code match",
    CodeMatchBasis.NAME: "code found in document name",
}

_VALIDITY_PHRASES: dict[ValidityStatus, str] = {
    ValidityStatus.EXPIRED: "document expired",
    ValidityStatus.VALID: "document valid",
}


def compose_observations(facts: RequirementFacts) -> str:
    match = facts.match
    gates = facts.gates
    if not match.found or gates is None:
        return NOT_FOUND

    parts: list[str] = []
    if facts.is_declaration_link:
        parts.append(DECLARATION_MARKER)
    parts.append(_strategy_phrase(facts))
    if not gates.hours_sufficient:
        parts.append(
            f"hours below required: candidate has {format_hours(gates.actual_hours or 0)}"
            f" and the matrix asks {format_hours(gates.required_hours or 0)}"
        )
    if not gates.modality_compatible and gates.modality_note:
        parts.append(gates.modality_note)
    validity = _VALIDITY_PHRASES.get(gates.validity_status)
    if validity:
        parts.append(validity)
    if match.confidence < 1.0:
        parts.append(f"similarity {round(match.confidence * 100)}%")
    return SEPARATOR.join(parts)


def format_hours(hours: float) -> str:
    """Render ``8.0`` as ``8h`` and ``7.5`` as ``7.5h``."""

    if float(hours).is_integer():
        return f"{int(hours)}h"
    return f"{hours:g}h"


def _strategy_phrase(facts: RequirementFacts) -> str:
    match = facts.match
    if match.match_type is MatchType.CODE:
        return _CODE_PHRASES[match.basis or CodeMatchBasis.CODE]
    return _STRATEGY_PHRASES[match.match_type]
