"""Status decision table.

Rules are evaluated top to bottom and the first one that applies wins:

1. no match                                      -> PENDING
2. matched document expired                      -> PARTIAL
3. matched document short of required hours      -> PARTIAL
4. identity / code / abbreviation / exact name   -> SATISFIED
5. semantic name at or above the satisfied cut   -> SATISFIED
6. semantic name in the borderline band          -> PARTIAL
7. anything else                                 -> PARTIAL

This stage must stay deterministic given the fact record alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docmatrix.domain.model import MatchType, RequirementStatus

from .settings import MatchingConfig

if TYPE_CHECKING:
    from .contracts import RequirementFacts

STRUCTURAL_MATCHES = frozenset(
    {MatchType.IDENTITY, MatchType.CODE, MatchType.ABBREVIATION, MatchType.EXACT_NAME}
)


@dataclass(frozen=True, slots=True)
class StatusDecider:
    config: MatchingConfig = field(default_factory=MatchingConfig)

    def decide(self, facts: RequirementFacts) -> RequirementStatus:
        match = facts.match
        gates = facts.gates
        if not match.found or gates is None:
            return RequirementStatus.PENDING
        if gates.expired:
            return RequirementStatus.PARTIAL
        if not gates.hours_sufficient:
            return RequirementStatus.PARTIAL
        if match.match_type in STRUCTURAL_MATCHES:
            return RequirementStatus.SATISFIED
        if (
            match.match_type is MatchType.SEMANTIC_NAME
            and match.confidence >= self.config.satisfied_threshold
        ):
            return RequirementStatus.SATISFIED
        # Borderline fuzzy matches stay partial even when every gate passed.
        return RequirementStatus.PARTIAL
