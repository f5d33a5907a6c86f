"""Match resolution: walk the strategy cascade for one requirement.

Responsibilities of this stage:
- partition the candidate's documents into all / comparable (non-declaration)
- offer each strategy the partition it is allowed to see
- stop at the first strategy that returns a result

Out of scope for this stage:
- validity, hours and modality gates
- status decisions and display text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .contracts import MatchResult
from .strategies import default_strategies

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docmatrix.domain.model import CandidateDocument, Requirement

    from .strategies import MatchStrategy

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DocumentPool:
    """Documents available to the cascade for one resolution call."""

    all: tuple[CandidateDocument, ...]
    comparable: tuple[CandidateDocument, ...]

    @classmethod
    def partition(cls, documents: Iterable[CandidateDocument]) -> DocumentPool:
        everything = tuple(documents)
        return cls(
            all=everything,
            comparable=tuple(doc for doc in everything if not doc.is_declaration),
        )


@dataclass(frozen=True, slots=True)
class MatchResolver:
    strategies: tuple[MatchStrategy, ...] = field(default_factory=default_strategies)

    def resolve(
        self,
        requirement: Requirement,
        documents: Iterable[CandidateDocument],
    ) -> MatchResult:
        """Return the first strategy hit, or a no-match result."""

        # Rebuilt on every call: callers may change the document list between calls.
        pool = DocumentPool.partition(documents)
        for strategy in self.strategies:
            candidates = pool.all if strategy.includes_declarations else pool.comparable
            result = strategy.try_match(requirement, candidates)
            if result is not None:
                log.debug(
                    "Requirement %s matched document %s via %s (confidence=%.2f)",
                    requirement.id,
                    result.document.id if result.document else None,
                    result.match_type,
                    result.confidence,
                )
                return result
        return MatchResult.no_match()
