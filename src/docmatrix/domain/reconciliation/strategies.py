"""Match strategies of the reconciliation cascade.

Each strategy looks for one candidate document that satisfies a requirement by
one kind of evidence and returns ``None`` when that evidence is absent. The
resolver decides which documents each strategy may see: only strategies that
declare ``includes_declarations`` are offered declaration documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Protocol

from docmatrix.domain.model import CodeMatchBasis, MatchType
from docmatrix.domain.normalize import normalize_text

from .contracts import MatchResult
from .hierarchy import RegulatoryHierarchy, StcwHierarchy
from .settings import MatchingConfig
from .similarity import SimilarityScorer

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from docmatrix.domain.model import CandidateDocument, Requirement


class MatchStrategy(Protocol):
    """One step of the cascade."""

    includes_declarations: ClassVar[bool]

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None: ...


@dataclass(frozen=True, slots=True)
class IdentityMatch:
    """Explicit catalog linkage, the only path that accepts declarations."""

    config: MatchingConfig = field(default_factory=MatchingConfig)
    includes_declarations: ClassVar[bool] = True

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None:
        document = _first(documents, lambda doc: doc.catalog_id == requirement.id)
        if document is None:
            return None
        return MatchResult(
            match_type=MatchType.IDENTITY,
            confidence=self.config.identity_confidence,
            document=document,
        )


@dataclass(frozen=True, slots=True)
class CodeMatch:
    """Regulatory code evidence, most specific sub-rule first."""

    config: MatchingConfig = field(default_factory=MatchingConfig)
    hierarchy: RegulatoryHierarchy = field(default_factory=StcwHierarchy)
    includes_declarations: ClassVar[bool] = False

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None:
        if not requirement.code:
            return None
        required = normalize_text(requirement.code)
        if not required:
            return None

        rules: tuple[tuple[CodeMatchBasis, float, Callable[[CandidateDocument], bool]], ...] = (
            (
                CodeMatchBasis.HIERARCHY,
                self.config.code_subtype_confidence,
                lambda doc: bool(doc.code_subtype)
                and self.hierarchy.satisfies(requirement.code or "", doc.code_subtype or ""),
            ),
            (
                CodeMatchBasis.SUBTYPE,
                self.config.code_subtype_confidence,
                lambda doc: normalize_text(doc.code_subtype) == required,
            ),
            (
                CodeMatchBasis.CODE,
                self.config.code_confidence,
                lambda doc: normalize_text(doc.code) == required,
            ),
            (
                CodeMatchBasis.NAME,
                self.config.code_in_name_confidence,
                lambda doc: required in normalize_text(doc.name),
            ),
        )
        for basis, confidence, predicate in rules:
            document = _first(documents, predicate)
            if document is not None:
                return MatchResult(
                    match_type=MatchType.CODE,
                    confidence=confidence,
                    document=document,
                    basis=basis,
                )
        return None


@dataclass(frozen=True, slots=True)
class AbbreviationMatch:
    config: MatchingConfig = field(default_factory=MatchingConfig)
    includes_declarations: ClassVar[bool] = False

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None:
        wanted = normalize_text(requirement.abbreviation)
        if not wanted:
            return None
        document = _first(documents, lambda doc: normalize_text(doc.abbreviation) == wanted)
        if document is None:
            return None
        return MatchResult(
            match_type=MatchType.ABBREVIATION,
            confidence=self.config.abbreviation_confidence,
            document=document,
        )


@dataclass(frozen=True, slots=True)
class SemanticNameMatch:
    """Best structural name similarity strictly above the semantic threshold."""

    scorer: SimilarityScorer = field(default_factory=SimilarityScorer)
    includes_declarations: ClassVar[bool] = False

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None:
        if not requirement.name:
            return None
        best: CandidateDocument | None = None
        best_score = self.scorer.config.semantic_threshold
        for document in documents:
            score = self.scorer.score(document.name, requirement.name)
            if score > best_score:
                best, best_score = document, score
        if best is None:
            return None
        return MatchResult(
            match_type=MatchType.SEMANTIC_NAME,
            confidence=best_score,
            document=best,
        )


@dataclass(frozen=True, slots=True)
class ExactNameMatch:
    config: MatchingConfig = field(default_factory=MatchingConfig)
    includes_declarations: ClassVar[bool] = False

    def try_match(
        self,
        requirement: Requirement,
        documents: Sequence[CandidateDocument],
    ) -> MatchResult | None:
        wanted = normalize_text(requirement.name)
        if not wanted:
            return None
        document = _first(documents, lambda doc: normalize_text(doc.name) == wanted)
        if document is None:
            return None
        return MatchResult(
            match_type=MatchType.EXACT_NAME,
            confidence=self.config.exact_name_confidence,
            document=document,
        )


def default_strategies(
    config: MatchingConfig | None = None,
    *,
    hierarchy: RegulatoryHierarchy | None = None,
) -> tuple[MatchStrategy, ...]:
    """Build the cascade in priority order: identity, code, abbreviation, names."""

    effective = config or MatchingConfig()
    return (
        IdentityMatch(effective),
        CodeMatch(effective, hierarchy or StcwHierarchy()),
        AbbreviationMatch(effective),
        SemanticNameMatch(SimilarityScorer(effective)),
        ExactNameMatch(effective),
    )


def _first(
    documents: Sequence[CandidateDocument],
    predicate: Callable[[CandidateDocument], bool],
) -> CandidateDocument | None:
    return next((document for document in documents if predicate(document)), None)
