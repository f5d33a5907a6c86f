"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum

from docmatrix.domain.normalize import normalize_text


class ObligationLevel(StrEnum):
    """How strongly a matrix demands a document. Never affects matching."""

    ELIMINATORY = "eliminatory"
    MANDATORY = "mandatory"
    RECOMMENDED = "recommended"
    CLIENT_REQUIRED = "client_required"

    @classmethod
    def parse(cls, value: str | ObligationLevel | None) -> ObligationLevel:
        """Map operator-typed obligation text onto the closed set.

        Accepts the enum values themselves plus the Portuguese labels used by
        the back office ("Obrigatório", "Requerido pelo Cliente", ...).
        Blank input defaults to ``MANDATORY``.
        """

        if isinstance(value, ObligationLevel):
            return value
        folded = normalize_text(value)
        if not folded:
            return cls.MANDATORY
        key = folded.replace(" ", "_").replace("-", "_")
        for level in cls:
            if level.value == key:
                return level
        for needle, level in _OBLIGATION_KEYWORDS:
            if needle in folded:
                return level
        raise ValueError(f"Unknown obligation level: {value!r}")


# Order matters: "requerido cliente" must win over the generic "requerido".
_OBLIGATION_KEYWORDS: tuple[tuple[str, ObligationLevel], ...] = (
    ("eliminat", ObligationLevel.ELIMINATORY),
    ("client", ObligationLevel.CLIENT_REQUIRED),
    ("recomend", ObligationLevel.RECOMMENDED),
    ("recommend", ObligationLevel.RECOMMENDED),
    ("desejavel", ObligationLevel.RECOMMENDED),
    ("opcional", ObligationLevel.RECOMMENDED),
    ("obrigat", ObligationLevel.MANDATORY),
    ("mandat", ObligationLevel.MANDATORY),
    ("requerido", ObligationLevel.MANDATORY),
)


class MatchType(StrEnum):
    """Which cascade strategy located the candidate document."""

    IDENTITY = "exact_id"
    CODE = "exact_code"
    ABBREVIATION = "exact_sigla"
    SEMANTIC_NAME = "semantic_name"
    EXACT_NAME = "exact_name"
    NONE = "none"


class CodeMatchBasis(StrEnum):
    """Sub-rule of the code strategy that fired."""

    HIERARCHY = "hierarchy"
    SUBTYPE = "subtype"
    CODE = "code"
    NAME = "name"


class ValidityStatus(StrEnum):
    VALID = "valid"
    EXPIRED = "expired"
    NOT_APPLICABLE = "not_applicable"
    MISSING = "missing"


class RequirementStatus(StrEnum):
    SATISFIED = "satisfied"
    PARTIAL = "partial"
    PENDING = "pending"
