"""Tunable thresholds of the reconciliation engine.

The default values are a behavioural contract shared with every screen and
export that shows a verdict; change them only when product rules change.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DOMAIN_KEYWORDS: tuple[str, ...] = (
    "seguranca",
    "saude",
    "trabalho",
    "plataforma",
    "petroleo",
    "offshore",
    "altura",
    "confinado",
    "supervisor",
    "basico",
    "avancado",
    "treinamento",
    "capacitacao",
    "maritimo",
    "aquaviario",
    "helicopter",
    "escape",
    "submersa",
    "socorros",
    "sobrevivencia",
    "incendio",
)


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchingConfig:
    """Similarity cutoffs, strategy confidences and the domain keyword list."""

    semantic_threshold: float = 0.7
    satisfied_threshold: float = 0.9

    containment_score: float = 0.8
    code_token_score: float = 0.85
    keyword_base_score: float = 0.7
    keyword_step_score: float = 0.1
    keywords: tuple[str, ...] = DEFAULT_DOMAIN_KEYWORDS

    identity_confidence: float = 1.0
    code_subtype_confidence: float = 0.95
    code_confidence: float = 0.9
    code_in_name_confidence: float = 0.85
    abbreviation_confidence: float = 0.9
    exact_name_confidence: float = 0.95
