"""Reconciliation core: candidate documents against matrix requirements.

Layered flow for one requirement:
1) partition the candidate's documents (declarations vs comparable)
2) walk the match strategy cascade until one hits
3) evaluate hard gates (validity, hours) and the informational modality gate
4) record the facts once
5) project the facts into a status and an observation text
6) aggregate verdicts into adherence summaries
"""

from __future__ import annotations

from .aggregate import adherence_percentage, aggregate, aggregate_by
from .contracts import AggregateSummary, MatchResult, QualityGates, RequirementFacts, Verdict
from .engine import ReconciliationEngine
from .hierarchy import RegulatoryHierarchy, StcwHierarchy
from .resolve import MatchResolver
from .settings import MatchingConfig
from .similarity import SimilarityScorer
from .strategies import default_strategies
from .validity import Clock, evaluate_validity

__all__ = [
    "AggregateSummary",
    "Clock",
    "MatchResolver",
    "MatchResult",
    "MatchingConfig",
    "QualityGates",
    "ReconciliationEngine",
    "RegulatoryHierarchy",
    "RequirementFacts",
    "SimilarityScorer",
    "StcwHierarchy",
    "Verdict",
    "adherence_percentage",
    "aggregate",
    "aggregate_by",
    "default_strategies",
    "evaluate_validity",
]
