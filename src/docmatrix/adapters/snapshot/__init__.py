"""Snapshot adapter package."""

from __future__ import annotations

from .loader import Snapshot, SnapshotError, load_snapshot, parse_snapshot
from .schema import (
    CandidateDocumentRecord,
    CandidateRecord,
    CatalogDocumentRecord,
    MatrixRecord,
    RequirementRecord,
    SnapshotRecord,
    VacancyRecord,
)
from .translator import (
    translate_candidate,
    translate_document,
    translate_matrix,
    translate_requirement,
    translate_vacancy,
)

__all__ = [
    "CandidateDocumentRecord",
    "CandidateRecord",
    "CatalogDocumentRecord",
    "MatrixRecord",
    "RequirementRecord",
    "Snapshot",
    "SnapshotError",
    "SnapshotRecord",
    "VacancyRecord",
    "load_snapshot",
    "parse_snapshot",
    "translate_candidate",
    "translate_document",
    "translate_matrix",
    "translate_requirement",
    "translate_vacancy",
]
