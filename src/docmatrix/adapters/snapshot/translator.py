"""Translate snapshot records into domain entities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docmatrix.domain.model import (
    NOT_APPLICABLE,
    Candidate,
    CandidateDocument,
    Matrix,
    ObligationLevel,
    Requirement,
    Vacancy,
)

if TYPE_CHECKING:
    from .schema import (
        CandidateDocumentRecord,
        CandidateRecord,
        MatrixRecord,
        RequirementRecord,
        VacancyRecord,
    )

log = logging.getLogger(__name__)

_CATALOG_FIELDS = (
    "name",
    "code",
    "abbreviation",
    "category",
    "english_name",
    "validity_rule",
    "group",
)


def translate_requirement(record: RequirementRecord) -> Requirement | None:
    """Build a requirement, or ``None`` when the row has no catalog identity.

    Nested catalog values win over flat ones on the same row.
    """

    catalog = record.documents_catalog
    identity = record.document_id or (catalog.id if catalog else None) or record.id
    if not identity:
        log.warning("Dropping matrix item without a catalog identity: %r", record)
        return None

    values = {name: getattr(record, name) for name in _CATALOG_FIELDS}
    if catalog is not None:
        for name in _CATALOG_FIELDS:
            nested = getattr(catalog, name)
            if nested:
                values[name] = nested

    return Requirement(
        id=identity,
        item_id=record.id,
        name=values["name"] or "",
        code=values["code"],
        abbreviation=values["abbreviation"],
        obligation=ObligationLevel.parse(record.obligation),
        modality=record.modality or NOT_APPLICABLE,
        required_hours=record.required_hours,
        validity_rule=values["validity_rule"],
        english_name=values["english_name"],
        group=values["group"],
        category=values["category"],
    )


def translate_matrix(record: MatrixRecord) -> Matrix:
    requirements = tuple(
        requirement
        for requirement in (translate_requirement(item) for item in record.items)
        if requirement is not None
    )
    return Matrix(id=record.id, name=record.name, requirements=requirements)


def translate_document(record: CandidateDocumentRecord) -> CandidateDocument:
    return CandidateDocument(
        id=record.id,
        name=record.name,
        code=record.code,
        code_subtype=record.code_subtype,
        abbreviation=record.abbreviation,
        catalog_id=record.catalog_id,
        total_hours=record.total_hours,
        theoretical_hours=record.theoretical_hours,
        practical_hours=record.practical_hours,
        modality=record.modality,
        expiry_date=record.expiry_date,
        issue_date=record.issue_date,
        is_declaration=record.is_declaration,
        group=record.group,
    )


def translate_candidate(record: CandidateRecord) -> Candidate:
    return Candidate(
        id=record.id,
        name=record.name,
        documents=tuple(translate_document(document) for document in record.documents),
    )


def translate_vacancy(record: VacancyRecord, *, matrix: Matrix) -> Vacancy:
    return Vacancy(
        id=record.id,
        title=record.title,
        matrix=matrix,
        candidate_ids=tuple(record.candidate_ids),
    )
