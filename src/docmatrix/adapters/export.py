"""Flat projection of comparison verdicts for spreadsheets."""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typing import TextIO

    from docmatrix.domain.comparison import CandidateComparison

EXPORT_COLUMNS = (
    "candidate",
    "requirement",
    "code",
    "abbreviation",
    "obligation",
    "required_hours",
    "modality",
    "status",
    "validity",
    "validity_date",
    "observations",
    "similarity",
    "match_type",
    "matched_document",
)

ExportRow: TypeAlias = dict[str, str]


def verdict_rows(comparison: CandidateComparison) -> list[ExportRow]:
    """One row per verdict, read straight from the verdict fields."""

    rows: list[ExportRow] = []
    for verdict in comparison.verdicts:
        requirement = verdict.requirement
        document = verdict.matched_document
        rows.append(
            {
                "candidate": comparison.candidate.name,
                "requirement": requirement.name if requirement else "",
                "code": (requirement.code or "") if requirement else "",
                "abbreviation": (requirement.abbreviation or "") if requirement else "",
                "obligation": str(requirement.obligation) if requirement else "",
                "required_hours": _hours(requirement.required_hours if requirement else None),
                "modality": requirement.modality if requirement else "",
                "status": str(verdict.status),
                "validity": str(verdict.validity_status),
                "validity_date": verdict.validity_date or "",
                "observations": verdict.observations,
                "similarity": f"{round(verdict.similarity_score * 100)}%",
                "match_type": str(verdict.match_type),
                "matched_document": document.name if document else "",
            }
        )
    return rows


def write_csv(rows: list[ExportRow], handle: TextIO) -> None:
    writer = csv.DictWriter(handle, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)


def _hours(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:g}"
