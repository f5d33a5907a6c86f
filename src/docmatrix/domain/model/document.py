"""Candidate documents as produced by the extraction collaborators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class CandidateDocument:
    """One document held by a candidate.

    ``expiry_date`` is kept as received (ISO text) because its validity is a
    function of the clock at comparison time, never a stored property.
    Declarations are only ever matched through ``catalog_id``.
    """

    id: str
    name: str
    code: str | None = None
    code_subtype: str | None = None
    abbreviation: str | None = None
    catalog_id: str | None = None
    total_hours: float | None = None
    theoretical_hours: float | None = None
    practical_hours: float | None = None
    modality: str | None = None
    expiry_date: str | None = None
    issue_date: str | None = None
    is_declaration: bool = False
    group: str | None = None

    def __post_init__(self) -> None:
        for label, hours in (
            ("total", self.total_hours),
            ("theoretical", self.theoretical_hours),
            ("practical", self.practical_hours),
        ):
            if hours is not None and hours < 0:
                raise ValueError(f"Document {self.id!r} has negative {label} hours")


@dataclass(frozen=True, slots=True, kw_only=True)
class Candidate:
    id: str
    name: str
    documents: tuple[CandidateDocument, ...] = ()
