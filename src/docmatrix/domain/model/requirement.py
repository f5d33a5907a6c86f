"""Matrix requirements and the vacancies that own them."""

from __future__ import annotations

from dataclasses import dataclass

from docmatrix.domain.model.enums import ObligationLevel

NOT_APPLICABLE = "N/A"


@dataclass(frozen=True, slots=True, kw_only=True)
class Requirement:
    """One row of a vacancy matrix.

    ``id`` is the catalog identity candidate documents link to; ``item_id``
    is the matrix row itself and is only carried for display and export.
    """

    id: str
    name: str
    code: str | None = None
    abbreviation: str | None = None
    obligation: ObligationLevel = ObligationLevel.MANDATORY
    modality: str = NOT_APPLICABLE
    required_hours: float | None = None
    validity_rule: str | None = None
    item_id: str | None = None
    english_name: str | None = None
    group: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if self.required_hours is not None and self.required_hours < 0:
            raise ValueError(f"Requirement {self.id!r} has negative required hours")


@dataclass(frozen=True, slots=True, kw_only=True)
class Matrix:
    """Ordered set of requirements attached to a vacancy."""

    id: str
    name: str
    requirements: tuple[Requirement, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for requirement in self.requirements:
            if requirement.id in seen:
                raise ValueError(
                    f"Matrix {self.id!r} lists requirement {requirement.id!r} more than once"
                )
            seen.add(requirement.id)


@dataclass(frozen=True, slots=True, kw_only=True)
class Vacancy:
    id: str
    title: str
    matrix: Matrix
    candidate_ids: tuple[str, ...] = ()
