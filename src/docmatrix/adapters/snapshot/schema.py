"""Snapshot schemas for matrix, candidate and vacancy rows.

Rows come from the back office export, so column names are the operators'
Portuguese ones; the English names are accepted as well.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CatalogDocumentRecord(SnapshotBaseModel):
    """A ``documents_catalog`` row nested under a matrix item."""

    id: str | None = None
    name: str | None = Field(default=None, validation_alias=AliasChoices("name", "nome_curso"))
    code: str | None = Field(default=None, validation_alias=AliasChoices("codigo", "code"))
    abbreviation: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sigla_documento", "sigla", "abbreviation"),
    )
    category: str | None = Field(
        default=None,
        validation_alias=AliasChoices("categoria", "document_category", "category"),
    )
    english_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("nome_ingles", "english_name"),
    )
    validity_rule: str | None = Field(
        default=None,
        validation_alias=AliasChoices("regra_validade", "validity_rule"),
    )
    group: str | None = Field(
        default=None,
        validation_alias=AliasChoices("group_name", "group"),
    )


class RequirementRecord(CatalogDocumentRecord):
    """A ``matrix_items`` row; catalog fields may be flat or nested."""

    document_id: str | None = None
    obligation: str | None = Field(
        default=None,
        validation_alias=AliasChoices("obrigatoriedade", "obligation"),
    )
    modality: str | None = Field(
        default=None,
        validation_alias=AliasChoices("modalidade", "modality"),
    )
    required_hours: float | None = Field(
        default=None,
        validation_alias=AliasChoices("carga_horaria", "required_hours"),
    )
    documents_catalog: CatalogDocumentRecord | None = None


class CandidateDocumentRecord(SnapshotBaseModel):
    id: str
    name: str = Field(
        default="",
        validation_alias=AliasChoices("document_name", "nome_curso", "name"),
    )
    code: str | None = Field(default=None, validation_alias=AliasChoices("codigo", "code"))
    code_subtype: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tipo_de_codigo", "code_subtype"),
    )
    abbreviation: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sigla_documento", "sigla", "abbreviation"),
    )
    catalog_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("catalog_document_id", "catalog_id"),
    )
    total_hours: float | None = Field(
        default=None,
        validation_alias=AliasChoices("carga_horaria_total", "total_hours"),
    )
    theoretical_hours: float | None = Field(
        default=None,
        validation_alias=AliasChoices("carga_horaria_teorica", "theoretical_hours"),
    )
    practical_hours: float | None = Field(
        default=None,
        validation_alias=AliasChoices("carga_horaria_pratica", "practical_hours"),
    )
    modality: str | None = Field(
        default=None,
        validation_alias=AliasChoices("modalidade", "modality"),
    )
    expiry_date: str | None = None
    issue_date: str | None = None
    is_declaration: bool = Field(
        default=False,
        validation_alias=AliasChoices("declaracao", "is_declaration"),
    )
    group: str | None = Field(
        default=None,
        validation_alias=AliasChoices("group_name", "group"),
    )


class CandidateRecord(SnapshotBaseModel):
    id: str
    name: str
    documents: list[CandidateDocumentRecord] = Field(default_factory=list)


class MatrixRecord(SnapshotBaseModel):
    id: str
    name: str = ""
    items: list[RequirementRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "matrix_items"),
    )


class VacancyRecord(SnapshotBaseModel):
    id: str
    title: str = ""
    candidate_ids: list[str] = Field(default_factory=list)


class SnapshotRecord(SnapshotBaseModel):
    matrix: MatrixRecord
    candidates: list[CandidateRecord] = Field(default_factory=list)
    vacancy: VacancyRecord | None = None
