"""Load JSON snapshots from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .schema import SnapshotRecord
from .translator import translate_candidate, translate_matrix, translate_vacancy

if TYPE_CHECKING:
    from docmatrix.domain.model import Candidate, Matrix, Vacancy

log = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be parsed into domain objects."""


@dataclass(frozen=True, slots=True)
class Snapshot:
    matrix: Matrix
    candidates: tuple[Candidate, ...]
    vacancy: Vacancy | None = None

    def candidate(self, candidate_id: str) -> Candidate:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        raise SnapshotError(f"Candidate {candidate_id!r} is not part of the snapshot")


def parse_snapshot(payload: str | bytes) -> Snapshot:
    """Validate a JSON document and translate it into domain objects."""

    record = SnapshotRecord.model_validate_json(payload)
    matrix = translate_matrix(record.matrix)
    candidates = tuple(translate_candidate(candidate) for candidate in record.candidates)
    vacancy = translate_vacancy(record.vacancy, matrix=matrix) if record.vacancy else None
    return Snapshot(matrix=matrix, candidates=candidates, vacancy=vacancy)


def load_snapshot(path: str | Path) -> Snapshot:
    source = Path(path)
    try:
        snapshot = parse_snapshot(source.read_bytes())
    except ValueError as exc:
        raise SnapshotError(f"Invalid snapshot {source}: {exc}") from exc
    log.info(
        "Loaded snapshot %s: matrix %s with %s requirements, %s candidates",
        source,
        snapshot.matrix.id,
        len(snapshot.matrix.requirements),
        len(snapshot.candidates),
    )
    return snapshot
