"""Expiry classification for candidate documents."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Protocol

from docmatrix.domain.model import ValidityStatus

_ABSENT_MARKERS = frozenset({"", "null", "undefined"})


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


def evaluate_validity(expiry: str | None, *, clock: Clock = utcnow) -> ValidityStatus:
    """Classify ``expiry`` against the current time reported by ``clock``.

    Date-only values are read as midnight UTC, so a document expiring today is
    already expired once the day has started. Timestamps without an offset are
    read as UTC. Unparsable values are ``MISSING`` rather than an error.
    """

    if expiry is None or expiry.strip() in _ABSENT_MARKERS:
        return ValidityStatus.NOT_APPLICABLE

    parsed = parse_expiry(expiry)
    if parsed is None:
        return ValidityStatus.MISSING

    now = _ensure_utc(clock())
    return ValidityStatus.EXPIRED if parsed < now else ValidityStatus.VALID


def parse_expiry(value: str) -> datetime | None:
    """Parse an ISO date or timestamp into a UTC instant, or ``None``."""

    normalized = value.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        if len(normalized) == 10:  # noqa: PLR2004
            day = date.fromisoformat(normalized)
            return datetime(day.year, day.month, day.day, tzinfo=UTC)
        return _ensure_utc(datetime.fromisoformat(normalized))
    except ValueError:
        return None


def _ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
