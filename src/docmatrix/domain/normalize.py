"""Text canonicalization shared by every comparison in the domain."""

from __future__ import annotations

import unicodedata

_NOT_APPLICABLE_MARKERS = frozenset({"n/a", "na", "nao aplicavel", "not applicable"})


def normalize_text(value: str | None) -> str:
    """Case-fold, strip accents and trim ``value``.

    ``None`` and empty strings normalize to ``""``; the function never raises.
    """

    if not value:
        return ""
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()


def is_not_applicable(value: str | None) -> bool:
    """Return whether ``value`` is blank or one of the "not applicable" markers."""

    normalized = normalize_text(value)
    return not normalized or normalized in _NOT_APPLICABLE_MARKERS
