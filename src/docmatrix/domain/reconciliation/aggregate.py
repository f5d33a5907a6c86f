"""Adherence aggregation over per-requirement verdicts.

Every percentage the application shows (candidate card, detail view,
breakdowns, ranking key, export) is produced by ``aggregate``; nothing else
recounts statuses.
"""

from __future__ import annotations

import math
from collections import Counter
from fractions import Fraction
from typing import TYPE_CHECKING

from docmatrix.domain.model import RequirementStatus

from .contracts import AggregateSummary

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .contracts import Verdict


def aggregate(verdicts: Iterable[Verdict]) -> AggregateSummary:
    """Count verdicts by status and derive the adherence percentage.

    Partial verdicts weigh half a satisfied one; the percentage is rounded
    half-up to an integer and is 0 for an empty list.
    """

    counts = Counter(verdict.status for verdict in verdicts)
    satisfied = counts[RequirementStatus.SATISFIED]
    partial = counts[RequirementStatus.PARTIAL]
    pending = counts[RequirementStatus.PENDING]
    total = satisfied + partial + pending
    return AggregateSummary(
        total=total,
        satisfied=satisfied,
        partial=partial,
        pending=pending,
        adherence_percentage=adherence_percentage(satisfied, partial, total),
    )


def adherence_percentage(satisfied: int, partial: int, total: int) -> int:
    if total <= 0:
        return 0
    ratio = Fraction(100 * (2 * satisfied + partial), 2 * total)
    return math.floor(ratio + Fraction(1, 2))


def aggregate_by(
    verdicts: Iterable[Verdict],
    key: Callable[[Verdict], str],
) -> dict[str, AggregateSummary]:
    """Aggregate verdicts per group label, preserving first-seen group order."""

    grouped: dict[str, list[Verdict]] = {}
    for verdict in verdicts:
        grouped.setdefault(key(verdict), []).append(verdict)
    return {label: aggregate(members) for label, members in grouped.items()}
