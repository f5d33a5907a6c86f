"""Regulatory code supersession.

The engine only depends on the ``RegulatoryHierarchy`` protocol. ``StcwHierarchy``
is the default table for maritime STCW competencies, where a higher
certificate covers the lower ones listed next to it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol


class RegulatoryHierarchy(Protocol):
    """Decide whether a held code satisfies a required code."""

    def satisfies(self, required_code: str, held_code: str) -> bool: ...


STCW_COVERAGE: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "A-II/2": frozenset({"A-II/1", "A-II/4", "A-VI/1"}),  # master / chief mate
        "A-II/1": frozenset({"A-II/4", "A-VI/1"}),  # officer of the watch
        "A-III/2": frozenset({"A-III/1", "A-III/4", "A-VI/1"}),  # chief / 2nd engineer
        "A-III/1": frozenset({"A-III/4", "A-VI/1"}),  # engineering watch
        "A-III/6": frozenset({"A-VI/1"}),  # electro-technical officer
        "A-VI/3": frozenset({"A-VI/1"}),  # advanced fire fighting
        "A-VI/2-1": frozenset({"A-VI/1"}),  # survival craft and rescue boats
    }
)


@dataclass(frozen=True, slots=True)
class StcwHierarchy:
    coverage: Mapping[str, frozenset[str]] = field(default_factory=lambda: STCW_COVERAGE)

    def satisfies(self, required_code: str, held_code: str) -> bool:
        required = _canonical_code(required_code)
        held = _canonical_code(held_code)
        if not required or not held:
            return False
        if required == held:
            return True
        return required in self.coverage.get(held, frozenset())


def _canonical_code(value: str | None) -> str:
    return (value or "").strip().upper()
