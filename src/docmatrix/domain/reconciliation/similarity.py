"""Structural name similarity used by the semantic-name strategy.

Rules are evaluated in order and the first one that applies wins:

1. equal after normalization
2. one name contains the other
3. both carry the same regulatory-code token (``NR-35``, ``TST004``, ...)
4. both mention shared domain keywords
5. token overlap ratio

The scorer is deterministic so scores for fixed pairs can be asserted exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from fractions import Fraction

from docmatrix.domain.normalize import normalize_text

from .settings import MatchingConfig

_CODE_TOKEN = re.compile(r"\b[a-z]{2,3}-?\d+")


@dataclass(frozen=True, slots=True)
class SimilarityScorer:
    config: MatchingConfig = field(default_factory=MatchingConfig)

    def score(self, first: str | None, second: str | None) -> float:
        """Return a similarity in ``[0, 1]`` between two free-text names."""

        left = normalize_text(first)
        right = normalize_text(second)
        if not left or not right:
            return 0.0

        if left == right:
            return 1.0
        if left in right or right in left:
            return self.config.containment_score

        left_code = _code_token(left)
        right_code = _code_token(right)
        if left_code is not None and left_code == right_code:
            return self.config.code_token_score

        shared = self.shared_keywords(left, right)
        if shared:
            return self._keyword_score(len(shared))

        return _token_overlap(left, right)

    def shared_keywords(self, left: str, right: str) -> tuple[str, ...]:
        """Domain keywords present in both (already normalized) names."""

        return tuple(
            keyword for keyword in self.config.keywords if keyword in left and keyword in right
        )

    def _keyword_score(self, shared: int) -> float:
        # Fractions keep 0.7 + 0.1 at exactly 0.8 so threshold checks stay stable.
        base = Fraction(str(self.config.keyword_base_score))
        step = Fraction(str(self.config.keyword_step_score))
        return float(min(Fraction(1), base + step * shared))


def _code_token(value: str) -> str | None:
    found = _CODE_TOKEN.search(value)
    return found.group(0) if found else None


def _token_overlap(left: str, right: str) -> float:
    left_tokens = left.split()
    right_tokens = right.split()
    common = sum(
        1
        for token in left_tokens
        if any(token == other or other in token or token in other for other in right_tokens)
    )
    if not common:
        return 0.0
    return common / max(len(left_tokens), len(right_tokens))
