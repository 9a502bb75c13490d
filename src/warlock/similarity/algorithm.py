"""Closed set of similarity algorithms."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from warlock.similarity.jaro_winkler import JaroWinkler
from warlock.similarity.levenshtein import Levenshtein

if TYPE_CHECKING:
    from warlock.similarity.base import SimilarityMetric
    from warlock.similarity.strategy import ScoringStrategy


class Algorithm(Enum):
    """Available similarity algorithms."""

    LEVENSHTEIN = "levenshtein"
    JARO_WINKLER = "jaro_winkler"

    @property
    def metric(self) -> SimilarityMetric:
        """Metric implementing this algorithm."""
        return _METRICS[self]

    def score(
        self,
        a: str,
        b: str,
        substitution_cost: float = 1.0,
        strategy: ScoringStrategy | None = None,
    ) -> float:
        """Score two strings with this algorithm's metric."""
        return self.metric.score(a, b, substitution_cost, strategy)


_METRICS: dict[Algorithm, SimilarityMetric] = {
    Algorithm.LEVENSHTEIN: Levenshtein(),
    Algorithm.JARO_WINKLER: JaroWinkler(),
}
