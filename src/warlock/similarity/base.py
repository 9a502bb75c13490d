"""Base similarity metric class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warlock.similarity.strategy import ScoringStrategy


class SimilarityMetric(ABC):
    """A normalized string similarity measure.

    Implementations compare case-insensitively and always return a score in
    [0.0, 1.0], where 1.0 is an exact match.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Metric name."""
        pass

    @abstractmethod
    def score(
        self,
        a: str,
        b: str,
        substitution_cost: float = 1.0,
        strategy: ScoringStrategy | None = None,
    ) -> float:
        """Score the similarity of two strings.

        Args:
            a: Query string
            b: Candidate string
            substitution_cost: Cost of replacing one character, for metrics
                that weight edits
            strategy: Scoring strategy, sequential when omitted

        Returns:
            Similarity in [0.0, 1.0]
        """
        pass
