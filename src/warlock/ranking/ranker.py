"""Ranker - scores candidates, filters by threshold, orders and truncates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from warlock.similarity import Algorithm

if TYPE_CHECKING:
    from collections.abc import Iterable

    from warlock.config import MatchConfig
    from warlock.similarity import ScoringStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate name with its similarity to the query."""

    name: str
    score: float  # 0.0 to 1.0


class Ranker:
    """Ranks candidate names by similarity to a query."""

    def __init__(
        self,
        algorithm: Algorithm = Algorithm.JARO_WINKLER,
        threshold: float = 0.75,
        max_results: int = 5,
        substitution_cost: float = 1.0,
    ) -> None:
        """Initialize ranker.

        Args:
            algorithm: Similarity algorithm to score with
            threshold: Minimum score (inclusive) to keep a candidate
            max_results: Maximum number of results returned
            substitution_cost: Substitution cost for edit distance
        """
        self.algorithm = algorithm
        self.threshold = threshold
        self.max_results = max_results
        self.substitution_cost = substitution_cost

    @classmethod
    def from_config(cls, config: MatchConfig) -> Ranker:
        """Create a ranker from a validated config."""
        return cls(
            algorithm=config.algorithm,
            threshold=config.threshold,
            max_results=config.max_results,
            substitution_cost=config.substitution_cost,
        )

    def score_all(
        self,
        query: str,
        candidates: Iterable[str],
        strategy: ScoringStrategy | None = None,
    ) -> list[ScoredCandidate]:
        """Score every candidate, keeping input order."""
        scored = []
        for candidate in candidates:
            score = self.algorithm.score(query, candidate, self.substitution_cost, strategy)
            logger.debug(
                f"Comparing: {query} and {candidate}, Sensitivity: {self.substitution_cost}, "
                f"Algorithm: {self.algorithm.value}, Score: {score:.4f}"
            )
            scored.append(ScoredCandidate(name=candidate, score=score))
        return scored

    def rank(
        self,
        query: str,
        candidates: Iterable[str],
        strategy: ScoringStrategy | None = None,
    ) -> list[ScoredCandidate]:
        """Rank candidates against a query.

        Args:
            query: The (possibly misspelled) name to match
            candidates: Candidate names in a deterministic order
            strategy: Scoring strategy, sequential when omitted

        Returns:
            At most max_results candidates scoring at least the threshold,
            best first. Equal scores keep their input order.
        """
        scored = self.score_all(query, candidates, strategy)
        kept = [s for s in scored if s.score >= self.threshold]

        # list.sort is stable, reverse=True included
        kept.sort(key=lambda s: s.score, reverse=True)

        logger.debug(
            f"{len(kept)} of {len(scored)} candidates scored >= {self.threshold} "
            f"with {self.algorithm.value}"
        )
        return kept[: self.max_results]
