"""Ranking pipeline - ties config, scoring strategy and ranker together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from warlock.ranking.ranker import Ranker, ScoredCandidate
from warlock.similarity import ScoringStrategy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from warlock.config import MatchConfig

logger = logging.getLogger(__name__)


def rank(
    query: str,
    candidates: Sequence[str],
    config: MatchConfig,
) -> list[ScoredCandidate]:
    """Rank candidates against a query using a validated config.

    Blocks until every candidate is scored. Any worker pool the metrics use
    is opened for this call and shut down before returning.

    Args:
        query: The name to match
        candidates: Candidate names, deduplicated, in a deterministic order
        config: Validated match configuration

    Returns:
        Ordered list of scored candidates
    """
    ranker = Ranker.from_config(config)

    logger.debug(
        f"Ranking {len(candidates)} candidates for '{query}' "
        f"(algorithm={config.algorithm.value}, threshold={config.threshold}, "
        f"max_results={config.max_results}, concurrency={config.concurrency.value})"
    )

    with ScoringStrategy(config.concurrency, config.max_workers) as strategy:
        return ranker.rank(query, candidates, strategy)
