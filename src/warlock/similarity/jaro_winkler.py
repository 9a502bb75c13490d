"""Jaro and Jaro-Winkler similarity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warlock.similarity.base import SimilarityMetric
from warlock.similarity.strategy import SEQUENTIAL

if TYPE_CHECKING:
    from warlock.similarity.strategy import ScoringStrategy

# Both strings must be longer than this before match discovery is split up
PARALLEL_MIN_LENGTH = 20

PREFIX_SCALE = 0.1
MAX_PREFIX_LENGTH = 4


def _window(i: int, match_distance: int, len2: int) -> range:
    return range(max(0, i - match_distance), min(len2 - 1, i + match_distance) + 1)


def _match_sequential(
    s1: str,
    s2: str,
    match_distance: int,
) -> tuple[list[bool], list[bool]]:
    s1_matches = [False] * len(s1)
    s2_matches = [False] * len(s2)

    for i, ch in enumerate(s1):
        for j in _window(i, match_distance, len(s2)):
            if not s2_matches[j] and s2[j] == ch:
                s1_matches[i] = True
                s2_matches[j] = True
                break

    return s1_matches, s2_matches


def _match_concurrent(
    s1: str,
    s2: str,
    match_distance: int,
    strategy: ScoringStrategy,
) -> tuple[list[bool], list[bool]]:
    """Find matches in two phases.

    Workers collect, for each index range of s1, the positions in the window
    holding an equal character. That only reads the inputs. A single pass
    then claims the first unclaimed position for each i in ascending order,
    which is exactly the greedy sequential assignment.
    """

    def collect(indices: range) -> list[list[int]]:
        return [
            [j for j in _window(i, match_distance, len(s2)) if s2[j] == s1[i]]
            for i in indices
        ]

    candidates: list[list[int]] = []
    for chunk in strategy.map(collect, strategy.split(0, len(s1))):
        candidates.extend(chunk)

    s1_matches = [False] * len(s1)
    s2_matches = [False] * len(s2)
    for i, positions in enumerate(candidates):
        for j in positions:
            if not s2_matches[j]:
                s1_matches[i] = True
                s2_matches[j] = True
                break

    return s1_matches, s2_matches


def _common_prefix(s1: str, s2: str) -> int:
    length = 0
    for c1, c2 in zip(s1, s2):
        if c1 != c2 or length == MAX_PREFIX_LENGTH:
            break
        length += 1
    return length


def jaro(a: str, b: str, strategy: ScoringStrategy | None = None) -> float:
    """Compute the Jaro similarity of two strings, case-insensitively.

    Args:
        a: First string
        b: Second string
        strategy: Scoring strategy, sequential when omitted

    Returns:
        Similarity in [0.0, 1.0]
    """
    s1 = a.lower()
    s2 = b.lower()
    len1, len2 = len(s1), len(s2)

    if len1 == 0 and len2 == 0:
        return 1.0
    if len1 == 0 or len2 == 0:
        return 0.0

    match_distance = max(max(len1, len2) // 2 - 1, 0)

    strategy = strategy or SEQUENTIAL
    if strategy.should_fan_out(len1, len2, PARALLEL_MIN_LENGTH):
        s1_matches, s2_matches = _match_concurrent(s1, s2, match_distance, strategy)
    else:
        s1_matches, s2_matches = _match_sequential(s1, s2, match_distance)

    matches = sum(s1_matches)
    if matches == 0:
        return 0.0

    s1_matched = [ch for ch, hit in zip(s1, s1_matches) if hit]
    s2_matched = [ch for ch, hit in zip(s2, s2_matches) if hit]
    transpositions = sum(c1 != c2 for c1, c2 in zip(s1_matched, s2_matched)) / 2

    return (matches / len1 + matches / len2 + (matches - transpositions) / matches) / 3.0


def similarity(a: str, b: str, strategy: ScoringStrategy | None = None) -> float:
    """Compute the Jaro-Winkler similarity of two strings.

    The Jaro score is boosted by 0.1 per character of common prefix, counting
    at most four characters.

    Args:
        a: First string
        b: Second string
        strategy: Scoring strategy, sequential when omitted

    Returns:
        Similarity in [0.0, 1.0]
    """
    score = jaro(a, b, strategy)
    if score == 0.0 or not a or not b:
        return score

    prefix_length = _common_prefix(a.lower(), b.lower())
    return min(score + prefix_length * PREFIX_SCALE * (1 - score), 1.0)


class JaroWinkler(SimilarityMetric):
    """Prefix-weighted Jaro-Winkler metric."""

    @property
    def name(self) -> str:
        return "jaro_winkler"

    def score(
        self,
        a: str,
        b: str,
        substitution_cost: float = 1.0,
        strategy: ScoringStrategy | None = None,
    ) -> float:
        # Substitution cost does not apply to match-window comparison
        return similarity(a, b, strategy)
