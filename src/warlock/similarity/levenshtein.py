"""Weighted Levenshtein edit distance and its normalized similarity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warlock.similarity.base import SimilarityMetric
from warlock.similarity.strategy import SEQUENTIAL

if TYPE_CHECKING:
    from warlock.similarity.strategy import ScoringStrategy

# Both strings must be longer than this before the table is filled concurrently
PARALLEL_MIN_LENGTH = 10

# In AUTO mode a diagonal is split only when every worker gets at least this many cells
DIAGONAL_MIN_CHUNK = 64


def _fill_cell(
    table: list[list[float]],
    a_chars: list[str],
    b_chars: list[str],
    i: int,
    j: int,
    substitution_cost: float,
) -> None:
    cost = 0 if a_chars[i - 1] == b_chars[j - 1] else substitution_cost
    table[i][j] = min(
        table[i - 1][j] + 1,  # deletion
        table[i][j - 1] + 1,  # insertion
        table[i - 1][j - 1] + cost,  # substitution
    )


def _fill_rows(
    table: list[list[float]],
    a_chars: list[str],
    b_chars: list[str],
    substitution_cost: float,
) -> None:
    for i in range(1, len(a_chars) + 1):
        for j in range(1, len(b_chars) + 1):
            _fill_cell(table, a_chars, b_chars, i, j, substitution_cost)


def _fill_wavefront(
    table: list[list[float]],
    a_chars: list[str],
    b_chars: list[str],
    substitution_cost: float,
    strategy: ScoringStrategy,
) -> None:
    """Fill the table one anti-diagonal at a time.

    Cells with i + j == d only read diagonals d - 1 and d - 2, so a diagonal
    can be split across workers once the previous ones are complete.
    ``strategy.map`` returns only after every chunk is done, which is the
    barrier between diagonals.
    """
    la, lb = len(a_chars), len(b_chars)

    for d in range(2, la + lb + 1):
        lo = max(1, d - lb)
        hi = min(la, d - 1)

        def fill(rows: range, d: int = d) -> None:
            for i in rows:
                _fill_cell(table, a_chars, b_chars, i, d - i, substitution_cost)

        strategy.map(fill, strategy.split(lo, hi + 1, DIAGONAL_MIN_CHUNK))


def distance(
    a: str,
    b: str,
    substitution_cost: float = 1.0,
    strategy: ScoringStrategy | None = None,
) -> float:
    """Compute the weighted edit distance between two strings.

    Insertions and deletions cost 1, substitutions cost ``substitution_cost``.
    Comparison is case-insensitive.

    Args:
        a: First string
        b: Second string
        substitution_cost: Cost of replacing one character
        strategy: Scoring strategy, sequential when omitted

    Returns:
        Minimum total edit cost
    """
    a_chars = list(a.lower())
    b_chars = list(b.lower())
    la, lb = len(a_chars), len(b_chars)

    table: list[list[float]] = [[0] * (lb + 1) for _ in range(la + 1)]
    for i in range(la + 1):
        table[i][0] = i
    for j in range(lb + 1):
        table[0][j] = j

    strategy = strategy or SEQUENTIAL
    if strategy.should_fan_out(la, lb, PARALLEL_MIN_LENGTH):
        _fill_wavefront(table, a_chars, b_chars, substitution_cost, strategy)
    else:
        _fill_rows(table, a_chars, b_chars, substitution_cost)

    return float(table[la][lb])


def similarity(
    a: str,
    b: str,
    substitution_cost: float = 1.0,
    strategy: ScoringStrategy | None = None,
) -> float:
    """Normalized edit similarity: 1 - distance / longest length, in [0, 1]."""
    max_len = max(len(a.lower()), len(b.lower()))
    if max_len == 0:
        return 1.0

    score = 1.0 - distance(a, b, substitution_cost, strategy) / max_len
    # Substitution costs above 1 can push the distance past max_len
    return min(max(score, 0.0), 1.0)


class Levenshtein(SimilarityMetric):
    """Edit-distance metric with a tunable substitution cost."""

    @property
    def name(self) -> str:
        return "levenshtein"

    def score(
        self,
        a: str,
        b: str,
        substitution_cost: float = 1.0,
        strategy: ScoringStrategy | None = None,
    ) -> float:
        return similarity(a, b, substitution_cost, strategy)
