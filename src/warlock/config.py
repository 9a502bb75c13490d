"""Match configuration - validates raw textual options into a MatchConfig."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from thefuzz import process

from warlock.similarity import Algorithm, ConcurrencyMode

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_SUBSTITUTION_COST = 1.0
DEFAULT_THRESHOLD = 0.75
DEFAULT_MAX_RESULTS = 5

ALGORITHM_TAGS: dict[str, Algorithm] = {
    "levenshtein": Algorithm.LEVENSHTEIN,
    "lev": Algorithm.LEVENSHTEIN,
    "jaro_winkler": Algorithm.JARO_WINKLER,
    "jw": Algorithm.JARO_WINKLER,
}


class ConfigError(ValueError):
    """Raised when an option cannot be recovered with a default."""


@dataclass(frozen=True)
class MatchConfig:
    """Validated options for one ranking call."""

    substitution_cost: float = DEFAULT_SUBSTITUTION_COST
    algorithm: Algorithm = Algorithm.JARO_WINKLER
    threshold: float = DEFAULT_THRESHOLD
    max_results: int = DEFAULT_MAX_RESULTS
    concurrency: ConcurrencyMode = ConcurrencyMode.SEQUENTIAL
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Check invariants the core relies on."""
        if self.substitution_cost < 0:
            raise ConfigError(f"substitution_cost must be >= 0, got {self.substitution_cost}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigError(f"threshold must be within [0, 1], got {self.threshold}")
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int) or self.max_results < 1:
            raise ConfigError(f"max_results must be a positive integer, got {self.max_results!r}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError(f"max_workers must be a positive integer, got {self.max_workers}")

    @classmethod
    def from_raw(
        cls,
        sensitivity: str | None = None,
        algorithm: str | None = None,
        threshold: str | None = None,
        max_results: str | int | None = None,
        concurrency: str | None = None,
        max_workers: int | None = None,
    ) -> MatchConfig:
        """Build a config from raw option text.

        Args:
            sensitivity: Substitution cost text, e.g. "1.0" or ".5"
            algorithm: Algorithm tag (levenshtein, lev, jaro_winkler, jw)
            threshold: Minimum similarity text in [0, 1]
            max_results: Maximum number of suggestions
            concurrency: Concurrency mode (auto, sequential, concurrent)
            max_workers: Worker pool size, None for the CPU count

        Returns:
            A validated MatchConfig

        Raises:
            ConfigError: If max_results or max_workers is invalid
        """
        if max_workers is not None and max_workers < 1:
            raise ConfigError(f"jobs must be a positive integer, got {max_workers}")

        return cls(
            substitution_cost=parse_substitution_cost(sensitivity),
            algorithm=parse_algorithm(algorithm),
            threshold=parse_threshold(threshold),
            max_results=parse_max_results(max_results),
            concurrency=parse_concurrency(concurrency),
            max_workers=max_workers,
        )


def normalize_decimal(text: str) -> str:
    """Turn shorthand like ".5" into "0.5"."""
    text = text.strip()
    if text.startswith("."):
        return "0" + text
    if text.startswith("-."):
        return "-0" + text[1:]
    return text


def _parse_float(
    name: str,
    raw: str | None,
    default: float,
    valid: Callable[[float], bool],
) -> float:
    if raw is None:
        return default

    try:
        value = float(normalize_decimal(raw))
    except ValueError:
        logger.warning(f"Invalid {name} '{raw}', using default {default}")
        return default

    # float() accepts "nan" and "inf"; neither is usable here
    if value != value or not valid(value):
        logger.warning(f"Out-of-range {name} '{raw}', using default {default}")
        return default

    return value


def parse_substitution_cost(raw: str | None) -> float:
    """Parse the substitution cost (sensitivity), defaulting to 1.0."""
    return _parse_float(
        "sensitivity",
        raw,
        DEFAULT_SUBSTITUTION_COST,
        lambda v: 0.0 <= v < float("inf"),
    )


def parse_threshold(raw: str | None) -> float:
    """Parse the similarity threshold, defaulting to 0.75."""
    return _parse_float("threshold", raw, DEFAULT_THRESHOLD, lambda v: 0.0 <= v <= 1.0)


def parse_max_results(raw: str | int | None) -> int:
    """Parse the result count bound.

    Unlike the float options there is no silent fallback: a bad value is an
    input error for the caller.
    """
    if raw is None:
        return DEFAULT_MAX_RESULTS

    if isinstance(raw, bool):
        raise ConfigError(f"Invalid number of matches: {raw!r}")

    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw.strip())
        except ValueError as e:
            raise ConfigError(f"Invalid number of matches: {raw!r}") from e

    if value < 1:
        raise ConfigError(f"Number of matches must be at least 1, got {value}")

    return value


def parse_algorithm(raw: str | None) -> Algorithm:
    """Map an algorithm tag to an Algorithm, defaulting to Jaro-Winkler."""
    if raw is None:
        return Algorithm.JARO_WINKLER

    tag = raw.strip().lower()
    if tag in ALGORITHM_TAGS:
        return ALGORITHM_TAGS[tag]

    hint = ""
    best = process.extractOne(tag, list(ALGORITHM_TAGS)) if tag else None
    if best is not None and best[1] >= 60:
        hint = f" (did you mean '{best[0]}'?)"
    logger.warning(f"Unknown algorithm '{raw}'{hint}, using jaro_winkler")
    return Algorithm.JARO_WINKLER


def parse_concurrency(raw: str | None) -> ConcurrencyMode:
    """Map a concurrency mode name, defaulting to SEQUENTIAL."""
    if raw is None:
        return ConcurrencyMode.SEQUENTIAL

    try:
        return ConcurrencyMode(raw.strip().lower())
    except ValueError:
        logger.warning(f"Unknown concurrency mode '{raw}', using sequential")
        return ConcurrencyMode.SEQUENTIAL
