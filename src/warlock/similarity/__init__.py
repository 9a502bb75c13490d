"""String similarity metrics and their scoring strategy."""

from .algorithm import Algorithm
from .base import SimilarityMetric
from .jaro_winkler import JaroWinkler
from .levenshtein import Levenshtein
from .strategy import ConcurrencyMode, ScoringStrategy

__all__ = [
    "Algorithm",
    "ConcurrencyMode",
    "JaroWinkler",
    "Levenshtein",
    "ScoringStrategy",
    "SimilarityMetric",
]
