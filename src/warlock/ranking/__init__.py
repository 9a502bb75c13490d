"""Candidate ranking."""

from .pipeline import rank
from .ranker import Ranker, ScoredCandidate

__all__ = ["Ranker", "ScoredCandidate", "rank"]
