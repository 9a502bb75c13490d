"""Warlock - a smarter `which` with fuzzy command suggestions."""

__version__ = "0.1.4"

# Lazy imports keep `warlock.cli` startup light
def __getattr__(name: str):
    """Lazy import of public components."""
    if name == "Warlock":
        from warlock.core import Warlock
        return Warlock
    elif name == "MatchConfig":
        from warlock.config import MatchConfig
        return MatchConfig
    elif name == "Algorithm":
        from warlock.similarity import Algorithm
        return Algorithm
    elif name == "ScoredCandidate":
        from warlock.ranking import ScoredCandidate
        return ScoredCandidate
    elif name == "rank":
        from warlock.ranking import rank
        return rank
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "Warlock",
    "MatchConfig",
    "Algorithm",
    "ScoredCandidate",
    "rank",
]
