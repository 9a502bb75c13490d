"""Terminal presentation of suggestions."""

from .table import NO_MATCHES, Palette, SuggestionTable, highlight_differences

__all__ = ["NO_MATCHES", "Palette", "SuggestionTable", "highlight_differences"]
