"""Suggestion table rendering with character-level difference highlighting."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from warlock.ranking import ScoredCandidate

NO_MATCHES = "Command not found and no close matches."


@dataclass(frozen=True)
class Palette:
    """Styles used when highlighting a suggestion against the query."""

    match: str = "green"
    mismatch: str = "red"
    extra: str = "magenta"


def highlight_differences(query: str, suggestion: str, palette: Palette | None = None) -> Text:
    """Highlight a suggestion relative to the query.

    Characters equal to the query at the same position use the match style,
    differing ones the mismatch style, and characters past the end of the
    query the extra style.
    """
    palette = palette or Palette()
    text = Text()

    for position, ch in enumerate(suggestion):
        if position >= len(query):
            text.append(ch, style=palette.extra)
        elif query[position] == ch:
            text.append(ch, style=palette.match)
        else:
            text.append(ch, style=palette.mismatch)

    return text


class SuggestionTable:
    """Renders ranked suggestions to a console."""

    def __init__(
        self,
        console: Console | None = None,
        resolve: Callable[[str], str | None] | None = None,
        palette: Palette | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            console: Rich console to print to
            resolve: Maps a name to its executable path, None if unresolvable
            palette: Highlight styles
        """
        self.console = console or Console()
        self.palette = palette or Palette()
        self.resolve = resolve or shutil.which

    def build(
        self,
        matches: Sequence[ScoredCandidate],
        query: str,
        verbose: bool = False,
    ) -> Table | None:
        """Build the table, or None if no match resolves to an executable."""
        rows = []
        for match in matches:
            location = self.resolve(match.name)
            if location is not None:
                rows.append((match, location))

        if not rows:
            return None

        table = Table()
        table.add_column("Suggested Command", style="bold", min_width=20)
        table.add_column("Location", style="cyan", min_width=50)
        if verbose:
            table.add_column("Similarity", style="yellow", justify="right")

        for match, location in rows:
            cells = [
                highlight_differences(query, match.name, self.palette),
                Text(location),
            ]
            if verbose:
                cells.append(Text(f"{match.score:.2f}"))
            table.add_row(*cells)

        return table

    def render(
        self,
        matches: Sequence[ScoredCandidate],
        query: str,
        verbose: bool = False,
    ) -> bool:
        """Print the suggestion table.

        Returns:
            True if at least one suggestion was printed
        """
        table = self.build(matches, query, verbose)
        if table is None:
            self.console.print(NO_MATCHES)
            return False

        self.console.print(table)
        return True
