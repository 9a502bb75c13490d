"""Tests for suggestion table rendering."""

import io

from rich.console import Console

from warlock.output import NO_MATCHES, Palette, SuggestionTable, highlight_differences
from warlock.ranking import ScoredCandidate

LOCATIONS = {
    "git": "/usr/bin/git",
    "grep": "/usr/bin/grep",
}


def make_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


class TestHighlightDifferences:
    """Test character-level highlighting."""

    def test_mismatches(self) -> None:
        """Test positional matches and mismatches."""
        text = highlight_differences("gti", "git")

        assert text.plain == "git"
        assert [span.style for span in text.spans] == ["green", "red", "red"]

    def test_extra_characters(self) -> None:
        """Test characters past the query length."""
        text = highlight_differences("gi", "gitk")

        assert [span.style for span in text.spans] == ["green", "green", "magenta", "magenta"]

    def test_shorter_suggestion(self) -> None:
        """Test a suggestion shorter than the query."""
        text = highlight_differences("grepx", "grep")

        assert text.plain == "grep"
        assert all(span.style == "green" for span in text.spans)

    def test_custom_palette(self) -> None:
        """Test styles come from the given palette."""
        palette = Palette(match="blue", mismatch="yellow", extra="white")

        text = highlight_differences("ab", "xbz", palette)

        assert [span.style for span in text.spans] == ["yellow", "blue", "white"]


class TestSuggestionTable:
    """Test the suggestion table."""

    def test_render(self) -> None:
        """Test resolvable suggestions are printed with their location."""
        console, buffer = make_console()
        table = SuggestionTable(console=console, resolve=LOCATIONS.get)

        shown = table.render([ScoredCandidate("git", 0.9), ScoredCandidate("grep", 0.8)], "gti")

        output = buffer.getvalue()
        assert shown is True
        assert "Suggested Command" in output
        assert "/usr/bin/git" in output
        assert "/usr/bin/grep" in output
        assert "Similarity" not in output

    def test_render_verbose(self) -> None:
        """Test verbose mode adds the similarity column."""
        console, buffer = make_console()
        table = SuggestionTable(console=console, resolve=LOCATIONS.get)

        table.render([ScoredCandidate("git", 0.8666)], "gti", verbose=True)

        output = buffer.getvalue()
        assert "Similarity" in output
        assert "0.87" in output

    def test_unresolvable_filtered(self) -> None:
        """Test suggestions without an executable path are dropped."""
        console, buffer = make_console()
        table = SuggestionTable(console=console, resolve=LOCATIONS.get)

        table.render([ScoredCandidate("gitx", 0.95), ScoredCandidate("git", 0.9)], "gti")

        output = buffer.getvalue()
        assert "gitx" not in output
        assert "/usr/bin/git" in output

    def test_nothing_resolvable(self) -> None:
        """Test the fallback message when nothing resolves."""
        console, buffer = make_console()
        table = SuggestionTable(console=console, resolve=LOCATIONS.get)

        shown = table.render([ScoredCandidate("nope", 0.9)], "nop")

        assert shown is False
        assert NO_MATCHES in buffer.getvalue()
        assert table.build([ScoredCandidate("nope", 0.9)], "nop") is None

    def test_location_is_not_markup(self) -> None:
        """Test bracketed directory names are printed literally."""
        console, buffer = make_console()
        table = SuggestionTable(console=console, resolve=lambda name: f"/opt[red]/bin/{name}")

        table.render([ScoredCandidate("gitx", 0.9)], "gti")

        assert "/opt[red]/bin/gitx" in buffer.getvalue()
