"""Core Warlock functionality."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console

from warlock.config import MatchConfig
from warlock.locator import ExecutableLocator
from warlock.output import NO_MATCHES, Palette, SuggestionTable
from warlock.ranking import rank

if TYPE_CHECKING:
    from collections.abc import Iterable

    from warlock.ranking import ScoredCandidate

logger = logging.getLogger(__name__)


class Warlock:
    """A `which` that suggests close matches when a command is missing."""

    def __init__(
        self,
        config: MatchConfig | None = None,
        ignore: Iterable[str] = (),
        ignore_dirs: Iterable[str] = (),
        env_path: str | None = None,
        console: Console | None = None,
        palette: Palette | None = None,
        verbose: bool = False,
    ):
        self.config = config or MatchConfig()
        self.verbose = verbose
        self.console = console or Console()

        self.locator = ExecutableLocator(
            ignore=ignore,
            ignore_dirs=ignore_dirs,
            env_path=env_path,
        )
        self.table = SuggestionTable(
            console=self.console,
            resolve=self.locator.find_executable,
            palette=palette,
        )

        logger.debug(
            f"Warlock initialized: sensitivity={self.config.substitution_cost}, "
            f"algorithm={self.config.algorithm.value}, threshold={self.config.threshold}"
        )

    def suggest(self, command: str) -> list[ScoredCandidate]:
        """Rank executables on the search path against a command name.

        Args:
            command: The command to look for

        Returns:
            Best matches first, at most config.max_results
        """
        candidates = self.locator.list_executables()
        return rank(command, candidates, self.config)

    def which(self, command: str) -> str | None:
        """Locate a command, printing its path or the closest matches.

        Args:
            command: The command to look for

        Returns:
            The executable path on an exact match, otherwise None
        """
        logger.debug(f"Searching for '{command}' in PATH")

        path = self.locator.find_executable(command)
        if path is not None:
            logger.debug(f"Exact match found: {path}")
            self.console.print(path, markup=False, highlight=False, soft_wrap=True)
            return path

        logger.debug("Exact match not found, gathering executables from PATH")
        matches = self.suggest(command)

        if not matches:
            self.console.print(NO_MATCHES)
            return None

        self.console.print(
            f"\nCommand '{command}' not found. Close matches:\n",
            markup=False,
            highlight=False,
        )
        self.table.render(matches, command, verbose=self.verbose)
        return None
