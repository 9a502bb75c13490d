"""PATH scanning - candidate executable names and exact resolution."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def search_path(env_path: str | None = None) -> list[Path]:
    """Split a PATH string into its directories.

    Args:
        env_path: PATH value, defaults to the PATH environment variable

    Returns:
        Directories in PATH order, empty entries dropped
    """
    if env_path is None:
        env_path = os.environ.get("PATH", "")
    return [Path(entry) for entry in env_path.split(os.pathsep) if entry]


class ExecutableLocator:
    """Finds executables on a search path."""

    def __init__(
        self,
        ignore: Iterable[str] = (),
        ignore_dirs: Iterable[str] = (),
        env_path: str | None = None,
    ) -> None:
        """Initialize locator.

        Args:
            ignore: Substrings; names containing any of them are skipped
            ignore_dirs: Directories to skip, compared exactly
            env_path: PATH value, defaults to the PATH environment variable
        """
        self.ignore = [pattern for pattern in ignore if pattern]
        self.ignore_dirs = set(ignore_dirs)
        self.env_path = env_path

    def _is_ignored_dir(self, directory: Path) -> bool:
        return str(directory) in self.ignore_dirs

    def _is_ignored_name(self, name: str) -> bool:
        return any(pattern in name for pattern in self.ignore)

    def _list_dir(self, directory: Path) -> list[str]:
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError as e:
            logger.debug(f"Skipping unreadable PATH entry {directory}: {e}")
            return []

    def list_executables(self) -> list[str]:
        """List candidate names from every PATH directory.

        Returns:
            Unique names, first occurrence order, with ignore filters applied
        """
        seen: set[str] = set()
        names: list[str] = []

        for directory in search_path(self.env_path):
            if self._is_ignored_dir(directory):
                logger.debug(f"Ignoring directory: {directory}")
                continue

            for name in self._list_dir(directory):
                if name in seen or self._is_ignored_name(name):
                    continue
                seen.add(name)
                names.append(name)

        logger.debug(f"Total unique executables found: {len(names)}")
        return names

    def find_executable(self, name: str) -> str | None:
        """Resolve a name to an executable path, or None if there is none."""
        return shutil.which(name, path=self.env_path)
