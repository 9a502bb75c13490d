"""Executable discovery on the search path."""

from .path import ExecutableLocator, search_path

__all__ = ["ExecutableLocator", "search_path"]
