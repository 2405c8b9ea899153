"""
Root ``.gitignore`` matching on top of ``pathspec``'s git wildmatch rules.
"""

from __future__ import annotations

import os

import pathspec


class GitIgnore:
    """A parsed set of ignore rules, evaluated the way git does (last match wins)."""

    def __init__(self, lines: list[str] | None = None):
        self._spec = pathspec.GitIgnoreSpec.from_lines(lines or [])

    @classmethod
    def from_directory(cls, root: str) -> "GitIgnore":
        """Load ``root/.gitignore``; a missing file yields an empty matcher."""
        path = os.path.join(root, ".gitignore")
        if not os.path.isfile(path):
            return cls()
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return cls(f.read().splitlines())

    def __len__(self) -> int:
        # comments and blank lines parse to patterns that include nothing
        return sum(1 for p in self._spec.patterns if p.include is not None)

    def ignores(self, rel_path: str, is_dir: bool = False) -> bool:
        """
        Check a path against the rules.

        Args:
            rel_path: Path relative to the ignore file's directory, '/' separated
            is_dir: Whether the path names a directory

        Returns:
            True when the last matching rule ignores the path
        """
        if is_dir:
            rel_path = rel_path.rstrip("/") + "/"
        return bool(self._spec.match_file(rel_path))
