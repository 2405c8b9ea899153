"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from agentboost.exceptions import FileRepositoryError
from agentboost.ports.files.file_repository_port import FileRepositoryPort
from agentboost.utils.gitignore import GitIgnore
from agentboost.utils.workspace import ensure_within_root, resolve_root, to_relative

ALWAYS_IGNORED_DIRS = frozenset({".git"})


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, root: str | None = None, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            root: Repository directory; defaults to the workspace root
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._root: str = resolve_root(root)
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    @override
    def root(self) -> str:
        return self._root

    def _resolve(self, path: str) -> str:
        """
        Resolve a relative path inside the root.

        Raises:
            FileRepositoryError: If the path escapes the root
        """
        ok, abs_path = ensure_within_root(self._root, path or ".")
        if not ok:
            raise FileRepositoryError(f"Path is outside of the project root: {path}")
        return abs_path

    @override
    def list_paths(self, directory: str | None = None) -> list[str]:
        """
        List all files below a directory, skipping .git and .gitignore matches.

        Args:
            directory: Directory relative to the root (defaults to the root itself)

        Returns:
            Sorted list of relative file paths

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            top = self._resolve(directory or ".")
            if not os.path.exists(top):
                raise FileRepositoryError(f"Directory does not exist: {directory}")
            if not os.path.isdir(top):
                raise FileRepositoryError(f"Path is not a directory: {directory}")

            ignore = GitIgnore.from_directory(self._root)
            self._logger.debug(f"Loaded {len(ignore)} ignore rules from {self._root}")

            paths: list[str] = []
            for current, dirs, files in os.walk(top):
                dirs[:] = [
                    d
                    for d in dirs
                    if d not in ALWAYS_IGNORED_DIRS
                    and not ignore.ignores(
                        to_relative(self._root, os.path.join(current, d)), is_dir=True
                    )
                ]
                for name in files:
                    rel = to_relative(self._root, os.path.join(current, name))
                    if not ignore.ignores(rel):
                        paths.append(rel)
            return sorted(paths)

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def read_text(self, path: str) -> str:
        """
        Read a UTF-8 text file.

        Args:
            path: File path relative to the root

        Returns:
            The file content

        Raises:
            FileRepositoryError: If the file is missing, not a file or not UTF-8
        """
        abs_path = self._resolve(path)
        if not os.path.exists(abs_path):
            raise FileRepositoryError(f"File does not exist: {path}")
        if not os.path.isfile(abs_path):
            raise FileRepositoryError(f"Path is not a file: {path}")
        try:
            with open(abs_path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError:
            raise FileRepositoryError(f"File is not valid UTF-8 text: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def write_text(self, path: str, content: str) -> str:
        """
        Create or overwrite a text file, creating parent directories.

        Args:
            path: File path relative to the root
            content: Text content to write

        Returns:
            The relative path that was written

        Raises:
            FileRepositoryError: If writing fails
        """
        abs_path = self._resolve(path)
        try:
            os.makedirs(os.path.dirname(abs_path), exist_ok=True)
            with open(abs_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")
        rel = to_relative(self._root, abs_path)
        self._logger.info(f"Wrote {len(content)} characters to {rel}")
        return rel
