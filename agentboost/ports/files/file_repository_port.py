"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod


class FileRepositoryPort(ABC):
    """Port interface for file repository operations rooted at a project directory."""

    @property
    @abstractmethod
    def root(self) -> str:
        """Absolute path of the directory every relative path is resolved against."""
        pass

    @abstractmethod
    def list_paths(self, directory: str | None = None) -> list[str]:
        """
        List all files below a directory, honoring the project's ignore rules.

        Args:
            directory: Directory relative to the root (defaults to the root itself)

        Returns:
            Sorted list of file paths relative to the root, using '/' separators

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a UTF-8 text file.

        Args:
            path: File path relative to the root

        Returns:
            The file content

        Raises:
            FileRepositoryError: If the file is missing or unreadable
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> str:
        """
        Create or overwrite a text file with UTF-8 content.

        Args:
            path: File path relative to the root
            content: Text content to write

        Returns:
            The relative path that was written

        Raises:
            FileRepositoryError: If writing fails
        """
        pass
