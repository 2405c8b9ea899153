"""
Plugin port interface: a recognizer that says whether a repository uses a
technology and, if so, describes it as a markdown fragment.
"""

from abc import ABC, abstractmethod


class PluginPort(ABC):
    """Port interface for repository recognizers."""

    name: str

    @abstractmethod
    def detect(self) -> bool:
        """
        Check whether the repository looks like it uses this plugin's technology.

        Returns:
            True when evidence was found
        """
        pass

    @abstractmethod
    def compile(self) -> str:
        """
        Produce the AGENTS.md fragment for this technology.

        Returns:
            Markdown text, possibly empty

        Raises:
            PluginError: If the fragment cannot be produced
        """
        pass
