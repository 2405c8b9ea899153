"""
Port and types describing LLM tools (function calls), independent of the provider.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class ToolSpec(TypedDict):
    """Specification for a tool that can be called by an LLM."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema


class ToolsHandlerPort(ABC):
    """
    Port interface for tools the model may call while exploring a repository.
    """

    @abstractmethod
    def available_tools(self) -> list[ToolSpec]:
        """
        Get the tools this handler can run.

        Returns:
            List of tool specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, object]) -> str:
        """
        Run a tool by name.

        Args:
            name: Name of the tool to invoke
            arguments: Decoded JSON arguments supplied by the model

        Returns:
            Text result handed back to the model

        Raises:
            ValueError: If the tool name is unknown
        """
        pass
