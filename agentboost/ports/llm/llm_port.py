"""
Language model port used when a plugin needs prose about the repository
(e.g. the "Big Picture" section of AGENTS.md).
"""

from abc import ABC, abstractmethod
from typing import Any


class LLMPort(ABC):
    """A model that can be asked to describe the codebase."""

    @abstractmethod
    def generate_response(self, prompt: str, **kwargs: Any) -> str:
        """
        Answer a documentation request about the repository.

        Args:
            prompt: What to write, e.g. the bundled big-picture prompt
            **kwargs: Adapter options such as ``system_message`` or
                ``tool_max_steps``

        Returns:
            Markdown text ready to become an AGENTS.md fragment

        Raises:
            LLMError: If the model gives no usable answer
        """
        pass

    @abstractmethod
    def execute_with_system_message(
        self, prompt: str, system_message: str, **kwargs: Any
    ) -> str:
        """Same as ``generate_response`` with an explicit persona for the model."""
        pass

    def get_model_info(self) -> dict[str, Any]:
        """Provider and model name, for logs."""
        return {"provider": "Unknown", "model": "Unknown"}
