"""
Tools "codebase", "read_file" and "write_file" backed by the file repository.
"""

import json
import logging
from typing import Any, Optional

from agentboost.exceptions import FileRepositoryError
from agentboost.ports.files.file_repository_port import FileRepositoryPort
from agentboost.ports.llm.tools_port import ToolSpec, ToolsHandlerPort


class CodebaseToolsHandler(ToolsHandlerPort):
    """Handler for repository tools that can be called by an LLM or a plugin."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the codebase tools handler.

        Args:
            file_repository: Repository rooted at the project being inspected
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        return [
            {
                "name": "codebase",
                "description": "Get the source code tree starting from the project root",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "The directory path relative to the project root",
                        }
                    },
                    "required": [],
                },
            },
            {
                "name": "read_file",
                "description": "Read a file",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "The file path relative to the project root",
                        }
                    },
                    "required": ["path"],
                },
            },
            {
                "name": "write_file",
                "description": "Write a file",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "The file path relative to the project root",
                        },
                        "content": {
                            "type": "string",
                            "description": "The full content to write to the file",
                        },
                    },
                    "required": ["path", "content"],
                },
            },
        ]

    def codebase(self, path: str | None = None) -> str:
        """JSON array of every non-ignored file path under ``path``."""
        self._logger.info("Building codebase tree...")
        tree = self._file_repository.list_paths(path or None)
        return json.dumps(tree, indent=2)

    def read_file(self, path: str) -> str:
        """Text of the file, or an empty string when it cannot be read."""
        self._logger.info(f"Reading file: {path}")
        try:
            return self._file_repository.read_text(path)
        except FileRepositoryError as e:
            self._logger.debug(f"Could not read {path}: {e}")
            return ""

    def write_file(self, path: str, content: str) -> str:
        """Write the file and report the outcome as a sentence for the model."""
        try:
            self._file_repository.write_text(path, content)
        except FileRepositoryError as e:
            self._logger.warning(f"Could not write {path}: {e}")
            return f"Failed to write {path}."
        return f"{path} updated successfully."

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        if name == "codebase":
            return self.codebase(str(arguments.get("path") or ""))
        if name == "read_file":
            return self.read_file(str(arguments.get("path") or ""))
        if name == "write_file":
            return self.write_file(
                str(arguments.get("path") or ""), str(arguments.get("content") or "")
            )
        raise ValueError(f"Unknown tool: {name}")
