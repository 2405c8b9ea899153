"""
Dependency injection container for managing application dependencies.
"""

import logging

from agentboost.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from agentboost.adapters.llm.openai_tools_adapter import OpenAIToolsAdapter
from agentboost.plugins.base import PluginContext
from agentboost.ports.files.file_repository_port import FileRepositoryPort
from agentboost.ports.llm.llm_port import LLMPort
from agentboost.ports.llm.tools_port import ToolsHandlerPort
from agentboost.use_cases.tools.codebase_tools import CodebaseToolsHandler
from agentboost.utils.workspace import resolve_root


class DependencyContainer:
    """
    Container for the dependencies of one run against one repository.
    """

    def __init__(self, cwd: str | None = None):
        self.cwd = resolve_root(cwd)
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance rooted at the repository.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(
                self.cwd, self._logger
            )
        return self._instances["file_repository"]

    def get_tools_handler(self) -> ToolsHandlerPort:
        """
        Get the codebase/read_file/write_file tools handler.

        Returns:
            ToolsHandlerPort implementation
        """
        if "tools_handler" not in self._instances:
            self._instances["tools_handler"] = CodebaseToolsHandler(
                self.get_file_repository(), self._logger
            )
        return self._instances["tools_handler"]

    def get_llm_tools_adapter(self) -> LLMPort:
        """
        LLM adapter that can call the codebase tools.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is not set
        """
        if "llm_tools_adapter" not in self._instances:
            self._instances["llm_tools_adapter"] = OpenAIToolsAdapter(
                tools_handler=self.get_tools_handler(), logger=self._logger
            )
        return self._instances["llm_tools_adapter"]

    def get_plugin_context(self) -> PluginContext:
        """Context handed to every plugin; the LLM is only built when a plugin asks."""
        if "plugin_context" not in self._instances:
            self._instances["plugin_context"] = PluginContext(
                cwd=self.cwd,
                tools=self.get_tools_handler(),
                llm_factory=self.get_llm_tools_adapter,
            )
        return self._instances["plugin_context"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
