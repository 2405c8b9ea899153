"""
Tests for the DependencyContainer.
"""

import pytest

from agentboost.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from agentboost.adapters.llm.openai_tools_adapter import OpenAIToolsAdapter
from agentboost.config.settings import settings
from agentboost.exceptions import ConfigurationError
from agentboost.use_cases.tools.codebase_tools import CodebaseToolsHandler


class TestDependencyContainer:
    def test_file_repository_is_rooted_and_cached(self, dependency_container, temp_repository):
        repository = dependency_container.get_file_repository()
        assert isinstance(repository, LocalFileSystemAdapter)
        assert repository.root == temp_repository
        assert dependency_container.get_file_repository() is repository

    def test_tools_handler(self, dependency_container):
        handler = dependency_container.get_tools_handler()
        assert isinstance(handler, CodebaseToolsHandler)
        assert dependency_container.get_tools_handler() is handler

    def test_plugin_context_shares_tools(self, dependency_container, temp_repository):
        context = dependency_container.get_plugin_context()
        assert context.cwd == temp_repository
        assert context.tools is dependency_container.get_tools_handler()
        assert context.llm_factory is not None

    def test_llm_needs_api_key(self, dependency_container, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        with pytest.raises(ConfigurationError):
            dependency_container.get_llm_tools_adapter()
        with pytest.raises(ConfigurationError):
            dependency_container.get_plugin_context().get_llm()

    def test_reset(self, dependency_container):
        first = dependency_container.get_file_repository()
        dependency_container.reset()
        assert dependency_container.get_file_repository() is not first

    def test_llm_tools_adapter_is_cached(self, dependency_container, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        adapter = dependency_container.get_llm_tools_adapter()
        assert isinstance(adapter, OpenAIToolsAdapter)
        assert dependency_container.get_llm_tools_adapter() is adapter
        assert dependency_container.get_plugin_context().get_llm() is adapter
