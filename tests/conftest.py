"""
Pytest configuration and shared fixtures.
"""

import json
import os
from typing import Callable
from unittest.mock import MagicMock

import pytest

from agentboost.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from agentboost.container import DependencyContainer
from agentboost.plugins.base import PluginContext
from agentboost.use_cases.tools.codebase_tools import CodebaseToolsHandler


def write_tree(root: str, files: dict[str, str]) -> None:
    """Create files (and their parent directories) below root."""
    for rel, content in files.items():
        full = os.path.join(root, *rel.split("/"))
        os.makedirs(os.path.dirname(full), exist_ok=True)
        with open(full, "w", encoding="utf-8") as f:
            f.write(content)


@pytest.fixture
def make_tree(tmp_path) -> Callable[[dict[str, str]], str]:
    """
    Build a throwaway repository.

    Returns:
        Function taking {relative path: content} and returning the root path
    """

    def _make(files: dict[str, str]) -> str:
        root = str(tmp_path)
        write_tree(root, files)
        return root

    return _make


@pytest.fixture
def temp_repository(make_tree) -> str:
    """
    A small repository with an ignore file, a nested source tree and a package.json.

    Returns:
        Path to the repository root
    """
    return make_tree(
        {
            ".gitignore": "node_modules/\n*.log\n",
            "package.json": json.dumps({"name": "demo", "scripts": {"dev": "vite"}}),
            "README.md": "# Demo\n",
            "src/index.ts": "export {};\n",
            "src/lib/util.ts": "export const x = 1;\n",
            "debug.log": "noise\n",
            "node_modules/left-pad/index.js": "module.exports = {};\n",
        }
    )


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def make_context(mock_logger) -> Callable[..., PluginContext]:
    """Plugin context over a real directory, with an optional LLM factory."""

    def _make(root: str, llm_factory=None) -> PluginContext:
        repository = LocalFileSystemAdapter(root, mock_logger)
        return PluginContext(
            cwd=root,
            tools=CodebaseToolsHandler(repository, mock_logger),
            llm_factory=llm_factory,
        )

    return _make


@pytest.fixture
def dependency_container(temp_repository, mock_logger):
    """
    Create a dependency container rooted at the temporary repository.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(temp_repository)
    container._logger = mock_logger
    return container
