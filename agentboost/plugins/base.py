"""
Base class and context shared by every plugin.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from agentboost.exceptions import PluginError
from agentboost.ports.llm.llm_port import LLMPort
from agentboost.ports.llm.tools_port import ToolsHandlerPort
from agentboost.ports.plugins.plugin_port import PluginPort

# package.json sections that declare dependencies
DEPENDENCY_FIELDS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


@dataclass
class PluginContext:
    """What a plugin is allowed to look at."""

    cwd: str
    tools: ToolsHandlerPort
    llm_factory: Optional[Callable[[], LLMPort]] = None

    def get_llm(self) -> LLMPort:
        if self.llm_factory is None:
            raise PluginError("No language model is configured for this run")
        return self.llm_factory()


def clean_version(version: str) -> str:
    """Drop a leading semver range marker: "^14.1.0" -> "14.1.0"."""
    return version[1:] if version[:1] in ("^", "~") else version


class Plugin(PluginPort):
    """Base plugin. Subclasses set ``name`` and implement detect/compile."""

    name = "Plugin"

    def __init__(self, context: PluginContext, logger: Optional[logging.Logger] = None):
        self.context = context
        self._logger = logger or logging.getLogger(f"{__name__}.{self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cwd='{self.context.cwd}')"

    # ------------------------- repository helpers -------------------------
    def read_text(self, path: str) -> str:
        """File content through the read_file tool; empty when unreadable."""
        return str(self.context.tools.dispatch("read_file", {"path": path}))

    def read_json(self, path: str) -> Optional[dict[str, Any]]:
        raw = self.read_text(path)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            self._logger.debug(f"{path} is not valid JSON")
            return None
        return data if isinstance(data, dict) else None

    def list_files(self) -> list[str]:
        """Every non-ignored file of the repository, relative to its root."""
        raw = self.context.tools.dispatch("codebase", {})
        try:
            files = json.loads(raw)
        except json.JSONDecodeError:
            return []
        return [f for f in files if isinstance(f, str)] if isinstance(files, list) else []

    def exists(self, path: str) -> bool:
        return os.path.isfile(os.path.join(self.context.cwd, path))

    def package_json(self) -> dict[str, Any]:
        return self.read_json("package.json") or {}

    def dependency_version(
        self,
        package: str,
        pkg: Optional[dict[str, Any]] = None,
        fields: tuple[str, ...] = DEPENDENCY_FIELDS,
    ) -> Optional[str]:
        """
        Find the declared version range of a package in package.json.

        Args:
            package: npm package name
            pkg: Already-parsed package.json; read from disk when omitted
            fields: Dependency sections to search, first match wins

        Returns:
            The raw version string, or None when the package is not declared
        """
        pkg = self.package_json() if pkg is None else pkg
        for field in fields:
            deps = pkg.get(field)
            if isinstance(deps, dict) and package in deps:
                return str(deps[package])
        return None


class NpmPackagePlugin(Plugin):
    """Recognizer for a framework declared as a single npm package."""

    package = ""
    title = ""
    # companion packages worth mentioning when present
    related: tuple[str, ...] = ()

    def detect(self) -> bool:
        version = self.dependency_version(self.package)
        if version is None:
            return False
        self._logger.info(f"Found {self.title} {clean_version(version)}.")
        return True

    def compile(self) -> str:
        pkg = self.package_json()
        version = self.dependency_version(self.package, pkg)
        if version is None:
            return ""
        lines = [f"## {self.title}", "", f"- **Version**: `{clean_version(version)}`"]
        companions: list[str] = []
        for name in self.related:
            related_version = self.dependency_version(name, pkg)
            if related_version is not None:
                companions.append(f"`{name}` {clean_version(related_version)}")
        if companions:
            lines.append(f"- **Related packages**: {', '.join(companions)}")
        return "\n".join(lines)
