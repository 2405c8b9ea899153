"""
Plugin lifecycle: detect which plugins apply to a repository, then compile
their fragments into an AGENTS.md document.
"""

import logging
from collections.abc import Sequence
from typing import Literal, Optional, Union

from rich.console import Console

from agentboost.config.settings import settings
from agentboost.container import DependencyContainer
from agentboost.entities.parse_result import ParseResult
from agentboost.exceptions import BaseAppError, UsageError
from agentboost.plugins import DEFAULT_PLUGINS
from agentboost.ports.plugins.plugin_port import PluginPort
from agentboost.utils.args import classify

LifeCycleEvent = Literal["detect", "compile"]

DEFAULT_COMMAND = "init"

USAGE = """\
Usage: agentboost [command] [options]

Commands:
  init      Detect the stack and write AGENTS.md (default)
  detect    Only list the plugins that match this repository
  help      Show this message

Options:
  --cwd <dir>       Repository to inspect (default: current directory)
  --output <file>   File to write, relative to the repository (default: AGENTS.md)
  --dry-run         Print the document instead of writing it
  --verbose         Debug logging
"""


class AgentBoost:
    """Runs registered plugins against one repository."""

    def __init__(
        self,
        cwd: Optional[str] = None,
        container: Optional[DependencyContainer] = None,
        logger: Optional[logging.Logger] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the application.

        Args:
            cwd: Repository root (defaults to the workspace root)
            container: Dependency container; built for ``cwd`` when omitted
            logger: Logger instance to use for logging
            console: Where user-facing output goes
        """
        self.container = container or DependencyContainer(cwd)
        self.cwd = self.container.cwd
        self._logger = logger or logging.getLogger(__name__)
        self._console = console or Console(soft_wrap=True)
        self._plugins: dict[str, PluginPort] = {}
        self._detected: list[str] = []

    @property
    def plugins(self) -> list[PluginPort]:
        return list(self._plugins.values())

    @property
    def detected(self) -> list[str]:
        return list(self._detected)

    def register(self, plugin: Union[PluginPort, type]) -> PluginPort:
        """
        Register a plugin instance, or a plugin class to build with this repository's context.

        A plugin registered under an existing name replaces the previous one.
        """
        if isinstance(plugin, type):
            plugin = plugin(self.container.get_plugin_context())
        self._plugins[plugin.name] = plugin
        self._logger.debug(f"Registered plugin {plugin.name}")
        return plugin

    def register_defaults(self) -> None:
        for plugin_class in DEFAULT_PLUGINS:
            self.register(plugin_class)

    def _detect(self) -> list[str]:
        for plugin in self._plugins.values():
            if plugin.name in self._detected:
                continue
            try:
                found = plugin.detect()
            except BaseAppError as e:
                self._logger.error(f"Plugin {plugin.name} failed to detect: {e}")
                continue
            if found:
                self._detected.append(plugin.name)
        return self.detected

    def _compile(self) -> list[str]:
        fragments: list[str] = []
        for name in self._detected:
            plugin = self._plugins.get(name)
            if plugin is None:
                continue
            try:
                fragment = plugin.compile()
            except BaseAppError as e:
                self._logger.error(f"Plugin {name} failed to compile: {e}")
                continue
            if fragment and fragment.strip():
                fragments.append(fragment.strip())
        return fragments

    def emit(self, event: LifeCycleEvent) -> list[str]:
        """
        Run one lifecycle step over the registered plugins.

        Args:
            event: "detect" returns the detected plugin names,
                "compile" returns the non-empty fragments of detected plugins

        Raises:
            ValueError: If the event is unknown
        """
        if event == "detect":
            return self._detect()
        if event == "compile":
            return self._compile()
        raise ValueError(f"Unknown event: {event}")

    @staticmethod
    def build_document(fragments: Sequence[str]) -> str:
        body = "\n\n".join(fragments)
        return f"# AGENTS.md\n\n{body}\n" if body else "# AGENTS.md\n"

    def _report_detected(self) -> None:
        names = ", ".join(self._detected) or "None"
        self._console.print(f"Detected plugins: {names}", markup=False, highlight=False)

    def dispatch(self, parsed: ParseResult) -> int:
        """
        Execute a classified command line.

        Returns:
            Process exit code

        Raises:
            UsageError: If the command is unknown
            FileRepositoryError: If the document cannot be written
        """
        command = parsed.command or DEFAULT_COMMAND
        self._logger.debug(f"Command {command!r} with params {parsed.params or {}}")

        if command == "help":
            self._console.print(USAGE, markup=False, highlight=False)
            return 0

        if command == "detect":
            self.emit("detect")
            self._report_detected()
            return 0

        if command == "init":
            self.emit("detect")
            self._report_detected()
            document = self.build_document(self.emit("compile"))
            if parsed.flag("dry-run"):
                self._console.print(document, markup=False, highlight=False)
                return 0
            output = parsed.get("output") or settings.output_file
            written = self.container.get_file_repository().write_text(output, document)
            self._console.print(f"[green]Wrote {written}[/green]")
            return 0

        raise UsageError(f"Unknown command: {command}")

    def run(self, argv: Sequence[str]) -> int:
        """Classify argv and dispatch it."""
        return self.dispatch(classify(argv))
