"""
Tests for the AgentBoost plugin lifecycle and command dispatch.
"""

import io
import os

import pytest
from rich.console import Console

from agentboost.app import AgentBoost
from agentboost.container import DependencyContainer
from agentboost.exceptions import LLMError, UsageError
from agentboost.plugins import DEFAULT_PLUGINS
from agentboost.plugins.base import Plugin
from agentboost.ports.plugins.plugin_port import PluginPort
from agentboost.utils.args import classify


class FakePlugin(PluginPort):
    def __init__(self, name, found=True, fragment="", error=None):
        self.name = name
        self._found = found
        self._fragment = fragment
        self._error = error
        self.detect_calls = 0
        self.compile_calls = 0

    def detect(self) -> bool:
        self.detect_calls += 1
        return self._found

    def compile(self) -> str:
        self.compile_calls += 1
        if self._error is not None:
            raise self._error
        return self._fragment


class ContextPlugin(Plugin):
    name = "ContextPlugin"

    def detect(self) -> bool:
        return self.exists("README.md")

    def compile(self) -> str:
        return "## Context\n\nHas a README."


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def app(temp_repository, mock_logger, output):
    return AgentBoost(
        container=DependencyContainer(temp_repository),
        logger=mock_logger,
        console=Console(file=output, width=200),
    )


class TestRegistration:
    def test_register_class_builds_with_context(self, app, temp_repository):
        plugin = app.register(ContextPlugin)
        assert isinstance(plugin, ContextPlugin)
        assert plugin.context.cwd == temp_repository
        assert app.plugins == [plugin]

    def test_register_instance_replaces_same_name(self, app):
        first = FakePlugin("A")
        second = FakePlugin("A")
        app.register(first)
        app.register(second)
        assert app.plugins == [second]

    def test_register_defaults_keeps_order(self, app):
        app.register_defaults()
        assert [p.name for p in app.plugins] == [cls.name for cls in DEFAULT_PLUGINS]
        assert [p.name for p in app.plugins] == [
            "ReactPlugin",
            "VuePlugin",
            "LaravelPlugin",
            "NextJSPlugin",
            "TailwindPlugin",
            "BigPicturePlugin",
        ]


class TestLifecycle:
    def test_detect_in_registration_order(self, app):
        for plugin in (FakePlugin("B"), FakePlugin("skip", found=False), FakePlugin("A")):
            app.register(plugin)
        assert app.emit("detect") == ["B", "A"]
        assert app.detected == ["B", "A"]

    def test_detected_plugins_are_not_asked_again(self, app):
        found, missing = FakePlugin("A"), FakePlugin("B", found=False)
        app.register(found)
        app.register(missing)
        app.emit("detect")
        app.emit("detect")
        assert found.detect_calls == 1
        assert missing.detect_calls == 2

    def test_compile_only_detected_and_non_empty(self, app):
        a = FakePlugin("A", fragment="## A\n")
        empty = FakePlugin("Empty", fragment="   ")
        hidden = FakePlugin("Hidden", found=False, fragment="## Hidden")
        for plugin in (a, empty, hidden):
            app.register(plugin)
        app.emit("detect")

        assert app.emit("compile") == ["## A"]
        assert hidden.compile_calls == 0

    def test_compile_skips_failing_plugin(self, app, mock_logger):
        app.register(FakePlugin("Broken", error=LLMError("no key")))
        app.register(FakePlugin("Fine", fragment="## Fine"))
        app.emit("detect")

        assert app.emit("compile") == ["## Fine"]
        mock_logger.error.assert_called_once_with(
            "Plugin Broken failed to compile: no key"
        )

    def test_unknown_event(self, app):
        with pytest.raises(ValueError, match="Unknown event: publish"):
            app.emit("publish")  # type: ignore[arg-type]

    def test_build_document(self):
        assert AgentBoost.build_document(["## A", "## B"]) == "# AGENTS.md\n\n## A\n\n## B\n"
        assert AgentBoost.build_document([]) == "# AGENTS.md\n"


class TestDispatch:
    def test_default_command_is_init(self, app, temp_repository, output):
        app.register(ContextPlugin)

        assert app.run([]) == 0
        with open(os.path.join(temp_repository, "AGENTS.md"), encoding="utf-8") as f:
            assert f.read() == "# AGENTS.md\n\n## Context\n\nHas a README.\n"
        assert "Detected plugins: ContextPlugin" in output.getvalue()
        assert "Wrote AGENTS.md" in output.getvalue()

    def test_init_with_output(self, app, temp_repository):
        app.register(ContextPlugin)
        assert app.run(["init", "--output", "docs/AGENTS.md"]) == 0
        assert os.path.isfile(os.path.join(temp_repository, "docs", "AGENTS.md"))

    def test_init_dry_run_does_not_write(self, app, temp_repository, output):
        app.register(ContextPlugin)

        assert app.dispatch(classify(["init", "--dry-run"])) == 0
        assert not os.path.exists(os.path.join(temp_repository, "AGENTS.md"))
        assert "## Context" in output.getvalue()

    def test_detect_command(self, app, output):
        app.register(FakePlugin("A"))
        app.register(FakePlugin("B", found=False))

        assert app.run(["detect"]) == 0
        assert output.getvalue().strip() == "Detected plugins: A"

    def test_detect_none(self, app, output):
        assert app.run(["detect"]) == 0
        assert output.getvalue().strip() == "Detected plugins: None"

    def test_help(self, app, output):
        assert app.run(["help"]) == 0
        assert "Usage: agentboost" in output.getvalue()

    def test_unknown_command(self, app):
        with pytest.raises(UsageError, match="Unknown command: publish"):
            app.run(["publish"])
