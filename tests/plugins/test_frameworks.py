"""
Tests for the React, Vue and Laravel recognizers.
"""

import json

from agentboost.plugins.laravel import LaravelPlugin
from agentboost.plugins.react import ReactPlugin
from agentboost.plugins.vue import VuePlugin


class TestReactPlugin:
    def test_detect_and_compile(self, make_tree, make_context):
        root = make_tree(
            {
                "package.json": json.dumps(
                    {"dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0"}}
                )
            }
        )
        plugin = ReactPlugin(make_context(root))

        assert plugin.detect() is True
        md = plugin.compile()
        assert md.startswith("## React")
        assert "- **Version**: `18.2.0`" in md
        assert "- **Related packages**: `react-dom` 18.2.0" in md

    def test_not_detected(self, make_tree, make_context):
        root = make_tree({"package.json": json.dumps({"dependencies": {"vue": "3.4.0"}})})
        plugin = ReactPlugin(make_context(root))

        assert plugin.detect() is False
        assert plugin.compile() == ""


class TestVuePlugin:
    def test_detect_from_dev_dependencies(self, make_tree, make_context):
        root = make_tree(
            {
                "package.json": json.dumps(
                    {"devDependencies": {"vue": "~3.4.0"}, "dependencies": {"pinia": "2.1.0"}}
                )
            }
        )
        plugin = VuePlugin(make_context(root))

        assert plugin.detect() is True
        md = plugin.compile()
        assert "## Vue" in md
        assert "- **Version**: `3.4.0`" in md
        assert "`pinia` 2.1.0" in md

    def test_without_related_packages(self, make_tree, make_context):
        root = make_tree({"package.json": json.dumps({"dependencies": {"vue": "3.4.0"}})})
        md = VuePlugin(make_context(root)).compile()
        assert "Related packages" not in md


class TestLaravelPlugin:
    def test_detect_and_compile(self, make_tree, make_context):
        root = make_tree(
            {
                "composer.json": json.dumps(
                    {"require": {"php": "^8.2", "laravel/framework": "^11.0"}}
                ),
                "artisan": "#!/usr/bin/env php",
            }
        )
        plugin = LaravelPlugin(make_context(root))

        assert plugin.detect() is True
        md = plugin.compile()
        assert md.startswith("## Laravel")
        assert "- **Version**: `11.0`" in md
        assert "- **PHP**: `^8.2`" in md
        assert "- **Artisan**: yes" in md
        assert "php artisan <command>" in md

    def test_without_artisan_or_php(self, make_tree, make_context):
        root = make_tree(
            {"composer.json": json.dumps({"require": {"laravel/framework": "10.48.0"}})}
        )
        md = LaravelPlugin(make_context(root)).compile()
        assert "- **PHP**: unknown" in md
        assert "- **Artisan**: no" in md

    def test_not_detected(self, make_tree, make_context):
        root = make_tree({"composer.json": json.dumps({"require": {"php": "^8.2"}})})
        plugin = LaravelPlugin(make_context(root))
        assert plugin.detect() is False
        assert plugin.compile() == ""

    def test_invalid_composer_json(self, make_tree, make_context):
        root = make_tree({"composer.json": "[1, 2"})
        assert LaravelPlugin(make_context(root)).detect() is False
