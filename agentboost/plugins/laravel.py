"""
Laravel recognizer, driven by composer.json.
"""

from typing import Any, Optional

from typing_extensions import override

from agentboost.plugins.base import Plugin, clean_version


class LaravelPlugin(Plugin):
    name = "LaravelPlugin"

    def _require(self) -> dict[str, Any]:
        composer = self.read_json("composer.json") or {}
        require = composer.get("require")
        return require if isinstance(require, dict) else {}

    def _framework_version(self, require: dict[str, Any]) -> Optional[str]:
        version = require.get("laravel/framework")
        return str(version) if version is not None else None

    @override
    def detect(self) -> bool:
        version = self._framework_version(self._require())
        if version is None:
            return False
        self._logger.info(f"Found Laravel {clean_version(version)}.")
        return True

    @override
    def compile(self) -> str:
        require = self._require()
        version = self._framework_version(require)
        if version is None:
            return ""
        php = require.get("php")
        lines = [
            "## Laravel",
            "",
            f"- **Version**: `{clean_version(version)}`",
            f"- **PHP**: `{php}`" if php else "- **PHP**: unknown",
            f"- **Artisan**: {'yes' if self.exists('artisan') else 'no'}",
        ]
        if self.exists("artisan"):
            lines += ["", "Run framework tasks with `php artisan <command>`."]
        return "\n".join(lines)
