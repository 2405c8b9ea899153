"""
Tailwind CSS recognizer.

Evidence, in the order it is looked for:
- ``tailwindcss`` in any package.json dependency field
- the installed ``node_modules/tailwindcss/package.json`` (exact version)
- a root ``tailwind.config.*`` file
- a ``postcss.config.*`` file mentioning tailwindcss
- stylesheets containing the ``@tailwind`` directive

``compile()`` produces a markdown summary with the version, the evidence
files, a trimmed copy of the config, the stylesheets using ``@tailwind`` and
a few suggestions an agent can act on.
"""

import os
import re
from typing import Optional

from typing_extensions import override

from agentboost.plugins.base import Plugin

CONFIG_CANDIDATES = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
    "tailwind.config.ts",
)
POSTCSS_CANDIDATES = (
    "postcss.config.js",
    "postcss.config.cjs",
    "postcss.config.mjs",
    "postcss.config.ts",
)
STYLESHEET_EXTENSIONS = (".css", ".pcss", ".postcss", ".scss", ".sass", ".less")
SKIPPED_DIRS = frozenset({"node_modules", ".git", "dist"})

DETECT_SAMPLE = 200
COMPILE_SAMPLE = 500
LISTED_STYLESHEETS = 25
CONFIG_TRIM = 3200

_TAILWIND_DIRECTIVE = re.compile(r"@tailwind\b")
_CONTENT_SECTION = re.compile(r"content\s*:\s*(\[[\s\S]*?\]|`[\s\S]*?`|\{[\s\S]*?\})", re.M)


class TailwindPlugin(Plugin):
    name = "TailwindPlugin"

    def _installed_version(self) -> Optional[str]:
        installed = self.read_json("node_modules/tailwindcss/package.json")
        if installed and installed.get("version"):
            return str(installed["version"])
        return None

    def _postcss_mentions_tailwind(self, path: str) -> bool:
        return "tailwindcss" in self.read_text(path)

    def _stylesheets(self) -> list[str]:
        """Stylesheets under the root, sorted, outside node_modules/.git/dist."""
        found: list[str] = []
        root = self.context.cwd
        for current, dirs, files in os.walk(root):
            dirs[:] = sorted(d for d in dirs if d not in SKIPPED_DIRS)
            for name in sorted(files):
                if name.endswith(STYLESHEET_EXTENSIONS):
                    rel = os.path.relpath(os.path.join(current, name), root)
                    found.append(rel.replace(os.sep, "/"))
        return found

    def _uses_directive(self, path: str) -> bool:
        return bool(_TAILWIND_DIRECTIVE.search(self.read_text(path)))

    @override
    def detect(self) -> bool:
        version = self.dependency_version("tailwindcss")
        found = version is not None

        if not version:
            installed = self._installed_version()
            if installed:
                version = installed
                found = True

        if not found:
            found = any(self.exists(f) for f in CONFIG_CANDIDATES)

        if not found:
            found = any(self._postcss_mentions_tailwind(f) for f in POSTCSS_CANDIDATES)

        if not found:
            found = any(
                self._uses_directive(f) for f in self._stylesheets()[:DETECT_SAMPLE]
            )

        if found:
            label = f"Tailwind CSS {version}" if version else "Tailwind CSS"
            self._logger.info(f"Found {label}.")
        return found

    @override
    def compile(self) -> str:
        detected = False
        evidence: list[str] = []

        version = self.dependency_version("tailwindcss")
        if version is not None:
            detected = True
            evidence.append("package.json")

        installed = self._installed_version()
        if installed:
            version = installed
            evidence.append("node_modules/tailwindcss")
            detected = True

        config_path: Optional[str] = None
        config_content = ""
        for f in CONFIG_CANDIDATES:
            if self.exists(f):
                config_path = f
                config_content = self.read_text(f)
                evidence.append(f)
                detected = True
                break

        for f in POSTCSS_CANDIDATES:
            if self._postcss_mentions_tailwind(f):
                evidence.append(f)
                detected = True

        with_directive = [
            f for f in self._stylesheets()[:COMPILE_SAMPLE] if self._uses_directive(f)
        ]
        if with_directive:
            detected = True

        if not detected:
            return "## Tailwind CSS\n\n- **Detected**: No\n"

        md: list[str] = [
            "## Tailwind CSS",
            "",
            "- **Detected**: Yes",
            f"- **Version**: `{version or 'unknown'}`",
            "- **Evidence**: "
            + (", ".join(f"`{e}`" for e in evidence) if evidence else "none"),
            "",
        ]

        if config_path and config_content:
            trimmed = (
                config_content[:CONFIG_TRIM] + "\n\n/* config trimmed for brevity */"
                if len(config_content) > CONFIG_TRIM
                else config_content
            )
            md += [
                f"- **Tailwind config (first match)**: `{config_path}`",
                "",
                "```js",
                trimmed,
                "```",
                "",
            ]
            content_match = _CONTENT_SECTION.search(config_content)
            if content_match:
                md += [
                    "- **Config notes**: Found a `content` configuration in the Tailwind config.",
                    "",
                    "```js",
                    content_match.group(0).strip(),
                    "```",
                    "",
                ]

        if with_directive:
            md.append("- **Stylesheets with `@tailwind` directives**:")
            md.append("")
            md.extend(f"  - `{f}`" for f in with_directive[:LISTED_STYLESHEETS])
            if len(with_directive) > LISTED_STYLESHEETS:
                md.append("  - `...and more`")
            md.append("")

        md += [
            "### Quick Suggestions",
            "",
            "- To upgrade Tailwind to the latest version use `npm install -D tailwindcss@latest` "
            "or `yarn add -D tailwindcss@latest`.",
            "- Inspect the `content` array in the Tailwind config to ensure all source directories "
            "that contain classes are included (e.g. `src/**/*.{js,ts,jsx,tsx,html}`)",
            "- Look in the Tailwind config `theme.extend` and `plugins` to understand "
            "customizations and third-party plugins in use.",
            "- If PostCSS integrates Tailwind, check `postcss.config.*` for the plugin ordering "
            "(Tailwind should typically be included before autoprefixer).",
            "",
            "### How an AI Agent Can Help",
            "",
            "- Find unused utilities by scanning the `content` targets and suggest content path fixes.",
            "- Migrate legacy Tailwind config keys to the current version (compare `version` "
            "with release notes).",
            "- Propose small theme changes (colors, spacing) by editing `theme.extend` and "
            "showing a before/after diff.",
            "",
        ]

        return "\n".join(md).strip()
