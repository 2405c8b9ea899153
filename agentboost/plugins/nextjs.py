"""
Next.js recognizer.
"""

import re
from typing import Any, Optional

from typing_extensions import override

from agentboost.plugins.base import Plugin, clean_version

CONFIG_CANDIDATES = (
    "next.config.ts",
    "next.config.mjs",
    "next.config.js",
    "next.config.cjs",
)
SCRIPT_NAMES = ("dev", "build", "start", "lint")
CORE_SCRIPTS = ("dev", "build", "start")

_ENV_FILE = re.compile(r"\.env(\..+)?")


class NextJSPlugin(Plugin):
    name = "NextJSPlugin"

    def _next_version(self, pkg: dict[str, Any]) -> Optional[str]:
        return self.dependency_version(
            "next", pkg, fields=("dependencies", "devDependencies")
        )

    @override
    def detect(self) -> bool:
        version = self._next_version(self.package_json())
        if not version:
            return False
        self._logger.info(f"Found Next.js {clean_version(version)}.")
        return True

    @override
    def compile(self) -> str:
        pkg = self.package_json()
        version = self._next_version(pkg)
        clean = clean_version(version) if version else "unknown"
        files = self.list_files()

        def has_prefix(prefix: str) -> bool:
            return any(f.startswith(prefix) for f in files)

        app_dir = has_prefix("app/")
        pages_dir = has_prefix("pages/")
        if app_dir and pages_dir:
            routing = "both"
        elif app_dir:
            routing = "app"
        elif pages_dir:
            routing = "pages"
        else:
            routing = "unknown"

        config_file = next((c for c in CONFIG_CANDIDATES if c in files), None)

        ts_source = any(
            f.startswith(("app/", "pages/"))
            and f.endswith((".ts", ".tsx"))
            and not f.endswith(".d.ts")
            for f in files
        )
        uses_typescript = "tsconfig.json" in files or ts_source

        has_tailwind = any(f.startswith("tailwind.config.") for f in files) or bool(
            self.dependency_version(
                "tailwindcss", pkg, fields=("dependencies", "devDependencies")
            )
        )

        env_files = [f for f in files if "/" not in f and _ENV_FILE.fullmatch(f)]

        scripts = pkg.get("scripts")
        if not isinstance(scripts, dict):
            scripts = {}
        script_markers = " ".join(
            f"{n}{'✓' if scripts.get(n) else '✗'}" for n in SCRIPT_NAMES
        )

        lines = [
            "## Next.js",
            f"Detected Next.js {clean} with {routing} routing.",
            "",
            "| Attribute | Value |",
            "| --------- | ----- |",
            f"| Version | {clean} |",
            f"| Routing | {routing} |",
            f"| TypeScript | {'yes' if uses_typescript else 'no'} |",
            f"| Tailwind | {'yes' if has_tailwind else 'no'} |",
            f"| Config File | {config_file or 'none'} |",
            f"| Env Files | {', '.join(env_files) if env_files else 'none'} |",
            f"| Scripts | {script_markers} |",
            "",
        ]

        if routing == "both":
            lines.append(
                "> Note: Both `app/` and `pages/` directories detected. This indicates "
                "a hybrid or migration state between routing systems."
            )

        missing_core = [n for n in CORE_SCRIPTS if not scripts.get(n)]
        if missing_core:
            lines.append("")
            lines.extend(f"> Warning: Missing script: {s}" for s in missing_core)

        if not version:
            lines.append("")
            lines.append(
                "> Warning: Version could not be determined (package.json parsed "
                "without a next dependency version)."
            )

        return "\n".join(lines).strip()
