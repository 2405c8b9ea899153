from __future__ import annotations

import os
from typing import Tuple

"""Project root utilities to constrain file access.

Environment variables:
- AGENTBOOST_ROOT: path of the repository to inspect. Defaults to the current working directory.
"""


def get_workspace_root() -> str:
    root = os.getenv("AGENTBOOST_ROOT")
    if root:
        return resolve_root(root)
    # default to current working directory
    return os.path.abspath(os.getcwd())


def resolve_root(path: str | None) -> str:
    """Normalize a user-supplied root into an absolute path (None -> workspace root)."""
    if not path:
        return get_workspace_root()
    s = os.path.expanduser(str(path).strip())
    if not os.path.isabs(s):
        s = os.path.abspath(os.path.join(os.getcwd(), s))
    return os.path.normpath(s)


def ensure_within_root(root: str, path: str) -> Tuple[bool, str]:
    """Return (ok, normalized_abs) for a path relative to root.

    Absolute inputs are accepted as-is; ok is False when the result escapes root.
    """
    p = os.path.abspath(os.path.join(root, path))
    try:
        common = os.path.commonpath([root, p])
    except ValueError:
        return False, p
    return common == root, p


def to_relative(root: str, abs_path: str) -> str:
    """Relative path with forward slashes, the form every tool reports."""
    return os.path.relpath(abs_path, root).replace(os.sep, "/")
