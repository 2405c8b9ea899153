"""
Parse result domain entity.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class ParseResult:
    """Outcome of classifying a command line: an optional command and its params.

    Both fields are ``None`` when empty: ``command`` is never an empty string
    and ``params`` never holds zero entries. ``params`` is a read-only view of
    a private copy, so results compare by value but are not hashable.
    """

    command: str | None = None
    params: Mapping[str, str] | None = None

    def __post_init__(self):
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up a parameter by key."""
        if not self.params:
            return default
        return self.params.get(key, default)

    def flag(self, key: str) -> bool:
        """True when the parameter was given as a bare switch."""
        return self.get(key) == "true"

    def to_dict(self) -> dict[str, Any]:
        """
        Get the result as a plain dictionary.

        Returns:
            Dictionary holding only the fields that are present
        """
        out: dict[str, Any] = {}
        if self.command:
            out["command"] = self.command
        if self.params:
            out["params"] = dict(self.params)
        return out
