"""Schema-free classification of argv tokens into a command and parameters.

No list of valid flags is needed. Two left-to-right passes run over the same
tokens: the first finds at most one standalone token to use as the command,
the second binds every other token into the params mapping.

Accepted parameter shapes:
- ``key=value``, ``--key=value``, ``-k=value``
- ``--key value``, ``-k value``
- ``key value`` (a pair of bare tokens)
- ``--dry-run``, ``-f`` and lone bare tokens become ``"true"``
- ``-ab`` becomes ``a="true"`` and ``b="true"``
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from agentboost.entities.parse_result import ParseResult

TRUE = "true"

_COMBINED_SHORT = re.compile(r"-[^-]{2,}")
_LEADING_DASHES = re.compile(r"^--?")


def is_flag_like(token: str) -> bool:
    """True for any token starting with a dash: "-f", "--flag", "-ab", "-", "--", "-1"."""
    return token.startswith("-")


def is_key_value(token: str) -> bool:
    """True when the token contains '=' anywhere, including "=value" and "key="."""
    return "=" in token


def is_combined_short(token: str) -> bool:
    """True for a single dash followed by two or more non-dash characters, e.g. "-ab"."""
    return _COMBINED_SHORT.fullmatch(token) is not None


def _strip_dashes(token: str) -> str:
    return _LEADING_DASHES.sub("", token, count=1)


def _value_eligible(token: str | None) -> bool:
    # An empty string follower counts as no follower at all.
    return bool(token) and not is_flag_like(token) and not is_key_value(token)


def _find_command_index(tokens: Sequence[str]) -> int | None:
    j = 0
    n = len(tokens)
    while j < n:
        tok = tokens[j]
        nxt = tokens[j + 1] if j + 1 < n else None

        if is_key_value(tok):
            j += 1
            continue

        if is_flag_like(tok):
            # -ab never takes a value; -f, --flag and bare dashes may.
            if not is_combined_short(tok) and _value_eligible(nxt):
                j += 1
            j += 1
            continue

        if _value_eligible(nxt):
            # "key value" pair
            j += 2
            continue

        return j
    return None


def classify(tokens: Sequence[str]) -> ParseResult:
    """
    Split argv tokens into an optional command and a params mapping.

    The command is the first bare token that is neither consumed as a flag's
    value nor paired with a following bare token. Later standalone tokens are
    treated as parameters. Never raises.

    Args:
        tokens: Already shell-split arguments, without the program name

    Returns:
        ParseResult with absent fields left as None
    """
    if not tokens:
        return ParseResult()

    command_index = _find_command_index(tokens)
    params: dict[str, str] = {}

    def set_param(key: str, value: str) -> None:
        if key:
            params[key] = value

    i = 0
    n = len(tokens)
    while i < n:
        token = tokens[i]
        nxt = tokens[i + 1] if i + 1 < n else None

        if i == command_index:
            i += 1
            continue

        if is_key_value(token):
            raw_key, _, value = token.partition("=")
            set_param(_strip_dashes(raw_key), value)
            i += 1
            continue

        if is_combined_short(token):
            for ch in token[1:]:
                set_param(ch, TRUE)
            i += 1
            continue

        # --key value, -k value, or a bare "key value" pair
        key = _strip_dashes(token) if is_flag_like(token) else token
        if nxt and not nxt.startswith("-"):
            set_param(key, nxt)
            i += 2
        else:
            set_param(key, TRUE)
            i += 1

    command = tokens[command_index] if command_index is not None else None
    return ParseResult(command=command or None, params=params or None)
