"""agentboost: detect what a repository is built with and write an AGENTS.md for it.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
