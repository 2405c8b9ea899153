"""Entry point for `python -m agentboost`."""

from agentboost.cli import main

raise SystemExit(main())
