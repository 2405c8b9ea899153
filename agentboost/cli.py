"""
Command-line entry point: ``agentboost [command] [options]``.
"""

import logging
import sys
from typing import Optional

from rich.console import Console

from agentboost.app import USAGE, AgentBoost
from agentboost.config.settings import settings
from agentboost.exceptions import BaseAppError, UsageError
from agentboost.utils.args import classify

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[list[str]] = None) -> int:
    """Main application entry point."""
    tokens = sys.argv[1:] if argv is None else argv
    parsed = classify(tokens)
    configure_logging(parsed.flag("verbose"))
    console = Console(soft_wrap=True)

    try:
        app = AgentBoost(cwd=parsed.get("cwd"), console=console)
        app.register_defaults()
        return app.dispatch(parsed)
    except UsageError as e:
        logger.error(str(e))
        console.print(USAGE, markup=False, highlight=False)
        return 2
    except BaseAppError as e:
        logger.error(f"Application error: {e}")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
