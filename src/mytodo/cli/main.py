# src/mytodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def console_level_from_name(name: str, default: int = logging.INFO) -> int:
    """Map "DEBUG"/"warning"/... to a level; unknown names give `default`."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def main() -> None:
    settings = get_settings()

    console_level = console_level_from_name(settings.log_level)
    setup_logging(log_file=settings.log_file, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info(
            "Bye. tasks=%s done=%s",
            state.task_store.count_tasks(),
            state.task_store.count_done(),
        )


if __name__ == "__main__":
    main()
