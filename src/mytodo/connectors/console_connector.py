# src/mytodo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import quick_add
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "== MyTodo Console =="
EXIT_COMMANDS = ("/exit", "/quit")


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read-evaluate-print loop over the task store.

    `read`/`write` default to input()/print(); tests pass scripted fakes.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    write(BANNER)
    write("Type a task title and press Enter to add it. Use /help for commands, /exit to quit.")

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, ask=read)
            if response is None:
                response = quick_add(state, user_input)
        except (EOFError, KeyboardInterrupt):
            # Interrupted inside a prompt (confirmation, interactive add).
            logger.info("Console prompt interrupted, exiting.")
            write("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        write(response)

    write("Bye!")
    logger.info("Console connector finished.")
