# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import render_tasks
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive single-screen task list.

    Plain text adds a task; /commands edit the list. The list is re-rendered
    from the store's change notification, not from the command replies.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))
    store = state.task_store

    def on_change(tasks: tuple[Task, ...]) -> None:
        write(render_tasks(tasks))

    unsubscribe = store.subscribe(on_change)
    logger.info("Console connector started (tasks=%d).", len(store))

    write(f"== {app_name} ==  (/help for commands, /exit to quit)")
    write(render_tasks(store.snapshot()))

    try:
        while True:
            try:
                user_input = read_line("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                write(reply)
                continue

            # Not a command: the text field + "add" button.
            store.add(user_input)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
