# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "No tasks yet.\n  Type a title and press Enter to add one."


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        # Unsplit argument text, for handlers that need inner whitespace intact.
        rest = parts[1] if len(parts) > 1 else ""
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 2

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, rest)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Anything that is not a command is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_tasks(tasks: Sequence[Task]) -> str:
    """Numbered list, 1-based, done items marked [x]."""
    if not tasks:
        return EMPTY_LIST_TEXT
    lines = []
    for i, t in enumerate(tasks, start=1):
        mark = "x" if t.is_done else " "
        lines.append(f"{i:>3}. [{mark}] {t.title}")
    return "\n".join(lines)


def _parse_position(raw: str, size: int, *, allow_end: bool = False) -> int | None:
    """Turn a 1-based row number into a 0-based position (None if invalid)."""
    try:
        n = int(raw)
    except ValueError:
        return None
    upper = size + 1 if allow_end else size
    if not 1 <= n <= upper:
        return None
    return n - 1


def _task_at(state: AppState, raw: str) -> Task | None:
    tasks = state.task_store.snapshot()
    pos = _parse_position(raw, len(tasks))
    return None if pos is None else tasks[pos]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state.task_store.snapshot())


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done N -> toggle completion of row N
    """
    if len(args) != 1:
        return "Usage: /done N"
    task = _task_at(state, args[0])
    if task is None:
        return f"No task #{args[0]}."
    state.task_store.toggle(task.id)
    return f"{'Reopened' if task.is_done else 'Completed'}: {task.title}"


def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    """
    /edit N new title -> rename row N (title taken verbatim after N)
    """
    parts = rest.split(maxsplit=1)
    if len(parts) < 2:
        return "Usage: /edit N new title"
    task = _task_at(state, args[0])
    if task is None:
        return f"No task #{args[0]}."
    if not state.task_store.rename(task.id, parts[1]):
        return "Title unchanged."
    return f"Renamed #{args[0]}."


def cmd_del(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /del N"
    task = _task_at(state, args[0])
    if task is None:
        return f"No task #{args[0]}."
    state.task_store.delete(task.id)
    return f"Deleted: {task.title}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    """
    /delete N M ... -> delete several rows at once
    """
    if not args:
        return "Usage: /delete N [M ...]"
    size = len(state.task_store)
    positions: set[int] = set()
    for raw in args:
        pos = _parse_position(raw, size)
        if pos is None:
            return f"No task #{raw}."
        positions.add(pos)
    state.task_store.delete_at(positions)
    return f"Deleted {len(positions)} task(s)."


def cmd_move(state: AppState, args: list[str]) -> str:
    """
    /move N [M ...] before K -> move rows so they sit just above row K
    (K may be one past the last row to move to the end)
    """
    usage = "Usage: /move N [M ...] before K"
    if len(args) < 3 or args[-2].lower() != "before":
        return usage

    size = len(state.task_store)
    positions: set[int] = set()
    for raw in args[:-2]:
        pos = _parse_position(raw, size)
        if pos is None:
            return f"No task #{raw}."
        positions.add(pos)

    to = _parse_position(args[-1], size, allow_end=True)
    if to is None:
        return f"Target must be between 1 and {size + 1}."

    state.task_store.move(positions, to)
    return f"Moved {len(positions)} task(s)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Toggle completion: /done N.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Rename a task: /edit N new title.", aliases=["rename"])
registry.register("del", cmd_del, help_text="Delete one task: /del N.", aliases=["rm"])
registry.register("delete", cmd_delete, help_text="Delete several tasks: /delete N M ...")
registry.register("move", cmd_move, help_text="Reorder: /move N [M ...] before K.", aliases=["mv"])
