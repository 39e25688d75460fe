# src/mytodo/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Prompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

DUE_PREFIX = "due:"
ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Bad command input. The message is shown to the user as the reply."""


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str, ask: Prompt | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        `ask` is how a handler prompts the user (confirmations, interactive add).
        Handlers taking only (state, args) never prompt.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, ask)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except UsageError as e:
            logger.debug("Usage error in /%s: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Leave the console.")
        lines.append("Text without a leading / is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- parsing helpers ----


def parse_task_id(raw: str) -> int:
    """Positive integer id; a trailing '.' is tolerated ("3." as printed by /list)."""
    text = raw.strip().rstrip(".")
    # isdigit() alone lets through digits like "²" that int() rejects.
    if not (text.isascii() and text.isdigit()) or int(text) < 1:
        raise UsageError(f"Invalid id: {raw}")
    return int(text)


def parse_due_date(raw: str) -> date:
    """Calendar date in YYYY-MM-DD form."""
    text = raw.strip()
    if not ISO_DATE_RE.fullmatch(text):
        raise UsageError(f"Invalid due date: {raw} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise UsageError(f"Invalid due date: {raw} (expected YYYY-MM-DD)") from None


def parse_add_args(args: list[str]) -> tuple[str, date | None]:
    """Split `/add` arguments into (title, due_date); `due:YYYY-MM-DD` may appear anywhere."""
    title_parts: list[str] = []
    due: date | None = None
    for token in args:
        if token.lower().startswith(DUE_PREFIX):
            if due is not None:
                raise UsageError("Only one due date per task.")
            due = parse_due_date(token[len(DUE_PREFIX) :])
        else:
            title_parts.append(token)

    title = " ".join(title_parts).strip()
    if not title:
        raise UsageError("Title required.")
    return title, due


def _single_id(args: list[str], usage: str) -> int:
    if len(args) != 1:
        raise UsageError(f"Usage: {usage}")
    return parse_task_id(args[0])


# ---- rendering ----


def format_task(task: Task) -> str:
    mark = "x" if task.is_done else " "
    line = f"[{task.id}] [{mark}] {task.title}"
    if task.due_date is not None:
        line += f" (due {task.due_date.isoformat()})"
    return line


def format_created(task: Task) -> str:
    line = f"Created: [{task.id}] {task.title}"
    if task.due_date is not None:
        line += f" (due {task.due_date.isoformat()})"
    return line


def _not_found(task_id: int) -> str:
    return f"Task {task_id} not found."


# ---- handlers ----


def quick_add(state: AppState, line: str) -> str:
    """Plain console text becomes a task title."""
    title = line.strip()
    if not title:
        return "Title required."
    task = state.task_store.add_task(title)
    return format_created(task)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /add <title...> [due:YYYY-MM-DD]   -> add inline
    /add                               -> prompt for title and due date
    """
    if args:
        title, due = parse_add_args(args)
    else:
        if ask is None:
            raise UsageError("Usage: /add <title...> [due:YYYY-MM-DD]")
        title = ask("Title: ").strip()
        if not title:
            raise UsageError("Title required.")
        due_raw = ask("Due date (YYYY-MM-DD, empty for none): ").strip()
        due = parse_due_date(due_raw) if due_raw else None

    task = state.task_store.add_task(title, due)
    return format_created(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _single_id(args, "/done <id>")
    if not state.task_store.complete_task(task_id):
        return _not_found(task_id)
    return f"Task {task_id} marked done."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _single_id(args, "/toggle <id>")
    if not state.task_store.toggle_task(task_id):
        return _not_found(task_id)
    task = state.task_store.get_task(task_id)
    status = "done" if task is not None and task.is_done else "open"
    return f"Task {task_id} is now {status}."


def cmd_delete(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /delete <id>

    Asks for confirmation when confirm_delete is on and a prompt is available.
    """
    task_id = _single_id(args, "/delete <id>")
    task = state.task_store.get_task(task_id)
    if task is None:
        return _not_found(task_id)

    if state.confirm_delete and ask is not None:
        answer = ask(f"Delete {format_task(task)}? (y/N): ").strip().lower()
        if answer not in ("y", "yes"):
            return "Cancelled."

    if not state.task_store.delete_task(task_id):
        return _not_found(task_id)
    return f"Task {task_id} deleted."


def cmd_seed(state: AppState, args: list[str]) -> str:
    created = state.task_store.seed()
    return "\n".join(format_created(t) for t in created)


def cmd_status(state: AppState, args: list[str]) -> str:
    total = state.task_store.count_tasks()
    done = state.task_store.count_done()
    return (
        "Status:\n"
        f"  Tasks: {total}\n"
        f"  Done: {done}\n"
        f"  Open: {total - done}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title...> [due:YYYY-MM-DD].", aliases=["a"]
)
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task done: /done <id>.", aliases=["complete", "c"])
registry.register("toggle", cmd_toggle, help_text="Flip done/open: /toggle <id>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"])
registry.register("seed", cmd_seed, help_text="Add sample tasks.")
registry.register("status", cmd_status, help_text="Show task totals.")
