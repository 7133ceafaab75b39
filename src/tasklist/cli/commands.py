# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import TaskError
from ..core.state import AppState
from ..tasks.task_models import Task
from ..tasks.task_service import parse_task_id

CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

        TaskError from a handler becomes "Error: <message>"; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, rest = body.partition(" ")
        name = name.lower()
        rest = rest.strip()
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args, rest)
        except TaskError as exc:
            logger.debug("Command /%s failed: %s", name, exc.message)
            return f"Error: {exc.message}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} {task.title}"


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    tasks = state.task_service.list()
    if not tasks:
        return "No tasks yet. Use /add <title> to create one."
    return "\n".join(format_task(t) for t in tasks)


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    """
    /add <title>  -> create a pending task

    The raw remainder of the line is passed through; trimming and
    validation belong to the service.
    """
    task = state.task_service.create(rest)
    return f"Created {format_task(task)}"


def cmd_toggle(state: AppState, args: list[str], rest: str) -> str:
    raw = args[0] if args else None
    task = state.task_service.toggle(parse_task_id(raw))
    return f"Toggled {format_task(task)}"


def cmd_status(state: AppState, args: list[str], rest: str) -> str:
    tasks = state.task_service.list()
    done = sum(1 for t in tasks if t.completed)
    db_path = getattr(state.settings, "tasks_db_path", "?")
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} completed, {len(tasks) - done} pending)\n"
        f"  Database: {db_path}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Create a task: /add <title>.", aliases=["new"])
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["t"])
registry.register("status", cmd_status, help_text="Show task counts and database path.")
