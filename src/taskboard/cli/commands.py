# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.board import TaskBoard
from ..core.models import TaskFilter
from ..core.view import BoardView, build_view

CommandHandler = Callable[[TaskBoard, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /toggle, ...)."""

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

    def handle(self, board: TaskBoard, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
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

        return handler(board, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other text is submitted as the draft (Add, or Update while editing).")
        return "\n".join(lines)


registry = CommandRegistry()


def render_board(view: BoardView) -> str:
    if view.loading:
        return "Loading..."

    lines = [f"Todo List [filter: {view.active_filter.value}]"]
    if not view.tasks:
        lines.append("  (no tasks)")
    for task in view.tasks:
        box = "[x]" if task.completed else "[ ]"
        marker = "  <- editing" if task.id == view.editing_task_id else ""
        lines.append(f"  {box} {task.id}. {task.title}{marker}")
    lines.append(f"Completed: {view.completed_count}   Total Tasks: {view.total_count}")
    return "\n".join(lines)


def _parse_task_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def cmd_help(board: TaskBoard, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(board: TaskBoard, args: list[str]) -> str:
    return render_board(build_view(board.state))


def cmd_status(board: TaskBoard, args: list[str]) -> str:
    view = build_view(board.state)
    mode = f"EDITING task {view.editing_task_id}" if view.is_editing else "ADDING"
    return (
        "Status:\n"
        f"  Mode: {mode} (submit: {view.submit_label})\n"
        f"  Filter: {view.active_filter.value}\n"
        f"  Completed: {view.completed_count}, remaining: {view.remaining_count}, total: {view.total_count}"
    )


def cmd_toggle(board: TaskBoard, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    if not board.toggle_completed(task_id):
        return f"No task with id {task_id}."
    return render_board(build_view(board.state))


def cmd_edit(board: TaskBoard, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /edit <id>"
    if not board.begin_edit(task_id):
        return f"No task with id {task_id}."
    return (
        f"Editing task {task_id}: {board.state.draft_text}\n"
        "Type the new title and press Enter (or /cancel)."
    )


def cmd_cancel(board: TaskBoard, args: list[str]) -> str:
    if board.state.editing_task_id is None:
        return "Nothing to cancel."
    board.cancel_edit()
    return "Edit cancelled."


def cmd_delete(board: TaskBoard, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    board.delete_task(task_id)
    return render_board(build_view(board.state))


def cmd_complete_all(board: TaskBoard, args: list[str]) -> str:
    board.complete_all()
    return render_board(build_view(board.state))


def cmd_clear_completed(board: TaskBoard, args: list[str]) -> str:
    board.clear_completed()
    return render_board(build_view(board.state))


def cmd_filter(board: TaskBoard, args: list[str]) -> str:
    """
    /filter              -> show active filter
    /filter all          -> every task
    /filter completed    -> completed only
    /filter uncompleted  -> open tasks only
    """
    if not args:
        return f"Filter is {board.state.active_filter.value}. Use /filter all|completed|uncompleted."
    try:
        board.set_filter(args[0])
    except ValueError as e:
        return str(e)
    return render_board(build_view(board.state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the board.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show input mode, filter and counters.")
registry.register("toggle", cmd_toggle, help_text="Flip completion: /toggle <id>.", aliases=["t", "done"])
registry.register("edit", cmd_edit, help_text="Edit a task title: /edit <id>.", aliases=["e"])
registry.register("cancel", cmd_cancel, help_text="Leave edit mode without saving.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"])
registry.register("complete-all", cmd_complete_all, help_text="Mark every task completed.")
registry.register("clear-completed", cmd_clear_completed, help_text="Delete every completed task.", aliases=["clear"])
registry.register(
    "filter", cmd_filter, help_text="Filter the list: /filter all | completed | uncompleted.", aliases=["f"]
)
