# tests/test_commands.py

from __future__ import annotations

from taskboard.cli.commands import CommandRegistry, registry, render_board
from taskboard.core.models import Task, TaskFilter
from taskboard.core.view import build_view


def test_command_registry_routes_names_and_aliases(board) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(board, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(board, "/a x") == "ok"
    assert reg.handle(board, "/ALPHA y z") == "ok"
    assert called == [["x"], ["y", "z"]]


def test_command_registry_unknown_and_non_command(board) -> None:
    reg = CommandRegistry()
    assert reg.handle(board, "hello") is None
    assert "Unknown command" in (reg.handle(board, "/nope") or "")
    assert "Empty command" in (reg.handle(board, "/") or "")


def test_help_lists_board_commands(board) -> None:
    text = registry.handle(board, "/help") or ""
    for name in ("/toggle", "/edit", "/cancel", "/delete", "/complete-all", "/clear-completed", "/filter"):
        assert name in text


def test_toggle_delete_and_bulk_commands(board, notifier) -> None:
    board.state.tasks = [Task(id=1, title="A"), Task(id=2, title="B")]

    assert "[x] 1. A" in (registry.handle(board, "/toggle 1") or "")
    assert "No task with id 9" in (registry.handle(board, "/t 9") or "")
    assert "Usage" in (registry.handle(board, "/toggle one") or "")

    out = registry.handle(board, "/clear-completed") or ""
    assert "1. A" not in out
    assert "Total Tasks: 1" in out

    registry.handle(board, "/complete-all")
    assert all(t.completed for t in board.state.tasks)

    registry.handle(board, "/rm 2")
    assert board.state.tasks == []
    assert notifier.messages == [("success", "Task deleted successfully")]


def test_edit_and_cancel_commands(board) -> None:
    board.state.tasks = [Task(id=3, title="Walk dog")]

    out = registry.handle(board, "/edit 3") or ""
    assert "Editing task 3: Walk dog" in out
    assert board.state.editing_task_id == 3

    assert registry.handle(board, "/cancel") == "Edit cancelled."
    assert board.state.editing_task_id is None
    assert registry.handle(board, "/cancel") == "Nothing to cancel."

    assert "No task with id 4" in (registry.handle(board, "/edit 4") or "")


def test_filter_command(board) -> None:
    board.state.tasks = [Task(id=1, title="A", completed=True), Task(id=2, title="B")]

    out = registry.handle(board, "/filter rem") or ""
    assert board.state.active_filter == TaskFilter.UNCOMPLETED
    assert "2. B" in out and "1. A" not in out
    assert "Completed: 1   Total Tasks: 2" in out

    assert "Unknown filter" in (registry.handle(board, "/filter later") or "")
    assert board.state.active_filter == TaskFilter.UNCOMPLETED
    assert "Filter is uncompleted" in (registry.handle(board, "/f") or "")


def test_status_command_reports_mode(board) -> None:
    board.state.tasks = [Task(id=1, title="A")]
    assert "ADDING (submit: Add)" in (registry.handle(board, "/status") or "")
    board.begin_edit(1)
    assert "EDITING task 1 (submit: Update)" in (registry.handle(board, "/status") or "")


def test_render_board_states(board) -> None:
    board.state.loading = True
    assert render_board(build_view(board.state)) == "Loading..."

    board.state.loading = False
    assert "(no tasks)" in render_board(build_view(board.state))

    board.state.tasks = [Task(id=1, title="A")]
    board.begin_edit(1)
    assert "[ ] 1. A  <- editing" in render_board(build_view(board.state))
