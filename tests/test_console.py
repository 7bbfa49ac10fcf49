# tests/test_console.py

from __future__ import annotations

import asyncio
import threading

import pytest

from taskboard.connectors.console_connector import ConsoleNotifier, run_console_loop
from taskboard.core.board import MSG_ADDED
from taskboard.core.models import Task


def _feed(monkeypatch, lines: list[str]) -> list[str]:
    """Replace input() with a scripted session; returns the list of prompts shown."""
    prompts: list[str] = []
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_console_notifier_prints_kind(capsys) -> None:
    n = ConsoleNotifier()
    n.success("Task added successfully")
    n.failure("Error adding task")

    out = capsys.readouterr().out
    assert "[ok] Task added successfully" in out
    assert "[error] Error adding task" in out


@pytest.mark.asyncio
async def test_console_loads_seed_and_runs_commands(board, gateway, monkeypatch, capsys) -> None:
    gateway.seed = [Task(id=1, title="delectus aut autem")]
    prompts = _feed(monkeypatch, ["", "/toggle 1", "/edit 1", "/exit"])

    await run_console_loop(board)

    assert gateway.calls == [("fetch", 4)]
    assert board.state.tasks[0].completed is True
    assert board.live is False
    assert prompts[0] == ">>> Add: "
    assert prompts[-1] == ">>> Update #1: "
    out = capsys.readouterr().out
    assert "[x] 1. delectus aut autem" in out


@pytest.mark.asyncio
async def test_console_submits_plain_text_as_draft(board, gateway, monkeypatch) -> None:
    _feed(monkeypatch, ["Buy milk"])

    await run_console_loop(board)

    # EOF closes the board; the pending create was still sent.
    assert ("create", "Buy milk", False) in gateway.calls
    assert board.live is False


@pytest.mark.asyncio
async def test_console_survives_crashing_command(board, monkeypatch, capsys) -> None:
    from taskboard.cli import commands

    def boom(board, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)
    _feed(monkeypatch, ["/list", "/quit"])

    await run_console_loop(board)

    assert "Internal error while handling a command." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_console_background_add_lands_while_board_is_live(
    board, gateway, notifier, monkeypatch, capsys
) -> None:
    _feed(monkeypatch, ["Buy milk", "/list", "/exit"])

    await run_console_loop(board)

    assert [(t.id, t.title) for t in board.state.tasks] == [(201, "Buy milk")]
    assert notifier.messages == [("success", MSG_ADDED)]
    assert "[ ] 201. Buy milk" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_cancelled_console_closes_board(board, gateway, monkeypatch) -> None:
    waiting = threading.Event()
    release = threading.Event()

    def blocking_input(prompt: str = "") -> str:
        waiting.set()
        release.wait(timeout=5)
        raise EOFError

    monkeypatch.setattr("builtins.input", blocking_input)

    runner = asyncio.create_task(run_console_loop(board))
    try:
        while not waiting.is_set():
            await asyncio.sleep(0.01)

        runner.cancel()
        with pytest.raises(asyncio.CancelledError):
            await runner
    finally:
        release.set()

    assert board.live is False
    assert gateway.calls == [("fetch", 4)]
