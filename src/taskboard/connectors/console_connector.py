# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_board
from ..core.board import TaskBoard
from ..core.view import build_view

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


class ConsoleNotifier:
    """Notifier that prints transient messages to the terminal."""

    def success(self, message: str) -> None:
        _print_ts(f"[ok] {message}")

    def failure(self, message: str) -> None:
        _print_ts(f"[error] {message}")


def _prompt(board: TaskBoard) -> str:
    view = build_view(board.state)
    if view.is_editing:
        return f">>> {view.submit_label} #{view.editing_task_id}: "
    return f">>> {view.submit_label}: "


def _log_submit_result(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Submit crashed.", exc_info=exc)


def _resolve(fut: asyncio.Future, line: str | None, exc: BaseException | None) -> None:
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(line)


async def _read_line(prompt: str) -> str:
    """
    input() on a daemon thread.

    A cancelled read leaves the thread blocked in input(); being a daemon it never
    holds up interpreter shutdown.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _worker() -> None:
        try:
            line, exc = input(prompt), None
        except (Exception, KeyboardInterrupt) as e:
            line, exc = None, e
        # The loop is gone if the read was abandoned during shutdown.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_resolve, fut, line, exc)

    threading.Thread(target=_worker, name="taskboard-console-input", daemon=True).start()
    return await fut


async def run_console_loop(board: TaskBoard) -> None:
    """
    Interactive board.

    Loads the seed tasks, then reads lines until /exit. Plain text becomes the draft
    and is submitted in the background, so a slow request never blocks the prompt.
    The board is closed and pending submits are drained however the loop ends,
    including cancellation (Ctrl-C under asyncio.run).
    """
    logger.info("Console connector started.")

    pending: set[asyncio.Task] = set()

    try:
        print(render_board(build_view(board.state)))
        await board.load_initial()
        print(render_board(build_view(board.state)))
        _print_ts("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")

        while True:
            try:
                line = (await _read_line(_prompt(board))).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break
            except asyncio.CancelledError:
                logger.info("Console cancelled, exiting.")
                print()
                raise

            if not line:
                continue

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                cmd_response = command_registry.handle(board, line)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is not None:
                print(cmd_response)
                continue

            board.set_draft_text(line)
            submit = asyncio.create_task(board.submit_draft())
            pending.add(submit)
            submit.add_done_callback(pending.discard)
            submit.add_done_callback(_log_submit_result)
    finally:
        # Close first: whatever is still in flight resolves into a dead board and is dropped.
        board.close()
        if pending:
            logger.info("Waiting for %d pending request(s).", len(pending))
            await asyncio.gather(*pending, return_exceptions=True)

        logger.info("Console connector finished.")
