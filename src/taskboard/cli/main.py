# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the board, then runs the console REPL on an asyncio loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_board
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.board import TaskBoard
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(board: TaskBoard) -> None:
    try:
        await run_console_loop(board)
    finally:
        board.close()
        aclose = getattr(board.gateway, "aclose", None)
        if aclose is not None:
            try:
                await aclose()
            except Exception:
                logger.debug("Gateway close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    board = create_board(settings=settings)

    try:
        asyncio.run(_run(board))
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
