# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete gateway and notifier into a TaskBoard.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.board import TaskBoard
from ..core.ports import Notifier
from ..remote.client import HttpTaskGateway
from ..remote.offline import OfflineTaskGateway

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_gateway(settings) -> HttpTaskGateway | OfflineTaskGateway:
    if getattr(settings, "offline", False):
        logger.info("Offline mode: using the in-memory task service.")
        return OfflineTaskGateway()
    logger.info("Remote task service: %s", settings.api_base_url)
    return HttpTaskGateway.from_settings(settings)


def create_board(*, settings=None, notifier: Notifier | None = None) -> TaskBoard:
    """
    Create a TaskBoard from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if notifier is None:
        from ..connectors.console_connector import ConsoleNotifier

        notifier = ConsoleNotifier()

    return TaskBoard(
        create_gateway(settings),
        notifier,
        seed_limit=int(settings.seed_limit),
    )
