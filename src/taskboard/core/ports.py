# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on Protocols instead of concrete implementations.
This keeps the remote service and the notification surface swappable and makes testing easier.
"""

from typing import Protocol

from .models import Task


class TaskGateway(Protocol):
    """
    Remote task service: one best-effort round trip per call, no retry.

    Every method raises NetworkError on failure.
    """

    async def fetch_seed_tasks(self, limit: int) -> list[Task]: ...

    async def create_task(self, title: str, *, completed: bool = False) -> Task: ...

    async def update_task(self, task_id: int, title: str, *, completed: bool = False) -> Task: ...


class Notifier(Protocol):
    """
    Connector-side port: transient success/failure messages for the user.

    The board decides *when* to signal; the connector decides how it is shown.
    """

    def success(self, message: str) -> None: ...

    def failure(self, message: str) -> None: ...
