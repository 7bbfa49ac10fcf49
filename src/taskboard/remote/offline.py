# src/taskboard/remote/offline.py

from __future__ import annotations

from ..core.errors import NetworkError
from ..core.models import Task

DEFAULT_SEED: tuple[tuple[str, bool], ...] = (
    ("Read the board help (/help)", False),
    ("Add a task by typing its title", False),
    ("Toggle a task with /toggle <id>", True),
    ("Filter with /filter completed", False),
)


class OfflineTaskGateway:
    """
    Offline deterministic task service used for demos when the network is unavailable.

    Behavior:
    - Seed -> the first `limit` tasks of a fixed list
    - Create -> stores the task with id max(existing ids) + 1
    - Update -> stores and echoes the new title/completed; unknown id -> NetworkError (like HTTP 404)
    """

    def __init__(self, seed: tuple[tuple[str, bool], ...] = DEFAULT_SEED) -> None:
        self._tasks: dict[int, Task] = {
            i: Task(id=i, title=title, completed=done) for i, (title, done) in enumerate(seed, start=1)
        }

    async def fetch_seed_tasks(self, limit: int) -> list[Task]:
        items = sorted(self._tasks.values(), key=lambda t: t.id)[: max(0, int(limit))]
        return [Task(id=t.id, title=t.title, completed=t.completed) for t in items]

    async def create_task(self, title: str, *, completed: bool = False) -> Task:
        new_id = max(self._tasks, default=0) + 1
        self._tasks[new_id] = Task(id=new_id, title=title, completed=completed)
        return Task(id=new_id, title=title, completed=completed)

    async def update_task(self, task_id: int, title: str, *, completed: bool = False) -> Task:
        if task_id not in self._tasks:
            raise NetworkError(f"PUT /todos/{task_id} failed with HTTP 404")
        self._tasks[task_id] = Task(id=task_id, title=title, completed=completed)
        return Task(id=task_id, title=title, completed=completed)

    async def aclose(self) -> None:
        return None
