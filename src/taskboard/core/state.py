# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from .models import Task, TaskFilter


@dataclass
class BoardState:
    """
    Session state of a single board.

    Created once per process, never persisted. `live` turns False when the owning
    view is torn down; async completions check it before touching anything else.
    """

    tasks: list[Task] = field(default_factory=list)
    draft_text: str = ""
    active_filter: TaskFilter = TaskFilter.ALL
    loading: bool = True
    editing_task_id: int | None = None
    live: bool = True

    def find_task(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
