# src/taskboard/core/view.py

"""
Derived view model.

Pure functions of BoardState, recomputed on every render. Lists are tiny, so
nothing is cached.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Task, TaskFilter
from .state import BoardState


def matches_filter(task: Task, active_filter: TaskFilter) -> bool:
    if active_filter == TaskFilter.COMPLETED:
        return task.completed
    if active_filter == TaskFilter.UNCOMPLETED:
        return not task.completed
    return True


def visible_tasks(tasks: Iterable[Task], active_filter: TaskFilter) -> list[Task]:
    return [t for t in tasks if matches_filter(t, active_filter)]


def completed_count(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if t.completed)


@dataclass(frozen=True, slots=True)
class BoardView:
    tasks: tuple[Task, ...]
    completed_count: int
    total_count: int
    active_filter: TaskFilter
    loading: bool
    draft_text: str
    editing_task_id: int | None

    @property
    def remaining_count(self) -> int:
        return self.total_count - self.completed_count

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None

    @property
    def submit_label(self) -> str:
        return "Update" if self.is_editing else "Add"


def build_view(state: BoardState) -> BoardView:
    return BoardView(
        tasks=tuple(visible_tasks(state.tasks, state.active_filter)),
        completed_count=completed_count(state.tasks),
        total_count=len(state.tasks),
        active_filter=state.active_filter,
        loading=state.loading,
        draft_text=state.draft_text,
        editing_task_id=state.editing_task_id,
    )
