# src/taskboard/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """
    View-level predicate for the task list.

    Notes:
    - "rem"/"com" are the short ids of the web filter dropdown (remaining / completed).
    """

    ALL = "all"
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"

    @classmethod
    def parse(cls, raw: str | TaskFilter) -> TaskFilter:
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        alias = _FILTER_ALIASES.get(key)
        if alias is not None:
            return alias
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown filter: {raw!r} (expected all, completed or uncompleted)") from None


_FILTER_ALIASES: dict[str, TaskFilter] = {
    "com": TaskFilter.COMPLETED,
    "done": TaskFilter.COMPLETED,
    "rem": TaskFilter.UNCOMPLETED,
    "todo": TaskFilter.UNCOMPLETED,
    "open": TaskFilter.UNCOMPLETED,
}


@dataclass(slots=True)
class Task:
    id: int
    title: str
    completed: bool = False

    @classmethod
    def from_wire(cls, raw: Any) -> Task:
        """Build a Task from a decoded JSON object; raises ValueError on a malformed payload."""
        if not isinstance(raw, dict):
            raise ValueError(f"Task payload must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is a subclass of int; "id": true is not a valid id.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"Task payload has invalid id: {task_id!r}")

        title = raw.get("title")
        if not isinstance(title, str):
            raise ValueError(f"Task {task_id} has invalid title: {title!r}")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"Task {task_id} has invalid completed flag: {completed!r}")

        return cls(id=task_id, title=title, completed=completed)
