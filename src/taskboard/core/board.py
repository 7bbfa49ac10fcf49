# src/taskboard/core/board.py

from __future__ import annotations

"""
TaskBoard: owns the session state and every user action.

Local actions (toggle, delete, bulk actions, filter, edit mode) mutate state
synchronously. Add/update are two-phase:
- a synchronous guard (empty draft -> no-op, nothing sent),
- an async gateway round trip whose result is reconciled into state only if the
  board is still live.

Calls are not serialized: two submits may be in flight at once; each one appends or
updates by id when it resolves.
"""

import logging

from .errors import DiscardedResult, NetworkError
from .models import Task, TaskFilter
from .ports import Notifier, TaskGateway
from .state import BoardState

logger = logging.getLogger(__name__)

MSG_ADDED = "Task added successfully"
MSG_ADD_FAILED = "Error adding task"
MSG_UPDATED = "Task updated successfully"
MSG_UPDATE_FAILED = "Error updating task"
MSG_DELETED = "Task deleted successfully"


class TaskBoard:
    def __init__(
        self,
        gateway: TaskGateway,
        notifier: Notifier,
        *,
        seed_limit: int = 4,
        state: BoardState | None = None,
    ) -> None:
        self.gateway = gateway
        self.notifier = notifier
        self.seed_limit = seed_limit
        self.state = state if state is not None else BoardState()
        self._seed_requested = False

    # -------------------- lifecycle --------------------

    @property
    def live(self) -> bool:
        return self.state.live

    def close(self) -> None:
        """Tear the board down; in-flight requests still resolve but their results are dropped."""
        self.state.live = False

    def _ensure_live(self, action: str) -> None:
        if not self.state.live:
            raise DiscardedResult(f"{action} resolved after the board was closed")

    # -------------------- remote-backed actions --------------------

    async def load_initial(self) -> None:
        """
        Fetch the seed tasks once.

        A failed fetch is logged only: the board falls back to an empty list with
        loading cleared and no notification is shown.
        """
        if self._seed_requested:
            logger.debug("Seed tasks already requested; ignoring repeated load")
            return
        self._seed_requested = True
        self.state.loading = True

        try:
            try:
                tasks = await self.gateway.fetch_seed_tasks(self.seed_limit)
            except NetworkError:
                self._ensure_live("load_initial")
                logger.warning("Error fetching seed tasks", exc_info=True)
                self.state.loading = False
                return

            self._ensure_live("load_initial")
            self.state.tasks = list(tasks)
            self.state.loading = False
            logger.info("Loaded %d seed tasks", len(self.state.tasks))
        except DiscardedResult as exc:
            logger.debug("Discarded: %s", exc)

    async def submit_draft(self) -> Task | None:
        """
        Add the draft as a new task, or apply it as the new title of the task being edited.

        Returns the added/updated task, or None when nothing was applied.
        """
        text = self.state.draft_text
        if not text.strip():
            return None

        editing_id = self.state.editing_task_id
        try:
            if editing_id is None:
                return await self._add(text)
            return await self._update(editing_id, text)
        except DiscardedResult as exc:
            logger.debug("Discarded: %s", exc)
            return None

    async def _add(self, text: str) -> Task | None:
        try:
            created = await self.gateway.create_task(text, completed=False)
        except NetworkError:
            self._ensure_live("create_task")
            logger.warning("Error adding task", exc_info=True)
            self.notifier.failure(MSG_ADD_FAILED)
            return None

        self._ensure_live("create_task")
        self.state.tasks.append(created)
        if self.state.editing_task_id is None:
            self.state.draft_text = ""
        logger.info("Task %s added", created.id)
        self.notifier.success(MSG_ADDED)
        return created

    async def _update(self, task_id: int, text: str) -> Task | None:
        current = self.state.find_task(task_id)
        completed = current.completed if current is not None else False

        try:
            echoed = await self.gateway.update_task(task_id, text, completed=completed)
        except NetworkError:
            self._ensure_live("update_task")
            logger.warning("Error updating task %s", task_id, exc_info=True)
            self.notifier.failure(MSG_UPDATE_FAILED)
            return None

        self._ensure_live("update_task")

        target = self.state.find_task(task_id)
        if target is None:
            logger.info("Task %s was removed before its update resolved; dropping echo", task_id)
            return None

        # Completion is local-only state; only the title comes from the echo.
        target.title = echoed.title

        if self.state.editing_task_id == task_id:
            self.state.editing_task_id = None
            self.state.draft_text = ""

        logger.info("Task %s updated", task_id)
        self.notifier.success(MSG_UPDATED)
        return target

    # -------------------- local actions --------------------

    def set_draft_text(self, text: str) -> None:
        self.state.draft_text = text

    def toggle_completed(self, task_id: int) -> bool:
        task = self.state.find_task(task_id)
        if task is None:
            return False
        task.completed = not task.completed
        return True

    def delete_task(self, task_id: int) -> None:
        """Remove a task locally. Always reports success, even if the id was unknown."""
        self.state.tasks = [t for t in self.state.tasks if t.id != task_id]
        if self.state.editing_task_id == task_id:
            self._drop_edit_session()
        self.notifier.success(MSG_DELETED)

    def begin_edit(self, task_id: int) -> bool:
        task = self.state.find_task(task_id)
        if task is None:
            logger.warning("Cannot edit task %s: not on the board", task_id)
            return False
        self.state.editing_task_id = task_id
        self.state.draft_text = task.title
        return True

    def cancel_edit(self) -> None:
        if self.state.editing_task_id is None:
            return
        self._drop_edit_session()

    def complete_all(self) -> None:
        for task in self.state.tasks:
            task.completed = True

    def clear_completed(self) -> None:
        self.state.tasks = [t for t in self.state.tasks if not t.completed]
        editing_id = self.state.editing_task_id
        if editing_id is not None and self.state.find_task(editing_id) is None:
            self._drop_edit_session()

    def set_filter(self, kind: TaskFilter | str) -> None:
        self.state.active_filter = TaskFilter.parse(kind)

    def _drop_edit_session(self) -> None:
        self.state.editing_task_id = None
        self.state.draft_text = ""
