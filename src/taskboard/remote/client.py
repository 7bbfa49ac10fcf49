# src/taskboard/remote/client.py

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..core.errors import NetworkError
from ..core.models import Task

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


class HttpTaskGateway:
    """
    TaskGateway over the JSONPlaceholder-style /todos REST API.

    - GET  /todos?_limit=n  -> list of tasks
    - POST /todos           -> created task (server assigns the id)
    - PUT  /todos/{id}      -> echoed task

    One attempt per call. Every failure (transport, non-2xx, bad JSON, malformed task)
    surfaces as NetworkError with the httpx exception as __cause__.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(cls, settings) -> HttpTaskGateway:
        return cls(
            str(getattr(settings, "api_base_url")),
            timeout_seconds=float(getattr(settings, "http_timeout_seconds", 5.0)),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # -------------------- TaskGateway --------------------

    async def fetch_seed_tasks(self, limit: int) -> list[Task]:
        data = await self._request("GET", "/todos", params={"_limit": int(limit)})
        if not isinstance(data, list):
            raise NetworkError(f"GET /todos returned {type(data).__name__}, expected a list")
        return [self._task_from(item, "GET /todos") for item in data]

    async def create_task(self, title: str, *, completed: bool = False) -> Task:
        data = await self._request("POST", "/todos", body={"title": title, "completed": completed})
        return self._task_from(data, "POST /todos")

    async def update_task(self, task_id: int, title: str, *, completed: bool = False) -> Task:
        path = f"/todos/{int(task_id)}"
        data = await self._request("PUT", path, body={"title": title, "completed": completed})
        return self._task_from(data, f"PUT {path}")

    # -------------------- helpers --------------------

    @staticmethod
    def _task_from(raw: Any, what: str) -> Task:
        try:
            return Task.from_wire(raw)
        except ValueError as e:
            raise NetworkError(f"{what} returned a malformed task: {e}") from e

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            # Explicit body so the charset lands in Content-Type exactly as the API expects.
            content = json.dumps(body, ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"{method} {path} failed with HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {path} failed: {e.__class__.__name__}") from e

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"{method} {path} returned invalid JSON") from e
