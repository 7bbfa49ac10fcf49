# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.board import TaskBoard

from .fakes import FakeNotifier, FakeTaskGateway


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and gateways.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        api_base_url="https://todos.test",
        seed_limit=4,
        http_timeout_seconds=1.0,
        offline=True,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def gateway() -> FakeTaskGateway:
    return FakeTaskGateway()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def board(gateway: FakeTaskGateway, notifier: FakeNotifier, settings: SimpleNamespace) -> TaskBoard:
    """TaskBoard wired with deterministic fakes; loading already cleared."""
    b = TaskBoard(gateway, notifier, seed_limit=settings.seed_limit)
    b.state.loading = False
    return b
