# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from taskboard.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("taskboard.core.board", logging.DEBUG, True),
        ("httpx", logging.INFO, False),
        ("httpcore.connection", logging.DEBUG, False),
        ("httpx", logging.WARNING, True),
        ("asyncio", logging.WARNING, False),
        ("asyncio", logging.ERROR, True),
        ("py.warnings", logging.WARNING, False),
    ],
)
def test_console_filter_quiets_third_party_loggers(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown
