# src/taskboard/core/errors.py

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for errors raised by the board and its gateways."""


class NetworkError(TaskBoardError):
    """A remote task service round trip failed (transport, HTTP status or payload)."""


class DiscardedResult(TaskBoardError):
    """An async completion resolved after its board was closed; the result is dropped."""
