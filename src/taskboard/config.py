# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time: every value has a working default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_SEED_LIMIT = 4
DEFAULT_HTTP_TIMEOUT_SECONDS = 5.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Remote task service ----
    api_base_url: str
    seed_limit: int
    http_timeout_seconds: float
    offline: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).strip().rstrip("/")
        if not api_base_url:
            api_base_url = DEFAULT_API_BASE_URL

        # A zero or negative limit would make the seed request meaningless.
        seed_limit = _env_int(_k("SEED_LIMIT"), DEFAULT_SEED_LIMIT)
        if seed_limit <= 0:
            seed_limit = DEFAULT_SEED_LIMIT

        http_timeout_seconds = _env_float(_k("HTTP_TIMEOUT_SECONDS"), DEFAULT_HTTP_TIMEOUT_SECONDS)
        if http_timeout_seconds <= 0:
            http_timeout_seconds = DEFAULT_HTTP_TIMEOUT_SECONDS

        offline = _env_bool(_k("OFFLINE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_base_url=api_base_url,
            seed_limit=seed_limit,
            http_timeout_seconds=http_timeout_seconds,
            offline=offline,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
