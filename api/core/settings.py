"""
Environment-driven settings.

Values are read on every call so tests can monkeypatch the environment.
Invalid integers fall back to the defaults.
"""

from __future__ import annotations

import os


DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 5
DEFAULT_COMMAND_TIMEOUT = 30
DEFAULT_LOG_LEVEL = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def pool_size() -> tuple[int, int]:
    """
    Returns (min_size, max_size) for the asyncpg pool.

    - DB_POOL_MIN_SIZE: connections opened eagerly (default: 1)
    - DB_POOL_MAX_SIZE: upper bound on concurrent checkouts (default: 5)
    """
    min_size = max(0, _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE))
    max_size = max(1, _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE))
    return min(min_size, max_size), max_size


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT)


def api_host() -> str:
    return os.environ.get("API_HOST", DEFAULT_API_HOST).strip() or DEFAULT_API_HOST


def api_port() -> int:
    return _env_int("API_PORT", DEFAULT_API_PORT)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
