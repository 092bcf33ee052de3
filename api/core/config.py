"""
Environment-driven settings.

Values are read on every call so tests can override them with monkeypatch.
A local `.env` file is loaded once at import time.
"""

from __future__ import annotations

import os
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def raw_database_url() -> str:
    """
    Return DATABASE_URL, or assemble one from the DB_* parts.
    """
    url = _env_str("DATABASE_URL")
    if url:
        return url

    database = _env_str("DB_DATABASE")
    if not database:
        raise RuntimeError("DATABASE_URL or DB_DATABASE must be set.")

    user = quote(_env_str("DB_USER"), safe="")
    password = quote(_env_str("DB_PASSWORD"), safe="")
    host = _env_str("DB_HOST", "localhost")
    port = _env_int("DB_PORT", 5432)

    credentials = user
    if password:
        credentials = f"{user}:{password}"
    if credentials:
        credentials += "@"
    return f"postgresql://{credentials}{host}:{port}/{database}"


def pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def server_host() -> str:
    return _env_str("HOST", "0.0.0.0")


def server_port() -> int:
    return _env_int("PORT", 5000)


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def log_json() -> bool:
    return _env_bool("LOG_JSON", True)
