from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_ROOT_DIR = Path(__file__).resolve().parents[2]
_ENV_PATH = _ROOT_DIR / ".env"
load_dotenv(_ENV_PATH)

_TRUTHY = {"1", "true", "yes", "on"}


def _postgres_url(driver: str) -> str:
    user = os.getenv("POSTGRES_USER", "ingestion")
    password = os.getenv("POSTGRES_PASSWORD", "ingestion")
    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")
    db_name = os.getenv("POSTGRES_DB", "transcriptions")
    return f"postgresql+{driver}://{user}:{password}@{host}:{port}/{db_name}"


def get_database_url() -> str:
    return os.getenv("DATABASE_URL") or _postgres_url("asyncpg")


def get_migration_database_url() -> str:
    return os.getenv("MIGRATION_DATABASE_URL") or _postgres_url("psycopg2")


def get_atomic_writes() -> bool:
    return os.getenv("TRANSCRIPT_ATOMIC_WRITES", "false").strip().lower() in _TRUTHY


def get_celery_broker_url() -> str:
    return os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")


def get_celery_result_backend() -> str:
    return os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")
