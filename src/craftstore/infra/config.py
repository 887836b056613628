from __future__ import annotations

import os

STORAGE_BACKENDS = ("memory", "sql")


def storage_backend() -> str:
    backend = os.getenv("STOREFRONT_STORAGE", "memory").strip().lower()

    if backend not in STORAGE_BACKENDS:
        raise RuntimeError(
            f"STOREFRONT_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got '{backend}'"
        )

    return backend


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def seed_catalog_enabled() -> bool:
    return os.getenv("STOREFRONT_SEED_CATALOG", "true").strip().lower() not in ("0", "false", "no")


def http_port() -> int:
    return int(os.getenv("PORT", "8000"))
