"""
Storage backend selection and start-up.

STOREFRONT_STORAGE=memory (default): one process-wide set of in-memory
repositories, created lazily.
STOREFRONT_STORAGE=sql: SQLAlchemy repositories over DATABASE_URL, one
session per request (see entrypoints.http.dependencies).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock

from craftstore.adapters.in_memory_cart_repository import InMemoryCartRepository
from craftstore.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from craftstore.adapters.in_memory_user_repository import InMemoryUserRepository
from craftstore.infra.config import seed_catalog_enabled, storage_backend
from craftstore.infra.seed import seed_catalog

logger = logging.getLogger(__name__)


@dataclass
class InMemoryStore:
    catalog: InMemoryCatalogRepository = field(default_factory=InMemoryCatalogRepository)
    carts: InMemoryCartRepository = field(default_factory=InMemoryCartRepository)
    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)


_memory_store: InMemoryStore | None = None
_memory_store_lock = Lock()


def build_memory_store(seed: bool = True) -> InMemoryStore:
    store = InMemoryStore()
    if seed:
        seed_catalog(store.catalog)
    return store


def get_memory_store() -> InMemoryStore:
    """Get or create the process-wide in-memory store (lazy initialization)."""
    global _memory_store
    with _memory_store_lock:
        if _memory_store is None:
            _memory_store = build_memory_store(seed=seed_catalog_enabled())
        return _memory_store


def reset_memory_store() -> None:
    """Drop the process-wide store; the next access starts from scratch."""
    global _memory_store
    with _memory_store_lock:
        _memory_store = None


def init_storage() -> None:
    """Prepare the configured backend: build the store or create and seed tables."""
    backend = storage_backend()

    if backend == "memory":
        get_memory_store()
    else:
        # Imported here so the memory backend never needs a DATABASE_URL
        from craftstore.adapters.sqlalchemy_catalog_repository import SqlAlchemyCatalogRepository
        from craftstore.infra.db.session import create_schema, get_session

        create_schema()
        if seed_catalog_enabled():
            with get_session() as session:
                seed_catalog(SqlAlchemyCatalogRepository(session=session))

    logger.info("Storage initialized", extra={"backend": backend})
