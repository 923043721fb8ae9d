"""Storage facade wiring for in-memory and Postgres backends."""

from __future__ import annotations

from lions_team.application.ports.storage import Storage

from .config import StorageBackend, StorageSettings
from .memory import MemoryStorage
from .postgres import PostgresStorage

__all__ = [
    "StorageBackend",
    "StorageSettings",
    "MemoryStorage",
    "PostgresStorage",
    "create_storage",
]


async def create_storage(settings: StorageSettings) -> Storage:
    """Instantiate storage backend based on provided settings."""

    storage: Storage
    if settings.backend == StorageBackend.MEMORY:
        storage = MemoryStorage(seed=settings.seed)
    elif settings.backend == StorageBackend.POSTGRES:
        storage = PostgresStorage(database_url=settings.require_db_url(), seed=settings.seed)
    else:  # pragma: no cover
        raise ValueError(f"Unsupported storage backend: {settings.backend}")

    await storage.init()
    return storage
