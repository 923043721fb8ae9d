from __future__ import annotations

import pytest

from lions_team.infrastructure.storage import (
    MemoryStorage,
    PostgresStorage,
    StorageBackend,
    StorageSettings,
    create_storage,
)


def test_defaults_select_seeded_memory_backend() -> None:
    settings = StorageSettings.from_env({})
    assert settings.backend is StorageBackend.MEMORY
    assert settings.db_url is None
    assert settings.seed is True


def test_reads_postgres_settings() -> None:
    settings = StorageSettings.from_env(
        {
            "STORAGE_BACKEND": "Postgres",
            "DB_URL": "postgresql+asyncpg://lions@db/lions",
            "STORAGE_SEED": "off",
        }
    )
    assert settings.backend is StorageBackend.POSTGRES
    assert settings.require_db_url() == "postgresql+asyncpg://lions@db/lions"
    assert settings.seed is False


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported STORAGE_BACKEND"):
        StorageSettings.from_env({"STORAGE_BACKEND": "sheets"})


def test_bad_seed_flag_is_rejected() -> None:
    with pytest.raises(ValueError, match="boolean flag"):
        StorageSettings.from_env({"STORAGE_SEED": "maybe"})


def test_postgres_requires_db_url() -> None:
    settings = StorageSettings(backend=StorageBackend.POSTGRES)
    with pytest.raises(RuntimeError, match="DB_URL"):
        settings.require_db_url()


@pytest.mark.asyncio()
async def test_create_storage_memory_without_seed() -> None:
    storage = await create_storage(StorageSettings(seed=False))
    assert isinstance(storage, MemoryStorage)
    assert storage.name == "memory"
    assert await storage.athletes.list_all() == ()


@pytest.mark.asyncio()
async def test_create_storage_sql_backend() -> None:
    storage = await create_storage(
        StorageSettings(
            backend=StorageBackend.POSTGRES,
            db_url="sqlite+aiosqlite:///:memory:",
            seed=False,
        )
    )
    try:
        assert isinstance(storage, PostgresStorage)
        assert storage.name == "postgres"
        assert storage.engine.dialect.name == "sqlite"
    finally:
        await storage.close()


@pytest.mark.asyncio()
async def test_create_storage_postgres_without_url_fails() -> None:
    with pytest.raises(RuntimeError):
        await create_storage(StorageSettings(backend=StorageBackend.POSTGRES))
