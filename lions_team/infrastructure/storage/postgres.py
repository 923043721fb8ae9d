"""Postgres backed implementation of the storage facade.

Any SQLAlchemy async URL works; tests run it against ``sqlite+aiosqlite``.
The schema is managed by Alembic unless ``create_schema`` is requested.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infra.db import AthleteRecord, UserRecord, async_session_factory, create_engine, create_schema
from infra.db.repositories import (
    SqlAthletesRepo,
    SqlBestOfWeekRepo,
    SqlEventsRepo,
    SqlExercisesRepo,
    SqlGalleryRepo,
    SqlLiveStreamsRepo,
    SqlTrainingSessionsRepo,
    SqlUsersRepo,
    record_from_entity,
)
from lions_team.application.ports.repositories import (
    AthletesRepo,
    BestOfWeekRepo,
    EventsRepo,
    ExercisesRepo,
    GalleryRepo,
    LiveStreamsRepo,
    TrainingSessionsRepo,
    UsersRepo,
)
from lions_team.application.ports.storage import Storage
from lions_team.domain.factories import Clock, utc_now

from .config import StorageBackend
from .seed import build_seed_data

logger = logging.getLogger(__name__)


class PostgresStorage(Storage):
    """Storage facade powered by Postgres and SQLAlchemy."""

    name = StorageBackend.POSTGRES.value

    def __init__(
        self,
        *,
        database_url: str,
        seed: bool = True,
        create_schema: bool = False,
        clock: Clock = utc_now,
    ) -> None:
        self._database_url = database_url
        self._seed = seed
        self._create_schema = create_schema
        self._clock = clock
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._users_repo: SqlUsersRepo | None = None
        self._athletes_repo: SqlAthletesRepo | None = None
        self._exercises_repo: SqlExercisesRepo | None = None
        self._sessions_repo: SqlTrainingSessionsRepo | None = None
        self._events_repo: SqlEventsRepo | None = None
        self._gallery_repo: SqlGalleryRepo | None = None
        self._best_of_week_repo: SqlBestOfWeekRepo | None = None
        self._streams_repo: SqlLiveStreamsRepo | None = None

    async def init(self) -> None:
        self._engine = create_engine(self._database_url)
        self._session_factory = async_session_factory(self._engine)
        if self._create_schema:
            await create_schema(self._engine)

        factory, clock = self._session_factory, self._clock
        self._users_repo = SqlUsersRepo(factory, clock)
        self._athletes_repo = SqlAthletesRepo(factory)
        self._exercises_repo = SqlExercisesRepo(factory)
        self._sessions_repo = SqlTrainingSessionsRepo(factory, clock)
        self._events_repo = SqlEventsRepo(factory, clock)
        self._gallery_repo = SqlGalleryRepo(factory, clock)
        self._best_of_week_repo = SqlBestOfWeekRepo(factory, clock)
        self._streams_repo = SqlLiveStreamsRepo(factory)

        if self._seed:
            await self._load_seed()

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
        self._users_repo = None
        self._athletes_repo = None
        self._exercises_repo = None
        self._sessions_repo = None
        self._events_repo = None
        self._gallery_repo = None
        self._best_of_week_repo = None
        self._streams_repo = None

    @property
    def users(self) -> UsersRepo:
        if self._users_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._users_repo

    @property
    def athletes(self) -> AthletesRepo:
        if self._athletes_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._athletes_repo

    @property
    def exercises(self) -> ExercisesRepo:
        if self._exercises_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._exercises_repo

    @property
    def training_sessions(self) -> TrainingSessionsRepo:
        if self._sessions_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._sessions_repo

    @property
    def events(self) -> EventsRepo:
        if self._events_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._events_repo

    @property
    def gallery(self) -> GalleryRepo:
        if self._gallery_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._gallery_repo

    @property
    def best_of_week(self) -> BestOfWeekRepo:
        if self._best_of_week_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._best_of_week_repo

    @property
    def live_streams(self) -> LiveStreamsRepo:
        if self._streams_repo is None:
            raise RuntimeError("Storage not initialised")
        return self._streams_repo

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Storage not initialised")
        return self._session_factory

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Storage not initialised")
        return self._engine

    async def _load_seed(self) -> None:
        """Insert fixture accounts once, when the users table is still empty."""

        async with self.session_factory() as session:
            async with session.begin():
                existing = await session.scalar(select(func.count()).select_from(UserRecord))
                if existing:
                    return
                data = build_seed_data(self._clock())
                session.add_all([record_from_entity(UserRecord, user) for user in data.users])
                # users must exist before the profile referencing them
                await session.flush()
                session.add(record_from_entity(AthleteRecord, data.athlete))
        logger.info("Seeded database with %d fixture accounts", len(data.users))
