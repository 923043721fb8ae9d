"""In-memory implementation of the storage facade.

Each entity kind lives in its own ``dict`` keyed by the generated identifier.
No value, uniqueness or foreign-key validation happens here; callers own it.
State is process-local and disappears with the process.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, TypeVar

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
from lions_team.domain.calendar import start_of_week
from lions_team.domain.factories import (
    Clock,
    build_athlete,
    build_best_of_week,
    build_event,
    build_exercise,
    build_gallery_item,
    build_live_stream,
    build_training_session,
    build_user,
    ensure_utc,
    utc_now,
)
from lions_team.domain.models import (
    Athlete,
    AthleteUpdate,
    BestOfWeek,
    Event,
    EventUpdate,
    Exercise,
    ExerciseUpdate,
    GalleryItem,
    LiveStream,
    LiveStreamUpdate,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    TrainingSession,
    TrainingSessionUpdate,
    User,
    UserUpdate,
)

from .config import StorageBackend
from .seed import build_seed_data

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


def _merge(record: EntityT, updates: Mapping[str, Any]) -> EntityT:
    """Return ``record`` with the supplied fields replaced; ``id`` never changes.

    Timestamps are stored as aware UTC, matching what the builders produce.
    """

    changes = {
        key: ensure_utc(value) if isinstance(value, datetime) else value
        for key, value in updates.items()
        if key != "id"
    }
    if not changes:
        return record
    return replace(record, **changes)  # type: ignore[type-var]


def _update(table: dict[str, EntityT], key: str, updates: Mapping[str, Any]) -> Optional[EntityT]:
    record = table.get(key)
    if record is None:
        return None
    merged = _merge(record, updates)
    table[key] = merged
    return merged


def _delete(table: dict[str, Any], key: str, kind: str) -> bool:
    removed = table.pop(key, None) is not None
    if removed:
        logger.debug("Deleted %s %s", kind, key)
    return removed


class MemoryStorage(Storage):
    """Storage facade keeping every entity in process memory."""

    name = StorageBackend.MEMORY.value

    def __init__(self, *, seed: bool = True, clock: Clock = utc_now) -> None:
        self._clock = clock
        self.user_rows: dict[str, User] = {}
        self.athlete_rows: dict[str, Athlete] = {}
        self.exercise_rows: dict[str, Exercise] = {}
        self.session_rows: dict[str, TrainingSession] = {}
        self.event_rows: dict[str, Event] = {}
        self.gallery_rows: dict[str, GalleryItem] = {}
        self.best_of_week_rows: dict[str, BestOfWeek] = {}
        self.stream_rows: dict[str, LiveStream] = {}

        self._users_repo = MemoryUsersRepo(self)
        self._athletes_repo = MemoryAthletesRepo(self)
        self._exercises_repo = MemoryExercisesRepo(self)
        self._sessions_repo = MemoryTrainingSessionsRepo(self)
        self._events_repo = MemoryEventsRepo(self)
        self._gallery_repo = MemoryGalleryRepo(self)
        self._best_of_week_repo = MemoryBestOfWeekRepo(self)
        self._streams_repo = MemoryLiveStreamsRepo(self)

        if seed:
            self._load_seed()

    def now(self) -> datetime:
        return self._clock()

    async def init(self) -> None:
        return None

    async def close(self) -> None:
        return None

    @property
    def users(self) -> UsersRepo:
        return self._users_repo

    @property
    def athletes(self) -> AthletesRepo:
        return self._athletes_repo

    @property
    def exercises(self) -> ExercisesRepo:
        return self._exercises_repo

    @property
    def training_sessions(self) -> TrainingSessionsRepo:
        return self._sessions_repo

    @property
    def events(self) -> EventsRepo:
        return self._events_repo

    @property
    def gallery(self) -> GalleryRepo:
        return self._gallery_repo

    @property
    def best_of_week(self) -> BestOfWeekRepo:
        return self._best_of_week_repo

    @property
    def live_streams(self) -> LiveStreamsRepo:
        return self._streams_repo

    def _load_seed(self) -> None:
        data = build_seed_data(self.now())
        for user in data.users:
            self.user_rows[user.id] = user
        self.athlete_rows[data.athlete.id] = data.athlete
        logger.info("Seeded in-memory storage with %d fixture accounts", len(data.users))


class MemoryUsersRepo(UsersRepo):
    """User repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, user_id: str) -> Optional[User]:
        return self._storage.user_rows.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self._storage.user_rows.values():
            if user.username == username:
                return user
        return None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self._storage.user_rows.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: NewUser) -> User:
        record = build_user(user, now=self._storage.now())
        self._storage.user_rows[record.id] = record
        logger.debug("Created user %s", record.id)
        return record

    async def update(self, user_id: str, updates: UserUpdate) -> Optional[User]:
        return _update(self._storage.user_rows, user_id, updates)


class MemoryAthletesRepo(AthletesRepo):
    """Athlete repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, athlete_id: str) -> Optional[Athlete]:
        return self._storage.athlete_rows.get(athlete_id)

    async def get_by_user_id(self, user_id: str) -> Optional[Athlete]:
        for athlete in self._storage.athlete_rows.values():
            if athlete.user_id == user_id:
                return athlete
        return None

    async def list_all(self) -> Sequence[Athlete]:
        return tuple(self._storage.athlete_rows.values())

    async def create(self, athlete: NewAthlete) -> Athlete:
        record = build_athlete(athlete)
        self._storage.athlete_rows[record.id] = record
        logger.debug("Created athlete %s for user %s", record.id, record.user_id)
        return record

    async def update(self, athlete_id: str, updates: AthleteUpdate) -> Optional[Athlete]:
        return _update(self._storage.athlete_rows, athlete_id, updates)

    async def delete(self, athlete_id: str) -> bool:
        return _delete(self._storage.athlete_rows, athlete_id, "athlete")


class MemoryExercisesRepo(ExercisesRepo):
    """Exercise repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._storage.exercise_rows.get(exercise_id)

    async def list_all(self) -> Sequence[Exercise]:
        return tuple(self._storage.exercise_rows.values())

    async def list_by_category(self, category: str) -> Sequence[Exercise]:
        return tuple(
            exercise
            for exercise in self._storage.exercise_rows.values()
            if exercise.category == category
        )

    async def create(self, exercise: NewExercise) -> Exercise:
        record = build_exercise(exercise)
        self._storage.exercise_rows[record.id] = record
        logger.debug("Created exercise %s", record.id)
        return record

    async def update(self, exercise_id: str, updates: ExerciseUpdate) -> Optional[Exercise]:
        return _update(self._storage.exercise_rows, exercise_id, updates)

    async def delete(self, exercise_id: str) -> bool:
        return _delete(self._storage.exercise_rows, exercise_id, "exercise")


class MemoryTrainingSessionsRepo(TrainingSessionsRepo):
    """Training session repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, session_id: str) -> Optional[TrainingSession]:
        return self._storage.session_rows.get(session_id)

    async def list_by_athlete(self, athlete_id: str) -> Sequence[TrainingSession]:
        return tuple(
            session
            for session in self._storage.session_rows.values()
            if session.athlete_id == athlete_id
        )

    async def create(self, session: NewTrainingSession) -> TrainingSession:
        record = build_training_session(session, now=self._storage.now())
        self._storage.session_rows[record.id] = record
        logger.debug("Created training session %s", record.id)
        return record

    async def update(
        self, session_id: str, updates: TrainingSessionUpdate
    ) -> Optional[TrainingSession]:
        return _update(self._storage.session_rows, session_id, updates)


class MemoryEventsRepo(EventsRepo):
    """Event repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, event_id: str) -> Optional[Event]:
        return self._storage.event_rows.get(event_id)

    async def list_all(self) -> Sequence[Event]:
        return tuple(self._storage.event_rows.values())

    async def list_upcoming(self) -> Sequence[Event]:
        now = ensure_utc(self._storage.now())
        return tuple(event for event in self._storage.event_rows.values() if event.start_date > now)

    async def create(self, event: NewEvent) -> Event:
        record = build_event(event)
        self._storage.event_rows[record.id] = record
        logger.debug("Created event %s", record.id)
        return record

    async def update(self, event_id: str, updates: EventUpdate) -> Optional[Event]:
        return _update(self._storage.event_rows, event_id, updates)

    async def delete(self, event_id: str) -> bool:
        return _delete(self._storage.event_rows, event_id, "event")


class MemoryGalleryRepo(GalleryRepo):
    """Gallery repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, item_id: str) -> Optional[GalleryItem]:
        return self._storage.gallery_rows.get(item_id)

    async def list_all(self) -> Sequence[GalleryItem]:
        return tuple(self._storage.gallery_rows.values())

    async def list_by_album(self, album: str) -> Sequence[GalleryItem]:
        return tuple(item for item in self._storage.gallery_rows.values() if item.album == album)

    async def create(self, item: NewGalleryItem) -> GalleryItem:
        record = build_gallery_item(item, now=self._storage.now())
        self._storage.gallery_rows[record.id] = record
        logger.debug("Created gallery item %s in album %s", record.id, record.album)
        return record

    async def delete(self, item_id: str) -> bool:
        return _delete(self._storage.gallery_rows, item_id, "gallery item")


class MemoryBestOfWeekRepo(BestOfWeekRepo):
    """Weekly highlight repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get_current(self) -> Optional[BestOfWeek]:
        boundary = ensure_utc(start_of_week(self._storage.now()))
        for pick in self._storage.best_of_week_rows.values():
            if pick.week_start == boundary:
                return pick
        return None

    async def set(self, pick: NewBestOfWeek) -> BestOfWeek:
        record = build_best_of_week(pick)
        self._storage.best_of_week_rows[record.id] = record
        logger.debug("Stored best of week %s for athlete %s", record.id, record.athlete_id)
        return record


class MemoryLiveStreamsRepo(LiveStreamsRepo):
    """Live stream repository backed by a dictionary."""

    def __init__(self, storage: MemoryStorage) -> None:
        self._storage = storage

    async def get(self, stream_id: str) -> Optional[LiveStream]:
        return self._storage.stream_rows.get(stream_id)

    async def list_all(self) -> Sequence[LiveStream]:
        return tuple(self._storage.stream_rows.values())

    async def list_active(self) -> Sequence[LiveStream]:
        return tuple(stream for stream in self._storage.stream_rows.values() if stream.is_active)

    async def create(self, stream: NewLiveStream) -> LiveStream:
        record = build_live_stream(stream)
        self._storage.stream_rows[record.id] = record
        logger.debug("Created live stream %s", record.id)
        return record

    async def update(self, stream_id: str, updates: LiveStreamUpdate) -> Optional[LiveStream]:
        return _update(self._storage.stream_rows, stream_id, updates)

    async def delete(self, stream_id: str) -> bool:
        return _delete(self._storage.stream_rows, stream_id, "live stream")
