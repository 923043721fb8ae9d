"""SQLAlchemy-based repository implementations for relational storage."""

from __future__ import annotations

import logging
from dataclasses import asdict, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

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
    optional_utc,
)
from lions_team.domain.models import (
    Achievements,
    Athlete,
    AthleteUpdate,
    BestOfWeek,
    Event,
    EventType,
    EventUpdate,
    Exercise,
    ExerciseCategory,
    ExerciseMetrics,
    ExerciseUpdate,
    GalleryItem,
    LiveStream,
    LiveStreamUpdate,
    MediaType,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    Role,
    SessionResults,
    StreamCategory,
    TrainingSession,
    TrainingSessionUpdate,
    User,
    UserUpdate,
)
from .models import (
    AthleteRecord,
    Base,
    BestOfWeekRecord,
    EventRecord,
    ExerciseRecord,
    GalleryItemRecord,
    LiveStreamRecord,
    TrainingSessionRecord,
    UserRecord,
)

logger = logging.getLogger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]
EnumT = TypeVar("EnumT", bound=Enum)
NestedT = TypeVar("NestedT")
EntityT = TypeVar("EntityT")
RecordT = TypeVar("RecordT", bound=Base)


def _to_column(value: Any) -> Any:
    """Convert a domain value into something the column types accept."""

    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, datetime):
        return ensure_utc(value)
    return value


def _coerce_enum(enum_cls: type[EnumT], value: Any) -> Any:
    # Unknown values are kept verbatim: the store does not validate.
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _load_nested(cls: type[NestedT], data: Mapping[str, Any] | None) -> Optional[NestedT]:
    if data is None:
        return None
    known = {field.name for field in fields(cls)}  # type: ignore[arg-type]
    return cls(**{key: value for key, value in data.items() if key in known})


def record_from_entity(model: type[RecordT], entity: Any) -> RecordT:
    return model(**{field.name: _to_column(getattr(entity, field.name)) for field in fields(entity)})


async def _create(
    session_factory: SessionFactory,
    model: type[RecordT],
    entity: Any,
    loader: Callable[[RecordT], EntityT],
) -> EntityT:
    record = record_from_entity(model, entity)
    async with session_factory() as session:
        async with session.begin():
            session.add(record)
    logger.debug("Created %s %s", model.__tablename__, record.id)
    return loader(record)


async def _update(
    session_factory: SessionFactory,
    model: type[RecordT],
    key: str,
    updates: Mapping[str, Any],
    loader: Callable[[RecordT], EntityT],
) -> Optional[EntityT]:
    async with session_factory() as session:
        async with session.begin():
            record = await session.get(model, key)
            if record is None:
                return None
            for name, value in updates.items():
                if name == "id":
                    continue
                setattr(record, name, _to_column(value))
        return loader(record)


async def _delete(session_factory: SessionFactory, model: type[RecordT], key: str) -> bool:
    async with session_factory() as session:
        async with session.begin():
            result = await session.execute(delete(model).where(model.id == key))  # type: ignore[attr-defined]
    removed = bool(result.rowcount)
    if removed:
        logger.debug("Deleted %s %s", model.__tablename__, key)
    return removed


async def _get(
    session_factory: SessionFactory,
    model: type[RecordT],
    key: str,
    loader: Callable[[RecordT], EntityT],
) -> Optional[EntityT]:
    async with session_factory() as session:
        record = await session.get(model, key)
        return loader(record) if record else None


async def _first(session_factory: SessionFactory, stmt: Any, loader: Callable[[Any], EntityT]) -> Optional[EntityT]:
    async with session_factory() as session:
        record = (await session.scalars(stmt.limit(1))).first()
        return loader(record) if record else None


async def _all(session_factory: SessionFactory, stmt: Any, loader: Callable[[Any], EntityT]) -> Sequence[EntityT]:
    async with session_factory() as session:
        result = await session.scalars(stmt)
        return tuple(loader(row) for row in result)


def user_from_record(record: UserRecord) -> User:
    return User(
        id=record.id,
        username=record.username,
        email=record.email,
        password=record.password,
        role=_coerce_enum(Role, record.role),
        full_name=record.full_name,
        profile_picture=record.profile_picture,
        position=record.position,
        created_at=ensure_utc(record.created_at),
    )


def athlete_from_record(record: AthleteRecord) -> Athlete:
    return Athlete(
        id=record.id,
        user_id=record.user_id,
        height=record.height,
        weight=record.weight,
        sleep_hours=record.sleep_hours,
        overall_performance=record.overall_performance,
        last_training=optional_utc(record.last_training),
    )


def exercise_from_record(record: ExerciseRecord) -> Exercise:
    return Exercise(
        id=record.id,
        name=record.name,
        description=record.description,
        category=_coerce_enum(ExerciseCategory, record.category),
        video_url=record.video_url,
        metrics=_load_nested(ExerciseMetrics, record.metrics),
        created_by=record.created_by,
    )


def training_session_from_record(record: TrainingSessionRecord) -> TrainingSession:
    return TrainingSession(
        id=record.id,
        athlete_id=record.athlete_id,
        exercise_id=record.exercise_id,
        results=_load_nested(SessionResults, record.results),
        completed_at=ensure_utc(record.completed_at),
    )


def event_from_record(record: EventRecord) -> Event:
    return Event(
        id=record.id,
        title=record.title,
        description=record.description,
        event_type=_coerce_enum(EventType, record.event_type),
        start_date=ensure_utc(record.start_date),
        end_date=optional_utc(record.end_date),
        mandatory=bool(record.mandatory),
        created_by=record.created_by,
    )


def gallery_item_from_record(record: GalleryItemRecord) -> GalleryItem:
    return GalleryItem(
        id=record.id,
        title=record.title,
        description=record.description,
        media_type=_coerce_enum(MediaType, record.media_type),
        url=record.url,
        album=record.album,
        uploaded_by=record.uploaded_by,
        uploaded_at=ensure_utc(record.uploaded_at),
    )


def best_of_week_from_record(record: BestOfWeekRecord) -> BestOfWeek:
    return BestOfWeek(
        id=record.id,
        athlete_id=record.athlete_id,
        week_start=ensure_utc(record.week_start),
        achievements=_load_nested(Achievements, record.achievements),
        set_by=record.set_by,
    )


def live_stream_from_record(record: LiveStreamRecord) -> LiveStream:
    return LiveStream(
        id=record.id,
        title=record.title,
        description=record.description,
        youtube_url=record.youtube_url,
        is_active=bool(record.is_active),
        scheduled_for=optional_utc(record.scheduled_for),
        category=_coerce_enum(StreamCategory, record.category),
        created_by=record.created_by,
    )


class SqlUsersRepo(UsersRepo):
    """User repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory, clock: Clock) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def get(self, user_id: str) -> Optional[User]:
        return await _get(self._session_factory, UserRecord, user_id, user_from_record)

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserRecord).where(UserRecord.username == username)
        return await _first(self._session_factory, stmt, user_from_record)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserRecord).where(UserRecord.email == email)
        return await _first(self._session_factory, stmt, user_from_record)

    async def create(self, user: NewUser) -> User:
        entity = build_user(user, now=self._clock())
        return await _create(self._session_factory, UserRecord, entity, user_from_record)

    async def update(self, user_id: str, updates: UserUpdate) -> Optional[User]:
        return await _update(self._session_factory, UserRecord, user_id, updates, user_from_record)


class SqlAthletesRepo(AthletesRepo):
    """Athlete repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def get(self, athlete_id: str) -> Optional[Athlete]:
        return await _get(self._session_factory, AthleteRecord, athlete_id, athlete_from_record)

    async def get_by_user_id(self, user_id: str) -> Optional[Athlete]:
        stmt = select(AthleteRecord).where(AthleteRecord.user_id == user_id)
        return await _first(self._session_factory, stmt, athlete_from_record)

    async def list_all(self) -> Sequence[Athlete]:
        return await _all(self._session_factory, select(AthleteRecord), athlete_from_record)

    async def create(self, athlete: NewAthlete) -> Athlete:
        entity = build_athlete(athlete)
        return await _create(self._session_factory, AthleteRecord, entity, athlete_from_record)

    async def update(self, athlete_id: str, updates: AthleteUpdate) -> Optional[Athlete]:
        return await _update(
            self._session_factory, AthleteRecord, athlete_id, updates, athlete_from_record
        )

    async def delete(self, athlete_id: str) -> bool:
        return await _delete(self._session_factory, AthleteRecord, athlete_id)


class SqlExercisesRepo(ExercisesRepo):
    """Exercise repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def get(self, exercise_id: str) -> Optional[Exercise]:
        return await _get(self._session_factory, ExerciseRecord, exercise_id, exercise_from_record)

    async def list_all(self) -> Sequence[Exercise]:
        return await _all(self._session_factory, select(ExerciseRecord), exercise_from_record)

    async def list_by_category(self, category: str) -> Sequence[Exercise]:
        stmt = select(ExerciseRecord).where(ExerciseRecord.category == _to_column(category))
        return await _all(self._session_factory, stmt, exercise_from_record)

    async def create(self, exercise: NewExercise) -> Exercise:
        entity = build_exercise(exercise)
        return await _create(self._session_factory, ExerciseRecord, entity, exercise_from_record)

    async def update(self, exercise_id: str, updates: ExerciseUpdate) -> Optional[Exercise]:
        return await _update(
            self._session_factory, ExerciseRecord, exercise_id, updates, exercise_from_record
        )

    async def delete(self, exercise_id: str) -> bool:
        return await _delete(self._session_factory, ExerciseRecord, exercise_id)


class SqlTrainingSessionsRepo(TrainingSessionsRepo):
    """Training session repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory, clock: Clock) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def get(self, session_id: str) -> Optional[TrainingSession]:
        return await _get(
            self._session_factory, TrainingSessionRecord, session_id, training_session_from_record
        )

    async def list_by_athlete(self, athlete_id: str) -> Sequence[TrainingSession]:
        stmt = select(TrainingSessionRecord).where(TrainingSessionRecord.athlete_id == athlete_id)
        return await _all(self._session_factory, stmt, training_session_from_record)

    async def create(self, session: NewTrainingSession) -> TrainingSession:
        entity = build_training_session(session, now=self._clock())
        return await _create(
            self._session_factory, TrainingSessionRecord, entity, training_session_from_record
        )

    async def update(
        self, session_id: str, updates: TrainingSessionUpdate
    ) -> Optional[TrainingSession]:
        return await _update(
            self._session_factory,
            TrainingSessionRecord,
            session_id,
            updates,
            training_session_from_record,
        )


class SqlEventsRepo(EventsRepo):
    """Event repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory, clock: Clock) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def get(self, event_id: str) -> Optional[Event]:
        return await _get(self._session_factory, EventRecord, event_id, event_from_record)

    async def list_all(self) -> Sequence[Event]:
        return await _all(self._session_factory, select(EventRecord), event_from_record)

    async def list_upcoming(self) -> Sequence[Event]:
        now = ensure_utc(self._clock())
        stmt = select(EventRecord).where(EventRecord.start_date > now)
        return await _all(self._session_factory, stmt, event_from_record)

    async def create(self, event: NewEvent) -> Event:
        entity = build_event(event)
        return await _create(self._session_factory, EventRecord, entity, event_from_record)

    async def update(self, event_id: str, updates: EventUpdate) -> Optional[Event]:
        return await _update(self._session_factory, EventRecord, event_id, updates, event_from_record)

    async def delete(self, event_id: str) -> bool:
        return await _delete(self._session_factory, EventRecord, event_id)


class SqlGalleryRepo(GalleryRepo):
    """Gallery repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory, clock: Clock) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def get(self, item_id: str) -> Optional[GalleryItem]:
        return await _get(self._session_factory, GalleryItemRecord, item_id, gallery_item_from_record)

    async def list_all(self) -> Sequence[GalleryItem]:
        return await _all(self._session_factory, select(GalleryItemRecord), gallery_item_from_record)

    async def list_by_album(self, album: str) -> Sequence[GalleryItem]:
        stmt = select(GalleryItemRecord).where(GalleryItemRecord.album == album)
        return await _all(self._session_factory, stmt, gallery_item_from_record)

    async def create(self, item: NewGalleryItem) -> GalleryItem:
        entity = build_gallery_item(item, now=self._clock())
        return await _create(self._session_factory, GalleryItemRecord, entity, gallery_item_from_record)

    async def delete(self, item_id: str) -> bool:
        return await _delete(self._session_factory, GalleryItemRecord, item_id)


class SqlBestOfWeekRepo(BestOfWeekRepo):
    """Weekly highlight repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory, clock: Clock) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def get_current(self) -> Optional[BestOfWeek]:
        boundary = ensure_utc(start_of_week(self._clock()))
        stmt = select(BestOfWeekRecord).where(BestOfWeekRecord.week_start == boundary)
        return await _first(self._session_factory, stmt, best_of_week_from_record)

    async def set(self, pick: NewBestOfWeek) -> BestOfWeek:
        entity = build_best_of_week(pick)
        return await _create(self._session_factory, BestOfWeekRecord, entity, best_of_week_from_record)


class SqlLiveStreamsRepo(LiveStreamsRepo):
    """Live stream repository backed by SQLAlchemy."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def get(self, stream_id: str) -> Optional[LiveStream]:
        return await _get(self._session_factory, LiveStreamRecord, stream_id, live_stream_from_record)

    async def list_all(self) -> Sequence[LiveStream]:
        return await _all(self._session_factory, select(LiveStreamRecord), live_stream_from_record)

    async def list_active(self) -> Sequence[LiveStream]:
        stmt = select(LiveStreamRecord).where(LiveStreamRecord.is_active.is_(True))
        return await _all(self._session_factory, stmt, live_stream_from_record)

    async def create(self, stream: NewLiveStream) -> LiveStream:
        entity = build_live_stream(stream)
        return await _create(self._session_factory, LiveStreamRecord, entity, live_stream_from_record)

    async def update(self, stream_id: str, updates: LiveStreamUpdate) -> Optional[LiveStream]:
        return await _update(
            self._session_factory, LiveStreamRecord, stream_id, updates, live_stream_from_record
        )

    async def delete(self, stream_id: str) -> bool:
        return await _delete(self._session_factory, LiveStreamRecord, stream_id)
