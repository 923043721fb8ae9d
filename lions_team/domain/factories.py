"""Turn creation inputs into complete entities.

Every backend goes through these builders so generated identifiers,
timestamps and defaults for omitted optional fields are applied the same way.
Optional fields end up as an explicit ``None`` or their documented default,
never missing.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional
from uuid import uuid4

from lions_team.domain.models import (
    DEFAULT_ALBUM,
    Athlete,
    BestOfWeek,
    Event,
    Exercise,
    GalleryItem,
    LiveStream,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    Role,
    StreamCategory,
    TrainingSession,
    User,
)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC timestamp; naive values are read as UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def optional_utc(value: Optional[datetime]) -> Optional[datetime]:
    return ensure_utc(value) if value is not None else None


def new_id() -> str:
    return str(uuid4())


def build_user(data: NewUser, *, now: datetime) -> User:
    return User(
        id=new_id(),
        username=data.username,
        email=data.email,
        password=data.password,
        role=data.role or Role.ATHLETE,
        full_name=data.full_name,
        profile_picture=data.profile_picture or None,
        position=data.position or None,
        created_at=ensure_utc(now),
    )


def build_athlete(data: NewAthlete) -> Athlete:
    return Athlete(
        id=new_id(),
        user_id=data.user_id,
        height=data.height,
        weight=data.weight,
        sleep_hours=data.sleep_hours,
        overall_performance=data.overall_performance,
        last_training=optional_utc(data.last_training),
    )


def build_exercise(data: NewExercise) -> Exercise:
    return Exercise(
        id=new_id(),
        name=data.name,
        description=data.description,
        category=data.category,
        video_url=data.video_url,
        metrics=data.metrics,
        created_by=data.created_by,
    )


def build_training_session(data: NewTrainingSession, *, now: datetime) -> TrainingSession:
    """Stamp ``completed_at`` with the creation time."""

    return TrainingSession(
        id=new_id(),
        athlete_id=data.athlete_id,
        exercise_id=data.exercise_id,
        results=data.results,
        completed_at=ensure_utc(now),
    )


def build_event(data: NewEvent) -> Event:
    return Event(
        id=new_id(),
        title=data.title,
        description=data.description,
        event_type=data.event_type,
        start_date=ensure_utc(data.start_date),
        end_date=optional_utc(data.end_date),
        mandatory=bool(data.mandatory),
        created_by=data.created_by,
    )


def build_gallery_item(data: NewGalleryItem, *, now: datetime) -> GalleryItem:
    """Default the album to ``general`` and stamp ``uploaded_at``."""

    return GalleryItem(
        id=new_id(),
        title=data.title,
        description=data.description,
        media_type=data.media_type,
        url=data.url,
        album=data.album or DEFAULT_ALBUM,
        uploaded_by=data.uploaded_by,
        uploaded_at=ensure_utc(now),
    )


def build_best_of_week(data: NewBestOfWeek) -> BestOfWeek:
    # Callers derive week_start with start_of_week(); only the zone is normalised.
    return BestOfWeek(
        id=new_id(),
        athlete_id=data.athlete_id,
        week_start=ensure_utc(data.week_start),
        achievements=data.achievements,
        set_by=data.set_by,
    )


def build_live_stream(data: NewLiveStream) -> LiveStream:
    return LiveStream(
        id=new_id(),
        title=data.title,
        description=data.description,
        youtube_url=data.youtube_url,
        is_active=bool(data.is_active),
        scheduled_for=optional_utc(data.scheduled_for),
        category=data.category or StreamCategory.NBB,
        created_by=data.created_by,
    )
