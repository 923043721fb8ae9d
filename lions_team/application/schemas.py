"""Request and response models for the HTTP API.

Field names travel as camelCase on the wire (``fullName``, ``startDate``)
and are converted to the snake_case domain inputs by ``to_domain`` /
``to_update``. Timestamps without an offset are read as UTC.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Annotated, Any, ClassVar, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from lions_team.domain.factories import ensure_utc
from lions_team.domain.models import (
    DEFAULT_ALBUM,
    DEFAULT_PERFORMANCE,
    Achievements,
    AthleteUpdate,
    EventType,
    EventUpdate,
    ExerciseCategory,
    ExerciseMetrics,
    ExerciseUpdate,
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
)


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PartialModel(ApiModel):
    """Base for update bodies: only explicitly sent fields are applied."""

    # Fields that may be omitted but never sent as ``null``.
    not_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self) -> "PartialModel":
        for name in self.model_fields_set & self.not_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# --- nested value objects -------------------------------------------------


class MetricsModel(ApiModel):
    repetitions: Optional[int] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    accuracy: Optional[float] = None
    difficulty: Optional[str] = None

    def to_domain(self) -> ExerciseMetrics:
        return ExerciseMetrics(**self.model_dump())


class ResultsModel(ApiModel):
    repetitions: Optional[int] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    accuracy: Optional[float] = None
    completed: bool = False

    def to_domain(self) -> SessionResults:
        return SessionResults(**self.model_dump())


class AchievementsModel(ApiModel):
    shooting: Optional[str] = None
    rebounds: Optional[str] = None
    assists: Optional[str] = None
    description: Optional[str] = None

    def to_domain(self) -> Achievements:
        return Achievements(**self.model_dump())


# --- auth and users -------------------------------------------------------


class LoginRequest(ApiModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(ApiModel):
    username: str
    email: str
    password: str
    full_name: str
    role: Role = Role.ATHLETE
    profile_picture: Optional[str] = None
    position: Optional[str] = None

    def to_domain(self) -> NewUser:
        return NewUser(**self.model_dump())


class UserOut(ApiModel):
    """Public view of a user; the password never leaves the server."""

    id: str
    username: str
    email: str
    role: Role
    full_name: str
    profile_picture: Optional[str] = None
    position: Optional[str] = None
    created_at: Optional[datetime] = None


class UserEnvelope(ApiModel):
    user: UserOut


# --- athletes -------------------------------------------------------------


class AthleteCreate(ApiModel):
    user_id: str
    height: Optional[str] = None
    weight: Optional[str] = None
    sleep_hours: Optional[str] = None
    overall_performance: Optional[str] = DEFAULT_PERFORMANCE
    last_training: Optional[UtcDatetime] = None

    def to_domain(self) -> NewAthlete:
        return NewAthlete(**self.model_dump())


class AthleteUpdateBody(PartialModel):
    not_nullable = frozenset({"user_id"})

    user_id: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    sleep_hours: Optional[str] = None
    overall_performance: Optional[str] = None
    last_training: Optional[UtcDatetime] = None

    def to_update(self) -> AthleteUpdate:
        return AthleteUpdate(**self.changes())


class AthleteOut(ApiModel):
    id: str
    user_id: str
    height: Optional[str] = None
    weight: Optional[str] = None
    sleep_hours: Optional[str] = None
    overall_performance: Optional[str] = None
    last_training: Optional[datetime] = None


class AthleteWithUserOut(AthleteOut):
    user: Optional[UserOut] = None


# --- exercises ------------------------------------------------------------


class ExerciseCreate(ApiModel):
    name: str
    category: ExerciseCategory
    created_by: str
    description: Optional[str] = None
    video_url: Optional[str] = None
    metrics: Optional[MetricsModel] = None

    def to_domain(self) -> NewExercise:
        return NewExercise(
            name=self.name,
            category=self.category,
            created_by=self.created_by,
            description=self.description,
            video_url=self.video_url,
            metrics=self.metrics.to_domain() if self.metrics else None,
        )


class ExerciseUpdateBody(PartialModel):
    not_nullable = frozenset({"name", "category", "created_by"})

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ExerciseCategory] = None
    video_url: Optional[str] = None
    metrics: Optional[MetricsModel] = None
    created_by: Optional[str] = None

    def to_update(self) -> ExerciseUpdate:
        changes = self.changes()
        if "metrics" in changes:
            changes["metrics"] = self.metrics.to_domain() if self.metrics else None
        return ExerciseUpdate(**changes)


class ExerciseOut(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    category: ExerciseCategory
    video_url: Optional[str] = None
    metrics: Optional[MetricsModel] = None
    created_by: str


# --- training sessions ----------------------------------------------------


class TrainingSessionCreate(ApiModel):
    athlete_id: str
    exercise_id: str
    results: Optional[ResultsModel] = None

    def to_domain(self) -> NewTrainingSession:
        return NewTrainingSession(
            athlete_id=self.athlete_id,
            exercise_id=self.exercise_id,
            results=self.results.to_domain() if self.results else None,
        )


class TrainingSessionOut(ApiModel):
    id: str
    athlete_id: str
    exercise_id: str
    results: Optional[ResultsModel] = None
    completed_at: datetime


# --- events ---------------------------------------------------------------


class EventCreate(ApiModel):
    title: str
    event_type: EventType
    start_date: UtcDatetime
    created_by: str
    description: Optional[str] = None
    end_date: Optional[UtcDatetime] = None
    mandatory: bool = False

    def to_domain(self) -> NewEvent:
        return NewEvent(**self.model_dump())


class EventUpdateBody(PartialModel):
    not_nullable = frozenset({"title", "event_type", "start_date", "mandatory", "created_by"})

    title: Optional[str] = None
    description: Optional[str] = None
    event_type: Optional[EventType] = None
    start_date: Optional[UtcDatetime] = None
    end_date: Optional[UtcDatetime] = None
    mandatory: Optional[bool] = None
    created_by: Optional[str] = None

    def to_update(self) -> EventUpdate:
        return EventUpdate(**self.changes())


class EventOut(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    event_type: EventType
    start_date: datetime
    end_date: Optional[datetime] = None
    mandatory: bool
    created_by: str


# --- gallery --------------------------------------------------------------


class GalleryItemCreate(ApiModel):
    title: str
    media_type: MediaType
    url: str
    uploaded_by: str
    description: Optional[str] = None
    album: str = DEFAULT_ALBUM

    def to_domain(self) -> NewGalleryItem:
        return NewGalleryItem(**self.model_dump())


class GalleryItemOut(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    media_type: MediaType
    url: str
    album: str
    uploaded_by: str
    uploaded_at: datetime


# --- best of the week -----------------------------------------------------


class BestOfWeekCreate(ApiModel):
    athlete_id: str
    week_start: UtcDatetime
    set_by: str
    achievements: Optional[AchievementsModel] = None

    def to_domain(self) -> NewBestOfWeek:
        return NewBestOfWeek(
            athlete_id=self.athlete_id,
            week_start=self.week_start,
            set_by=self.set_by,
            achievements=self.achievements.to_domain() if self.achievements else None,
        )


class BestOfWeekOut(ApiModel):
    id: str
    athlete_id: str
    week_start: datetime
    achievements: Optional[AchievementsModel] = None
    set_by: str


class BestOfWeekWithAthleteOut(BestOfWeekOut):
    athlete: Optional[AthleteWithUserOut] = None


# --- live streams ---------------------------------------------------------


class LiveStreamCreate(ApiModel):
    title: str
    youtube_url: str
    created_by: str
    description: Optional[str] = None
    is_active: bool = False
    scheduled_for: Optional[UtcDatetime] = None
    category: StreamCategory = StreamCategory.NBB

    def to_domain(self) -> NewLiveStream:
        return NewLiveStream(**self.model_dump())


class LiveStreamUpdateBody(PartialModel):
    not_nullable = frozenset({"title", "youtube_url", "is_active", "category", "created_by"})

    title: Optional[str] = None
    description: Optional[str] = None
    youtube_url: Optional[str] = None
    is_active: Optional[bool] = None
    scheduled_for: Optional[UtcDatetime] = None
    category: Optional[StreamCategory] = None
    created_by: Optional[str] = None

    def to_update(self) -> LiveStreamUpdate:
        return LiveStreamUpdate(**self.changes())


class LiveStreamOut(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    youtube_url: str
    is_active: bool
    scheduled_for: Optional[datetime] = None
    category: StreamCategory
    created_by: str


# --- health ---------------------------------------------------------------


class HealthOut(ApiModel):
    status: str
    backend: str
    version: str
    counts: dict[str, int]


def entity_dict(entity: Any) -> dict[str, Any]:
    """Plain ``dict`` view of a domain dataclass, nested values included."""

    return asdict(entity)
