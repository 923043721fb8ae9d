"""Creation inputs and partial update records for domain entities.

``New*`` dataclasses carry everything a caller may provide when creating an
entity; generated fields (identifiers, creation timestamps) are omitted.
``*Update`` typed dicts describe partial updates: every key is optional and
only the keys present are merged onto the stored record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, TypedDict

from .entities import (
    DEFAULT_ALBUM,
    DEFAULT_PERFORMANCE,
    Achievements,
    EventType,
    ExerciseCategory,
    ExerciseMetrics,
    MediaType,
    Role,
    SessionResults,
    StreamCategory,
)


@dataclass(slots=True, frozen=True)
class NewUser:
    username: str
    email: str
    password: str
    full_name: str
    role: Role = Role.ATHLETE
    profile_picture: Optional[str] = None
    position: Optional[str] = None


@dataclass(slots=True, frozen=True)
class NewAthlete:
    user_id: str
    height: Optional[str] = None
    weight: Optional[str] = None
    sleep_hours: Optional[str] = None
    overall_performance: Optional[str] = DEFAULT_PERFORMANCE
    last_training: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class NewExercise:
    name: str
    category: ExerciseCategory
    created_by: str
    description: Optional[str] = None
    video_url: Optional[str] = None
    metrics: Optional[ExerciseMetrics] = None


@dataclass(slots=True, frozen=True)
class NewTrainingSession:
    athlete_id: str
    exercise_id: str
    results: Optional[SessionResults] = None


@dataclass(slots=True, frozen=True)
class NewEvent:
    title: str
    event_type: EventType
    start_date: datetime
    created_by: str
    description: Optional[str] = None
    end_date: Optional[datetime] = None
    mandatory: bool = False


@dataclass(slots=True, frozen=True)
class NewGalleryItem:
    title: str
    media_type: MediaType
    url: str
    uploaded_by: str
    description: Optional[str] = None
    album: str = DEFAULT_ALBUM


@dataclass(slots=True, frozen=True)
class NewBestOfWeek:
    athlete_id: str
    week_start: datetime
    set_by: str
    achievements: Optional[Achievements] = None


@dataclass(slots=True, frozen=True)
class NewLiveStream:
    title: str
    youtube_url: str
    created_by: str
    description: Optional[str] = None
    is_active: bool = False
    scheduled_for: Optional[datetime] = None
    category: StreamCategory = StreamCategory.NBB


class UserUpdate(TypedDict, total=False):
    username: str
    email: str
    password: str
    role: Role
    full_name: str
    profile_picture: Optional[str]
    position: Optional[str]
    created_at: datetime


class AthleteUpdate(TypedDict, total=False):
    user_id: str
    height: Optional[str]
    weight: Optional[str]
    sleep_hours: Optional[str]
    overall_performance: Optional[str]
    last_training: Optional[datetime]


class ExerciseUpdate(TypedDict, total=False):
    name: str
    description: Optional[str]
    category: ExerciseCategory
    video_url: Optional[str]
    metrics: Optional[ExerciseMetrics]
    created_by: str


class TrainingSessionUpdate(TypedDict, total=False):
    athlete_id: str
    exercise_id: str
    results: Optional[SessionResults]
    completed_at: datetime


class EventUpdate(TypedDict, total=False):
    title: str
    description: Optional[str]
    event_type: EventType
    start_date: datetime
    end_date: Optional[datetime]
    mandatory: bool
    created_by: str


class LiveStreamUpdate(TypedDict, total=False):
    title: str
    description: Optional[str]
    youtube_url: str
    is_active: bool
    scheduled_for: Optional[datetime]
    category: StreamCategory
    created_by: str
